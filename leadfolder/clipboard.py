# leadfolder/clipboard.py
"""
Browser clipboard for the Streamlit page.

The write runs in the browser through ``streamlit_js_eval``, which sends the
promise result back to Python on a later rerun. Until then the component
returns None and ``write`` raises ClipboardPending. The caller keeps
rendering the same key until the outcome arrives.
"""
from __future__ import annotations

import json
from typing import Callable, Optional

from streamlit_js_eval import streamlit_js_eval

from leadfolder.errors import ClipboardError, ClipboardPending


def clipboard_js(text: str) -> str:
    return (
        f"navigator.clipboard.writeText({json.dumps(text)})"
        ".then(() => true, () => false)"
    )


class BrowserClipboard:
    def __init__(self, key: str, js_eval: Optional[Callable] = None):
        self.key = key
        self.js_eval = js_eval

    def write(self, text: str) -> None:
        js_eval = self.js_eval or streamlit_js_eval
        result = js_eval(js_expressions=clipboard_js(text), key=self.key)
        if result is None:
            raise ClipboardPending("Waiting for the browser clipboard")
        if result is not True:
            raise ClipboardError("Browser refused the clipboard write")
