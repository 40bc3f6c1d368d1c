# leadfolder/exports.py
"""Output actions: tab view, copy to clipboard, file export."""
from __future__ import annotations

import io
from typing import NamedTuple, Optional, Protocol

import markdown
from docx import Document

from leadfolder.errors import ClipboardError
from leadfolder.sections import segment_sections
from leadfolder.state import SessionState

COPY_OK = "Copied to clipboard."
COPY_FAILED = "Unable to copy. Please try again."

EXPORT_BASENAME = "project-folder"
EXPORT_FORMATS = ("Markdown", "HTML", "Word")


class Clipboard(Protocol):
    def write(self, text: str) -> None: ...


class ExportFile(NamedTuple):
    data: bytes
    file_name: str
    mime: str


def section_view(output_text: str, key: str) -> str:
    """Text for the selected tab; empty named sections fall back to the whole document."""
    sections = segment_sections(output_text)
    if key == "all":
        return sections["all"]
    return sections.get(key) or sections["all"]


def copy_output(state: SessionState, clipboard: Clipboard, now: Optional[float] = None) -> bool:
    """
    Copy the full output (never just the active tab). Returns True if written.

    ClipboardPending from the clipboard propagates; call again once the
    browser has answered.
    """
    text = state.output_text
    if not text.strip():
        return False
    try:
        clipboard.write(text)
    except ClipboardError:
        state.copy_notice.show(COPY_FAILED, now)
        return False
    state.copy_notice.show(COPY_OK, now)
    return True


def render_html(text: str) -> str:
    return markdown.markdown(
        text,
        extensions=["extra", "sane_lists"],
        output_format="html5",
    )


def _docx_bytes(text: str) -> bytes:
    buf = io.BytesIO()
    doc = Document()
    for block in text.split("\n\n"):
        block = block.strip()
        if not block:
            continue
        if block.startswith("#"):
            level = len(block) - len(block.lstrip("#"))
            heading, _, rest = block.lstrip("#").strip().partition("\n")
            doc.add_heading(heading.strip(), level=min(level, 9))
            if rest.strip():
                doc.add_paragraph(rest.strip())
        else:
            doc.add_paragraph(block)
    doc.save(buf)
    return buf.getvalue()


def export_document(text: str, fmt: str = "Markdown") -> Optional[ExportFile]:
    """Build the download for the full output. None when there is nothing to export."""
    if not (text or "").strip():
        return None
    if fmt == "HTML":
        return ExportFile(render_html(text).encode("utf-8"), f"{EXPORT_BASENAME}.html", "text/html;charset=utf-8")
    if fmt == "Word":
        return ExportFile(
            _docx_bytes(text),
            f"{EXPORT_BASENAME}.docx",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        )
    return ExportFile(text.encode("utf-8"), f"{EXPORT_BASENAME}.md", "text/markdown;charset=utf-8")
