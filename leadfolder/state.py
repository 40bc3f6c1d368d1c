# leadfolder/state.py
"""
In-memory workspace state for one UI session.

The Streamlit page keeps a single SessionState in ``st.session_state`` and
hands it to the pipeline; tests build their own.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional

from leadfolder.models import HistoryItem, ModelChoice, Tone

COPY_NOTICE_SECONDS = 2.0
COPY_NOTICE_POLL_SECONDS = 0.5

# Swapped out in tests to move time forward.
_clock = time.monotonic


@dataclass
class CopyNotice:
    """A transient message; each show() restarts the expiry clock."""
    message: str = ""
    expires_at: float = 0.0

    def show(self, message: str, now: Optional[float] = None, ttl: float = COPY_NOTICE_SECONDS) -> None:
        now = _clock() if now is None else now
        self.message = message
        self.expires_at = now + ttl

    def clear(self) -> None:
        self.message = ""
        self.expires_at = 0.0

    def current(self, now: Optional[float] = None) -> str:
        now = _clock() if now is None else now
        if self.message and now >= self.expires_at:
            self.clear()
        return self.message

    def poll_interval(self, now: Optional[float] = None) -> Optional[float]:
        """How often the page should re-check the notice, None when nothing is showing."""
        return COPY_NOTICE_POLL_SECONDS if self.current(now) else None


@dataclass
class SessionState:
    lead_text: str = ""
    output_text: str = ""
    is_loading: bool = False
    error_text: str = ""
    copy_notice: CopyNotice = field(default_factory=CopyNotice)
    active_tab: str = "all"
    model: str = ModelChoice.FAST.value
    tone: str = Tone.PREMIUM.value
    active_history_id: Optional[str] = None

    def new_project(self) -> None:
        self.lead_text = ""
        self.output_text = ""
        self.error_text = ""
        self.copy_notice.clear()
        self.active_tab = "all"
        self.active_history_id = None

    def select_history(self, item: HistoryItem) -> None:
        """Restore a past run as the active context. Does not regenerate."""
        self.lead_text = item.lead_text
        self.output_text = item.output_text
        self.model = item.model
        self.tone = item.tone
        self.error_text = ""
        self.copy_notice.clear()
        self.active_tab = "all"
        self.active_history_id = item.id
