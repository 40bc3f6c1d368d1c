# leadfolder/pipeline.py
"""
Generate button flow: validate the lead, call the backend, record history.

Every outcome is written to the injected SessionState. Errors never escape
``generate``; they end up in ``state.error_text`` and the output is cleared so
the operator can fix the input or simply click again.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import ValidationError as PydanticValidationError

from leadfolder.backend_client import BackendClient
from leadfolder.errors import LeadFolderError, ValidationError
from leadfolder.history_store import HistoryStore
from leadfolder.ids import IdFactory, make_id as default_make_id
from leadfolder.models import GenerationRequest, HistoryItem
from leadfolder.state import SessionState
from leadfolder.titles import derive_title

logger = logging.getLogger(__name__)

EMPTY_LEAD_MESSAGE = "Paste a lead on the left, then click Generate."
UNSUPPORTED_SETTINGS_MESSAGE = "Pick a supported model and tone preset, then click Generate."
PLACEHOLDER_OUTPUT = "Generating project folder from backend…"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_request(lead_text: str, model: str, tone: str) -> GenerationRequest:
    if not (lead_text or "").strip():
        raise ValidationError(EMPTY_LEAD_MESSAGE)
    try:
        return GenerationRequest(lead_text=lead_text, model=model, tone=tone)
    except PydanticValidationError as e:
        raise ValidationError(UNSUPPORTED_SETTINGS_MESSAGE) from e


class GenerationPipeline:
    def __init__(
        self,
        state: SessionState,
        history: HistoryStore,
        client: BackendClient,
        make_id: IdFactory = default_make_id,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.state = state
        self.history = history
        self.client = client
        self.make_id = make_id
        self.clock = clock

    def generate(self, lead_text: str, model: str, tone: str) -> Optional[HistoryItem]:
        """Run one generation. Returns the recorded HistoryItem, or None on failure."""
        ws = self.state
        try:
            request = build_request(lead_text, model, tone)
        except ValidationError as e:
            ws.output_text = ""
            ws.error_text = e.message
            return None

        ws.is_loading = True
        ws.error_text = ""
        ws.copy_notice.clear()
        ws.active_tab = "all"
        ws.output_text = PLACEHOLDER_OUTPUT
        ws.active_history_id = None

        try:
            folder = self.client.generate_project_folder(request)
        except LeadFolderError as e:
            logger.info("Generation failed: %s", e.message)
            ws.error_text = e.message
            ws.output_text = ""
            return None
        finally:
            ws.is_loading = False

        ws.output_text = folder
        item = HistoryItem(
            id=self.make_id(),
            created_at=self.clock(),
            title=derive_title(lead_text),
            lead_text=lead_text,
            output_text=folder,
            model=request.model.value,
            tone=request.tone.value,
        )
        self.history.record(item)
        ws.active_history_id = item.id
        return item
