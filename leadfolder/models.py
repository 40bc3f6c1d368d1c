# leadfolder/models.py
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelChoice(str, Enum):
    FAST = "gpt-4.1-mini"
    HIGH_QUALITY = "gpt-4.1"


class Tone(str, Enum):
    PREMIUM = "premium"
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    CONCISE = "concise"


class GenerationRequest(BaseModel):
    """What the UI sends to the backend. Frozen once built."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lead_text: str = Field(alias="leadText")
    model: ModelChoice = ModelChoice.FAST
    tone: Tone = Tone.PREMIUM

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class GenerateProjectFolderBody(BaseModel):
    """Backend request body; every field optional so the handler can answer 400 itself."""
    model_config = ConfigDict(populate_by_name=True)

    lead_text: Optional[str] = Field(default=None, alias="leadText")
    model: Optional[ModelChoice] = None
    tone: Optional[Tone] = None


class ProjectFolderResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    project_folder: str = Field(alias="projectFolder")


class ErrorResponse(BaseModel):
    error: str


class HistoryItem(BaseModel):
    """One past generation, stored with the camelCase keys of the history payload."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    created_at: datetime = Field(alias="createdAt")
    title: str
    lead_text: str = Field(alias="leadText")
    output_text: str = Field(alias="outputText")
    model: str
    tone: str

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class PromptSect(BaseModel):
    system: str
    user: str
    rules: List[str] = []
    temperature: float = 0.4
