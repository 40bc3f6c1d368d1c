# leadfolder/backend_client.py
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from leadfolder.errors import TransportError, UpstreamError
from leadfolder.models import GenerationRequest

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-project-folder"
NO_FOLDER_FALLBACK = "No project folder returned."
UPSTREAM_FALLBACK = "Failed to generate project folder."
TRANSPORT_MESSAGE = "Something went wrong while contacting the backend."


class BackendClient:
    """
    Talks to the project-folder backend. One POST per call, no retries.

    ``session`` only needs a requests-style ``post`` returning an object with
    ``status_code`` and ``json()``, so tests can hand in a fake or a
    FastAPI TestClient.
    """

    def __init__(self, base_url: str, session: Any = None, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}{GENERATE_PATH}"

    def generate_project_folder(self, request: GenerationRequest) -> str:
        kwargs = {"timeout": self.timeout} if self.timeout else {}
        try:
            resp = self.session.post(
                self.url,
                json=request.to_payload(),
                headers={"Content-Type": "application/json"},
                **kwargs,
            )
        except requests.RequestException as e:
            logger.warning("Backend request failed: %s", e)
            raise TransportError(TRANSPORT_MESSAGE) from e

        if not 200 <= resp.status_code < 300:
            raise UpstreamError(_error_message(resp))

        try:
            data = resp.json()
        except ValueError as e:
            logger.warning("Backend returned an undecodable body (status %s)", resp.status_code)
            raise TransportError(TRANSPORT_MESSAGE) from e
        if not isinstance(data, dict):
            raise TransportError(TRANSPORT_MESSAGE)

        folder = data.get("projectFolder")
        return folder if isinstance(folder, str) and folder else NO_FOLDER_FALLBACK


def _error_message(resp) -> str:
    try:
        data = resp.json()
    except ValueError:
        return UPSTREAM_FALLBACK
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return UPSTREAM_FALLBACK
