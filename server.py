"""
Backend proxy
=============
Wraps a pasted lead in the Project Folder instruction template and forwards it
to the OpenAI chat-completion API.

Run with:
    uvicorn server:app --port 5000
"""
import logging
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from leadfolder.config import Settings, configure_logging
from leadfolder.errors import MissingCredentialError, UpstreamError
from leadfolder.llm import generate_markdown
from leadfolder.models import ErrorResponse, GenerateProjectFolderBody, ProjectFolderResponse
from leadfolder.prompt_factory import make_project_folder_prompt

logger = logging.getLogger("leadfolder.server")

VERSION = "1.0.0"

MISSING_LEAD = "Missing leadText in request body."
INVALID_BODY = "Invalid request body."
PROVIDER_FAILED = "OpenAI API error while generating project folder."
UNEXPECTED = "Unexpected error while generating project folder."
EMPTY_COMPLETION = "No content returned from OpenAI."

_settings = Settings.from_env()
configure_logging(_settings.LOG_LEVEL)


def get_settings() -> Settings:
    return _settings


app = FastAPI(
    title="Project Folder API",
    version=VERSION,
    docs_url="/docs" if _settings.DEBUG else None,
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc: RequestValidationError):
    for err in exc.errors():
        if "leadText" in err.get("loc", ()):
            return _error(400, MISSING_LEAD)
    return _error(400, INVALID_BODY)


@app.get("/health")
async def health():
    return {"status": "ok", "version": VERSION}


@app.post(
    "/api/generate-project-folder",
    response_model=ProjectFolderResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_project_folder(
    body: Optional[GenerateProjectFolderBody] = None,
    settings: Settings = Depends(get_settings),
):
    lead_text = body.lead_text if body else None
    if not lead_text or not lead_text.strip():
        return _error(400, MISSING_LEAD)

    model = body.model.value if body.model else settings.MODEL_NAME
    tone = body.tone.value if body.tone else None
    prompt = make_project_folder_prompt(lead_text, tone, temperature=settings.TEMPERATURE)

    try:
        content = generate_markdown(
            prompt.system,
            prompt.user,
            api_key=settings.OPENAI_API_KEY,
            model=model,
            temperature=prompt.temperature,
        )
    except MissingCredentialError as e:
        return _error(500, e.message)
    except UpstreamError:
        return _error(500, PROVIDER_FAILED)
    except Exception:
        logger.exception("Unexpected error while generating project folder")
        return _error(500, UNEXPECTED)

    return {"projectFolder": content or EMPTY_COMPLETION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=_settings.HOST, port=_settings.PORT)
