# ============================================================
# PromptGenie FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Template expansion of user intent + parameters
#   - One completion call per request via the injected client
#   - Support for Gemini, OpenAI, Ollama, or Echo clients
# ============================================================

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

# --- Local imports ---
from promptgenie.settings import settings
from promptgenie.log import get_logger
from promptgenie.expand import OPTIONS, DEFAULT_PARAMETERS
from promptgenie.generate import PromptGenerator, GenerationError, build_model_client

logger = get_logger("promptgenie.app")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class GenerateRequest(BaseModel):
    # checked by PromptGenerator.generate
    prompt: Any = None
    parameters: Any = None

class GenerateResponse(BaseModel):
    completion: str

class ApiError(BaseModel):
    error: str
    status: int
    violations: Optional[List[str]] = None

class OptionsResponse(BaseModel):
    options: Dict[str, List[str]]
    defaults: Dict[str, str]


def _error_response(err: GenerationError) -> JSONResponse:
    return JSONResponse(err.to_body(), status_code=err.status)


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
def create_app(generator: Optional[PromptGenerator] = None) -> FastAPI:
    """Build the API around a generator; the default one uses the configured provider."""
    if generator is None:
        model_client = build_model_client(settings)
        generator = PromptGenerator(model_client=model_client, config_path=settings.GENERATE_CONFIG_PATH)
        logger.info("Model client: %s (%s)", type(model_client).__name__, getattr(model_client, "model", None))

    app = FastAPI(title="PromptGenie API", version="0.1")
    app.state.generator = generator

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return JSONResponse({"error": "Request body must be a JSON object", "status": 400}, status_code=400)

    # ------------------------------------------------------------
    # 💬 Main generate route
    # ------------------------------------------------------------
    @app.post(
        "/api/generate",
        response_model=GenerateResponse,
        responses={400: {"model": ApiError}, 500: {"model": ApiError}},
    )
    def generate(req: GenerateRequest):
        out = generator.generate(req.prompt, req.parameters)
        if isinstance(out, GenerationError):
            return _error_response(out)
        return GenerateResponse(completion=out.text)

    # ------------------------------------------------------------
    # 🎛️ Options for form controls
    # ------------------------------------------------------------
    @app.get("/api/options", response_model=OptionsResponse)
    def options():
        return OptionsResponse(
            options={name: list(values) for name, values in OPTIONS.items()},
            defaults=DEFAULT_PARAMETERS.model_dump(),
        )

    # ------------------------------------------------------------
    # 🧭 Health checks
    # ------------------------------------------------------------
    @app.get("/healthz")
    def healthz():
        client = generator.model_client
        return {
            "ok": True,
            "env": settings.ENV,
            "debug": settings.DEBUG,
            "app": settings.app_name,
            "engine": type(client).__name__,
            "model": getattr(client, "model", None),
        }

    @app.get("/health")
    def health():
        return {"status": "ok", "env": settings.ENV}

    @app.get("/")
    def hello():
        return {"message": f"{settings.app_name} service running."}

    return app


app = create_app()
