
import logging

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .di import lifespan, orchestrator
from .models import ChatRequest, ChatResponse, ErrorResponse
from .orchestrator import ChatOrchestrator

logger = logging.getLogger(__name__)

INVALID_MESSAGES_ERROR = "Invalid messages format"
INTERNAL_ERROR = "Internal server error"

app = FastAPI(title="simchat", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(400, INVALID_MESSAGES_ERROR)


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(500, INTERNAL_ERROR)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.post(
    "/api/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat_endpoint(
    req: ChatRequest,
    orch: ChatOrchestrator = Depends(orchestrator),
):
    try:
        reply = await orch.handle(req.messages)
    except Exception:
        logger.exception("Chat API error")
        return _error(500, INTERNAL_ERROR)
    return ChatResponse(message=reply)


"""
curl -X POST http://localhost:8000/api/chat \
  -H "Content-Type: application/json" \
  -d '{
    "messages": [
      {"role": "user", "content": "Hello there"},
      {"role": "assistant", "content": "Hello! I'"'"'m an AI assistant. How can I help you today?"},
      {"role": "user", "content": "what is 6 * 7"}
    ]
  }'
"""


def run() -> None:
    settings = get_settings()
    uvicorn.run("simchat.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
