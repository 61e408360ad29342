import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.v1.api import api_router
from app.core.config import get_settings
from app.core.exceptions import QuestionValidationError, RelayError
from app.core.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.SERVICE_NAME, settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.is_configured:
        logger.warning("DATABRICKS_URL ou DATABRICKS_TOKEN não definidos. Defina no deployment do AI Core.")
    app.state.http_client = httpx.AsyncClient(timeout=settings.DATABRICKS_TIMEOUT_SECONDS)
    logger.info("Databricks proxy rodando na porta %s", settings.PORT)
    yield
    await app.state.http_client.aclose()

app = FastAPI(
    title="Databricks Invocation Relay",
    lifespan=lifespan
)

@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(status_code=exc.status_code, content={"reply": exc.reply})

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Non-object bodies and non-string fields carry no usable question.
    return await relay_error_handler(request, QuestionValidationError())

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=502, content={"reply": f"[Erro] {exc}"})

app.include_router(api_router)

def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

if __name__ == "__main__":
    run()
