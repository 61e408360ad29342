import logging

import httpx
from fastapi import APIRouter, Depends

from app.api.deps import get_http_client
from app.core.config import Settings, get_settings
from app.core.exceptions import ConfigurationMissing, DownstreamError, QuestionValidationError
from app.schemas.invocation import InvocationRequest, InvocationResponse
from app.services.databricks_service import DEFAULT_ERROR_MESSAGE, forward_question
from app.services.reply_formatter import format_reply

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/invocations", response_model=InvocationResponse)
async def handle_invocation(
    request: InvocationRequest,
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    Entry point called by AI Core.
    Accepts {"question": ...}, {"input": ...} or {"message": ...} and answers {"reply": ...}.
    """
    question = request.resolve_question()
    if not question:
        raise QuestionValidationError()

    if not settings.is_configured:
        logger.warning("Request rejected: DATABRICKS_URL or DATABRICKS_TOKEN not set.")
        raise ConfigurationMissing()

    try:
        data = await forward_question(http_client, settings, question)
        reply = format_reply(data)
    except DownstreamError:
        raise
    except Exception as e:
        logger.exception("Unexpected error while handling invocation")
        raise DownstreamError(str(e) or DEFAULT_ERROR_MESSAGE) from e

    return InvocationResponse(reply=reply)
