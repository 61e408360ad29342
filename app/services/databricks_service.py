import logging
from typing import Any

import httpx

from app.core.config import Settings
from app.core.exceptions import DownstreamError
from app.services.payload import get_field, is_present, to_text

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Erro ao chamar Databricks"


def build_request_body(question: str) -> dict:
    return {"dataframe_records": [{"question": question}]}


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


async def forward_question(client: httpx.AsyncClient, settings: Settings, question: str) -> Any:
    """
    Sends the question to the Databricks serving endpoint.
    Returns the parsed response body untouched; raises DownstreamError on
    timeouts, transport failures and non-2xx answers.
    """
    headers = {
        "Authorization": f"Bearer {settings.DATABRICKS_TOKEN}",
        "Content-Type": "application/json",
    }

    try:
        response = await client.post(
            settings.DATABRICKS_URL,
            json=build_request_body(question),
            headers=headers,
            timeout=settings.DATABRICKS_TIMEOUT_SECONDS,
            follow_redirects=True,
        )
    except httpx.TimeoutException as e:
        message = str(e) or f"timeout of {settings.DATABRICKS_TIMEOUT_SECONDS:g}s exceeded"
        logger.error("Erro ao chamar Databricks: timeout: %s", message)
        raise DownstreamError(message) from e
    except httpx.HTTPError as e:
        message = str(e) or DEFAULT_ERROR_MESSAGE
        logger.error("Erro ao chamar Databricks: %s", message)
        raise DownstreamError(message) from e

    data = _parse_body(response)

    if not response.is_success:
        logger.error(
            "Erro ao chamar Databricks: %s %s",
            response.status_code,
            data,
            extra={"relay_attributes": {"http.status_code": response.status_code}},
        )
        downstream_message = get_field(data, "message")
        if is_present(downstream_message):
            message = to_text(downstream_message)
        else:
            message = f"Request failed with status code {response.status_code}"
        raise DownstreamError(message, status_code=response.status_code)

    return data
