from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

@router.get("/ping", response_class=PlainTextResponse)
async def ping():
    """Liveness probe for AI Core; never touches Databricks."""
    return "ok"
