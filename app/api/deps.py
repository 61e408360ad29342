import httpx
from fastapi import Request


def get_http_client(request: Request) -> httpx.AsyncClient:
    """The AsyncClient opened in the application lifespan."""
    return request.app.state.http_client
