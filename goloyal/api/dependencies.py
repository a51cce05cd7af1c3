"""FastAPI dependencies shared by API routes."""

from fastapi import Request

from goloyal.repositories.base import Storage


async def get_storage(request: Request) -> Storage:
    """Record store created by the app factory."""
    return request.app.state.storage
