"""In-memory storage. Data lives as long as the process does."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

import structlog

from goloyal.models import DemoRequest, User
from goloyal.repositories.base import Storage
from goloyal.schemas.demo_request import DemoRequestIn
from goloyal.schemas.user import UserIn

logger = structlog.get_logger()


class MemoryStorage(Storage):
    """Dict-backed store keyed by generated UUIDs.

    Writes are insert-only, so nothing here needs a lock: every call runs
    to completion on the event loop without awaiting.
    """

    def __init__(self):
        self._users: dict[str, User] = {}
        self._demo_requests: dict[str, DemoRequest] = {}

    async def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        """Return the first user with this username, in insertion order."""
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    async def create_user(self, data: UserIn) -> User:
        user = User(id=str(uuid.uuid4()), **data.model_dump())
        self._users[user.id] = user
        logger.debug("user_created", user_id=user.id)
        return user

    async def create_demo_request(self, data: DemoRequestIn) -> DemoRequest:
        """Store a validated submission.

        Args:
            data: Submission that already passed schema validation

        Returns:
            The stored record with its new id and creation timestamp
        """
        demo_request = DemoRequest(
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._demo_requests[demo_request.id] = demo_request
        return demo_request

    async def get_all_demo_requests(self) -> list[DemoRequest]:
        """All demo requests, most recent first.

        Equal timestamps keep insertion order reversed, so later records
        always come first.
        """
        return sorted(
            reversed(self._demo_requests.values()),
            key=lambda r: r.created_at,
            reverse=True,
        )

    async def get_demo_request(self, request_id: str) -> DemoRequest | None:
        return self._demo_requests.get(request_id)

    async def count_demo_requests(self) -> int:
        return len(self._demo_requests)
