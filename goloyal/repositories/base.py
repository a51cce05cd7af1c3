"""Storage interface for demo requests and users."""

from abc import ABC, abstractmethod
from typing import Optional

from goloyal.models import DemoRequest, User
from goloyal.schemas.demo_request import DemoRequestIn
from goloyal.schemas.user import UserIn


class Storage(ABC):
    """Record store used by the API layer."""

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def create_user(self, data: UserIn) -> User:
        ...

    @abstractmethod
    async def create_demo_request(self, data: DemoRequestIn) -> DemoRequest:
        ...

    @abstractmethod
    async def get_all_demo_requests(self) -> list[DemoRequest]:
        ...

    @abstractmethod
    async def get_demo_request(self, request_id: str) -> Optional[DemoRequest]:
        ...

    @abstractmethod
    async def count_demo_requests(self) -> int:
        ...
