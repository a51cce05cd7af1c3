"""In-memory record models."""

from goloyal.models.base import Record
from goloyal.models.demo_request import DemoRequest
from goloyal.models.user import User

__all__ = [
    "Record",
    "DemoRequest",
    "User",
]
