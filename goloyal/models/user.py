"""User record. Kept in the store interface, not exposed over HTTP."""

from goloyal.models.base import Record


class User(Record):
    id: str
    username: str
    password: str
