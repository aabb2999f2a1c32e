# src/sunrise_taskflow/users/user_directory.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class User:
    id: int
    email: str
    name: str
    password: str


@dataclass(frozen=True, slots=True)
class UserInfo:
    """Public projection of a User (no password)."""

    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


DEFAULT_USERS: tuple[User, ...] = (
    User(1, "user1@gmail.com", "user 1", "123456"),
    User(2, "user2@gmail.com", "user 2", "123kjal6"),
    User(3, "user3@gmail.com", "user 3", "hehehemeowmeow"),
)


class UserDirectory:
    """Fixed, read-only list of users."""

    def __init__(self, users: Iterable[User] = DEFAULT_USERS) -> None:
        self._users = tuple(users)

    def list_users(self) -> list[UserInfo]:
        return [UserInfo(id=u.id, name=u.name, email=u.email) for u in self._users]
