"""User storage backends."""

from .user_store import (
    DatabaseUserStore,
    InMemoryUserStore,
    UserStore,
    build_user_store,
)

__all__ = [
    "DatabaseUserStore",
    "InMemoryUserStore",
    "UserStore",
    "build_user_store",
]
