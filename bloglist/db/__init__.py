"""Core application modules."""

from bloglist.db.database import (
    async_session_maker,
    close_db,
    drop_db,
    engine,
    get_session,
    init_db,
    ping,
    transaction,
)

__all__ = [
    "async_session_maker",
    "close_db",
    "drop_db",
    "engine",
    "get_session",
    "init_db",
    "ping",
    "transaction",
]
