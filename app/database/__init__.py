from app.database.async_db import (
    create_async_database_engine,
    dispose_engine,
    get_async_db_context,
    get_async_engine,
    get_session_factory,
)

__all__ = [
    "create_async_database_engine",
    "dispose_engine",
    "get_async_db_context",
    "get_async_engine",
    "get_session_factory",
]
