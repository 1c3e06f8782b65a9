from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from ..domain.interfaces import AsyncDatabaseConnector, DatabaseConnector
from ..exceptions import ConnectionError
from .base import SQLAlchemyConnector
from .async_base import AsyncSQLAlchemyConnector

# Backend name -> driver used when the URL names none (or a blocking one)
SYNC_DRIVERS = {
    "mysql": "pymysql",
    "mariadb": "pymysql",
}

ASYNC_DRIVERS = {
    "mysql": "aiomysql",
    "mariadb": "aiomysql",
    "postgresql": "asyncpg",
    "sqlite": "aiosqlite",
}

def _with_driver(connection_string: str, drivers: dict, force: bool) -> str:
    try:
        url = make_url(connection_string)
    except ArgumentError as e:
        raise ConnectionError(f"Invalid connection string: {e}")

    backend = url.get_backend_name()
    driver = drivers.get(backend)
    if driver is None:
        return connection_string
    # Sync URLs keep an explicit driver; async URLs must use an asyncio driver
    if "+" in url.drivername and (not force or url.get_driver_name() == driver):
        return connection_string
    return url.set(drivername=f"{backend}+{driver}").render_as_string(hide_password=False)

def normalize_sync_url(connection_string: str) -> str:
    """`mysql://...` -> `mysql+pymysql://...`; other URLs are returned as is."""
    return _with_driver(connection_string, SYNC_DRIVERS, force=False)

def normalize_async_url(connection_string: str) -> str:
    """Rewrites the driver to its asyncio counterpart, e.g. `sqlite://` -> `sqlite+aiosqlite://`."""
    return _with_driver(connection_string, ASYNC_DRIVERS, force=True)

def get_connector(connection_string: str, alias: str = "unknown") -> DatabaseConnector:
    """
    Factory function to create a blocking connector for a connection string.
    """
    return SQLAlchemyConnector(normalize_sync_url(connection_string), alias)

def get_async_connector(connection_string: str, alias: str = "unknown") -> AsyncDatabaseConnector:
    """
    Factory function to create an asyncio connector for a connection string.
    """
    return AsyncSQLAlchemyConnector(normalize_async_url(connection_string), alias)
