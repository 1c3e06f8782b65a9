from typing import Any, List, Mapping
import time
from sqlalchemy import event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from ..domain.interfaces import Query
from ..domain.models import HealthStatus, ConnectionHealth
from ..exceptions import ConnectionError
from .base import as_statement, classify_latency, enforce_read_only, set_read_only_session

class AsyncSQLAlchemyConnector:
    """
    asyncio counterpart of SQLAlchemyConnector.
    Connecting and querying suspend the caller instead of blocking it.
    """
    def __init__(self, connection_string: str, db_alias: str = "unknown"):
        self.connection_string = connection_string
        self.db_alias = db_alias
        self._engine = None

    async def __aenter__(self) -> "AsyncSQLAlchemyConnector":
        self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def connect(self) -> None:
        if not self._engine:
            try:
                engine = create_async_engine(self.connection_string)
                # Listeners live on the wrapped sync engine
                sync_engine = engine.sync_engine
                event.listen(sync_engine, "before_cursor_execute", enforce_read_only)
                event.listen(sync_engine, "engine_connect", set_read_only_session)
                self._engine = engine
            except Exception as e:
                raise ConnectionError(f"Failed to create engine for '{self.db_alias}': {e}")

    async def close(self) -> None:
        if self._engine:
            await self._engine.dispose()
            self._engine = None

    async def check_health(self) -> ConnectionHealth:
        self.connect()
        start_time = time.time()
        status = HealthStatus.FAILED
        error_msg = None

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                status = HealthStatus.SUCCESS
        except Exception as e:
            error_msg = str(e)

        latency = (time.time() - start_time) * 1000  # ms

        return ConnectionHealth(
            db_alias=self.db_alias,
            status=classify_latency(status, latency),
            latency_ms=round(latency, 2),
            error_message=error_msg
        )

    async def fetch_rows(self, query: Query) -> List[Mapping[str, Any]]:
        self.connect()
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(as_statement(query))
                return list(result.mappings())
        except SQLAlchemyError as e:
            raise ConnectionError(f"Failed to fetch data from '{self.db_alias}': {e}")
