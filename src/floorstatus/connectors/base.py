from typing import Any, List, Mapping
import time
from sqlalchemy import create_engine, text, event
from sqlalchemy.exc import SQLAlchemyError
from ..domain.interfaces import Query
from ..domain.models import HealthStatus, ConnectionHealth
from ..exceptions import ConnectionError
from ..logger import get_logger

logger = get_logger(__name__)

# Statements the read-only guard lets through
ALLOWED_STATEMENT_PREFIXES = (
    "SELECT",
    "WITH",
    "EXPLAIN",
    "DESCRIBE",
    "SHOW",
    "SET",          # Needed for session configuration
)

SLOW_RESPONSE_MS = 5000

def enforce_read_only(conn, cursor, statement, parameters, context, executemany):
    """
    `before_cursor_execute` hook.
    Blocks any SQL that doesn't start with a whitelisted keyword.
    """
    sql = statement.strip().upper()
    if not sql.startswith(ALLOWED_STATEMENT_PREFIXES):
        raise PermissionError(
            f"SAFETY BLOCK: Operation blocked! Only read-only queries are allowed. "
            f"Attempted: {sql[:50]}..."
        )

def set_read_only_session(connection):
    """
    `engine_connect` hook.
    Puts the session into READ ONLY mode on dialects that support it.
    """
    dialect = connection.dialect.name.lower()
    try:
        if dialect in ("mysql", "mariadb"):
            connection.execute(text("SET SESSION TRANSACTION READ ONLY"))
        elif dialect == "postgresql":
            connection.execute(text("SET SESSION CHARACTERISTICS AS TRANSACTION READ ONLY"))
    except SQLAlchemyError as e:
        # The statement guard still applies
        logger.debug("Could not set READ ONLY session on %s: %s", dialect, e)

def as_statement(query: Query):
    return text(query) if isinstance(query, str) else query

def classify_latency(status: HealthStatus, latency_ms: float) -> HealthStatus:
    # A connection that succeeded but answered slowly is reported as a timeout
    if status == HealthStatus.SUCCESS and latency_ms > SLOW_RESPONSE_MS:
        return HealthStatus.TIMEOUT
    return status

class SQLAlchemyConnector:
    """
    Blocking connector over a SQLAlchemy engine.
    The engine is created lazily and disposed by `close()`, so a connector
    used as a context manager never leaks connections.
    """
    def __init__(self, connection_string: str, db_alias: str = "unknown"):
        self.connection_string = connection_string
        self.db_alias = db_alias
        self._engine = None

    def __enter__(self) -> "SQLAlchemyConnector":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def connect(self) -> None:
        if not self._engine:
            try:
                # Create engine but don't connect yet (lazy)
                engine = create_engine(self.connection_string)
                event.listen(engine, "before_cursor_execute", enforce_read_only)
                event.listen(engine, "engine_connect", set_read_only_session)
                self._engine = engine
            except Exception as e:
                raise ConnectionError(f"Failed to create engine for '{self.db_alias}': {e}")

    def close(self) -> None:
        if self._engine:
            self._engine.dispose()
            self._engine = None

    def check_health(self) -> ConnectionHealth:
        self.connect()
        start_time = time.time()
        status = HealthStatus.FAILED
        error_msg = None

        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
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

    def fetch_rows(self, query: Query) -> List[Mapping[str, Any]]:
        self.connect()
        try:
            with self._engine.connect() as conn:
                result = conn.execute(as_statement(query))
                return list(result.mappings())
        except SQLAlchemyError as e:
            raise ConnectionError(f"Failed to fetch data from '{self.db_alias}': {e}")
