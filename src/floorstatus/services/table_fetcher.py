from typing import Any, Iterable, List, Mapping, Optional
from ..config import AppConfig, DEFAULT_CONNECTION
from ..connectors.factory import get_async_connector, get_connector
from ..domain.conversion import to_bool, to_int
from ..domain.models import FetchResult, TableRecord
from ..exceptions import FloorStatusException, RowConversionError
from ..logger import get_logger
from .queries import MAIN_FLOOR_TABLES_QUERY

logger = get_logger(__name__)

def row_to_record(row: Mapping[str, Any]) -> TableRecord:
    try:
        return TableRecord(
            table_id=to_int(row["table_id"]),
            seats=to_int(row["seats"]),
            is_reserved=to_bool(row["is_reserved"]),
        )
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        raise RowConversionError(f"Cannot convert row {dict(row)!r}: {e}")

def rows_to_records(rows: Iterable[Mapping[str, Any]]) -> List[TableRecord]:
    return [row_to_record(row) for row in rows]

class TableFetcher:
    """
    Reads the seating and reservation status of the main floor tables (ids 1-11).

    `fetch_main_floor_tables` never raises: a missing connection string or any
    database/conversion failure is logged once and yields an empty list.
    Callers that need to tell "no rows" from "failure" use the `*_result`
    variants, which return a FetchResult instead.
    """
    def __init__(self, config: Optional[AppConfig], connection_name: str = DEFAULT_CONNECTION):
        self._config = config
        self.connection_name = connection_name

    def _connection_string(self) -> Optional[str]:
        if self._config is None:
            return None
        return self._config.get_connection_string(self.connection_name)

    def _missing_configuration(self) -> FetchResult:
        message = f"Connection string '{self.connection_name}' not found or is empty in configuration."
        logger.error(message)
        return FetchResult.failed(message)

    def _failure(self, e: Exception) -> FetchResult:
        if isinstance(e, FloorStatusException):
            message = f"Database error fetching tables: {e}"
            logger.error(message)
        else:
            message = f"Unexpected error fetching tables: {e}"
            logger.exception(message)
        return FetchResult.failed(message)

    def fetch_main_floor_tables_result(self) -> FetchResult:
        connection_string = self._connection_string()
        if not connection_string:
            return self._missing_configuration()

        try:
            with get_connector(connection_string, self.connection_name) as connector:
                rows = connector.fetch_rows(MAIN_FLOOR_TABLES_QUERY)
            return FetchResult(records=rows_to_records(rows))
        except Exception as e:
            return self._failure(e)

    async def fetch_main_floor_tables_result_async(self) -> FetchResult:
        connection_string = self._connection_string()
        if not connection_string:
            return self._missing_configuration()

        try:
            async with get_async_connector(connection_string, self.connection_name) as connector:
                rows = await connector.fetch_rows(MAIN_FLOOR_TABLES_QUERY)
            return FetchResult(records=rows_to_records(rows))
        except Exception as e:
            return self._failure(e)

    def fetch_main_floor_tables(self) -> List[TableRecord]:
        return self.fetch_main_floor_tables_result().records

    async def fetch_main_floor_tables_async(self) -> List[TableRecord]:
        result = await self.fetch_main_floor_tables_result_async()
        return result.records
