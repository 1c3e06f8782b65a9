from typing import Any, List, Mapping, Protocol, Union
from sqlalchemy.sql import Executable
from .models import ConnectionHealth

Query = Union[str, Executable]

class DatabaseConnector(Protocol):
    db_alias: str

    def __enter__(self) -> "DatabaseConnector": ...

    def __exit__(self, exc_type, exc, tb) -> None: ...

    def connect(self) -> None: ...

    def close(self) -> None: ...

    def check_health(self) -> ConnectionHealth: ...

    def fetch_rows(self, query: Query) -> List[Mapping[str, Any]]: ...

class AsyncDatabaseConnector(Protocol):
    db_alias: str

    async def __aenter__(self) -> "AsyncDatabaseConnector": ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    def connect(self) -> None: ...

    async def close(self) -> None: ...

    async def check_health(self) -> ConnectionHealth: ...

    async def fetch_rows(self, query: Query) -> List[Mapping[str, Any]]: ...
