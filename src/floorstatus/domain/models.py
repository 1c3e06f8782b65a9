from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class HealthStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    TIMEOUT = "timeout"

class ConnectionHealth(BaseModel):
    db_alias: str
    status: HealthStatus
    latency_ms: Optional[float] = None
    error_message: Optional[str] = None

class TableRecord(BaseModel):
    """Seating and reservation status of one dining table"""
    model_config = ConfigDict(frozen=True)

    table_id: int
    seats: int
    is_reserved: bool

class FetchResult(BaseModel):
    """
    Outcome of a single fetch. `records` is empty whenever `error` is set;
    partial results are never reported.
    """
    records: List[TableRecord] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, error: str) -> "FetchResult":
        return cls(records=[], error=error)
