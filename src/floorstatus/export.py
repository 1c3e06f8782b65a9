from pathlib import Path
from typing import List
import pandas as pd
from .domain.models import TableRecord

COLUMNS = ["table_id", "seats", "is_reserved"]

def records_to_frame(records: List[TableRecord]) -> pd.DataFrame:
    # Keep the column layout even for an empty snapshot
    return pd.DataFrame([r.model_dump() for r in records], columns=COLUMNS)

def write_csv(records: List[TableRecord], path: Path) -> int:
    df = records_to_frame(records)
    df.to_csv(path, index=False)
    return len(df)

def write_parquet(records: List[TableRecord], path: Path) -> int:
    df = records_to_frame(records).astype({"table_id": "int64", "seats": "int64", "is_reserved": "bool"})
    df.to_parquet(path, index=False)
    return len(df)
