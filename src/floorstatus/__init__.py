from .config import AppConfig
from .domain.models import FetchResult, TableRecord
from .services import TableFetcher

__all__ = ["AppConfig", "FetchResult", "TableFetcher", "TableRecord"]
