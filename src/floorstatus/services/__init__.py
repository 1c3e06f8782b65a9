from .table_fetcher import TableFetcher

__all__ = ["TableFetcher"]
