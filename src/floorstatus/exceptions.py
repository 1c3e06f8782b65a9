class FloorStatusException(Exception):
    """Base Exception Class"""
    pass

class ConnectionError(FloorStatusException):
    """Connection or Query Failure"""
    pass

class ConfigurationError(FloorStatusException):
    """Configuration Error"""
    pass

class RowConversionError(FloorStatusException):
    """A result row could not be mapped to a record"""
    pass
