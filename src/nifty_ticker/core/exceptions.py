"""Application-level exceptions."""


class TickerError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "TICKER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigurationError(TickerError):
    """Raised when startup configuration is unusable. Not recoverable."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")


class TickInProgressError(TickerError):
    """Raised when a manual refresh is requested while a tick is still running."""

    def __init__(self):
        super().__init__("A refresh is already in progress", code="TICK_IN_PROGRESS")
