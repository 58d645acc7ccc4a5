class ReverseLookupError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class TransportError(ReverseLookupError):
    """Fetching a lookup page failed (connection error, redirect loop)."""


class MissingCookieError(ReverseLookupError):
    def __init__(self, message: str = "HTML response does not contain cookie value"):
        super().__init__(message)
