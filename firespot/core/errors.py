from __future__ import annotations


class FetchFailure(Exception):
    """Raised when an upstream data source cannot produce a usable result.

    Network errors, non-2xx responses and malformed payloads all end up here;
    callers only ever see the human-readable ``message``.
    """

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
