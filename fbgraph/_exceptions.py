"""Exceptions raised by the SDK calling convention."""

from __future__ import annotations

from ._failures import ClassifiedFailure, FailureKind


class FacebookError(Exception):
    """Base exception for all fbgraph SDK errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.method = method
        self.path = path


class GraphAPIError(FacebookError):
    """The Graph API reported a failure. ``failure`` holds the classified category."""

    def __init__(
        self,
        failure: ClassifiedFailure,
        status_code: int | None = None,
        method: str | None = None,
        path: str | None = None,
    ):
        super().__init__(failure.message, status_code=status_code, method=method, path=path)
        self.failure = failure

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind


class NetworkError(FacebookError):
    """The request never produced a response (connection refused, timeout)."""
