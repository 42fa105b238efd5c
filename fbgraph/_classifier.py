"""Map Graph API responses onto the closed set of failure categories.

The Graph API is inconsistent about HTTP status codes: the same error can
arrive as 400, 403 or 500 depending on the endpoint, and some errors (unknown
aliases, for one) come back as ``200 OK``. Classification therefore looks at
the error envelope in the body first and only falls back to the status code
when the body cannot be interpreted.

``classify`` is a pure function. It never raises on malformed input.
"""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
import re

from ._failures import (
    ClassifiedFailure,
    ExpiredAuthorization,
    InsufficientPermission,
    MissingAuthorization,
    NotAFriend,
    ResourceNotFound,
    ResourceOwnership,
    RevokedAuthorization,
    Uncategorized,
)
from ._types import GraphError, RawResponse

logger = logging.getLogger(__name__)

# Graph API error codes
OAUTH_EXCEPTION_CODE = 190
ALIAS_NOT_FOUND_CODE = 803
PERMISSION_CODES = frozenset({10, *range(200, 300)})

# Subcodes of code 190
SUBCODE_APP_NOT_INSTALLED = 458
SUBCODE_PASSWORD_CHANGED = 460
SUBCODE_SESSION_EXPIRED = 463
SUBCODE_SESSION_INVALIDATED = 467

_PERMISSION_PATTERNS = (
    re.compile(r"requires '([^']+)' permission", re.IGNORECASE),
    re.compile(r"requires extended permission:\s*([\w.]+)", re.IGNORECASE),
)
_NOT_FOUND_PATTERNS = (
    "unknown path components",
    "some of the aliases you requested do not exist",
)
_NO_SESSION_PATTERNS = (
    "an active access token must be used",
    "an access token is required",
)
_EXPIRED_PATTERNS = ("session has expired",)
_REVOKED_PATTERNS = (
    "changed the password",
    "changed their password",
    "has not authorized application",
    "is not authorized",
    "user logged out",
)

Rule = Callable[[GraphError, bool], "ClassifiedFailure | None"]


def _contains_any(message: str, needles: tuple[str, ...]) -> bool:
    lowered = message.lower()
    return any(needle in lowered for needle in needles)


def required_permission(message: str) -> str | None:
    """Pull the permission name out of messages like "requires 'rsvp_event' permission"."""
    for pattern in _PERMISSION_PATTERNS:
        match = pattern.search(message)
        if match:
            return match.group(1)
    return None


def _invalid_token(err: GraphError, authorized: bool) -> ClassifiedFailure | None:
    is_token_error = err.code == OAUTH_EXCEPTION_CODE or err.message.lower().startswith(
        "error validating access token"
    )
    if not is_token_error:
        return None
    if err.subcode == SUBCODE_SESSION_EXPIRED or _contains_any(err.message, _EXPIRED_PATTERNS):
        return ExpiredAuthorization(err.message)
    if err.subcode in (
        SUBCODE_APP_NOT_INSTALLED,
        SUBCODE_PASSWORD_CHANGED,
        SUBCODE_SESSION_INVALIDATED,
    ) or _contains_any(err.message, _REVOKED_PATTERNS):
        return RevokedAuthorization(err.message)
    return None


def _no_active_session(err: GraphError, authorized: bool) -> ClassifiedFailure | None:
    if not _contains_any(err.message, _NO_SESSION_PATTERNS):
        return None
    if not authorized:
        return MissingAuthorization(err.message)
    # A token was sent but the API does not consider it an active session.
    return InsufficientPermission(err.message)


def _not_found(err: GraphError, authorized: bool) -> ClassifiedFailure | None:
    if err.code == ALIAS_NOT_FOUND_CODE or _contains_any(err.message, _NOT_FOUND_PATTERNS):
        return ResourceNotFound(err.message)
    return None


def _permission_message(err: GraphError, authorized: bool) -> ClassifiedFailure | None:
    permission = required_permission(err.message)
    if permission:
        return InsufficientPermission(err.message, required_permission=permission)
    return None


def _not_a_friend(err: GraphError, authorized: bool) -> ClassifiedFailure | None:
    if "must be a friend" in err.message.lower():
        return NotAFriend(err.message)
    return None


def _ownership(err: GraphError, authorized: bool) -> ClassifiedFailure | None:
    if _contains_any(err.message, ("must be an owner", "must be the owner")):
        return ResourceOwnership(err.message)
    return None


def _permission_code(err: GraphError, authorized: bool) -> ClassifiedFailure | None:
    if err.code in PERMISSION_CODES:
        return InsufficientPermission(err.message)
    return None


# Evaluated in order; first match wins.
RULES: tuple[Rule, ...] = (
    _invalid_token,
    _no_active_session,
    _not_found,
    _permission_message,
    _not_a_friend,
    _ownership,
    _permission_code,
)


def parse_graph_error(response: RawResponse) -> GraphError | None:
    """Decode the error envelope from the response body, if there is one."""
    text = response.text.lstrip()
    if not text.startswith("{"):
        return None
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        logger.debug("Failed to parse response body as JSON: %s", text[:200])
        return None
    return GraphError.from_envelope(data)


def classify(response: RawResponse, *, authorized: bool = True) -> ClassifiedFailure | None:
    """Classify a Graph API response.

    Args:
        response: The raw HTTP response.
        authorized: Whether the request carried a caller-supplied access token.

    Returns:
        None for a successful response, otherwise the failure category.
    """
    err = parse_graph_error(response)
    if err is None:
        if not response.is_error_status:
            return None
        return Uncategorized(
            f"HTTP {response.status_code}",
            status_code=response.status_code,
            body=response.text,
        )

    for rule in RULES:
        failure = rule(err, authorized)
        if failure is not None:
            return failure

    return Uncategorized(
        err.message or f"HTTP {response.status_code}",
        status_code=response.status_code,
        body=response.text,
        graph_error=err,
    )
