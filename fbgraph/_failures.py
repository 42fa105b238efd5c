"""Closed set of failure categories produced by the error classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Union

if TYPE_CHECKING:
    from ._types import GraphError


class FailureKind(str, Enum):
    """Tag identifying which failure category a variant belongs to."""

    INSUFFICIENT_PERMISSION = "insufficient_permission"
    NOT_A_FRIEND = "not_a_friend"
    RESOURCE_NOT_FOUND = "resource_not_found"
    RESOURCE_OWNERSHIP = "resource_ownership"
    MISSING_AUTHORIZATION = "missing_authorization"
    EXPIRED_AUTHORIZATION = "expired_authorization"
    REVOKED_AUTHORIZATION = "revoked_authorization"
    UNCATEGORIZED = "uncategorized"


@dataclass(frozen=True)
class InsufficientPermission:
    """The operation needs a permission the token was not granted."""

    message: str
    required_permission: str | None = None
    kind: ClassVar[FailureKind] = FailureKind.INSUFFICIENT_PERMISSION


@dataclass(frozen=True)
class NotAFriend:
    """The target user must be a friend of the current user."""

    message: str
    kind: ClassVar[FailureKind] = FailureKind.NOT_A_FRIEND


@dataclass(frozen=True)
class ResourceNotFound:
    """The object, alias or path does not exist."""

    message: str
    kind: ClassVar[FailureKind] = FailureKind.RESOURCE_NOT_FOUND


@dataclass(frozen=True)
class ResourceOwnership:
    """The current user must own the resource to modify it."""

    message: str
    kind: ClassVar[FailureKind] = FailureKind.RESOURCE_OWNERSHIP


@dataclass(frozen=True)
class MissingAuthorization:
    """No access token was supplied for a resource that requires one."""

    message: str
    kind: ClassVar[FailureKind] = FailureKind.MISSING_AUTHORIZATION


@dataclass(frozen=True)
class ExpiredAuthorization:
    """The access token is past its lifetime."""

    message: str
    kind: ClassVar[FailureKind] = FailureKind.EXPIRED_AUTHORIZATION


@dataclass(frozen=True)
class RevokedAuthorization:
    """Token invalidated by a password change, app deauthorization or sign-out."""

    message: str
    kind: ClassVar[FailureKind] = FailureKind.REVOKED_AUTHORIZATION


@dataclass(frozen=True)
class Uncategorized:
    """Anything the classifier does not recognise. Keeps the raw response for diagnostics."""

    message: str
    status_code: int
    body: str = ""
    graph_error: GraphError | None = None
    kind: ClassVar[FailureKind] = FailureKind.UNCATEGORIZED


ClassifiedFailure = Union[
    InsufficientPermission,
    NotAFriend,
    ResourceNotFound,
    ResourceOwnership,
    MissingAuthorization,
    ExpiredAuthorization,
    RevokedAuthorization,
    Uncategorized,
]

# Lookup from tag to variant class, mostly for callers dispatching on strings.
FAILURE_TYPES: dict[FailureKind, type] = {
    FailureKind.INSUFFICIENT_PERMISSION: InsufficientPermission,
    FailureKind.NOT_A_FRIEND: NotAFriend,
    FailureKind.RESOURCE_NOT_FOUND: ResourceNotFound,
    FailureKind.RESOURCE_OWNERSHIP: ResourceOwnership,
    FailureKind.MISSING_AUTHORIZATION: MissingAuthorization,
    FailureKind.EXPIRED_AUTHORIZATION: ExpiredAuthorization,
    FailureKind.REVOKED_AUTHORIZATION: RevokedAuthorization,
    FailureKind.UNCATEGORIZED: Uncategorized,
}
