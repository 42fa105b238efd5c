"""
fbgraph - Python SDK for the Facebook Graph API

Every response is classified into a closed set of failure categories.
"""

__version__ = "0.1.0"

from ._classifier import classify
from ._client import Facebook
from ._exceptions import FacebookError, GraphAPIError, NetworkError
from ._failures import (
    ClassifiedFailure,
    ExpiredAuthorization,
    FailureKind,
    InsufficientPermission,
    MissingAuthorization,
    NotAFriend,
    ResourceNotFound,
    ResourceOwnership,
    RevokedAuthorization,
    Uncategorized,
)
from ._types import FacebookProfile, GraphError, RawResponse, Reference

__all__ = [
    "ClassifiedFailure",
    "ExpiredAuthorization",
    # Main client
    "Facebook",
    "FacebookError",
    "FacebookProfile",
    "FailureKind",
    "GraphAPIError",
    "GraphError",
    "InsufficientPermission",
    "MissingAuthorization",
    "NetworkError",
    "NotAFriend",
    "RawResponse",
    "Reference",
    "ResourceNotFound",
    "ResourceOwnership",
    "RevokedAuthorization",
    "Uncategorized",
    "classify",
]
