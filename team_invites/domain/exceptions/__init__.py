from .base import DomainError

from .validation import ValidationError

from .team import (
    NoConfigAvailable,
    InvalidSelection,
)

from .invite import InviteTransportError

__all__ = [
    "DomainError",
    "ValidationError",
    "NoConfigAvailable",
    "InvalidSelection",
    "InviteTransportError",
]
