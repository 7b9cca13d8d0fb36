from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

DEFAULT_ROLE = "reader"


@dataclass(frozen=True)
class InviteRequest:
    emails: List[str]
    role: str = DEFAULT_ROLE
    resend: bool = False


@dataclass(frozen=True)
class InviteResult:
    """Outcome of one upstream invite call.

    An upstream rejection (non-2xx) is a failed result, not an exception:
    ``success`` is False and ``status_code``/``error`` carry the upstream
    status and raw body.
    """

    success: bool
    data: Any = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any) -> InviteResult:
        return cls(success=True, data=data)

    @classmethod
    def rejected(cls, status_code: int, error: str) -> InviteResult:
        return cls(success=False, status_code=status_code, error=error)

    @property
    def http_status(self) -> int:
        if self.success:
            return 200
        return self.status_code or 500

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "statusCode": self.status_code, "error": self.error}
