"""Outcome of the per-request authentication decision."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AuthAction(str, Enum):
    """Terminal action for a request."""

    PROCEED = "proceed"
    REDIRECT = "redirect"
    UNAUTHORIZED = "unauthorized"


@dataclass(frozen=True)
class AuthDecision:
    """What the hosting framework must do with the request.

    The decision engine never touches a response object; web adapters apply
    the decision with their own redirect and status primitives.
    """

    action: AuthAction
    location: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def proceed(cls) -> "AuthDecision":
        return cls(AuthAction.PROCEED)

    @classmethod
    def redirect(cls, location: str) -> "AuthDecision":
        return cls(AuthAction.REDIRECT, location=location, status_code=302)

    @classmethod
    def unauthorized(cls) -> "AuthDecision":
        return cls(AuthAction.UNAUTHORIZED, status_code=401)

    @property
    def should_proceed(self) -> bool:
        return self.action is AuthAction.PROCEED


@dataclass(frozen=True)
class SloAcknowledgement:
    """Receipt returned to the CAS server for a logout notification.

    The body is always ``ok``; only the status distinguishes a full (200)
    from a partial (202) reconciliation.
    """

    status_code: int = 200
    body: str = "ok"

    @property
    def is_partial(self) -> bool:
        return self.status_code == 202

    @classmethod
    def full(cls) -> "SloAcknowledgement":
        return cls(200)

    @classmethod
    def partial(cls) -> "SloAcknowledgement":
        return cls(202)
