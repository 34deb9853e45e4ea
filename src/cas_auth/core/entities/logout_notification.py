"""Back-channel logout notification entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LogoutNotification:
    """SAML LogoutRequest pushed by the CAS server.

    ``session_index`` is the service ticket that started the session which
    must now be torn down.
    """

    session_index: str
    name_id: Optional[str] = None
    request_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.session_index:
            raise ValueError("Logout notification requires a session index")
