"""Configuration error raised at construction time."""

from typing import Any, Dict, Optional

from .base import CasAuthError


class ConfigurationError(CasAuthError):
    """Raised when the CAS client is given an unusable configuration.

    Missing URLs and unsupported protocol versions fail fast while the client
    is being built; nothing is validated lazily per request.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message, details={"field": field, **(context or {})})
        self.field = field

    @classmethod
    def missing_parameter(cls, name: str) -> "ConfigurationError":
        """Create exception for a required parameter that was not supplied."""
        return cls(f"CAS Authentication requires a {name} parameter.", field=name)

    @classmethod
    def unsupported_version(cls, version: Any) -> "ConfigurationError":
        """Create exception for an unknown protocol version."""
        return cls(
            f'The supplied CAS version ("{version}") is not supported.',
            field="cas_version",
        )
