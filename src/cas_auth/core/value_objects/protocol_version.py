"""CAS protocol version value object."""

from enum import Enum
from typing import Any

from ..exceptions import ConfigurationError


class ProtocolVersion(str, Enum):
    """Supported CAS protocol versions.

    The version is chosen once when the client is built and determines both the
    validation endpoint and the adapter that parses the response.
    """

    V1 = "1.0"
    V2 = "2.0"
    V3 = "3.0"
    SAML1_1 = "saml1.1"

    @property
    def validate_path(self) -> str:
        """Validation endpoint path relative to the CAS base URL."""
        return _VALIDATE_PATHS[self]

    @property
    def supports_attributes(self) -> bool:
        """Whether the version can release user attributes."""
        return self is not ProtocolVersion.V1

    @classmethod
    def parse(cls, value: Any) -> "ProtocolVersion":
        """Resolve a configured value into a protocol version.

        Raises:
            ConfigurationError: If the value names no supported version
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError.unsupported_version(value)


_VALIDATE_PATHS = {
    ProtocolVersion.V1: "/validate",
    ProtocolVersion.V2: "/serviceValidate",
    ProtocolVersion.V3: "/p3/serviceValidate",
    ProtocolVersion.SAML1_1: "/samlValidate",
}
