"""CAS client settings.

Settings can be passed as keyword arguments or read from the environment
(``CAS_URL``, ``CAS_SERVICE_URL``, ``CAS_VERSION``, ``CAS_RENEW``, ...) and an
optional ``.env`` file.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError
from ..core.value_objects import ProtocolVersion

logger = logging.getLogger(__name__)


class CasSettings(BaseSettings):
    """Recognized CAS client options."""

    model_config = SettingsConfigDict(
        env_prefix="CAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # CAS server; read from CAS_URL / CAS_VERSION rather than CAS_CAS_*
    cas_url: str = Field(validation_alias="cas_url")
    cas_version: ProtocolVersion = Field(default=ProtocolVersion.V3, validation_alias="cas_version")
    service_url: str
    renew: bool = False
    request_timeout: Optional[float] = None

    # Development mode
    is_dev_mode: bool = False
    dev_mode_user: str = ""
    dev_mode_info: Dict[str, Any] = Field(default_factory=dict)

    # Session slots
    session_name: str = "cas_user"
    session_info: Optional[str] = None
    destroy_session: bool = False

    # Logout
    single_logout: bool = False
    logout_redirect_url: Optional[str] = None

    # Server-side session storage
    session_cookie_name: str = "cas_sid"
    session_max_age: int = 24 * 60 * 60
    redis_url: Optional[str] = None
    redis_key_prefix: str = "cas_session"

    @field_validator("cas_url", "service_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("must not be empty")
        return value.rstrip("/")

    @field_validator("cas_version", mode="before")
    @classmethod
    def _parse_version(cls, value: Any) -> ProtocolVersion:
        try:
            return ProtocolVersion.parse(value)
        except ConfigurationError as e:
            raise ValueError(e.message)

    @field_validator("session_info", "logout_redirect_url", mode="before")
    @classmethod
    def _empty_as_none(cls, value: Any) -> Any:
        if value in ("", False):
            return None
        return value

    @property
    def effective_session_info(self) -> Optional[str]:
        """Attribute slot name, only for versions that release attributes."""
        if self.session_info and self.cas_version.supports_attributes:
            return self.session_info
        return None

    @classmethod
    def load(cls, **overrides: Any) -> "CasSettings":
        """Build settings, converting validation errors to ConfigurationError.

        Raises:
            ConfigurationError: If a required URL is missing or the protocol
                version is not supported
        """
        try:
            return cls(**overrides)
        except ValidationError as e:
            raise configuration_error_from(e) from e


def configuration_error_from(error: ValidationError) -> ConfigurationError:
    """Map the first pydantic error onto the configuration error it means."""
    first = error.errors()[0]
    field = str(first["loc"][0]) if first.get("loc") else None

    if field in ("cas_url", "service_url"):
        return ConfigurationError.missing_parameter(field)
    if field == "cas_version":
        return ConfigurationError.unsupported_version(first.get("input"))

    logger.debug(f"Invalid CAS settings: {error}")
    return ConfigurationError(
        f"Invalid CAS configuration for {field}: {first.get('msg')}",
        field=field,
    )
