"""CAS 1.0 protocol adapter."""

import logging

from ...core.protocols import ValidationRequest
from ...core.value_objects import (
    ProtocolVersion,
    ValidationOutcome,
    ValidationSuccess,
    ValidationFailure,
    AUTHENTICATION_FAILED,
    BAD_RESPONSE,
)

logger = logging.getLogger(__name__)


class CasV1Adapter:
    """CAS 1.0 adapter.

    Handles ONLY the plain-text ``/validate`` exchange: a ``yes`` line
    followed by the user name, or a single ``no`` line. Releases no
    attributes.
    """

    version = ProtocolVersion.V1

    @property
    def validate_path(self) -> str:
        return self.version.validate_path

    def build_request(self, ticket: str, service_url: str) -> ValidationRequest:
        return ValidationRequest(
            method="GET",
            params={"service": service_url, "ticket": ticket},
        )

    def parse(self, body: str) -> ValidationOutcome:
        lines = (body or "").splitlines()
        if not lines:
            return ValidationFailure(BAD_RESPONSE)

        if lines[0] == "yes" and len(lines) >= 2:
            return ValidationSuccess(identity=lines[1], attributes={})
        if lines[0] == "no":
            return ValidationFailure(AUTHENTICATION_FAILED)

        logger.warning(f"Unexpected CAS 1.0 response first line: {lines[0][:40]!r}")
        return ValidationFailure(BAD_RESPONSE)
