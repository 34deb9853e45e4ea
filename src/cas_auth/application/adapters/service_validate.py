"""CAS 2.0 / 3.0 serviceValidate protocol adapter."""

import logging
from typing import Any, Dict
from xml.parsers.expat import ExpatError

from ...core.protocols import ValidationRequest
from ...core.value_objects import (
    AttributeValue,
    ProtocolVersion,
    ValidationOutcome,
    ValidationSuccess,
    ValidationFailure,
    AUTHENTICATION_FAILED,
    BAD_RESPONSE,
    failed_with_code,
)
from .xml_parser import parse_document, text_of, attribute_of

logger = logging.getLogger(__name__)


class ServiceValidateAdapter:
    """Adapter for the XML ``serviceValidate`` exchange of CAS 2.0 and 3.0.

    The two versions share the response format and differ only in the
    endpoint path (``/serviceValidate`` versus ``/p3/serviceValidate``).
    """

    def __init__(self, version: ProtocolVersion = ProtocolVersion.V3):
        if version not in (ProtocolVersion.V2, ProtocolVersion.V3):
            raise ValueError(f"serviceValidate does not apply to CAS {version.value}")
        self.version = version

    @property
    def validate_path(self) -> str:
        return self.version.validate_path

    def build_request(self, ticket: str, service_url: str) -> ValidationRequest:
        return ValidationRequest(
            method="GET",
            params={"service": service_url, "ticket": ticket},
        )

    def parse(self, body: str) -> ValidationOutcome:
        try:
            document = parse_document(body)
        except ExpatError as e:
            logger.warning(f"CAS {self.version.value} response is not valid XML: {e}")
            return ValidationFailure(BAD_RESPONSE)

        try:
            response = document["serviceresponse"]

            failure = response.get("authenticationfailure")
            if failure is not None:
                code = attribute_of(failure, "code")
                if code is None:
                    logger.warning(f"CAS {self.version.value} failure carries no code")
                    return ValidationFailure(AUTHENTICATION_FAILED)
                return failed_with_code(code)

            success = response.get("authenticationsuccess")
            if success:
                return ValidationSuccess(
                    identity=text_of(success["user"]),
                    attributes=self._extract_attributes(success.get("attributes")),
                )
            return ValidationFailure(AUTHENTICATION_FAILED)

        except Exception as e:
            logger.error(f"Failed to interpret CAS {self.version.value} response: {e}")
            return ValidationFailure(AUTHENTICATION_FAILED)

    def _extract_attributes(self, block: Any) -> Dict[str, AttributeValue]:
        """Flatten the ``cas:attributes`` block into names and values."""
        if not isinstance(block, dict):
            return {}

        attributes: Dict[str, AttributeValue] = {}
        for name, value in block.items():
            # Namespace declarations and text nodes of the block itself
            if name.startswith("@") or name.startswith("#"):
                continue
            if isinstance(value, list):
                attributes[name] = [text_of(item) for item in value]
            else:
                attributes[name] = text_of(value)
        return attributes
