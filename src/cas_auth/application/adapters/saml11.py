"""SAML 1.1 protocol adapter."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import uuid4
from xml.parsers.expat import ExpatError
from xml.sax.saxutils import escape

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
from .xml_parser import parse_document, text_of, as_list, attribute_of

logger = logging.getLogger(__name__)


SOAP_REQUEST_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    '<SOAP-ENV:Envelope xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/">\n'
    '  <SOAP-ENV:Header/>\n'
    '  <SOAP-ENV:Body>\n'
    '    <samlp:Request xmlns:samlp="urn:oasis:names:tc:SAML:1.0:protocol" MajorVersion="1"\n'
    '      MinorVersion="1" RequestID="{request_id}"\n'
    '      IssueInstant="{issue_instant}">\n'
    '      <samlp:AssertionArtifact>\n'
    '        {ticket}\n'
    '      </samlp:AssertionArtifact>\n'
    '    </samlp:Request>\n'
    '  </SOAP-ENV:Body>\n'
    '</SOAP-ENV:Envelope>'
)


def build_soap_envelope(
    ticket: str,
    request_id: str,
    issued_at: datetime
) -> str:
    """Render the samlValidate SOAP request carrying the ticket as artifact."""
    issue_instant = issued_at.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
    return SOAP_REQUEST_TEMPLATE.format(
        request_id=escape(request_id, {'"': "&quot;"}),
        issue_instant=issue_instant,
        ticket=escape(ticket),
    )


class Saml11Adapter:
    """SAML 1.1 ``/samlValidate`` adapter.

    Builds a SOAP envelope for the POST body and reads the status code,
    subject and attribute statements out of the SOAP response.
    """

    version = ProtocolVersion.SAML1_1

    @property
    def validate_path(self) -> str:
        return self.version.validate_path

    def build_request(self, ticket: str, service_url: str) -> ValidationRequest:
        envelope = build_soap_envelope(
            ticket,
            request_id=f"_{uuid4().hex}",
            issued_at=datetime.now(timezone.utc),
        )
        content = envelope.encode("utf-8")
        return ValidationRequest(
            method="POST",
            params={"TARGET": service_url},
            content=content,
            headers={
                "Content-Type": "text/xml",
                "Content-Length": str(len(content)),
            },
        )

    def parse(self, body: str) -> ValidationOutcome:
        try:
            document = parse_document(body)
        except ExpatError as e:
            logger.warning(f"SAML 1.1 response is not valid XML: {e}")
            return ValidationFailure(BAD_RESPONSE)

        try:
            response = document["envelope"]["body"]["response"]

            status_value = attribute_of(response["status"]["statuscode"], "Value")
            status = status_value.rsplit(":", 1)[-1]
            if status != "Success":
                return failed_with_code(status)

            assertion = response["assertion"]
            identity = text_of(
                assertion["authenticationstatement"]["subject"]["nameidentifier"]
            )
            return ValidationSuccess(
                identity=identity,
                attributes=self._extract_attributes(assertion.get("attributestatement")),
            )

        except Exception as e:
            logger.error(f"Failed to interpret SAML 1.1 response: {e}")
            return ValidationFailure(AUTHENTICATION_FAILED)

    def _extract_attributes(self, statements: Any) -> Dict[str, AttributeValue]:
        """Collect attributes from one or more AttributeStatement elements.

        An attribute with several AttributeValue children becomes a list in
        document order; a single value stays a plain string.
        """
        attributes: Dict[str, AttributeValue] = {}
        for statement in as_list(statements):
            if not isinstance(statement, dict):
                continue
            for attribute in as_list(statement.get("attribute")):
                name = attribute_of(attribute, "AttributeName")
                if name is None:
                    continue
                values = attribute.get("attributevalue")
                if isinstance(values, list):
                    attributes[name] = [text_of(value) for value in values]
                else:
                    attributes[name] = text_of(values)
        return attributes
