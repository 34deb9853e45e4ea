"""Protocol adapter selection."""

from typing import Any

from ...core.protocols import ProtocolAdapter
from ...core.value_objects import ProtocolVersion
from .cas_v1 import CasV1Adapter
from .service_validate import ServiceValidateAdapter
from .saml11 import Saml11Adapter


def create_protocol_adapter(version: Any) -> ProtocolAdapter:
    """Create the adapter for a protocol version.

    Args:
        version: ProtocolVersion or its configured string form ("1.0", "2.0",
            "3.0", "saml1.1")

    Returns:
        Adapter implementing the version's request and response format

    Raises:
        ConfigurationError: If the version is not supported
    """
    version = ProtocolVersion.parse(version)

    if version is ProtocolVersion.V1:
        return CasV1Adapter()
    if version in (ProtocolVersion.V2, ProtocolVersion.V3):
        return ServiceValidateAdapter(version)
    return Saml11Adapter()
