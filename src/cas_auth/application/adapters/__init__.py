"""Per-version CAS protocol adapters."""

from .cas_v1 import CasV1Adapter
from .service_validate import ServiceValidateAdapter
from .saml11 import Saml11Adapter, build_soap_envelope
from .factory import create_protocol_adapter

__all__ = [
    "CasV1Adapter",
    "ServiceValidateAdapter",
    "Saml11Adapter",
    "build_soap_envelope",
    "create_protocol_adapter",
]
