"""XML parsing helpers shared by the XML-based protocol adapters."""

from typing import Any, Dict, List, Optional, Tuple
from xml.parsers.expat import ExpatError

import xmltodict


def _normalize_tag(path: List[Any], key: str, value: Any) -> Tuple[str, Any]:
    """Strip namespace prefixes from element names and lower-case them.

    Attribute (``@``) and text (``#``) keys are left untouched so attribute
    names such as ``AttributeName`` keep their case.
    """
    if key.startswith("@") or key.startswith("#"):
        return key, value
    return key.rsplit(":", 1)[-1].lower(), value


def parse_document(body: str) -> Dict[str, Any]:
    """Parse an XML document into nested dictionaries.

    Element names are normalized (``cas:serviceResponse`` becomes
    ``serviceresponse``); repeated elements become lists; text content is
    whitespace-stripped. Entity expansion is disabled.

    Raises:
        xml.parsers.expat.ExpatError: If the body is not well-formed XML or
            declares entities
    """
    try:
        return xmltodict.parse(
            body,
            postprocessor=_normalize_tag,
            disable_entities=True,
        )
    except ValueError as e:
        # xmltodict rejects entity declarations with a ValueError
        raise ExpatError(str(e)) from e


def text_of(node: Any) -> str:
    """Text content of a parsed node, whether or not it carried attributes."""
    if node is None:
        return ""
    if isinstance(node, dict):
        text = node.get("#text")
        return "" if text is None else str(text)
    return str(node)


def as_list(node: Any) -> List[Any]:
    """Wrap a single parsed node in a list; lists pass through, None is empty."""
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def attribute_of(node: Any, name: str) -> Optional[str]:
    """XML attribute value of a parsed node, or None."""
    if isinstance(node, dict):
        value = node.get(f"@{name}")
        return None if value is None else str(value)
    return None
