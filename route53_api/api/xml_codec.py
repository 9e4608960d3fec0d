"""
XML request/response codec for the Route 53 API

Route 53 validates request bodies against a schema that fixes the order of
elements, so request data is built as OrderedFields: an explicit list of
(name, value) pairs serialized in insertion order.
"""

import xml.etree.ElementTree as ET
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from defusedxml import ElementTree as SafeET
from defusedxml.common import DefusedXmlException

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Raised while reading a response body
XML_PARSE_ERRORS = (SafeET.ParseError, DefusedXmlException)


class OrderedFields:
    """
    Ordered (name, value) pairs for one XML element.

    Values may be:
        - str / int / float / bool: element text
        - OrderedFields: nested child elements
        - list: one element per item, all with the same name
        - None: dropped, so optional fields can be passed unconditionally
    """

    def __init__(self, pairs: Iterable[Tuple[str, Any]] = ()):
        self._pairs: List[Tuple[str, Any]] = []
        for name, value in pairs:
            self.add(name, value)

    def add(self, name: str, value: Any) -> "OrderedFields":
        if value is None:
            return self
        if isinstance(value, list):
            value = [item for item in value if item is not None]
            if not value:
                return self
        self._pairs.append((name, value))
        return self

    def names(self) -> List[str]:
        return [name for name, _ in self._pairs]

    def get(self, name: str, default: Any = None) -> Any:
        for key, value in self._pairs:
            if key == name:
                return value
        return default

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, name: str) -> bool:
        return name in self.names()

    def __repr__(self) -> str:
        return f"OrderedFields({self._pairs!r})"


def ordered_fields(*pairs: Tuple[str, Any]) -> OrderedFields:
    """Shorthand: ordered_fields(("Name", "example.com."), ("CallerReference", "ref1"))"""
    return OrderedFields(pairs)


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _append(parent: ET.Element, name: str, value: Any) -> None:
    if isinstance(value, list):
        for item in value:
            _append(parent, name, item)
        return

    element = ET.SubElement(parent, name)
    if isinstance(value, OrderedFields):
        _fill(element, value)
    else:
        element.text = _text(value)


def _fill(element: ET.Element, fields: OrderedFields) -> None:
    for name, value in fields:
        if name == "xmlns":
            element.set("xmlns", _text(value))
        else:
            _append(element, name, value)


def to_xml(root_name: str, fields: OrderedFields) -> str:
    """
    Serialize ordered fields under a root element, with an XML declaration.

    A field named 'xmlns' becomes the namespace attribute of the root.
    """
    root = ET.Element(root_name)
    _fill(root, fields)
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}"


def _local_name(tag: str) -> str:
    # '{https://route53.amazonaws.com/doc/2013-04-01/}HostedZone' -> 'HostedZone'
    return tag.rsplit("}", 1)[-1]


def _element_to_value(element: ET.Element, force_list: Tuple[str, ...]) -> Any:
    children = list(element)
    if not children:
        return element.text if element.text is not None else ""

    data: Dict[str, Any] = {}
    repeated = set()
    for child in children:
        name = _local_name(child.tag)
        value = _element_to_value(child, force_list)

        if name in force_list or name in repeated:
            data.setdefault(name, []).append(value)
        elif name in data:
            data[name] = [data[name], value]
            repeated.add(name)
        else:
            data[name] = value

    return data


def xml_to_dict(text: Any, force_list: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Parse an XML document into nested dicts, dropping namespaces.

    Repeated child elements become lists. Elements named in force_list are
    always lists, even when only one is present.

    Returns:
        The content of the root element (the root name itself is dropped)
    """
    root = SafeET.fromstring(text)
    value = _element_to_value(root, tuple(force_list))
    return value if isinstance(value, dict) else {}


def parse_error_body(text: Any) -> Dict[str, Optional[str]]:
    """
    Extract type, code, message and request id from an error response.

    Handles both the generic ErrorResponse document and the
    InvalidChangeBatch document, which carries a list of messages.
    """
    error = {"type": None, "code": None, "message": None, "request_id": None}

    if not text:
        return error

    try:
        root = SafeET.fromstring(text)
    except XML_PARSE_ERRORS:
        error["message"] = text.decode("utf-8", "replace") if isinstance(text, bytes) else str(text)
        return error

    root_name = _local_name(root.tag)
    data = _element_to_value(root, ("Message",))
    if not isinstance(data, dict):
        data = {}

    if root_name == "InvalidChangeBatch":
        error["code"] = "InvalidChangeBatch"
        messages = data.get("Messages", {})
        if isinstance(messages, dict):
            error["message"] = "; ".join(messages.get("Message", []))
        error["request_id"] = data.get("RequestId")
        return error

    details = data.get("Error", {})
    if isinstance(details, dict):
        error["type"] = details.get("Type")
        error["code"] = details.get("Code")
        message = details.get("Message")
        if isinstance(message, list):
            message = "; ".join(message)
        error["message"] = message
    error["request_id"] = data.get("RequestId")
    return error
