"""
WSDL document reader that builds raw document nodes.

Phase 1 of the pipeline: parse a WSDL 1.1 service description into
TypeNode, OperationNode and ServiceNode objects without classifying
types or resolving references between them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlparse

import requests
from lxml import etree

from ..errors import DocumentError
from .nodes import OperationNode, ServiceNode, TypeNode

logger = logging.getLogger(__name__)

# Seconds to wait for a remote service description
FETCH_TIMEOUT = 30

WSDL_NS = "http://schemas.xmlsoap.org/wsdl/"
XSD_NS = "http://www.w3.org/2001/XMLSchema"

# Binding extensions that mark a SOAP 1.1 or SOAP 1.2 binding
SOAP_BINDING_NAMESPACES = {
    "http://schemas.xmlsoap.org/wsdl/soap/",
    "http://schemas.xmlsoap.org/wsdl/soap12/",
}

# Containers whose children contribute members to a complex type
_PARTICLE_CONTAINERS = {"sequence", "all", "choice", "complexContent", "simpleContent", "extension", "restriction"}


def _wsdl(tag: str) -> str:
    return f"{{{WSDL_NS}}}{tag}"


def _xsd(tag: str) -> str:
    return f"{{{XSD_NS}}}{tag}"


def _local(qname: str | None) -> str:
    """Strip the namespace prefix of a QName attribute value."""
    if not qname:
        return ""
    return qname.rsplit(":", 1)[-1]


def _local_tag(element: etree._Element) -> str:
    return etree.QName(element).localname


def _is_element(node) -> bool:
    # Comments and processing instructions have a non-string tag
    return isinstance(node.tag, str)


def is_url(source: str) -> bool:
    return urlparse(source).scheme in ("http", "https")


def _is_repeated(element: etree._Element) -> bool:
    max_occurs = element.get("maxOccurs", "1")
    return max_occurs == "unbounded" or (max_occurs.isdigit() and int(max_occurs) > 1)


class WsdlDocument:
    """A parsed WSDL service description."""

    def __init__(self, source: str | Path):
        """
        Parse a service description.

        Args:
            source: Local path or http(s) URL of the WSDL document

        Raises:
            DocumentError: If the document cannot be read or is not well-formed XML
        """
        self.source = str(source)
        parser = etree.XMLParser(remove_comments=True, resolve_entities=False)
        try:
            self.content = self._read(self.source)
            self.root = etree.fromstring(self.content, parser, base_url=self.source)
        except (OSError, requests.RequestException, etree.XMLSyntaxError) as e:
            raise DocumentError(f"Cannot read service description {self.source}: {e}") from e

        self._schemas = self._find_schemas()
        self._elements: dict[str, etree._Element] = {}
        for schema in self._schemas:
            for element in schema.iterfind(_xsd("element")):
                if element.get("name"):
                    self._elements.setdefault(element.get("name"), element)
        self._messages = {message.get("name"): message for message in self.root.iterfind(_wsdl("message"))}

    @staticmethod
    def _read(source: str) -> bytes:
        """Raw bytes of a local file or of an http(s) URL."""
        if not is_url(source):
            return Path(source).read_bytes()
        logger.debug("Fetching %s", source)
        response = requests.get(source, timeout=FETCH_TIMEOUT)
        response.raise_for_status()
        return response.content

    @property
    def file_name(self) -> str:
        """File name of the source, used when copying the document."""
        name = Path(urlparse(self.source).path).name
        return name or "service.wsdl"

    def _find_schemas(self) -> list[etree._Element]:
        """Find the embedded schemas (or the root, for a bare XSD)."""
        if self.root.tag == _xsd("schema"):
            return [self.root]
        return list(self.root.iterfind(f"{_wsdl('types')}/{_xsd('schema')}"))

    def _documentation(self, element: etree._Element) -> str:
        doc = element.find(_wsdl("documentation"))
        if doc is None:
            return ""
        return " ".join("".join(doc.itertext()).split())

    # ------------------------------------------------------------------
    # Service and operations
    # ------------------------------------------------------------------

    def get_service(self) -> ServiceNode | None:
        """Return the first service of the document, if any."""
        service = self.root.find(_wsdl("service"))
        if service is None:
            return None
        return ServiceNode(name=service.get("name", ""), documentation=self._documentation(service))

    def get_operations(self) -> list[OperationNode]:
        """
        Return the operations of the SOAP port types, in document order.

        Only port types referenced by a SOAP 1.1/1.2 binding are considered
        (HTTP GET/POST port types repeat the same operations with flat
        string parameters); when no SOAP binding is found every port type
        is used. The first declaration of an operation name wins.
        """
        operations: list[OperationNode] = []
        seen: set[str] = set()
        for port_type in self._soap_port_types():
            for op in port_type.iterfind(_wsdl("operation")):
                name = op.get("name", "")
                if not name or name in seen:
                    continue
                seen.add(name)
                operations.append(
                    OperationNode(
                        name=name,
                        params=self._message_params(op.find(_wsdl("input"))),
                        returns=self._message_return(op.find(_wsdl("output"))),
                        documentation=self._documentation(op),
                    )
                )
        return operations

    def _soap_port_types(self) -> list[etree._Element]:
        port_types = list(self.root.iterfind(_wsdl("portType")))
        bound: set[str] = set()
        for binding in self.root.iterfind(_wsdl("binding")):
            for child in binding:
                if not _is_element(child):
                    continue
                qname = etree.QName(child)
                if qname.namespace in SOAP_BINDING_NAMESPACES and qname.localname == "binding":
                    bound.add(_local(binding.get("type")))
        selected = [port_type for port_type in port_types if port_type.get("name") in bound]
        return selected or port_types

    def _message_params(self, io_element: etree._Element | None) -> dict[str, str]:
        if io_element is None:
            return {}
        message = self._messages.get(_local(io_element.get("message")))
        if message is None:
            logger.debug("Message %s not declared", io_element.get("message"))
            return {}
        params: dict[str, str] = {}
        for part in message.iterfind(_wsdl("part")):
            params[part.get("name", "")] = self._part_type(part)
        return params

    def _message_return(self, io_element: etree._Element | None) -> str:
        params = self._message_params(io_element)
        return next(iter(params.values()), "void")

    def _part_type(self, part: etree._Element) -> str:
        """Type name of a message part.

        An ``element`` part resolves to the element's named type when the
        element has one; otherwise the element name is the type name (the
        element carries an inline type registered under its own name).
        """
        if part.get("element"):
            name = _local(part.get("element"))
            element = self._elements.get(name)
            if element is not None and element.get("type"):
                return _local(element.get("type"))
            return name
        if part.get("type"):
            return _local(part.get("type"))
        return "anyType"

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def get_types(self) -> list[TypeNode]:
        """Return one TypeNode per named type declaration, in document order."""
        nodes: list[TypeNode] = []
        for schema in self._schemas:
            for child in schema:
                if not _is_element(child) or not child.get("name"):
                    continue
                tag = _local_tag(child)
                name = child.get("name")
                if tag == "complexType":
                    nodes.append(self._complex_node(name, child))
                elif tag == "simpleType":
                    nodes.append(self._simple_node(name, child))
                elif tag == "element":
                    complex_type = child.find(_xsd("complexType"))
                    simple_type = child.find(_xsd("simpleType"))
                    if complex_type is not None:
                        nodes.append(self._complex_node(name, complex_type))
                    elif simple_type is not None:
                        nodes.append(self._simple_node(name, simple_type))
        return nodes

    def _complex_node(self, name: str, complex_type: etree._Element) -> TypeNode:
        node = TypeNode(name=name, is_complex=True, is_abstract=complex_type.get("abstract") == "true")
        repeated: set[str] = set()
        self._collect_parts(complex_type, node, repeated)

        content = complex_type.find(_xsd("complexContent"))
        derivation = None
        if content is not None:
            derivation = content.find(_xsd("extension"))
            if derivation is None:
                derivation = content.find(_xsd("restriction"))

        if derivation is not None and _local(derivation.get("base")) == "Array":
            # SOAP-encoded array: the item type comes from wsdl:arrayType
            node.is_array = True
            for attribute in derivation.iter(_xsd("attribute")):
                array_type = attribute.get(_wsdl("arrayType"))
                if array_type:
                    node.parts = {"item": _local(array_type)}
                    node.nillable = {}
                    node.min_occurs = {}
                    break
        elif derivation is not None:
            node.base = _local(derivation.get("base")) or None
        elif name.startswith("ArrayOf") and len(node.parts) == 1 and repeated == set(node.parts):
            node.is_array = True

        return node

    def _collect_parts(self, element: etree._Element, node: TypeNode, repeated: set[str]) -> None:
        for child in element:
            if not _is_element(child):
                continue
            tag = _local_tag(child)
            if tag in _PARTICLE_CONTAINERS:
                self._collect_parts(child, node, repeated)
            elif tag == "element":
                self._add_element_part(child, node, repeated)
            elif tag == "attribute":
                self._add_attribute_part(child, node)

    def _add_element_part(self, element: etree._Element, node: TypeNode, repeated: set[str]) -> None:
        if element.get("ref"):
            name = _local(element.get("ref"))
            target = self._elements.get(name)
            type_name = self._element_type(target) if target is not None else name
        else:
            name = element.get("name", "")
            type_name = self._element_type(element)
        if not name:
            return

        if _is_repeated(element):
            type_name += "[]"
            repeated.add(name)
        node.parts[name] = type_name

        if element.get("nillable") is not None:
            node.nillable[name] = element.get("nillable") == "true"
        min_occurs = element.get("minOccurs")
        if min_occurs is not None and min_occurs.isdigit():
            node.min_occurs[name] = int(min_occurs)

    def _add_attribute_part(self, attribute: etree._Element, node: TypeNode) -> None:
        name = attribute.get("name") or _local(attribute.get("ref"))
        if not name:
            return
        node.parts[name] = _local(attribute.get("type")) or "string"
        if attribute.get("use") != "required":
            node.min_occurs[name] = 0

    def _element_type(self, element: etree._Element) -> str:
        if element.get("type"):
            return _local(element.get("type"))
        restriction = element.find(f"{_xsd('simpleType')}/{_xsd('restriction')}")
        if restriction is not None and restriction.get("base"):
            return _local(restriction.get("base"))
        return "anyType"

    def _simple_node(self, name: str, simple_type: etree._Element) -> TypeNode:
        node = TypeNode(name=name)
        restriction = simple_type.find(_xsd("restriction"))
        if restriction is None:
            return node
        node.restriction = _local(restriction.get("base")) or None
        node.enumerations = [value.get("value", "") for value in restriction.iterfind(_xsd("enumeration"))]
        pattern = restriction.find(_xsd("pattern"))
        if pattern is not None:
            node.pattern = pattern.get("value")
        return node

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def get_addresses(self) -> list[str]:
        """Return the endpoint locations of every service port, deduplicated."""
        addresses: list[str] = []
        for address in self.root.iterfind(f"{_wsdl('service')}/{_wsdl('port')}/*"):
            location = address.get("location")
            if _local_tag(address) == "address" and location and location not in addresses:
                addresses.append(location)
        return addresses

    def save(self, path: Path) -> None:
        """Copy the document, byte for byte, to a file."""
        Path(path).write_bytes(self.content)
