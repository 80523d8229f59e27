"""
Base Reader Module.

This module provides the base class for metadata readers. It owns the parts
every reader needs regardless of format: building an lxml tree from raw
input, comparing tag and attribute names case-insensitively, and locating an
element in the document for error messages.

Classes:
    BaseMetadataReader: Abstract base class for metadata readers
"""

from abc import ABC, abstractmethod
from lxml import etree
from typing import Dict, Iterator, Union, Any
import logging
import re

from .exceptions import DocumentBuildError

_XML_DECLARATION = re.compile(r'\A\ufeff?<\?xml\s[^>]*\?>')


class BaseMetadataReader(ABC):
    """
    Abstract base class for metadata readers.

    Tag and attribute names are normalized once, when they are read off an
    element, to their lower-cased local name. Element namespaces are
    stripped; namespaced attributes are ignored. Subclasses compare against
    lower-case constants only.

    Attributes:
        logger (logging.Logger): Logger instance for the reader
        xml_parser (etree.XMLParser): lxml parser used to build document trees
    """

    def __init__(self):
        """Initialize the base reader."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.xml_parser = etree.XMLParser(resolve_entities=False, no_network=True)

    @abstractmethod
    def parse(self, xml: Union[str, bytes]) -> Any:
        """
        Parse a document into the reader's result type.

        Args:
            xml (Union[str, bytes]): Document content

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        pass

    @abstractmethod
    def parse_tree(self, root: etree._Element) -> Any:
        """
        Read the reader's result type from an already built tree.

        Args:
            root (etree._Element): Root element of the document

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        pass

    def _build_tree(self, xml: Union[str, bytes]) -> etree._Element:
        """
        Build a document tree and return its root element.

        Args:
            xml (Union[str, bytes]): Document content

        Returns:
            etree._Element: Parsed XML root element

        Raises:
            DocumentBuildError: If lxml cannot build a tree from the input
        """
        if isinstance(xml, str):
            # str input is already decoded, its declared encoding must not apply
            xml = _XML_DECLARATION.sub('', xml, count=1).encode('utf-8')
        try:
            return etree.fromstring(xml, parser=self.xml_parser)
        except (etree.XMLSyntaxError, ValueError) as e:
            self.logger.error(f"XML syntax error: {str(e)}")
            raise DocumentBuildError(f"Invalid XML syntax: {str(e)}") from e

    @staticmethod
    def _local_name(element: etree._Element) -> str:
        """
        Get the normalized name of an element.

        Args:
            element (etree._Element): Element to name

        Returns:
            str: Lower-cased local name without namespace
        """
        return etree.QName(element).localname.lower()

    @staticmethod
    def _attributes(element: etree._Element) -> Dict[str, str]:
        """
        Get an element's attributes keyed by normalized name.

        Only attributes without a namespace are returned. When two names
        differ only in case, the all-lower-case spelling wins, otherwise the
        first in document order.

        Args:
            element (etree._Element): Element to read

        Returns:
            Dict[str, str]: Attribute values keyed by lower-cased name
        """
        attributes: Dict[str, str] = {}
        for name, value in element.attrib.items():
            if name.startswith('{'):
                continue
            key = name.lower()
            if key not in attributes or name == key:
                attributes[key] = value
        return attributes

    @staticmethod
    def _child_elements(element: etree._Element) -> Iterator[etree._Element]:
        """Iterate direct child elements in document order, skipping comments and PIs."""
        return element.iterchildren(tag=etree.Element)

    @staticmethod
    def _text_content(element: etree._Element) -> str:
        """
        Get the text content of an element and all of its descendants.

        Args:
            element (etree._Element): Element to read

        Returns:
            str: Concatenated descendant text, without the element's tail
        """
        return etree.tostring(element, method='text', encoding='unicode', with_tail=False)

    def _get_element_path(self, element: etree._Element) -> str:
        """
        Get XPath-like string representation of element's location.

        Args:
            element (etree._Element): Element to get path for

        Returns:
            str: XPath-like location string
        """
        path_parts = []
        current = element
        while current is not None:
            name = etree.QName(current).localname
            parent = current.getparent()
            if parent is not None:
                siblings = list(parent.iterchildren(tag=current.tag))
                if len(siblings) > 1:
                    name = f"{name}[{siblings.index(current) + 1}]"
            path_parts.append(name)
            current = parent
        return '/' + '/'.join(reversed(path_parts))
