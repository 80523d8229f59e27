"""
MusicXML Metadata Parser Module.

This module reads the metadata subset of a MusicXML 3.0 score-partwise
document: the movement title and, from the identification block, the
creators, the encoding software, the encoding date and the supports
declarations. Musical content (parts, measures, notes) is never touched.

Classes:
    MusicXMLParser: Parser that builds a MetadataModel from a MusicXML document
"""

from lxml import etree
from pathlib import Path
from typing import Union
import re

from .base import BaseMetadataReader
from .exceptions import (
    InconsistentSupportsAttributeError,
    MalformedDateError,
    MalformedSupportsTagError,
    MissingAttributeError,
    UnsupportedVersionError,
)
from .model import MetadataModel

SUPPORTED_VERSION = "3.0"

_DATE_SEGMENT = re.compile(r'\+?[0-9]+')

# Segments must fit a signed 32-bit integer
_DATE_SEGMENT_MAX = 2 ** 31 - 1


class MusicXMLParser(BaseMetadataReader):
    """
    Parser for the metadata of MusicXML documents.

    The walk covers a fixed shape, root -> identification -> encoding, and
    fails on the first structural violation it finds. A model is only
    returned when the whole walk succeeds.

    Unrecognized elements at any level (work, rights, source, relation,
    miscellaneous, encoder, encoding-description, part-list, part, ...) are
    skipped.
    """

    def parse(self, xml: Union[str, bytes]) -> MetadataModel:
        """
        Parse MusicXML content into a metadata model.

        Args:
            xml (Union[str, bytes]): MusicXML document content

        Returns:
            MetadataModel: Metadata read from the document

        Raises:
            DocumentBuildError: If the content is not well-formed XML
            MusicXMLParserError: If the metadata violates the expected structure
        """
        return self.parse_tree(self._build_tree(xml))

    def parse_file(self, path: Union[str, Path]) -> MetadataModel:
        """
        Parse a MusicXML file into a metadata model.

        Args:
            path (Union[str, Path]): Path to the MusicXML file

        Returns:
            MetadataModel: Metadata read from the file

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentBuildError: If the file is not well-formed XML
            MusicXMLParserError: If the metadata violates the expected structure
        """
        path = Path(path)
        if not path.exists():
            self.logger.error(f"MusicXML file not found: {path.absolute()}")
            raise FileNotFoundError(
                f"Specified MusicXML file does not exist: {path.absolute()}"
            )
        self.logger.info(f"Parsing MusicXML file: {path}")
        return self.parse(path.read_bytes())

    def parse_tree(self, root: etree._Element) -> MetadataModel:
        """
        Read metadata from an already built MusicXML tree.

        Args:
            root (etree._Element): The score-partwise root element

        Returns:
            MetadataModel: Metadata read from the tree

        Raises:
            MusicXMLParserError: If the metadata violates the expected structure
        """
        self._check_version(root)

        model = MetadataModel()
        for child in self._child_elements(root):
            tag = self._local_name(child)
            if tag == 'movement-title':
                model.set_title(self._text_content(child))
            elif tag == 'identification':
                self._parse_identification(child, model)

        self.logger.info(
            f"Parsed metadata for '{model.get_title()}': "
            f"{sum(len(names) for names in model.get_all_creators().values())} creator(s), "
            f"{len(model.get_all_supports())} supports declaration(s)"
        )
        return model

    def _check_version(self, root: etree._Element) -> None:
        """
        Ensure the document declares the supported MusicXML version.

        Args:
            root (etree._Element): Root element of the document

        Raises:
            UnsupportedVersionError: If the version is absent or not 3.0
        """
        version = self._attributes(root).get('version')
        if version is None or version.lower() != SUPPORTED_VERSION:
            self.logger.error(f"Unsupported MusicXML version: {version}")
            raise UnsupportedVersionError(version)

    def _parse_identification(self, identification: etree._Element, model: MetadataModel) -> None:
        for child in self._child_elements(identification):
            tag = self._local_name(child)
            if tag == 'creator':
                self._parse_creator(child, model)
            elif tag == 'encoding':
                self._parse_encoding(child, model)

    def _parse_creator(self, creator: etree._Element, model: MetadataModel) -> None:
        """
        Add a creator element's text under the role named by its type attribute.

        Raises:
            MissingAttributeError: If the type attribute is absent
        """
        role = self._attributes(creator).get('type')
        if role is None:
            path = self._get_element_path(creator)
            self.logger.error(f"Missing 'type' attribute for a creator tag at {path}")
            raise MissingAttributeError('creator', 'type', path)

        name = self._text_content(creator)
        self.logger.debug(f"Creator ({role}): {name}")
        model.add_creator(role, name)

    def _parse_encoding(self, encoding: etree._Element, model: MetadataModel) -> None:
        for child in self._child_elements(encoding):
            tag = self._local_name(child)
            if tag == 'software':
                model.set_software(self._text_content(child))
            elif tag == 'encoding-date':
                self._parse_encoding_date(child, model)
            elif tag == 'supports':
                self._parse_supports(child, model)

    def _parse_encoding_date(self, encoding_date: etree._Element, model: MetadataModel) -> None:
        """
        Set the model's encoding date from a year-month-day element.

        Segments are stored as integers, so "2020-05-01" becomes "2020-5-1".
        Whitespace is not tolerated anywhere in the value.

        Raises:
            MalformedDateError: If the text is not three '-' separated integers
        """
        text = self._text_content(encoding_date)
        segments = text.split('-')
        if len(segments) != 3 or not all(_DATE_SEGMENT.fullmatch(s) for s in segments):
            self.logger.error(f"Malformed date in 'encoding-date' tag: {text}")
            raise MalformedDateError(text)

        year, month, day = (int(segment) for segment in segments)
        if max(year, month, day) > _DATE_SEGMENT_MAX:
            self.logger.error(f"Out of range date in 'encoding-date' tag: {text}")
            raise MalformedDateError(text)
        model.set_encoding_date(year, month, day)

    def _parse_supports(self, supports: etree._Element, model: MetadataModel) -> None:
        """
        Record a supports declaration.

        Raises:
            MalformedSupportsTagError: If element or type is absent
            InconsistentSupportsAttributeError: If attribute is present without value
        """
        attrs = self._attributes(supports)
        missing = [name for name in ('element', 'type') if name not in attrs]
        if missing:
            path = self._get_element_path(supports)
            self.logger.error(f"Malformed supports tag at {path}, missing {missing}")
            raise MalformedSupportsTagError(missing, path)

        element = attrs['element']
        enabled = attrs['type'].lower() == 'yes'
        attribute = attrs.get('attribute')

        if attribute is None:
            model.add_support(element, enabled)
            return

        if not model.add_support(element, enabled, attribute, attrs.get('value')):
            self.logger.error(
                f"Supports tag for '{element}' has attribute '{attribute}' but no value"
            )
            raise InconsistentSupportsAttributeError(element, attribute)
