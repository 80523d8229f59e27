"""
MusicXML Metadata Exceptions Module.

This module defines the errors raised while reading metadata from a
MusicXML document. Every error derives from MusicXMLParserError, which is
itself a ValueError, so callers that only care about "bad input" can catch
ValueError as they would for any other reader in this package.

Classes:
    MusicXMLParserError: Base class for all parse-time errors
    DocumentBuildError: The XML library could not build a document tree
    UnsupportedVersionError: Root element declares a version other than 3.0
    MissingAttributeError: A creator element has no type attribute
    MalformedDateError: An encoding-date value is not year-month-day
    MalformedSupportsTagError: A supports element lacks element or type
    InconsistentSupportsAttributeError: A supports element has attribute without value
"""

from typing import Optional, Sequence


class MusicXMLParserError(ValueError):
    """Base class for errors raised while parsing MusicXML metadata."""
    pass


class DocumentBuildError(MusicXMLParserError):
    """When the XML library cannot tokenize or build a tree from the input."""
    pass


class UnsupportedVersionError(MusicXMLParserError):
    """When the root element's version attribute is missing or not 3.0."""

    def __init__(self, version: Optional[str]):
        self.version = version
        super().__init__(
            f"MusicXML file must be version 3.0, version detected was: {version}"
        )


class MissingAttributeError(MusicXMLParserError):
    """When an element is missing an attribute it cannot be read without."""

    def __init__(self, element: str, attribute: str, path: str = ""):
        self.element = element
        self.attribute = attribute
        self.path = path
        message = f"Missing '{attribute}' attribute for a {element} tag"
        if path:
            message += f" at {path}"
        super().__init__(message)


class MalformedDateError(MusicXMLParserError):
    """When an encoding-date value does not split into three integers."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Malformed date in 'encoding-date' tag: {text}")


class MalformedSupportsTagError(MusicXMLParserError):
    """When a supports element lacks its element or type attribute."""

    def __init__(self, missing: Sequence[str], path: str = ""):
        self.missing = list(missing)
        self.path = path
        message = (
            "Malformed supports tag. Tag is missing attribute(s): "
            + ", ".join(f"'{name}'" for name in self.missing)
        )
        if path:
            message += f" at {path}"
        super().__init__(message)


class InconsistentSupportsAttributeError(MusicXMLParserError):
    """When a supports element names an attribute but gives no value for it."""

    def __init__(self, element: str, attribute: str):
        self.element = element
        self.attribute = attribute
        super().__init__(
            f"The 'value' attribute for a supports tag (element '{element}') "
            f"was missing, but an 'attribute' attribute '{attribute}' existed "
            "for that same tag."
        )
