"""
MusicXML metadata reader.

Reads the movement title and identification block of MusicXML 3.0 scores
into a MetadataModel.
"""

from .exceptions import (
    DocumentBuildError,
    InconsistentSupportsAttributeError,
    MalformedDateError,
    MalformedSupportsTagError,
    MissingAttributeError,
    MusicXMLParserError,
    UnsupportedVersionError,
)
from .model import MetadataModel, SupportEntry
from .parser import MusicXMLParser

__all__ = [
    'DocumentBuildError',
    'InconsistentSupportsAttributeError',
    'MalformedDateError',
    'MalformedSupportsTagError',
    'MetadataModel',
    'MissingAttributeError',
    'MusicXMLParser',
    'MusicXMLParserError',
    'SupportEntry',
    'UnsupportedVersionError',
]

__version__ = '0.1.0'
