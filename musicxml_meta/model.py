"""
MusicXML Metadata Model Module.

This module holds the in-memory representation of the bibliographic facts
read from a MusicXML document: movement title, creators by role, encoding
software, encoding date and the per-element supports declarations.

Classes:
    SupportEntry: A single supports declaration and its attributes
    MetadataModel: Aggregate of all metadata read from one document
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Union, Any


@dataclass
class SupportEntry:
    """Whether a notation feature is supported, plus its attribute/value pairs."""
    enabled: bool
    attributes: Dict[str, str] = field(default_factory=dict)

    def get_attribute_value(self, attribute: str) -> Optional[str]:
        """Return the value for ``attribute``, or None if it was never set."""
        return self.attributes.get(attribute)

    def set_attribute_value(self, attribute: str, value: str) -> None:
        """Set ``attribute`` to ``value``. A later call overwrites the earlier value."""
        self.attributes[attribute] = value

    def get_all_attributes(self) -> Dict[str, str]:
        return self.attributes

    def to_dict(self) -> Dict[str, Any]:
        return {
            'enabled': self.enabled,
            'attributes': dict(self.attributes)
        }


class MetadataModel:
    """
    Metadata read from the identification block of a MusicXML score.

    A model is created empty at the start of a parse, filled in by the parser
    while it walks the document, and handed to the caller once the walk has
    succeeded. Consumers treat it as read-only from then on.

    Attributes:
        title (str): Movement title, empty when the document has none
        creators (Dict[str, List[str]]): Creator names keyed by role, in
            declaration order
        software (str): Software that encoded the document
        encoding_date (str): Encoding date as year-month-day, or empty
        supports (Dict[str, SupportEntry]): Supports declarations keyed by
            element name
    """

    def __init__(self):
        """Create an empty model. The encoding date is left empty."""
        self.title = ""
        self.creators: Dict[str, List[str]] = {}
        self.software = ""
        self.encoding_date = ""
        self.supports: Dict[str, SupportEntry] = {}

    @classmethod
    def with_current_date(cls) -> 'MetadataModel':
        """
        Create an empty model whose encoding date is today's date.

        Returns:
            MetadataModel: New model with encoding_date set to today (YYYY-MM-DD)
        """
        model = cls()
        model.set_encoding_date(datetime.now())
        return model

    def set_title(self, title: str) -> None:
        """
        Set the movement title.

        A score has only one title, so setting it again replaces the previous one.

        Args:
            title (str): New movement title
        """
        self.title = title

    def get_title(self) -> str:
        return self.title

    set_movement_title = set_title
    get_movement_title = get_title

    def add_creator(self, role: str, name: str) -> None:
        """
        Add a creator under the given role.

        Common roles are composer, lyricist and arranger, but any string is
        accepted and kept exactly as given.

        Args:
            role (str): Creator role, used as-is as the mapping key
            name (str): Creator name, appended after earlier names for the role
        """
        self.creators.setdefault(role, []).append(name)

    def get_creators(self, role: str) -> Optional[List[str]]:
        """
        Get every creator declared for a role.

        Args:
            role (str): Creator role to look up

        Returns:
            Optional[List[str]]: Names in declaration order, or None when no
                creator was ever added for this role
        """
        return self.creators.get(role)

    def get_all_creators(self) -> Dict[str, List[str]]:
        """
        Get the full role to creators mapping.

        Check for "no creators at all" with the mapping's emptiness, not with
        a None check.

        Returns:
            Dict[str, List[str]]: The live creators mapping
        """
        return self.creators

    def set_software(self, software: str) -> None:
        self.software = software

    def get_software(self) -> str:
        return self.software

    def set_encoding_date(
        self,
        date_value: Union[date, int],
        month: Optional[int] = None,
        day: Optional[int] = None
    ) -> None:
        """
        Set the date the document was encoded.

        Accepts either a calendar date, stored zero-padded as YYYY-MM-DD, or
        explicit year, month and day integers, stored joined with '-' without
        padding or range checks.

        Args:
            date_value (Union[date, int]): A date/datetime, or the year
            month (Optional[int]): Month, required with an integer year
            day (Optional[int]): Day of month, required with an integer year

        Raises:
            TypeError: If the arguments match neither form
        """
        if isinstance(date_value, date):
            if month is not None or day is not None:
                raise TypeError("month and day must not be given with a date value")
            self.encoding_date = date_value.strftime('%Y-%m-%d')
            return

        if month is None or day is None:
            raise TypeError("year, month and day are all required")
        self.encoding_date = f"{date_value}-{month}-{day}"

    def get_encoding_date(self) -> str:
        return self.encoding_date

    def add_support(
        self,
        element: str,
        enabled: bool,
        attribute: Optional[str] = None,
        value: Optional[str] = None
    ) -> bool:
        """
        Record a supports declaration for an element.

        The first declaration of an element fixes its enabled flag; later
        declarations for the same element only merge in attributes.

        Args:
            element (str): Name of the feature being declared
            enabled (bool): Whether the feature is supported
            attribute (Optional[str]): Attribute qualifying the declaration
            value (Optional[str]): Value for ``attribute``

        Returns:
            bool: False if ``attribute`` is given without ``value`` (the model
                is left unchanged), True otherwise
        """
        if attribute is not None and value is None:
            return False

        entry = self.supports.get(element)
        if entry is None:
            entry = SupportEntry(enabled)
            self.supports[element] = entry

        if attribute is not None:
            entry.set_attribute_value(attribute, value)

        return True

    def get_support(self, element: str) -> Optional[SupportEntry]:
        return self.supports.get(element)

    def get_all_supports(self) -> Dict[str, SupportEntry]:
        return self.supports

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the model to plain JSON-ready data.

        Returns:
            Dict[str, Any]: Title, creators, software, encoding date and supports
        """
        return {
            'title': self.title,
            'creators': {role: list(names) for role, names in self.creators.items()},
            'software': self.software,
            'encoding_date': self.encoding_date,
            'supports': {
                element: entry.to_dict() for element, entry in self.supports.items()
            }
        }

    def __repr__(self) -> str:
        return (
            f"MetadataModel(title={self.title!r}, creators={self.creators!r}, "
            f"software={self.software!r}, encoding_date={self.encoding_date!r}, "
            f"supports={self.supports!r})"
        )
