"""
Console Report Module.

Formats a parsed MetadataModel as the plain-text report printed by the
``python -m musicxml_meta`` driver.
"""

from typing import List

from .model import MetadataModel

REPORTED_ROLES = ('composer', 'lyricist', 'arranger')


def format_report(model: MetadataModel) -> str:
    """
    Build the text report for a model.

    Only the standard composer, lyricist and arranger roles are listed.

    Args:
        model (MetadataModel): Parsed metadata

    Returns:
        str: Report lines joined with newlines
    """
    lines: List[str] = [f"Title: {model.get_movement_title()}"]

    if model.get_all_creators():
        for role in REPORTED_ROLES:
            for name in model.get_creators(role) or []:
                lines.append(f"{role.capitalize()}: {name}")
    else:
        lines.append("No creators.")

    lines.append(f"Software: {model.get_software()}")
    lines.append(f"Encoding Date: {model.get_encoding_date()}")

    if model.get_all_supports():
        lines.append("======")
        for element, entry in model.get_all_supports().items():
            lines.append(f"Element: {element}")
            lines.append(f"  Type: {'yes' if entry.enabled else 'no'}")
            for attribute, value in entry.get_all_attributes().items():
                lines.append(f"  Attribute: {attribute}")
                lines.append(f"    Value: {value}")
        lines.append("======")
    else:
        lines.append("No supports.")

    return '\n'.join(lines)
