"""
Console driver: print the metadata report of one or more MusicXML files.

Usage:
    python -m musicxml_meta FILE [FILE ...]
"""

from typing import List, Optional
import argparse
import logging
import sys

from .config import configure_logging
from .exceptions import MusicXMLParserError
from .parser import MusicXMLParser
from .report import format_report

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = argparse.ArgumentParser(
        prog='musicxml_meta',
        description='Print the identification metadata of MusicXML 3.0 files.'
    )
    arg_parser.add_argument('files', nargs='+', help='MusicXML files to read')
    arg_parser.add_argument('--log-level', default=None, help='Log level (e.g. DEBUG)')
    args = arg_parser.parse_args(argv)

    configure_logging(args.log_level.upper() if args.log_level else None)
    parser = MusicXMLParser()

    for index, path in enumerate(args.files):
        try:
            model = parser.parse_file(path)
        except (FileNotFoundError, MusicXMLParserError) as e:
            logger.error(f"Failed to read {path}: {str(e)}")
            print(f"{path}: {e}", file=sys.stderr)
            return 1

        if index:
            print()
        if len(args.files) > 1:
            print(f"# {path}")
        print(format_report(model))

    return 0


if __name__ == '__main__':
    sys.exit(main())
