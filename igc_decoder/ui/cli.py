"""
Command-line interface for IGC Decoder.
Decodes IGC files and prints a summary or the decoded data as JSON.
"""

import argparse
import datetime
import json
import logging
import os
import sys
from typing import List, Optional

from ..config.constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from ..config.settings import settings
from ..data.errors import IGCDecodeError
from ..data.models import FlightRecord
from ..io.files import read_flight, list_igc_files
from ..io.igc import export_flight

# Configure logger
logger = logging.getLogger("igc_decoder.ui.cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='igc-decoder',
        description=APP_DESCRIPTION
    )
    parser.add_argument(
        'paths',
        nargs='+',
        metavar='FILE',
        help='IGC file(s) or directories containing IGC files'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the decoded flight as JSON'
    )
    parser.add_argument(
        '--fixes',
        action='store_true',
        help='Include the fixes in the JSON output'
    )
    parser.add_argument(
        '--tolerance',
        type=int,
        metavar='SECONDS',
        help='Backward window before a midnight rollover is assumed'
    )
    parser.add_argument(
        '--export',
        metavar='PATH',
        help='Write the decoded flight as a normalised IGC file (single input only)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f"{APP_NAME} {APP_VERSION}"
    )
    return parser


def format_duration(duration: Optional[datetime.timedelta]) -> str:
    """Format a duration as HH:MM:SS"""
    if duration is None:
        return "-"
    hours, remainder = divmod(int(duration.total_seconds()), 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class CLI:
    """
    Command-line interface for IGC Decoder.
    Decodes every given file and reports on each one.
    """

    def __init__(self, out=None, err=None):
        """Initialize the CLI."""
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the CLI.

        Args:
            argv: Command line arguments (default: sys.argv[1:])

        Returns:
            int: Exit status, 0 if every file decoded
        """
        args = build_parser().parse_args(argv)

        if args.debug:
            logging.getLogger("igc_decoder").setLevel(logging.DEBUG)
        else:
            logging.getLogger("igc_decoder").setLevel(settings.get('log_level', 'INFO'))

        options = {}
        if args.tolerance is not None:
            options['rollover_tolerance'] = datetime.timedelta(seconds=args.tolerance)

        files = self._collect_files(args.paths)
        if args.export and len(files) != 1:
            print("--export needs exactly one input file", file=self.err)
            return 2

        status = 0
        for filepath in files:
            try:
                flight = read_flight(filepath, **options)
            except IGCDecodeError as e:
                logger.error(f"Error decoding {filepath}: {e}")
                print(f"{filepath}: {e}", file=self.err)
                status = 1
                continue
            except OSError as e:
                logger.error(f"Error reading {filepath}: {e}")
                print(f"{filepath}: {e}", file=self.err)
                status = 1
                continue

            if args.json:
                self._print_json(flight, args.fixes)
            else:
                self._print_summary(filepath, flight)

            if args.export:
                export_flight(flight, args.export)

        return status

    @staticmethod
    def _collect_files(paths: List[str]) -> List[str]:
        """Expand directories into the IGC files they contain."""
        files = []
        for path in paths:
            if os.path.isdir(path):
                files.extend(list_igc_files(path))
            else:
                files.append(path)
        return files

    def _print_json(self, flight: FlightRecord, include_fixes: bool) -> None:
        print(json.dumps(flight.to_dict(include_fixes=include_fixes), indent=2), file=self.out)

    def _print_summary(self, filepath: str, flight: FlightRecord) -> None:
        """Print a human readable summary of a flight."""
        identity = flight.identity
        lines = [
            f"===== {os.path.basename(filepath)} =====",
            f"Date:          {flight.date.isoformat()}",
            f"Pilot:         {flight.pilot or '-'}",
            f"Glider:        {flight.glider_type or '-'}",
            f"Registration:  {flight.registration or '-'}",
            f"Logger:        {identity.manufacturer_name} {identity.logger_id}",
            f"Fixes:         {len(flight.fixes)}",
        ]
        if flight.fixes:
            lines.append(f"First fix:     {flight.fixes[0].timestamp.isoformat()}")
            lines.append(f"Last fix:      {flight.fixes[-1].timestamp.isoformat()}")
        lines.append(f"Duration:      {format_duration(flight.duration)}")

        print("\n".join(lines), file=self.out)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the igc-decoder command."""
    return CLI().run(argv)
