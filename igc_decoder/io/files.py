"""
File reading utilities for IGC Decoder.
Supplies the decoder with lines from IGC files on disk.
"""

import os
import glob
import logging
from typing import Any, List, Optional

from ..config.constants import IGC_EXTENSIONS
from ..config.settings import settings
from ..core.decoder import decode_lines
from ..data.models import FlightRecord

# Configure logger
logger = logging.getLogger("igc_decoder.io.files")


def read_igc_lines(filepath: str, encoding: Optional[str] = None, errors: Optional[str] = None) -> List[str]:
    """
    Read an IGC file into a list of trimmed lines.

    Args:
        filepath: Path to the IGC file
        encoding: Text encoding (default: from settings)
        errors: Decoding error handler (default: from settings)

    Returns:
        List[str]: Lines in file order, without line endings

    Raises:
        OSError: If the file can't be read
    """
    encoding = encoding or settings.get('input_encoding')
    errors = errors or settings.get('input_errors')

    with open(filepath, 'r', encoding=encoding, errors=errors, newline='') as f:
        lines = [line.strip() for line in f.read().splitlines()]

    logger.debug(f"Read {len(lines)} lines from {filepath}")
    return lines


def read_flight(filepath: str, **options: Any) -> FlightRecord:
    """
    Read and decode an IGC file.

    Args:
        filepath: Path to the IGC file
        **options: Passed on to FlightDecoder

    Returns:
        FlightRecord: The decoded flight

    Raises:
        OSError: If the file can't be read
        IGCDecodeError: If the file isn't a valid IGC file
    """
    logger.info(f"Decoding {filepath}")
    return decode_lines(read_igc_lines(filepath), **options)


def list_igc_files(directory: str) -> List[str]:
    """
    List all IGC files in the specified directory.

    Args:
        directory: Directory to search

    Returns:
        List[str]: IGC file paths sorted by name
    """
    if not os.path.isdir(directory):
        logger.error(f"Not a directory: {directory}")
        return []

    igc_files = set()
    for extension in IGC_EXTENSIONS:
        igc_files.update(glob.glob(os.path.join(directory, f"*{extension}")))

    return sorted(igc_files)
