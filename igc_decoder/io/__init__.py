"""
I/O package for IGC Decoder.
Contains modules for reading IGC files and exporting decoded flights.
"""

from .files import read_igc_lines, read_flight, list_igc_files
from .igc import IGCExporter, export_flight

__all__ = [
    'read_igc_lines',
    'read_flight',
    'list_igc_files',
    'IGCExporter',
    'export_flight'
]
