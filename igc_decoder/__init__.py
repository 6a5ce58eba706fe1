"""
IGC Decoder
Decodes IGC flight recorder logs into structured flight records.

Features:
- Decoding A, H, I and B records into a FlightRecord
- Resolving fix timestamps across midnight
- Exporting decoded flights as normalised IGC files
"""

__version__ = '1.0.0'

from . import config
from . import data
from .config.constants import APP_NAME, APP_VERSION, APP_AUTHOR, APP_LICENSE
from .core.decoder import FlightDecoder, create_decoder, decode_lines, parse
from .data.errors import (
    IGCDecodeError,
    MalformedRecord,
    InvalidExtensionSchema,
    MissingContext,
    MissingRequiredHeader,
)
from .data.models import ARecord, ExtensionField, Fix, FlightRecord

__author__ = APP_AUTHOR
__license__ = APP_LICENSE

__all__ = [
    'FlightDecoder',
    'create_decoder',
    'decode_lines',
    'parse',
    'IGCDecodeError',
    'MalformedRecord',
    'InvalidExtensionSchema',
    'MissingContext',
    'MissingRequiredHeader',
    'ARecord',
    'ExtensionField',
    'Fix',
    'FlightRecord',
]

# Initialize logging when the package is imported
import logging
import sys

# Configure package logger
root_logger = logging.getLogger("igc_decoder")
root_logger.setLevel(logging.INFO)

# Create console handler, the logger level decides what gets through
console_handler = logging.StreamHandler(sys.stderr)

# Create formatter
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
console_handler.setFormatter(formatter)

# Add handler to logger
root_logger.addHandler(console_handler)
root_logger.propagate = False

root_logger.debug(f"Initializing {APP_NAME} v{APP_VERSION}")
