"""
Data package for IGC Decoder.
Contains data models, errors and the per-record decoders.
"""

from .models import ARecord, ExtensionField, Fix, FlightRecord, RecordType
from .errors import (
    IGCDecodeError,
    MalformedRecord,
    InvalidExtensionSchema,
    MissingContext,
    MissingRequiredHeader,
)
from .records import IGCRecordParser, record_parser
from .schema import parse_extension_schema, extract_extensions
from .timestamps import resolve_timestamp

__all__ = [
    'ARecord',
    'ExtensionField',
    'Fix',
    'FlightRecord',
    'RecordType',
    'IGCDecodeError',
    'MalformedRecord',
    'InvalidExtensionSchema',
    'MissingContext',
    'MissingRequiredHeader',
    'IGCRecordParser',
    'record_parser',
    'parse_extension_schema',
    'extract_extensions',
    'resolve_timestamp'
]
