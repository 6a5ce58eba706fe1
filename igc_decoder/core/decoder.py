"""
Flight decoder for IGC Decoder.
Drives the record decoders over the lines of one IGC file and assembles
the FlightRecord.
"""

import datetime
import logging
from typing import Any, Dict, Iterable, List, Optional

from ..data.errors import MissingRequiredHeader
from ..data.models import ARecord, ExtensionField, Fix, FlightRecord
from ..data.records import IGCRecordParser, ManufacturerLookup
from ..data.schema import parse_extension_schema
from ..config.constants import (
    RECORD_IDENTITY,
    RECORD_FIX,
    RECORD_HEADER,
    RECORD_EXTENSIONS,
    HEADER_DATE,
    HEADER_REGISTRATION,
    TEXT_HEADER_FIELDS,
)
from ..config.manufacturers import lookup_manufacturer
from ..config.settings import settings

# Configure logger
logger = logging.getLogger("igc_decoder.decoder")


class FlightDecoder:
    """
    Holds the decode state of one IGC file.

    Lines are fed in file order through process_line(); the first invalid
    record raises and the decode is abandoned. The finished FlightRecord
    is available from the result property once the A record and the date
    header have been seen.
    """

    def __init__(self,
                 manufacturer_lookup: Optional[ManufacturerLookup] = None,
                 rollover_tolerance: Optional[datetime.timedelta] = None,
                 text_underscore_replacement: Optional[str] = None,
                 registration_underscore_replacement: Optional[str] = None):
        """
        Initialize the decoder.

        Args:
            manufacturer_lookup: Resolves A record manufacturer codes to names
                (default: built-in manufacturer table)
            rollover_tolerance: How far a fix may lie before the previous one
                before a day rollover is assumed (default: from settings)
            text_underscore_replacement: Replacement for '_' in text headers
                (default: from settings)
            registration_underscore_replacement: Replacement for '_' in the
                registration header (default: from settings)
        """
        self.manufacturer_lookup = manufacturer_lookup or lookup_manufacturer

        if rollover_tolerance is None:
            rollover_tolerance = datetime.timedelta(seconds=settings.get('rollover_tolerance_seconds'))
        self.rollover_tolerance = rollover_tolerance

        if text_underscore_replacement is None:
            text_underscore_replacement = settings.get('text_underscore_replacement')
        if registration_underscore_replacement is None:
            registration_underscore_replacement = settings.get('registration_underscore_replacement')
        self.text_underscore_replacement = text_underscore_replacement
        self.registration_underscore_replacement = registration_underscore_replacement

        self.line_number = 0
        self.date: Optional[datetime.date] = None
        self.identity: Optional[ARecord] = None
        self.headers: Dict[str, str] = {}
        self.schema: Optional[List[ExtensionField]] = None
        self.prev_timestamp: Optional[datetime.datetime] = None
        self.fixes: List[Fix] = []

    def process_line(self, line: str) -> None:
        """
        Dispatch one trimmed line by its first character.
        Lines with an unknown or missing record tag are skipped.
        """
        self.line_number += 1

        record_type = line[:1]

        if record_type == RECORD_FIX:
            fix = IGCRecordParser.parse_fix(
                line,
                self.line_number,
                self.date,
                previous=self.prev_timestamp,
                schema=self.schema,
                tolerance=self.rollover_tolerance,
            )
            self.prev_timestamp = fix.timestamp
            self.fixes.append(fix)

        elif record_type == RECORD_HEADER:
            self._process_header(line)

        elif record_type == RECORD_IDENTITY:
            self.identity = IGCRecordParser.parse_a_record(line, self.line_number, self.manufacturer_lookup)

        elif record_type == RECORD_EXTENSIONS:
            if self.schema is not None:
                logger.warning(f"Extension schema redeclared at line {self.line_number}")
            self.schema = parse_extension_schema(line, self.line_number)

        elif record_type:
            logger.debug(f"Skipping {record_type} record at line {self.line_number}")

    def _process_header(self, line: str) -> None:
        """Decode an H record into the date or one of the text headers"""
        subtype = IGCRecordParser.header_subtype(line)

        if subtype == HEADER_DATE:
            self.date = IGCRecordParser.parse_date(line, self.line_number)

        elif subtype in TEXT_HEADER_FIELDS:
            if subtype == HEADER_REGISTRATION:
                replacement = self.registration_underscore_replacement
            else:
                replacement = self.text_underscore_replacement
            self.headers[TEXT_HEADER_FIELDS[subtype]] = IGCRecordParser.parse_text_header(line, replacement)

        else:
            logger.debug(f"Skipping {subtype} header at line {self.line_number}")

    @property
    def result(self) -> FlightRecord:
        """
        The decoded flight.

        Raises:
            MissingRequiredHeader: If no A record or no date header was seen
        """
        if self.identity is None:
            raise MissingRequiredHeader(RECORD_IDENTITY)

        if self.date is None:
            raise MissingRequiredHeader(HEADER_DATE)

        return FlightRecord(
            date=self.date,
            identity=self.identity,
            fixes=tuple(self.fixes),
            **self.headers
        )


def create_decoder(**options: Any) -> FlightDecoder:
    """
    Create a new flight decoder instance.

    Returns:
        FlightDecoder: A new decoder with its own state
    """
    return FlightDecoder(**options)


def decode_lines(lines: Iterable[str], **options: Any) -> FlightRecord:
    """
    Decode a sequence of IGC lines in file order.

    Args:
        lines: Lines of the file; surrounding whitespace is removed
        **options: Passed on to FlightDecoder

    Returns:
        FlightRecord: The decoded flight

    Raises:
        IGCDecodeError: On the first invalid record, or if the A record or
            the date header is missing
    """
    decoder = create_decoder(**options)

    for line in lines:
        decoder.process_line(line.strip())

    flight = decoder.result
    logger.info(f"Decoded flight of {flight.date.isoformat()} with {len(flight.fixes)} fixes")
    return flight


def parse(text: str, **options: Any) -> FlightRecord:
    """Decode the full text of an IGC file"""
    return decode_lines(text.split('\n'), **options)
