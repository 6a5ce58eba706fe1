"""
Record decoders for IGC Decoder.

Each decoder validates one line against the fixed column layout of its
record type and returns a typed value. A recognised record that does not
fit its layout raises; nothing is repaired or guessed.
"""

import datetime
import logging
from typing import Callable, List, Optional, Tuple

from .errors import MalformedRecord, MissingContext
from .models import ARecord, ExtensionField, Fix
from .schema import extract_extensions
from .timestamps import resolve_timestamp, DEFAULT_TOLERANCE
from ..config.constants import (
    RECORD_IDENTITY,
    RECORD_FIX,
    RECORD_HEADER,
    HEADER_DATE,
    FLIGHT_NUMBER_MARKER,
    MANUFACTURER_CODE_LENGTH,
    MIN_LOGGER_ID_LENGTH,
    DATE_LONG_PREFIX,
    LAST_CENTURY_YEAR_DIGITS,
    FIX_TIME,
    FIX_LAT_DEGREES,
    FIX_LAT_MINUTES,
    FIX_LAT_DECIMALS,
    FIX_LAT_HEMISPHERE,
    FIX_LON_DEGREES,
    FIX_LON_MINUTES,
    FIX_LON_DECIMALS,
    FIX_LON_HEMISPHERE,
    FIX_VALIDITY,
    FIX_PRESSURE_ALT,
    FIX_GPS_ALT,
    FIX_MIN_LENGTH,
    FIX_VALID_CODE,
    ALTITUDE_NOT_REPORTED,
    DEFAULT_TEXT_UNDERSCORE_REPLACEMENT,
)

# Configure logger
logger = logging.getLogger("igc_decoder.records")

ManufacturerLookup = Callable[[str], str]


def _is_word(text: str) -> bool:
    """True for a non-empty run of letters, digits and underscores"""
    return bool(text) and all(c.isalnum() or c == '_' for c in text)


def _parse_altitude(text: str) -> Optional[int]:
    """
    Decode a 5-character altitude field: five digits or '-' plus four digits.
    Returns None for the '00000' sentinel. Validate with _is_altitude() first.
    """
    if text == ALTITUDE_NOT_REPORTED:
        return None
    return int(text)


def _is_altitude(text: str) -> bool:
    if len(text) != 5:
        return False
    if text[0] == '-':
        return text[1:].isdecimal()
    return text.isdecimal()


def _parse_coordinate(degrees: str, minutes: str, decimals: str, hemisphere: str, negative: str) -> float:
    value = int(degrees) + float(f"{minutes}.{decimals}") / 60
    return -value if hemisphere == negative else value


class IGCRecordParser:
    """
    Decodes single IGC lines into typed values:
    ARecord, header values, and Fix objects.
    """

    @staticmethod
    def parse_a_record(line: str, line_number: int, manufacturer_lookup: ManufacturerLookup) -> ARecord:
        """
        Decode the identity record.

        Example A records:
        AXXXabc123FLIGHT:7   => manufacturer XXX, logger abc123, flight 7
        ALXNGIIFLIGHT:1      => manufacturer LXN, logger GII, flight 1
        AFLA6NG:some text    => manufacturer FLA, logger 6NG, additional data

        Args:
            line: The raw A record
            line_number: 1-based line number, used for diagnostics
            manufacturer_lookup: Resolves the manufacturer code to a name

        Returns:
            ARecord: The decoded identity

        Raises:
            MalformedRecord: If the manufacturer code or logger id is invalid
        """
        code = line[1:1 + MANUFACTURER_CODE_LENGTH]
        rest = line[1 + MANUFACTURER_CODE_LENGTH:]

        if not line.startswith(RECORD_IDENTITY) or len(code) != MANUFACTURER_CODE_LENGTH or not _is_word(code):
            raise MalformedRecord(RECORD_IDENTITY, line_number, line)

        flight_number = None
        additional_data = None

        marker = rest.find(FLIGHT_NUMBER_MARKER)
        digits = ''
        if marker >= 0:
            for char in rest[marker + len(FLIGHT_NUMBER_MARKER):]:
                if not char.isdecimal():
                    break
                digits += char
        colon = rest.find(':')

        # The earliest separator wins: FLIGHT: inside the free text is data
        if digits and (colon < 0 or marker < colon):
            logger_id = rest[:marker]
            flight_number = int(digits)
        elif colon >= 0:
            logger_id = rest[:colon]
            additional_data = rest[colon + 1:] or None
        else:
            logger_id = rest
            for index, char in enumerate(rest):
                if not (char.isalnum() or char == '_'):
                    logger_id = rest[:index]
                    break

        if len(logger_id) < MIN_LOGGER_ID_LENGTH or not _is_word(logger_id):
            raise MalformedRecord(RECORD_IDENTITY, line_number, line)

        return ARecord(
            manufacturer_code=code,
            manufacturer_name=manufacturer_lookup(code),
            logger_id=logger_id,
            flight_number=flight_number,
            additional_data=additional_data,
        )

    @staticmethod
    def header_subtype(line: str) -> Optional[str]:
        """
        Return the 3-letter sub-type of an H record, or None if the line
        is too short to carry one.
        Layout: H<source flag><sub-type><payload>
        """
        if len(line) < 5 or not line.startswith(RECORD_HEADER):
            return None
        return line[2:5]

    @staticmethod
    def parse_date(line: str, line_number: int) -> datetime.date:
        """
        Decode a date header.

        Example date headers:
        HFDTE170717             => 2017-07-17
        HFDTEDATE:170717,01     => 2017-07-17 (flight of the day ignored)
        HFDTE010195             => 1995-01-01

        Raises:
            MalformedRecord: If the day, month and year don't parse
        """
        payload = line[5:]
        if payload.startswith(DATE_LONG_PREFIX):
            payload = payload[len(DATE_LONG_PREFIX):]
        elif ':' in payload:
            payload = payload.split(':', 1)[1]

        digits = payload[:6]
        if len(digits) != 6 or not digits.isdecimal():
            raise MalformedRecord(HEADER_DATE, line_number, line)

        day, month, year = digits[0:2], digits[2:4], digits[4:6]
        century = 1900 if year[0] in LAST_CENTURY_YEAR_DIGITS else 2000

        try:
            return datetime.date(century + int(year), int(month), int(day))
        except ValueError:
            raise MalformedRecord(HEADER_DATE, line_number, line)

    @staticmethod
    def parse_text_header(line: str, underscore_replacement: str = DEFAULT_TEXT_UNDERSCORE_REPLACEMENT) -> str:
        """
        Decode the payload of a free-text header.

        Example text headers:
        HFPLTPILOTINCHARGE:John Doe   => "John Doe"
        HFPLTJohn_Doe                 => "John Doe"
        HFGIDGLIDERID:D_1234          => "D-1234" (with '-' as replacement)
        """
        payload = line[5:]
        if ':' in payload:
            payload = payload.split(':', 1)[1]
        return payload.replace('_', underscore_replacement).strip()

    @staticmethod
    def parse_fix(line: str,
                  line_number: int,
                  flight_date: Optional[datetime.date],
                  previous: Optional[datetime.datetime] = None,
                  schema: Optional[List[ExtensionField]] = None,
                  tolerance: datetime.timedelta = DEFAULT_TOLERANCE) -> Fix:
        """
        Decode a B record.

        Example B record:
        B1200005213123N00012456EA0000000123
        => B<HHMMSS><DDMMmmmN><DDDMMmmmE><validity><pressure alt><gps alt>[extensions]

        Args:
            line: The raw B record
            line_number: 1-based line number, used for diagnostics
            flight_date: Date from the most recent date header
            previous: Timestamp of the previous fix, if any
            schema: Active extension schema, if any
            tolerance: Backward window before a day rollover is assumed

        Returns:
            Fix: The decoded fix

        Raises:
            MissingContext: If no date header has been seen yet
            MalformedRecord: If the line doesn't fit the B record layout
        """
        if flight_date is None:
            raise MissingContext("date-before-fix", line_number, line)

        time_of_day, latitude, longitude = IGCRecordParser._parse_position(line, line_number)

        pressure_text = line[FIX_PRESSURE_ALT]
        gps_text = line[FIX_GPS_ALT]
        if not (_is_altitude(pressure_text) and _is_altitude(gps_text)):
            raise MalformedRecord(RECORD_FIX, line_number, line)

        extensions, engine_noise_level, fix_accuracy = extract_extensions(line, schema, line_number)

        return Fix(
            timestamp=resolve_timestamp(flight_date, time_of_day, previous, tolerance),
            time_of_day=time_of_day.isoformat(),
            latitude=latitude,
            longitude=longitude,
            valid=line[FIX_VALIDITY] == FIX_VALID_CODE,
            pressure_altitude=_parse_altitude(pressure_text),
            gps_altitude=_parse_altitude(gps_text),
            extensions=extensions,
            engine_noise_level=engine_noise_level,
            fix_accuracy=fix_accuracy,
        )

    @staticmethod
    def _parse_position(line: str, line_number: int) -> Tuple[datetime.time, float, float]:
        """Decode and range-check the time and coordinates of a B record"""
        if len(line) < FIX_MIN_LENGTH or not line.startswith(RECORD_FIX):
            raise MalformedRecord(RECORD_FIX, line_number, line)

        numeric = (
            line[FIX_TIME],
            line[FIX_LAT_DEGREES], line[FIX_LAT_MINUTES], line[FIX_LAT_DECIMALS],
            line[FIX_LON_DEGREES], line[FIX_LON_MINUTES], line[FIX_LON_DECIMALS],
        )
        if not all(text.isdecimal() for text in numeric):
            raise MalformedRecord(RECORD_FIX, line_number, line)

        lat_hemisphere = line[FIX_LAT_HEMISPHERE]
        lon_hemisphere = line[FIX_LON_HEMISPHERE]
        if lat_hemisphere not in ('N', 'S') or lon_hemisphere not in ('E', 'W'):
            raise MalformedRecord(RECORD_FIX, line_number, line)

        time_text = line[FIX_TIME]
        hour, minute, second = int(time_text[0:2]), int(time_text[2:4]), int(time_text[4:6])
        if hour > 23 or minute > 59 or second > 59:
            raise MalformedRecord(RECORD_FIX, line_number, line)

        if int(line[FIX_LAT_MINUTES]) > 59 or int(line[FIX_LON_MINUTES]) > 59:
            raise MalformedRecord(RECORD_FIX, line_number, line)

        latitude = _parse_coordinate(line[FIX_LAT_DEGREES], line[FIX_LAT_MINUTES], line[FIX_LAT_DECIMALS],
                                     lat_hemisphere, 'S')
        longitude = _parse_coordinate(line[FIX_LON_DEGREES], line[FIX_LON_MINUTES], line[FIX_LON_DECIMALS],
                                      lon_hemisphere, 'W')
        if abs(latitude) > 90 or abs(longitude) > 180:
            raise MalformedRecord(RECORD_FIX, line_number, line)

        return datetime.time(hour, minute, second), latitude, longitude


# Create a singleton instance of the parser
record_parser = IGCRecordParser()
