"""
Extension schema handling for IGC Decoder.

An I record declares which columns of every following B record carry
which extension, e.g. ``I023638FXA3941ENL``:

    I 02 3638FXA 3941ENL
      |  |       +-- columns 39-41 hold ENL
      |  +-- columns 36-38 hold FXA
      +-- two extensions follow

Columns are 1-based and inclusive in the file; ExtensionField keeps a
0-based start offset and a length.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .errors import InvalidExtensionSchema, MalformedRecord
from .models import ExtensionField
from ..config.constants import (
    RECORD_EXTENSIONS,
    RECORD_FIX,
    EXTENSION_COUNT,
    EXTENSION_HEADER_LENGTH,
    EXTENSION_GROUP_LENGTH,
    EXTENSION_ENGINE_NOISE,
    EXTENSION_FIX_ACCURACY,
)

logger = logging.getLogger("igc_decoder.schema")


def parse_extension_schema(line: str, line_number: int) -> List[ExtensionField]:
    """
    Decode an I record into an ordered list of extension fields.

    Args:
        line: The raw I record
        line_number: 1-based line number, used for diagnostics

    Returns:
        List[ExtensionField]: Declared fields in declaration order

    Raises:
        InvalidExtensionSchema: If the count or any group doesn't parse
    """
    if not line.startswith(RECORD_EXTENSIONS):
        raise InvalidExtensionSchema(line_number, line)

    count_text = line[EXTENSION_COUNT]
    if len(count_text) != 2 or not count_text.isdecimal():
        raise InvalidExtensionSchema(line_number, line)

    count = int(count_text)
    if len(line) < EXTENSION_HEADER_LENGTH + count * EXTENSION_GROUP_LENGTH:
        raise InvalidExtensionSchema(line_number, line)

    fields = []
    for i in range(count):
        offset = EXTENSION_HEADER_LENGTH + i * EXTENSION_GROUP_LENGTH
        start_text = line[offset:offset + 2]
        end_text = line[offset + 2:offset + 4]
        code = line[offset + 4:offset + 7]

        if not (start_text.isdecimal() and end_text.isdecimal()):
            raise InvalidExtensionSchema(line_number, line)

        start = int(start_text)
        end = int(end_text)
        if start < 1 or end < start:
            raise InvalidExtensionSchema(line_number, line)

        fields.append(ExtensionField(code=code, start_column=start - 1, length=end - start + 1))

    logger.debug(f"Extension schema at line {line_number}: {[f.code for f in fields]}")
    return fields


def find_field(schema: List[ExtensionField], code: str) -> Optional[ExtensionField]:
    """
    Return the field declared with the given code. When a code is declared
    twice the last declaration wins, as it does in the extension map.
    """
    for extension_field in reversed(schema):
        if extension_field.code == code:
            return extension_field
    return None


def extract_extensions(line: str,
                       schema: Optional[List[ExtensionField]],
                       line_number: int) -> Tuple[Dict[str, str], Optional[float], Optional[int]]:
    """
    Slice every declared extension out of a B record.

    Args:
        line: The raw B record
        schema: Active extension schema, or None if no I record was seen
        line_number: 1-based line number, used for diagnostics

    Returns:
        Tuple of (raw values by code, engine noise level, fix accuracy)

    Raises:
        MalformedRecord: If ENL or FXA hold something other than digits;
            an empty or all-blank value is absent
    """
    if not schema:
        return {}, None, None

    extensions = {field.code: field.extract(line) for field in schema}

    engine_noise_level = None
    enl_field = find_field(schema, EXTENSION_ENGINE_NOISE)
    enl_text = enl_field.extract(line) if enl_field else None
    if enl_text and enl_text.strip():
        if not enl_text.isdecimal():
            raise MalformedRecord(RECORD_FIX, line_number, line)
        engine_noise_level = int(enl_text) / 10 ** enl_field.length

    fix_accuracy = None
    fxa_field = find_field(schema, EXTENSION_FIX_ACCURACY)
    fxa_text = fxa_field.extract(line) if fxa_field else None
    if fxa_text and fxa_text.strip():
        if not fxa_text.isdecimal():
            raise MalformedRecord(RECORD_FIX, line_number, line)
        fix_accuracy = int(fxa_text)

    return extensions, engine_noise_level, fix_accuracy
