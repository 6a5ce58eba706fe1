"""
Decode errors for IGC Decoder.

Every failure aborts the decode of the whole file. Unknown record tags and
unknown header sub-types are never errors.
"""

from typing import Optional


class IGCDecodeError(Exception):
    """Base class for all decode failures"""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class MalformedRecord(IGCDecodeError):
    """A recognised record whose payload does not match its grammar"""

    def __init__(self, record_type: str, line_number: int, line: str):
        super().__init__(f"Invalid {record_type} record at line {line_number}: {line}", line_number, line)
        self.record_type = record_type


class InvalidExtensionSchema(IGCDecodeError):
    """An I record whose declared count doesn't fit the line"""

    def __init__(self, line_number: int, line: str):
        super().__init__(f"Invalid I record at line {line_number}: {line}", line_number, line)


class MissingContext(IGCDecodeError):
    """A record that needs state no earlier line has provided"""

    def __init__(self, reason: str, line_number: Optional[int] = None, line: Optional[str] = None):
        message = f"Missing context ({reason})"
        if line_number is not None:
            message += f" at line {line_number}"
        super().__init__(message, line_number, line)
        self.reason = reason


class MissingRequiredHeader(IGCDecodeError):
    """End of input reached without an A record or a date header"""

    def __init__(self, which: str):
        super().__init__(f"Missing {which} record")
        self.which = which
