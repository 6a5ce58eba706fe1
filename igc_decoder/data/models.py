"""
Data models for IGC Decoder.
Contains classes representing the decoded content of an IGC file.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Mapping, Tuple
import datetime
from enum import Enum
from types import MappingProxyType


class RecordType(Enum):
    """Enum for the IGC record types the decoder understands"""
    IDENTITY = "A"
    FIX = "B"
    HEADER = "H"
    EXTENSIONS = "I"


@dataclass(frozen=True)
class ExtensionField:
    """
    One column range of a B record declared by an I record.
    start_column is the 0-based offset into the raw line.
    """
    code: str
    start_column: int
    length: int

    def __post_init__(self):
        """Validate data after initialization"""
        if len(self.code) != 3:
            raise ValueError("code must be 3 characters long")
        if self.start_column < 0:
            raise ValueError("start_column cannot be negative")
        if self.length < 1:
            raise ValueError("length must be positive")

    @property
    def data_type(self) -> RecordType:
        """Return the record type that declares this field"""
        return RecordType.EXTENSIONS

    @property
    def end_column(self) -> int:
        """Exclusive 0-based end offset"""
        return self.start_column + self.length

    def extract(self, line: str) -> str:
        """Slice the raw value of this extension out of a B record line"""
        return line[self.start_column:self.end_column]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        return {
            "code": self.code,
            "start_column": self.start_column,
            "length": self.length,
        }


@dataclass(frozen=True)
class ARecord:
    """
    Flight recorder identity from the A record.
    Format: A<manufacturer><logger id>[FLIGHT:<n>|:<additional data>]
    """
    manufacturer_code: str
    manufacturer_name: str
    logger_id: str
    flight_number: Optional[int] = None
    additional_data: Optional[str] = None

    def __post_init__(self):
        if self.flight_number is not None and self.flight_number < 0:
            raise ValueError("flight_number cannot be negative")

    @property
    def data_type(self) -> RecordType:
        """Return the record type of this object"""
        return RecordType.IDENTITY

    def to_dict(self) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        return {
            "manufacturer_code": self.manufacturer_code,
            "manufacturer_name": self.manufacturer_name,
            "logger_id": self.logger_id,
            "flight_number": self.flight_number,
            "additional_data": self.additional_data,
        }


@dataclass(frozen=True)
class Fix:
    """
    One GPS position sample from a B record.
    timestamp is a UTC instant, already corrected for midnight rollovers.
    """
    timestamp: datetime.datetime
    time_of_day: str
    latitude: float
    longitude: float
    valid: bool
    pressure_altitude: Optional[int] = None
    gps_altitude: Optional[int] = None
    extensions: Mapping[str, str] = field(default_factory=dict, hash=False)
    engine_noise_level: Optional[float] = None
    fix_accuracy: Optional[int] = None

    def __post_init__(self):
        """Validate data after initialization"""
        if not -90 <= self.latitude <= 90:
            raise ValueError("latitude must be between -90 and 90")
        if not -180 <= self.longitude <= 180:
            raise ValueError("longitude must be between -180 and 180")
        if self.engine_noise_level is not None and not 0 <= self.engine_noise_level <= 1:
            raise ValueError("engine_noise_level must be between 0 and 1")
        if self.fix_accuracy is not None and self.fix_accuracy < 0:
            raise ValueError("fix_accuracy cannot be negative")

        # Extensions are read-only once decoded
        object.__setattr__(self, "extensions", MappingProxyType(dict(self.extensions)))

    @property
    def data_type(self) -> RecordType:
        """Return the record type of this object"""
        return RecordType.FIX

    def to_dict(self) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        return {
            "timestamp": self.timestamp.isoformat(),
            "time": self.time_of_day,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "valid": self.valid,
            "pressure_altitude": self.pressure_altitude,
            "gps_altitude": self.gps_altitude,
            "extensions": dict(self.extensions),
            "engine_noise_level": self.engine_noise_level,
            "fix_accuracy": self.fix_accuracy,
        }


@dataclass(frozen=True)
class FlightRecord:
    """
    A fully decoded IGC file: session metadata plus the fixes in file order.
    """
    date: datetime.date
    identity: ARecord
    pilot: Optional[str] = None
    copilot: Optional[str] = None
    glider_type: Optional[str] = None
    registration: Optional[str] = None
    callsign: Optional[str] = None
    competition_class: Optional[str] = None
    logger_type: Optional[str] = None
    firmware_version: Optional[str] = None
    hardware_version: Optional[str] = None
    fixes: Tuple[Fix, ...] = ()

    @property
    def duration(self) -> Optional[datetime.timedelta]:
        """Time between the first and the last fix, None without fixes"""
        if not self.fixes:
            return None
        return self.fixes[-1].timestamp - self.fixes[0].timestamp

    def headers(self) -> Dict[str, Optional[str]]:
        """Free-text header values keyed by field name"""
        return {
            "pilot": self.pilot,
            "copilot": self.copilot,
            "glider_type": self.glider_type,
            "registration": self.registration,
            "callsign": self.callsign,
            "competition_class": self.competition_class,
            "logger_type": self.logger_type,
            "firmware_version": self.firmware_version,
            "hardware_version": self.hardware_version,
        }

    def to_dict(self, include_fixes: bool = True) -> Dict[str, Any]:
        """Convert the object to a dictionary"""
        result: Dict[str, Any] = {
            "date": self.date.isoformat(),
            "identity": self.identity.to_dict(),
        }
        result.update(self.headers())
        result["fix_count"] = len(self.fixes)
        if include_fixes:
            result["fixes"] = [fix.to_dict() for fix in self.fixes]
        return result


# Type hint for a declared extension layout
ExtensionSchema = List[ExtensionField]
