"""
IGC export module for IGC Decoder.
Writes a decoded flight back out as a normalised IGC file using the
aerofiles library.
"""

import logging
from typing import BinaryIO, Dict, List, Optional, Tuple

from aerofiles.igc import Writer

from ..data.models import FlightRecord, Fix

# Configure logger
logger = logging.getLogger("igc_decoder.io.igc")


class IGCExporter:
    """
    Writes FlightRecord objects as IGC files.
    Uses aerofiles library for IGC format compliance.
    """

    def write(self, flight: FlightRecord, fp: BinaryIO) -> int:
        """
        Write a flight to a binary file object.

        Args:
            flight: The decoded flight
            fp: File object opened in binary mode (required by aerofiles)

        Returns:
            int: Number of B records written
        """
        writer = Writer(fp)

        self._write_header(writer, flight)

        declared: List[Tuple[str, int]] = []
        for fix_extensions, fixes in self._extension_runs(flight.fixes):
            # Each change of layout gets its own I record
            if fix_extensions != declared:
                writer.write_fix_extensions(fix_extensions)
                declared = fix_extensions

            for fix in fixes:
                writer.write_fix(
                    time=fix.timestamp.time(),
                    latitude=fix.latitude,
                    longitude=fix.longitude,
                    valid=fix.valid,
                    pressure_alt=fix.pressure_altitude or 0,
                    gps_alt=fix.gps_altitude or 0,
                    extensions=self._extension_values(fix, fix_extensions) if fix_extensions else None,
                )

        return len(flight.fixes)

    @staticmethod
    def _write_header(writer: Writer, flight: FlightRecord) -> None:
        """Write the A record, the date and every present text header"""
        identity = flight.identity

        extension = None
        if identity.flight_number is not None:
            extension = f"FLIGHT:{identity.flight_number}"
        elif identity.additional_data:
            extension = f":{identity.additional_data}"

        writer.write_logger_id(identity.manufacturer_code, identity.logger_id,
                               extension=extension, validate=False)
        writer.write_date(flight.date)

        header_writers = [
            (flight.pilot, writer.write_pilot),
            (flight.copilot, writer.write_copilot),
            (flight.glider_type, writer.write_glider_type),
            (flight.registration, writer.write_glider_id),
            (flight.callsign, writer.write_competition_id),
            (flight.competition_class, writer.write_competition_class),
            (flight.logger_type, writer.write_logger_type),
            (flight.firmware_version, writer.write_firmware_version),
            (flight.hardware_version, writer.write_hardware_version),
        ]
        for value, write_header in header_writers:
            if value is not None:
                write_header(value)

    @staticmethod
    def _extension_runs(fixes: Tuple[Fix, ...]) -> List[Tuple[List[Tuple[str, int]], List[Fix]]]:
        """
        Split the fixes into runs that share the same extension codes.

        Returns:
            List of ((code, length) declaration, fixes) in file order; each
            length is the longest raw value seen for that code in the run
        """
        runs: List[Tuple[List[str], List[Fix]]] = []
        for fix in fixes:
            codes = list(fix.extensions.keys())
            if runs and runs[-1][0] == codes:
                runs[-1][1].append(fix)
            else:
                runs.append((codes, [fix]))

        result = []
        for codes, run in runs:
            lengths: Dict[str, int] = {code: 1 for code in codes}
            for fix in run:
                for code in codes:
                    lengths[code] = max(lengths[code], len(fix.extensions[code]))
            result.append(([(code, lengths[code]) for code in codes], run))
        return result

    @staticmethod
    def _extension_values(fix: Fix, fix_extensions: List[Tuple[str, int]]) -> List[str]:
        """Raw values, space-padded to the declared length"""
        return [fix.extensions.get(code, '').ljust(length) for code, length in fix_extensions]


def export_flight(flight: FlightRecord, filepath: str, exporter: Optional[IGCExporter] = None) -> int:
    """
    Write a decoded flight to an IGC file.

    Args:
        flight: The decoded flight
        filepath: Destination path, overwritten if it exists
        exporter: Exporter to use (default: a new IGCExporter)

    Returns:
        int: Number of B records written

    Raises:
        OSError: If the file can't be written
    """
    exporter = exporter or IGCExporter()
    with open(filepath, 'wb') as fp:
        count = exporter.write(flight, fp)

    logger.info(f"Exported {count} fixes to {filepath}")
    return count
