# igc_decoder/config/manufacturers.py

"""
This module defines the flight recorder manufacturers known to the decoder.

The three-character codes are the ones used in the A record of IGC files.
The table is the default manufacturer lookup; decoders accept any other
callable with the same signature.
"""

# Dictionary of IGC-approved manufacturer codes
MANUFACTURERS = {
    "ACT": "Aircotec",
    "CAM": "Cambridge Aero Instruments",
    "CNI": "ClearNav Instruments",
    "DSX": "Data Swan/DSX",
    "EWA": "EW Avionics",
    "FIL": "Filser",
    "FLA": "FLARM",
    "FLY": "Flytech",
    "GCS": "Garrecht",
    "IMI": "IMI Gliding Equipment",
    "LGS": "Logstream",
    "LXN": "LX Navigation",
    "LXV": "LXNAV",
    "NAV": "Naviter",
    "NKL": "Nielsen Kellerman",
    "NTE": "New Technologies",
    "PES": "Peschges",
    "PFE": "PressFinish Electronics",
    "PRT": "Print Technik",
    "SCH": "Scheffel",
    "SDI": "Streamline Data Instruments",
    "TRI": "Triadis Engineering",
    "WES": "Westerboer",
    "XCS": "XCSoar",
    "XCT": "XCTrack",
    "ZAN": "Zander",
}


def get_manufacturer_codes():
    """Returns a list of the known manufacturer codes sorted alphabetically."""
    return sorted(MANUFACTURERS.keys())


def lookup_manufacturer(code):
    """
    Resolves a manufacturer code to the manufacturer name.

    Args:
        code (str): Three-character code from the A record

    Returns:
        str: Manufacturer name, or the code itself if it is not known
    """
    return MANUFACTURERS.get(code.upper(), code)


def add_custom_manufacturer(code, name):
    """
    Adds a manufacturer that is not in the official list.

    Args:
        code (str): Three-character manufacturer code
        name (str): Manufacturer name

    Returns:
        bool: True if added successfully, False if it already existed
    """
    code = code.upper()
    if code in MANUFACTURERS:
        return False

    MANUFACTURERS[code] = name
    return True
