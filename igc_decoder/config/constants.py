"""
Constants for IGC Decoder.
These are fixed values that don't change during decoding.
"""

# Record type tags (first character of a line)
RECORD_IDENTITY = 'A'
RECORD_FIX = 'B'
RECORD_HEADER = 'H'
RECORD_EXTENSIONS = 'I'

# Header sub-type codes (columns 3-5 of an H record)
HEADER_DATE = 'DTE'
HEADER_PILOT = 'PLT'
HEADER_COPILOT = 'CM2'
HEADER_GLIDER_TYPE = 'GTY'
HEADER_REGISTRATION = 'GID'
HEADER_CALLSIGN = 'CID'
HEADER_COMPETITION_CLASS = 'CCL'
HEADER_LOGGER_TYPE = 'FTY'
HEADER_FIRMWARE_VERSION = 'RFW'
HEADER_HARDWARE_VERSION = 'RHW'

# Text headers and the FlightRecord field each one fills
TEXT_HEADER_FIELDS = {
    HEADER_PILOT: 'pilot',
    HEADER_COPILOT: 'copilot',
    HEADER_GLIDER_TYPE: 'glider_type',
    HEADER_REGISTRATION: 'registration',
    HEADER_CALLSIGN: 'callsign',
    HEADER_COMPETITION_CLASS: 'competition_class',
    HEADER_LOGGER_TYPE: 'logger_type',
    HEADER_FIRMWARE_VERSION: 'firmware_version',
    HEADER_HARDWARE_VERSION: 'hardware_version',
}

# A record markers
FLIGHT_NUMBER_MARKER = 'FLIGHT:'
MANUFACTURER_CODE_LENGTH = 3
MIN_LOGGER_ID_LENGTH = 3

# Date header
DATE_LONG_PREFIX = 'DATE:'
LAST_CENTURY_YEAR_DIGITS = ('8', '9')

# B record layout (0-based, end exclusive)
FIX_TIME = slice(1, 7)
FIX_LAT_DEGREES = slice(7, 9)
FIX_LAT_MINUTES = slice(9, 11)
FIX_LAT_DECIMALS = slice(11, 14)
FIX_LAT_HEMISPHERE = 14
FIX_LON_DEGREES = slice(15, 18)
FIX_LON_MINUTES = slice(18, 20)
FIX_LON_DECIMALS = slice(20, 23)
FIX_LON_HEMISPHERE = 23
FIX_VALIDITY = 24
FIX_PRESSURE_ALT = slice(25, 30)
FIX_GPS_ALT = slice(30, 35)
FIX_MIN_LENGTH = 35
FIX_VALID_CODE = 'A'
ALTITUDE_NOT_REPORTED = '00000'

# I record layout
EXTENSION_COUNT = slice(1, 3)
EXTENSION_HEADER_LENGTH = 3
EXTENSION_GROUP_LENGTH = 7

# Extension codes with typed accessors
EXTENSION_ENGINE_NOISE = 'ENL'
EXTENSION_FIX_ACCURACY = 'FXA'

# Decoding policy defaults
DEFAULT_ROLLOVER_TOLERANCE_SECONDS = 3600
DEFAULT_TEXT_UNDERSCORE_REPLACEMENT = ' '
DEFAULT_REGISTRATION_UNDERSCORE_REPLACEMENT = '-'
DEFAULT_ENCODING = 'utf-8'
DEFAULT_ENCODING_ERRORS = 'replace'

# IGC file related constants
IGC_EXTENSIONS = ('.igc', '.IGC')

# Application information
APP_NAME = "IGC Decoder"
APP_VERSION = "1.0.0"
APP_AUTHOR = "Juan Luis Gabriel"
APP_LICENSE = "MIT License"
APP_DESCRIPTION = "Decode IGC flight recorder logs into structured flight records"
