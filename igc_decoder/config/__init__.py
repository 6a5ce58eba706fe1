"""
Configuration package for IGC Decoder.
Contains settings, constants and the manufacturer table used across the decoder.
"""

from .constants import *
from .settings import settings, Settings
from .manufacturers import lookup_manufacturer

__all__ = ['settings', 'Settings', 'lookup_manufacturer']
