"""
Core package for IGC Decoder.
Contains the line dispatcher and the decode state of one file.
"""

from .decoder import FlightDecoder, create_decoder, decode_lines, parse

__all__ = [
    'FlightDecoder',
    'create_decoder',
    'decode_lines',
    'parse'
]
