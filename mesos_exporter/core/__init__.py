"""
Core Module - Configuration, Settings and Errors
"""
from .config import BASE_DIR, Settings, settings
from .exceptions import DecodeError, ExporterError, RangeDecodeError, TransportError

__all__ = [
    "BASE_DIR",
    "Settings",
    "settings",
    "ExporterError",
    "TransportError",
    "DecodeError",
    "RangeDecodeError",
]
