"""
Client variants for the Busylight HTTP server.
"""
from .base import BaseLight, BusylightError
from .busylight import Busylight
from .voidlight import Voidlight

__all__ = ["BaseLight", "BusylightError", "Busylight", "Voidlight"]
