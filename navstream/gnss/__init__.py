"""GNSS module for reading and decoding NMEA 0183 data from a serial port."""

from navstream.gnss.reader import STANDARD_BAUDRATES, NMEAReader, list_ports
from navstream.gnss.types import GNSSSnapshot

__all__ = ["STANDARD_BAUDRATES", "GNSSSnapshot", "NMEAReader", "list_ports"]
