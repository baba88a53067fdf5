"""NMEA field conversion utilities.

This module converts individual tokens of an NMEA sentence into typed values.
NMEA fields are comma-separated and may be empty (consecutive commas indicate
missing data). Empty tokens never raise: they decode to ``0`` / ``0.0`` for
numbers and a single space for character fields, so a record always holds a
value of the declared type.

Non-empty tokens that cannot be converted raise ``FormatError``. The error
propagates out of the sentence decoder so that the registry can discard the
whole sentence rather than keep a half-updated record.
"""

import math
import re

# Supported NMEA talker IDs for multi-constellation GNSS receivers.
# Each 2-character prefix identifies the satellite system:
#   GP = GPS (USA)
#   GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)
#   GA = Galileo (Europe)
#   GB = BeiDou (China)
#   GQ = QZSS (Japan)
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")

# Default talker: the registry decodes GPS sentences unless told otherwise
DEFAULT_TALKER_IDS = ("GP",)

SENTENCE_START = "$"
CHECKSUM_SEPARATOR = "*"

# Plain decimal notation only; float() and int() would also take "nan",
# "inf", "1_0" and surrounding whitespace
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class FormatError(ValueError):
    """Raised when a non-empty token is not a valid number.

    Attributes:
        token: The offending token text.
        expected: Name of the target type ("float" or "int").
    """

    def __init__(self, token: str, expected: str) -> None:
        super().__init__(f"could not convert {token!r} to {expected}")
        self.token = token
        self.expected = expected


def to_double(token: str) -> float:
    """Convert a token to float, treating an empty token as 0.0.

    Args:
        token: String value from an NMEA field

    Returns:
        Parsed float value, or 0.0 if the field is empty

    Raises:
        FormatError: If the token is non-empty and not a decimal number

    Example:
        >>> to_double("545.4")
        545.4
        >>> to_double("")
        0.0
    """
    if not token:
        return 0.0
    if _DECIMAL_PATTERN.fullmatch(token) is None:
        raise FormatError(token, "float")
    return float(token)


def to_int(token: str) -> int:
    """Convert a token to int, treating an empty token as 0.

    Similar to ``to_double`` but for integer values like satellite count,
    fix quality or the RMC date.

    Raises:
        FormatError: If the token is non-empty and not an integer
    """
    if not token:
        return 0
    if _INTEGER_PATTERN.fullmatch(token) is None:
        raise FormatError(token, "int")
    return int(token)


def to_char(token: str) -> str:
    """Return the first character of a token, or a space if it is empty."""
    if not token:
        return " "
    return token[0]


def convert_to_decimal_degrees(token: str, hemisphere: str) -> float:
    """Convert an NMEA coordinate (DDDMM.MMMM) to signed decimal degrees.

    The raw value packs whole degrees and decimal minutes into one number,
    so the degrees are the hundreds and above:

        degrees = floor(raw / 100)
        minutes = raw - degrees * 100
        decimal_degrees = degrees + minutes / 60

    Southern latitudes and western longitudes are negative.

    Args:
        token: Coordinate in DDMM.MMMM or DDDMM.MMMM format (e.g., "4807.038")
        hemisphere: Hemisphere indicator token ("N", "S", "E" or "W")

    Returns:
        Decimal degrees, 0.0 for an empty coordinate

    Raises:
        FormatError: If the coordinate token is not a number

    Example:
        >>> convert_to_decimal_degrees("4807.038", "N")
        48.11729999999999
        >>> convert_to_decimal_degrees("01131.000", "W")
        -11.516666666666667
    """
    raw = to_double(token)
    degrees = math.floor(raw / 100.0)
    minutes = (raw - degrees * 100.0) / 60.0
    decimal_degrees = degrees + minutes

    if to_char(hemisphere) in ("S", "W"):
        return -decimal_degrees

    return decimal_degrees


def headers_for(sentence: str, talker_ids: tuple[str, ...]) -> frozenset[str]:
    """Build the header literals of one sentence type for the given talkers.

    Example:
        >>> sorted(headers_for("RMC", ("GP", "GN")))
        ['$GNRMC', '$GPRMC']
    """
    return frozenset(
        f"{SENTENCE_START}{talker_id}{sentence}" for talker_id in talker_ids
    )


def is_checksum_token(token: str) -> bool:
    """Tell a two-digit checksum token from a one-character mode indicator.

    RMC and VTG gained a trailing FAA mode indicator in NMEA 2.3. Both
    layouts are positional, and the checksum is always two characters while
    the mode indicator is always one, which is enough to pick the layout.
    """
    return len(token) == 2
