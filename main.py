"""Print live fixes decoded from an NMEA receiver on a serial port.

Usage::

    python main.py --port /dev/ttyUSB0 --baudrate 9600
    python main.py --list-ports
"""

import argparse
import logging
import sys

from navstream import __version__
from navstream.gnss import STANDARD_BAUDRATES, GNSSSnapshot, NMEAReader, list_ports

logger = logging.getLogger("navstream")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode NMEA 0183 from a serial port.")
    parser.add_argument("--port", default="/dev/ttyUSB0", help="serial device")
    parser.add_argument(
        "--baudrate", type=int, default=9600, choices=STANDARD_BAUDRATES,
        help="line speed in baud",
    )
    parser.add_argument(
        "--talkers", default="GP",
        help="comma-separated talker IDs to decode, e.g. GP,GN",
    )
    parser.add_argument("--list-ports", action="store_true", help="list serial ports and exit")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _describe(snapshot: GNSSSnapshot) -> str:
    rmc, gga, gsv = snapshot.rmc, snapshot.gga, snapshot.gsv
    return (
        f"{rmc.time or gga.time:>10} | status {rmc.status} | "
        f"lat {gga.latitude or rmc.latitude:10.5f} lon {gga.longitude or rmc.longitude:11.5f} | "
        f"alt {gga.altitude:7.1f}{gga.altitude_unit} | "
        f"sats {gga.satellite_count:2d}/{gsv.satellites_in_view:2d} | "
        f"{rmc.speed_knots:5.1f} kn {rmc.course:5.1f} deg"
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list_ports:
        for port in list_ports():
            print(port)
        return 0

    talker_ids = tuple(talker.strip() for talker in args.talkers.split(",") if talker.strip())
    try:
        with NMEAReader(args.port, args.baudrate, talker_ids=talker_ids) as gnss:
            for snapshot in gnss:
                if "RMC" in snapshot.updated or "GGA" in snapshot.updated:
                    print(_describe(snapshot))
    except EOFError as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        print("\nStopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
