"""Helper factories for server tests."""

from navstream.gnss import GNSSSnapshot
from navstream.nmea.types import (
    GGAData,
    GSAData,
    GSVData,
    RMCData,
    SatelliteInView,
    VTGData,
)


def make_rmc() -> RMCData:
    return RMCData(
        type="$GPRMC",
        time="123519",
        status="A",
        latitude=48.1173,
        longitude=11.516667,
        speed_knots=22.4,
        course=84.4,
        date=230394,
        magnetic_variation=-3.1,
        checksum="*6A",
    )


def make_gsv() -> GSVData:
    return GSVData(
        type="$GPGSV",
        total_messages=1,
        message_number=1,
        satellites_in_view=2,
        satellites=[
            SatelliteInView(prn=5, elevation=45, azimuth=90, snr=40),
            SatelliteInView(prn=7, elevation=12, azimuth=300, snr=33),
            SatelliteInView(),
            SatelliteInView(),
        ],
        checksum="*7C",
    )


def make_snapshot(updated: tuple[str, ...] = ("RMC",)) -> GNSSSnapshot:
    return GNSSSnapshot(
        rmc=make_rmc(),
        gga=GGAData(),
        gsa=GSAData(),
        gsv=make_gsv(),
        vtg=VTGData(),
        headers=["$GPRMC", "$GPGSV", "$GPTXT"],
        updated=list(updated),
    )
