"""Background NMEA reading loop and the latest-snapshot store."""

import asyncio
import logging
import threading

from navstream.gnss import GNSSSnapshot, NMEAReader
from server.broadcaster import Broadcaster
from server.formatters import format_snapshot_messages

__all__ = ["SnapshotStore", "run_gnss_loop"]

logger = logging.getLogger(__name__)


class SnapshotStore:
    """Latest snapshot, written by the reader thread and read by requests."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._snapshot: GNSSSnapshot | None = None

    def update(self, snapshot: GNSSSnapshot) -> None:
        with self._lock:
            self._snapshot = snapshot

    def latest(self) -> GNSSSnapshot | None:
        with self._lock:
            return self._snapshot


def run_gnss_loop(
    loop: asyncio.AbstractEventLoop,
    gnss: NMEAReader,
    broadcaster: Broadcaster,
    store: SnapshotStore,
) -> None:
    """Read snapshots continuously, store the latest and broadcast fresh records.

    The caller owns *gnss* and must use it as an open context manager. The
    loop exits when ``gnss.cancel()`` is called, which causes the underlying
    ``NMEAReader.read()`` to raise ``EOFError``.

    Args:
        loop: Running asyncio event loop to broadcast messages on.
        gnss: An open ``NMEAReader`` instance managed by the caller.
        broadcaster: Channel to publish one message per fresh record to.
        store: Receives every snapshot for the REST endpoints.
    """
    try:
        for snapshot in gnss:
            store.update(snapshot)
            for message in format_snapshot_messages(snapshot):
                broadcaster.publish(message, loop)
    except EOFError as e:
        logger.info("NMEA reading loop stopped: %s", e)
