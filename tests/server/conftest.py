"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from navstream.gnss import GNSSSnapshot


class ControlledNMEAReader:
    """Stands in for ``NMEAReader``; yields whatever the test queues."""

    def __init__(self) -> None:
        self.message_queue: queue.Queue[GNSSSnapshot | None] = queue.Queue()
        self.cancelled = False

    def __enter__(self) -> "ControlledNMEAReader":
        return self

    def __exit__(self, *_: object) -> None:
        pass

    def cancel(self) -> None:
        self.cancelled = True
        self.message_queue.put(None)

    def __iter__(self) -> Iterator[GNSSSnapshot]:
        while True:
            item = self.message_queue.get()
            if item is None:
                break
            yield item


@pytest.fixture(autouse=True)
def gnss_controller() -> Iterator[ControlledNMEAReader]:
    controller = ControlledNMEAReader()
    with patch("server.main.NMEAReader", return_value=controller):
        yield controller
    controller.message_queue.put(None)
