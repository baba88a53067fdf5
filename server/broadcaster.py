"""Publish/subscribe channel fanning decoded records out to WebSocket clients."""

import asyncio

__all__ = ["Broadcaster"]


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


class Broadcaster:
    """Holds one bounded queue per subscriber.

    ``publish`` may be called from the reader thread; delivery is scheduled
    on the event loop. A full queue drops its oldest message so that a slow
    client never stalls the reader.

    Args:
        max_queue_size: Capacity of each subscriber queue.
    """

    def __init__(self, max_queue_size: int) -> None:
        self._max_queue_size = max_queue_size
        self._subscriber_queues: list[asyncio.Queue[str]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriber_queues)

    def subscribe(self) -> asyncio.Queue[str]:
        """Create and register a new subscriber queue."""
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=self._max_queue_size)
        self._subscriber_queues.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        self._subscriber_queues.remove(queue)

    def publish(self, message: str, loop: asyncio.AbstractEventLoop) -> None:
        """Dispatch a message to all subscriber queues, thread-safely."""
        for queue in list(self._subscriber_queues):
            loop.call_soon_threadsafe(_enqueue_message, queue, message)
