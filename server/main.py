"""FastAPI web server streaming decoded NMEA records.

Start with::

    NAVSTREAM_PORT=/dev/ttyUSB0 uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive one JSON
message per freshly decoded record, e.g. ``{"type": "rmc", ...}`` whenever
an RMC sentence arrives. ``GET /records/{type}`` returns the latest copy of
one record and ``GET /headers`` lists every sentence header seen so far.

Configuration is read from the environment at import time:

    NAVSTREAM_PORT      serial device (default ``/dev/ttyUSB0``)
    NAVSTREAM_BAUDRATE  line speed (default ``9600``)
    NAVSTREAM_TALKERS   comma-separated talker IDs to decode (default ``GP``)
"""

import asyncio
import os
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, WebSocket, WebSocketDisconnect

from navstream.gnss import GNSSSnapshot, NMEAReader
from navstream.nmea.types import SentenceType
from server.broadcaster import Broadcaster
from server.formatters import record_to_dict
from server.stream import SnapshotStore, run_gnss_loop

_PORT = os.environ.get("NAVSTREAM_PORT", "/dev/ttyUSB0")
_BAUDRATE = int(os.environ.get("NAVSTREAM_BAUDRATE", "9600"))
_TALKER_IDS = tuple(
    talker.strip()
    for talker in os.environ.get("NAVSTREAM_TALKERS", "GP").split(",")
    if talker.strip()
)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    broadcaster = Broadcaster(_QUEUE_MAX_SIZE)
    store = SnapshotStore()
    application.state.broadcaster = broadcaster
    application.state.store = store

    executor = ThreadPoolExecutor(max_workers=1)
    with NMEAReader(_PORT, _BAUDRATE, talker_ids=_TALKER_IDS) as gnss:
        loop.run_in_executor(executor, run_gnss_loop, loop, gnss, broadcaster, store)
        yield
        gnss.cancel()
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


def _latest_snapshot(request: Request) -> GNSSSnapshot:
    snapshot = request.app.state.store.latest()
    if snapshot is None:
        raise HTTPException(status_code=503, detail="No sentence decoded yet.")
    return snapshot


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded records as JSON messages to a connected client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall the reader thread. The connection closes and the client
    should reconnect if no message arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    broadcaster: Broadcaster = websocket.app.state.broadcaster
    # Subscribe before accepting so no message published after the
    # handshake is missed
    queue = broadcaster.subscribe()
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        broadcaster.unsubscribe(queue)


@app.get("/headers")
def get_headers(request: Request) -> dict:
    """List every distinct sentence header seen, in first-seen order."""
    snapshot = request.app.state.store.latest()
    return {"headers": snapshot.headers if snapshot is not None else []}


@app.get("/records/{name}")
def get_record(name: str, request: Request) -> dict:
    """Return the latest copy of one record ("rmc", "gga", "gsa", "gsv", "vtg")."""
    try:
        sentence_type = SentenceType(name.upper())
    except ValueError as e:
        raise HTTPException(status_code=404, detail=f"Unknown sentence {name!r}.") from e
    snapshot = _latest_snapshot(request)
    return record_to_dict(sentence_type, getattr(snapshot, sentence_type.value.lower()))
