"""
WebSocket feed rooms.

Clients join or leave the MEV and arbitrage rooms by sending
``{"action": "join-mev-feed"}`` and friends. Nothing in the service
publishes into the rooms yet; ``publish`` exists for whoever does.
"""

import logging
from typing import Any

import orjson
from fastapi import WebSocket, WebSocketDisconnect


logger = logging.getLogger(__name__)


MEV_FEED = "mev-transactions"
ARBITRAGE_FEED = "arbitrage-opportunities"

JOIN_ACTIONS = {
    "join-mev-feed": MEV_FEED,
    "join-arbitrage-feed": ARBITRAGE_FEED,
}
LEAVE_ACTIONS = {
    "leave-mev-feed": MEV_FEED,
    "leave-arbitrage-feed": ARBITRAGE_FEED,
}


def _encode(event_type: str, data: Any) -> str:
    return orjson.dumps({"type": event_type, "data": data}).decode()


class FeedHub:
    """Room registry for connected WebSocket clients."""

    def __init__(self) -> None:
        self._rooms: dict[str, list[WebSocket]] = {MEV_FEED: [], ARBITRAGE_FEED: []}

    @property
    def rooms(self) -> tuple[str, ...]:
        return tuple(self._rooms)

    def members(self, room: str) -> int:
        return len(self._rooms.get(room, ()))

    def join(self, room: str, client: WebSocket) -> None:
        subscribers = self._rooms.setdefault(room, [])
        if client not in subscribers:
            subscribers.append(client)

    def leave(self, room: str, client: WebSocket) -> None:
        subscribers = self._rooms.get(room)
        if subscribers and client in subscribers:
            subscribers.remove(client)

    def leave_all(self, client: WebSocket) -> None:
        for room in self._rooms:
            self.leave(room, client)

    async def publish(self, room: str, event_type: str, data: Any) -> int:
        """
        Send an event to every subscriber of ``room``.

        Subscribers whose send fails are dropped from the room.

        Returns:
            Number of subscribers the event was delivered to.
        """
        subscribers = self._rooms.get(room)
        if not subscribers:
            return 0

        message = _encode(event_type, data)
        delivered = 0
        disconnected = []
        for client in subscribers:
            try:
                await client.send_text(message)
                delivered += 1
            except Exception as e:
                logger.debug(f"Dropping subscriber of {room}: {e}")
                disconnected.append(client)
        for client in disconnected:
            self.leave(room, client)
        return delivered


async def feed_endpoint(websocket: WebSocket) -> None:
    hub: FeedHub = websocket.app.state.services.feeds
    await websocket.accept()
    await websocket.send_text(_encode("init", {"rooms": list(hub.rooms)}))
    logger.info("WebSocket client connected")

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = orjson.loads(raw)
            except orjson.JSONDecodeError:
                await websocket.send_text(_encode("error", {"message": "Invalid JSON"}))
                continue

            action = msg.get("action") if isinstance(msg, dict) else None
            if action in JOIN_ACTIONS:
                room = JOIN_ACTIONS[action]
                hub.join(room, websocket)
                await websocket.send_text(_encode("joined", {"room": room}))
            elif action in LEAVE_ACTIONS:
                room = LEAVE_ACTIONS[action]
                hub.leave(room, websocket)
                await websocket.send_text(_encode("left", {"room": room}))
            else:
                await websocket.send_text(
                    _encode("error", {"message": f"Unknown action: {action}"})
                )
    except WebSocketDisconnect:
        logger.info("WebSocket client disconnected")
    finally:
        hub.leave_all(websocket)
