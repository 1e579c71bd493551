"""
Mock WebSocket for testing.

Records what the feed hub sends and can be told to fail on send.
"""

from typing import Any

import orjson


class MockWebSocket:
    """Stand-in for a connected client socket."""

    def __init__(self, fail_on_send: bool = False) -> None:
        self.fail_on_send = fail_on_send
        self.sent: list[str] = []

    async def send_text(self, data: str) -> None:
        if self.fail_on_send:
            raise RuntimeError("Connection closed")
        self.sent.append(data)

    @property
    def messages(self) -> list[dict[str, Any]]:
        """Sent messages, decoded."""
        return [orjson.loads(m) for m in self.sent]
