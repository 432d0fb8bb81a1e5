"""A chat server that relays every text message to all connected clients."""

from __future__ import annotations

import argparse
import asyncio
import collections
import contextlib
import sys
from collections.abc import Awaitable, Iterator

import websockets

WELCOME = "Welcome to chat! Type a message"


class _Subscription:
    """One client's view of the broadcast, holding at most ``capacity`` messages."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._messages: collections.deque[str] = collections.deque()
        self._missed = 0
        self._ready = asyncio.Event()

    def push(self, message: str) -> None:
        if len(self._messages) >= self._capacity:
            self._messages.popleft()
            self._missed += 1
        self._messages.append(message)
        self._ready.set()

    async def recv(self) -> str:
        while not self._messages:
            self._ready.clear()
            await self._ready.wait()
        if self._missed:
            missed, self._missed = self._missed, 0
            raise RuntimeError(f"receiver lagged behind by {missed} messages")
        return self._messages.popleft()


async def _until_first_finishes(*jobs: Awaitable[None]) -> None:
    tasks = [asyncio.ensure_future(job) for job in jobs]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
    for task in done:
        task.result()


class ChatServer:
    """Relays each text message from any client to every connected client."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._subscribers: set[_Subscription] = set()

    @contextlib.contextmanager
    def _subscribe(self) -> Iterator[_Subscription]:
        subscription = _Subscription(self.capacity)
        self._subscribers.add(subscription)
        try:
            yield subscription
        finally:
            self._subscribers.discard(subscription)

    def _broadcast(self, message: str) -> None:
        for subscription in list(self._subscribers):
            subscription.push(message)

    async def _relay_incoming(self, websocket, address) -> None:
        async for message in websocket:
            if isinstance(message, str):
                print(f"From client {address!r} {message!r}")
                self._broadcast(message)

    async def _relay_outgoing(self, websocket, subscription: _Subscription) -> None:
        while True:
            await websocket.send(await subscription.recv())

    async def handle_connection(self, websocket) -> None:
        """Greet a client, then relay messages both ways until it disconnects."""
        address = websocket.remote_address
        print(f"New connection from {address!r}")
        with self._subscribe() as subscription:
            await websocket.send(WELCOME)
            await _until_first_finishes(
                self._relay_incoming(websocket, address),
                self._relay_outgoing(websocket, subscription),
            )

    async def serve(self, host: str = "127.0.0.1", port: int = 2000) -> None:
        """Accept WebSocket connections on ``host``:``port`` until cancelled."""
        async with websockets.serve(self.handle_connection, host, port) as server:
            bound = next(iter(server.sockets)).getsockname()[1]
            print(f"listening on port {bound}")
            await asyncio.Future()


def main(argv: list[str] | None = None) -> int:
    """Run the chat server."""
    parser = argparse.ArgumentParser(description="Run the chat server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=2000)
    args = parser.parse_args(argv)
    try:
        asyncio.run(ChatServer().serve(args.host, args.port))
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())