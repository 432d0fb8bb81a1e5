"""A chat client that sends input lines and prints what the server says."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Iterable
from typing import TextIO, Union

import websockets
from websockets.exceptions import WebSocketException

Lines = Union[AsyncIterable[str], Iterable[str]]


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


async def _as_async(lines: Lines) -> AsyncIterator[str]:
    if hasattr(lines, "__aiter__"):
        async for line in lines:
            yield line
    else:
        for line in lines:
            yield line


async def _receive(websocket, output: TextIO) -> None:
    async for message in websocket:
        if isinstance(message, str):
            print(f"From server: {message}", file=output, flush=True)


async def _send(websocket, lines: Lines) -> None:
    async for line in _as_async(lines):
        await websocket.send(line)


async def run_client(uri: str, lines: Lines, output: TextIO | None = None) -> None:
    """Send each of ``lines`` to the server at ``uri`` while printing its messages.

    Returns when the lines run out or the server closes the connection.
    """
    out = sys.stdout if output is None else output
    async with websockets.connect(uri) as websocket:
        await _until_first_finishes(_receive(websocket, out), _send(websocket, lines))


async def _stdin_lines() -> AsyncIterator[str]:
    loop = asyncio.get_running_loop()
    incoming: asyncio.Queue = asyncio.Queue()

    def pump() -> None:
        try:
            for line in sys.stdin:
                loop.call_soon_threadsafe(incoming.put_nowait, line)
            loop.call_soon_threadsafe(incoming.put_nowait, None)
        except RuntimeError:
            return  # the event loop has already closed

    threading.Thread(target=pump, daemon=True).start()
    while (line := await incoming.get()) is not None:
        yield line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Chat with the server, reading messages from standard input."""
    parser = argparse.ArgumentParser(description="Chat with the chat server.")
    parser.add_argument("uri", nargs="?", default="ws://127.0.0.1:2000")
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri, _stdin_lines()))
    except KeyboardInterrupt:
        return 0
    except (OSError, WebSocketException) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())