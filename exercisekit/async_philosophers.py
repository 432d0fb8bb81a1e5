"""Dining philosophers sharing chopsticks between asyncio tasks."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterable, Sequence
from dataclasses import dataclass

# With five philosophers the event loop never deadlocks, so seat two.
PHILOSOPHERS = ("Socrates", "Hypatia")

_THOUGHT_CAPACITY = 10


@dataclass(eq=False)
class AsyncPhilosopher:
    """A philosopher task that alternately has ideas and eats."""

    name: str
    left_chopstick: asyncio.Lock
    right_chopstick: asyncio.Lock
    thoughts: asyncio.Queue
    eat_time: float = 0.005

    async def think(self) -> None:
        """Share a new idea on the thoughts queue."""
        await self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    async def eat(self) -> None:
        """Pick up both chopsticks, eat for a moment and put them down."""
        async with self.left_chopstick, self.right_chopstick:
            print(f"{self.name} is eating...")
            await asyncio.sleep(self.eat_time)


def _chopsticks_for(seat: int, chopsticks: Sequence[asyncio.Lock]):
    left = chopsticks[seat]
    right = chopsticks[(seat + 1) % len(chopsticks)]
    if seat == len(chopsticks) - 1:
        left, right = right, left
    return left, right


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> AsyncIterator[str]:
    """Run the philosophers as tasks and asynchronously yield their thoughts.

    Each philosopher thinks and then eats ``rounds`` times. The iterator ends
    once every philosopher has finished.
    """
    seated = list(names)
    if len(seated) < 2:
        raise ValueError("at least two philosophers are needed to share chopsticks")
    return _feast(seated, rounds)


async def _feast(names: list[str], rounds: int) -> AsyncIterator[str]:
    thoughts: asyncio.Queue = asyncio.Queue(maxsize=_THOUGHT_CAPACITY)
    chopsticks = [asyncio.Lock() for _ in names]
    philosophers = [
        AsyncPhilosopher(name, *_chopsticks_for(seat, chopsticks), thoughts)
        for seat, name in enumerate(names)
    ]

    async def live(philosopher: AsyncPhilosopher) -> None:
        for _ in range(rounds):
            await philosopher.think()
            await philosopher.eat()

    tasks = [asyncio.create_task(live(philosopher)) for philosopher in philosophers]
    finished = asyncio.gather(*tasks)
    try:
        while True:
            getter = asyncio.ensure_future(thoughts.get())
            await asyncio.wait({getter, finished}, return_when=asyncio.FIRST_COMPLETED)
            if getter.done():
                yield getter.result()
                continue
            getter.cancel()
            break
        while not thoughts.empty():
            yield thoughts.get_nowait()
        await finished
    finally:
        for task in tasks:
            task.cancel()


async def _announce(names: Iterable[str], rounds: int) -> None:
    async for thought in dine(names, rounds):
        print(f"Here is a thought: {thought}")


def main(argv: list[str] | None = None) -> int:
    """Let the philosophers dine and print their thoughts."""
    asyncio.run(_announce(PHILOSOPHERS, 100))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())