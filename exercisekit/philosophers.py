"""Dining philosophers sharing chopsticks between threads."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

PHILOSOPHERS = ("Socrates", "Hypatia", "Plato", "Aristotle", "Pythagoras")

_THOUGHT_CAPACITY = 10
_DONE = object()


@dataclass(eq=False)
class Philosopher:
    """A philosopher who alternately eats with two chopsticks and has ideas."""

    name: str
    left_chopstick: threading.Lock
    right_chopstick: threading.Lock
    thoughts: queue.Queue
    eat_time: float = 0.01

    def think(self) -> None:
        """Share a new idea on the thoughts queue."""
        self.thoughts.put(f"Eureka! {self.name} has a new idea!")

    def eat(self) -> None:
        """Pick up both chopsticks, eat for a moment and put them down."""
        print(f"{self.name} is trying to eat")
        with self.left_chopstick, self.right_chopstick:
            print(f"{self.name} is eating...")
            time.sleep(self.eat_time)


def _chopsticks_for(seat: int, chopsticks: Sequence[threading.Lock]):
    left = chopsticks[seat]
    right = chopsticks[(seat + 1) % len(chopsticks)]
    # The last philosopher picks up the other chopstick first; breaking the
    # symmetry this way rules out a deadlock.
    if seat == len(chopsticks) - 1:
        left, right = right, left
    return left, right


def dine(names: Iterable[str] = PHILOSOPHERS, rounds: int = 100) -> Iterator[str]:
    """Seat the philosophers around a table and yield their thoughts.

    Each philosopher eats and then thinks ``rounds`` times in a thread of its
    own. The iterator ends once every philosopher has finished.
    """
    seated = list(names)
    if len(seated) < 2:
        raise ValueError("at least two philosophers are needed to share chopsticks")
    thoughts: queue.Queue = queue.Queue(maxsize=_THOUGHT_CAPACITY)
    chopsticks = [threading.Lock() for _ in seated]
    philosophers = [
        Philosopher(name, *_chopsticks_for(seat, chopsticks), thoughts)
        for seat, name in enumerate(seated)
    ]
    return _gather(philosophers, rounds, thoughts)


def _gather(
    philosophers: list[Philosopher], rounds: int, thoughts: queue.Queue
) -> Iterator[str]:
    errors: list[BaseException] = []

    def live(philosopher: Philosopher) -> None:
        try:
            for _ in range(rounds):
                philosopher.eat()
                philosopher.think()
        except BaseException as exc:
            errors.append(exc)
        finally:
            thoughts.put(_DONE)

    threads = [
        threading.Thread(target=live, args=(philosopher,), daemon=True)
        for philosopher in philosophers
    ]
    for thread in threads:
        thread.start()

    remaining = len(threads)
    while remaining:
        item = thoughts.get()
        if item is _DONE:
            remaining -= 1
            continue
        yield item

    for thread in threads:
        thread.join()
    if errors:
        raise errors[0]


def main(argv: list[str] | None = None) -> int:
    """Let five philosophers dine and print their thoughts."""
    for thought in dine(PHILOSOPHERS, 100):
        print(thought)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())