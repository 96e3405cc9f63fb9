"""Thread drills: shared data sums, timed workers and two senders on one queue."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Protocol, Sequence


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every value congruent to each offset modulo *workers*, one thread per offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


def run_timed_threads(count: int = 10, delay: float = 0.25) -> list[int]:
    """Start *count* threads that each sleep *delay* seconds; return their times in ms."""

    def work(index: int) -> int:
        start = time.monotonic()
        time.sleep(delay)
        print(f"thread {index} is complete")
        return int((time.monotonic() - start) * 1000)

    if count <= 0:
        return []
    with ThreadPoolExecutor(max_workers=count) as pool:
        return list(pool.map(work, range(count)))


class _Sink(Protocol):
    def put(self, item: int) -> None: ...


@dataclass
class Queue:
    """Ten values split into two halves, sent with a pause between each."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])
    delay: float = 1.0


def send_tx(queue: Queue, sink: _Sink) -> list[threading.Thread]:
    """Send both halves of *queue* to *sink* from two threads; return the started threads."""

    def send(values: Sequence[int]) -> None:
        for value in values:
            print(f"sending {value}")
            sink.put(value)
            time.sleep(queue.delay)

    threads = [
        threading.Thread(target=send, args=(tuple(queue.first_half),)),
        threading.Thread(target=send, args=(tuple(queue.second_half),)),
    ]
    for thread in threads:
        thread.start()
    return threads