from __future__ import annotations


class Counter:
    def __init__(self) -> None:
        self.value = 0

    def inc(self, n: int = 1) -> None:
        self.value += n


files_registered_total = Counter()
lookups_total = Counter()
lookup_misses_total = Counter()
