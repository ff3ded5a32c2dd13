"""Test doubles shared across the test suite."""

from __future__ import annotations

from uuid import UUID


class SequentialIdFactory:
    """Hands out predictable UUIDs: 00000000-...-000000000001, ...0002, ..."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self.issued: list[UUID] = []

    def __call__(self) -> UUID:
        new_id = UUID(int=self._next)
        self._next += 1
        self.issued.append(new_id)
        return new_id
