#!/usr/bin/env python3

"""Candidate pool with the index of the currently published address.

Provides the selector that tracks which address of an ordered, immutable
pool is published in DNS and which candidate comes next.
"""

from typing import Iterable, Tuple


class FailoverSelector:
    """Ordered candidate pool and index of the published address."""

    @property
    def ips(self) -> Tuple[str, ...]:
        """Get the candidate pool."""
        return self._ips

    @property
    def current_index(self) -> int:
        """Get the index of the published address."""
        return self._current_index

    @property
    def current_ip(self) -> str:
        """Get the published address."""
        return self._ips[self._current_index]

    @property
    def next_index(self) -> int:
        """Get the index of the following candidate, wrapping around the pool."""
        return (self._current_index + 1) % len(self._ips)

    @property
    def next_ip(self) -> str:
        """Get the following candidate."""
        return self._ips[self.next_index]

    def __init__(self, ips: Iterable[str]):
        """Initialize selector on the first address of the pool."""
        self._ips = tuple(ips)
        if not self._ips:
            raise ValueError("Candidate pool cannot be empty")

        self._current_index = 0

    def advance(self):
        """Make the following candidate the published address."""
        self._current_index = self.next_index

    def __repr__(self):
        return (
            f"FailoverSelector(ips={list(self._ips)}, "
            f"current_index={self._current_index})"
        )
