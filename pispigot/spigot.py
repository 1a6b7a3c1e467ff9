"""
Streaming spigot for the decimal digits of π.

The engine follows Gibbons' unbounded spigot: the state ``(q, r, t, k, n, l)``
describes a linear fractional transformation that brackets π.  Each call to
``next()`` folds in further series terms until the bracket pins down the next
decimal digit, emits it, and magnifies the remaining window by 10.  Python's
``int`` supplies the unbounded arithmetic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

LOG = logging.getLogger(__name__)

DECIMAL_POINT = "."


@dataclass(frozen=True, slots=True)
class SpigotSnapshot:
    """
    Immutable view of the engine state between two requests.
    """

    q: int
    r: int
    t: int
    k: int
    n: int
    l: int
    emitted_leading_digit: bool
    emitted_decimal_point: bool
    position: int
    refinements: int

    def to_dict(self) -> dict:
        # Unbounded values; serialised as decimal strings.
        return {
            "q": str(self.q),
            "r": str(self.r),
            "t": str(self.t),
            "k": str(self.k),
            "n": str(self.n),
            "l": str(self.l),
            "emittedLeadingDigit": bool(self.emitted_leading_digit),
            "emittedDecimalPoint": bool(self.emitted_decimal_point),
            "position": int(self.position),
            "refinements": int(self.refinements),
        }


class PiDigits(Iterator[str]):
    """
    Infinite iterator over the characters of π: ``"3"``, ``"."``, then the
    fractional digits.

    Instances are not restartable; build a new one to start over.  An instance
    carries mutable state and must not be advanced from more than one consumer
    at a time.
    """

    def __init__(self) -> None:
        self._q = 1
        self._r = 0
        self._t = 1
        self._k = 1
        self._n = 3
        self._l = 3
        self._emitted_leading_digit = False
        self._emitted_decimal_point = False
        self._position = 0
        self._refinements = 0

    # ------------------------------------------------------------------ helpers

    def _digit_certified(self) -> bool:
        return 4 * self._q + self._r - self._t < self._n * self._t

    def _refine(self) -> None:
        q, r, t, k, l = self._q, self._r, self._t, self._k, self._l
        nr = (2 * q + r) * l
        nn = (7 * k * q + 2 + r * l) // (t * l)
        self._q = q * k
        self._t = t * l
        self._l = l + 2
        self._k = k + 1
        self._n = nn
        self._r = nr
        self._refinements += 1

    def _extract(self) -> int:
        digit = self._n
        q, r, t = self._q, self._r, self._t
        nr = (r - digit * t) * 10
        self._n = (3 * q + r) * 10 // t - digit * 10
        self._q = q * 10
        self._r = nr
        return digit

    # ------------------------------------------------------------------ public API

    def __iter__(self) -> PiDigits:
        return self

    def __next__(self) -> str:
        if self._emitted_leading_digit and not self._emitted_decimal_point:
            self._emitted_decimal_point = True
            self._position += 1
            return DECIMAL_POINT

        while not self._digit_certified():
            self._refine()

        digit = self._extract()
        self._emitted_leading_digit = True
        self._position += 1
        LOG.debug("Certified digit %d at position %d", digit, self._position)
        return str(digit)

    @property
    def position(self) -> int:
        """Number of characters emitted so far."""
        return self._position

    def snapshot(self) -> SpigotSnapshot:
        return SpigotSnapshot(
            q=self._q,
            r=self._r,
            t=self._t,
            k=self._k,
            n=self._n,
            l=self._l,
            emitted_leading_digit=self._emitted_leading_digit,
            emitted_decimal_point=self._emitted_decimal_point,
            position=self._position,
            refinements=self._refinements,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._position}, "
            f"emitted_leading_digit={self._emitted_leading_digit}, "
            f"emitted_decimal_point={self._emitted_decimal_point})"
        )
