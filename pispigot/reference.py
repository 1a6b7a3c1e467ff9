"""
Batch recomputation of π used to validate :class:`pispigot.spigot.PiDigits`.

Unlike the streaming engine this helper starts from scratch on every call and
runs a single loop until it holds enough characters.
"""

from __future__ import annotations

from typing import List


def reference_pi(length: int) -> str:
    """
    Return the first ``length`` characters of π (``"3.14..."``).
    """

    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    result: List[str] = []
    q, r, t, k, n, l = 1, 0, 1, 1, 3, 3
    first = True
    while len(result) < length:
        if 4 * q + r - t < n * t:
            result.append(str(n))
            if first:
                result.append(".")
                first = False
            nr = (r - n * t) * 10
            n = (3 * q + r) * 10 // t - n * 10
            q *= 10
            r = nr
        else:
            nr = (2 * q + r) * l
            nn = (q * k * 7 + 2 + r * l) // (t * l)
            q *= k
            t *= l
            l += 2
            k += 1
            n = nn
            r = nr

    # The point is appended together with the leading digit, so a request
    # for a single character overshoots by one.
    return "".join(result)[:length]
