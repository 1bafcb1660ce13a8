"""Number-theory contest problems: square roots, cycles and quadratics."""

import math


def brightness_begins(k: int) -> int:
    """Return the smallest n leaving exactly ``k`` bulbs on after the flipping game.

    Bulbs left on number n - isqrt(n); the search runs over 1..2k and yields 0
    when nothing qualifies.
    """
    low, high, answer = 1, 2 * k, 0
    while low <= high:
        mid = (low + high) // 2
        if mid - math.isqrt(mid) >= k:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def journey_day(n: int, a: int, b: int, c: int) -> int:
    """Return the day on which walking a, b, c km in turn totals at least ``n`` km."""
    cycle = a + b + c
    full, rest = divmod(n, cycle)
    days = full * 3
    if rest == 0:
        return days
    if rest <= a:
        return days + 1
    if rest <= a + b:
        return days + 2
    return days + 3


def meme_problem(d: int) -> tuple[float, float] | None:
    """Return non-negative a, b with a + b = d and a * b = d, or ``None`` if impossible."""
    if 0 < d < 4:
        return None
    a = (d + math.sqrt(d * d - 4 * d)) / 2
    return a, d - a


def is_perfect_square(m: int) -> bool:
    """Tell whether ``m`` is the square of an integer."""
    if m < 0:
        return False
    root = math.isqrt(m)
    return root * root == m


def square_year(n: int) -> tuple[int, int] | None:
    """Return (0, root) for a perfect square ``n``, else ``None``."""
    if not is_perfect_square(n):
        return None
    return 0, math.isqrt(n)