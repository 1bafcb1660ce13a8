"""Introductory contest problems: grids, digits, strings and sliding windows."""

from collections import deque
from collections.abc import Iterable, Sequence

MATRIX_SIZE = 5
_CENTER = MATRIX_SIZE // 2


def beautiful_matrix_moves(matrix: Sequence[Sequence[int]]) -> int:
    """Return how many adjacent swaps move the single 1 to the centre of a 5x5 matrix.

    If several cells hold 1 the last one in row-major order counts; if none
    does the answer is 0.
    """
    if len(matrix) != MATRIX_SIZE or any(len(row) != MATRIX_SIZE for row in matrix):
        raise ValueError("matrix must be 5x5")
    moves = 0
    for i, row in enumerate(matrix):
        for j, cell in enumerate(row):
            if cell == 1:
                moves = abs(i - _CENTER) + abs(j - _CENTER)
    return moves


def _has_distinct_digits(number: int) -> bool:
    digits = str(number) if number > 0 else ""
    return len(set(digits)) == len(digits)


def next_distinct_year(year: int) -> int:
    """Return the smallest year after ``year`` whose digits are all different."""
    candidate = year + 1
    while not _has_distinct_digits(candidate):
        candidate += 1
    return candidate


def max_books(times: Iterable[int], limit: int) -> int:
    """Return the longest run of consecutive books readable within ``limit`` minutes."""
    window: deque[int] = deque()
    total = 0
    best = 0
    for minutes in times:
        window.append(minutes)
        total += minutes
        while total > limit and window:
            total -= window.popleft()
        best = max(best, len(window))
    return best


def flipping_game(bits: Sequence[int]) -> int:
    """Return the most ones obtainable after flipping exactly one non-empty segment.

    An empty sequence has no segment to flip and yields -1.
    """
    if not bits:
        return -1
    ones = sum(1 for bit in bits if bit == 1)
    best_gain = None
    running = 0
    for bit in bits:
        gain = -1 if bit == 1 else 1
        running = max(gain, running + gain)
        best_gain = running if best_gain is None else max(best_gain, running)
    return ones + best_gain


def rooms_with_space(rooms: Iterable[tuple[int, int]]) -> int:
    """Count rooms, given as (occupants, capacity), with space for two more people."""
    return sum(1 for occupants, capacity in rooms if capacity - occupants >= 2)


def lucky_number(n: int) -> str | None:
    """Return the smallest number made of 4s and 7s whose digits sum to ``n``.

    Returns ``None`` when no such number exists.
    """
    best: tuple[int, int, int] | None = None
    for sevens in range(max(n, -1) // 7 + 1):
        rest = n - 7 * sevens
        if rest % 4 == 0:
            fours = rest // 4
            if best is None or sevens + fours < best[0]:
                best = (sevens + fours, fours, sevens)
    if best is None:
        return None
    _, fours, sevens = best
    return "4" * fours + "7" * sevens


def compare_ignore_case(first: str, second: str) -> int:
    """Compare two strings case-insensitively, returning -1, 0 or 1."""
    for a, b in zip(first.lower(), second.lower()):
        if a > b:
            return 1
        if a < b:
            return -1
    return 0


def queue_after(order: str, seconds: int) -> str:
    """Return the queue after ``seconds`` rounds of boys letting girls ahead."""
    queue = list(order)
    for _ in range(seconds):
        i = 0
        while i < len(queue) - 1:
            if queue[i] == "B" and queue[i + 1] == "G":
                queue[i], queue[i + 1] = queue[i + 1], queue[i]
                i += 1
            i += 1
    return "".join(queue)


def stones_to_remove(stones: str) -> int:
    """Count stones to take so that no two neighbouring stones share a colour."""
    return sum(1 for left, right in zip(stones, stones[1:]) if left == right)


def is_translation(word: str, candidate: str) -> bool:
    """Tell whether ``candidate`` is ``word`` written backwards."""
    return word == candidate[::-1]