"""Contest problems on grids, sorting, prefix sums and counting."""

from bisect import bisect_left
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from itertools import accumulate

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def arrow_path_reachable(top: str, bottom: str) -> bool:
    """Tell whether a robot starting top-left can reach the bottom-right cell.

    Each turn the robot steps to a neighbouring cell and is then pushed one
    column along the arrow ('>' or '<') written there.
    """
    n = len(top)
    if n == 0 or len(bottom) != n:
        raise ValueError("rows must be non-empty and of equal length")
    rows = (top, bottom)
    start = (0, 0)
    seen = {start}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for d_row, d_col in _STEPS:
            r2, c2 = row + d_row, col + d_col
            if not (0 <= r2 < 2 and 0 <= c2 < n):
                continue
            c3 = c2 + 1 if rows[r2][c2] == ">" else c2 - 1
            if not 0 <= c3 < n:
                raise ValueError(f"arrow at row {r2}, column {c2} points outside the grid")
            cell = (r2, c3)
            if cell not in seen:
                seen.add(cell)
                queue.append(cell)
    return (1, n - 1) in seen


def basketball_wins(powers: Iterable[int], enemy_power: int) -> int:
    """Return how many teams can be formed whose total power beats ``enemy_power``.

    A team's total is its strongest member's power times its size.
    """
    ordered = sorted(powers, reverse=True)
    left, right = 0, len(ordered) - 1
    wins = 0
    while left <= right:
        needed = enemy_power // ordered[left] + 1
        if right - left + 1 < needed:
            break
        wins += 1
        left += 1
        right -= needed - 1
    return wins


def binary_path(top: str, bottom: str) -> tuple[str, int]:
    """Return the lexicographically smallest path string and how many paths give it.

    The path moves right along ``top``, drops down once and continues along
    ``bottom``.
    """
    n = len(top)
    if n == 0 or len(bottom) != n:
        raise ValueError("rows must be non-empty and of equal length")
    turn = 0
    for i in range(1, n):
        if top[i] > bottom[i - 1]:
            break
        turn = i
    path = top[: turn + 1] + bottom[turn:]
    ways = 1
    for k in range(turn, 0, -1):
        if top[k] != bottom[k - 1]:
            break
        ways += 1
    return path, ways


def collecting_game(values: Sequence[int]) -> list[int]:
    """For each element, return how many others it can absorb when starting with it.

    Starting from one element, any element not larger than the collected total
    may be absorbed; the answer is the number absorbed.
    """
    ordered = sorted((value, index) for index, value in enumerate(values))
    if not ordered:
        return []
    prefix = list(accumulate(value for value, _ in ordered))
    n = len(ordered)
    sorted_answer = [0] * n
    sorted_answer[-1] = n - 1
    for i in range(n - 2, -1, -1):
        if prefix[i] >= ordered[i + 1][0]:
            sorted_answer[i] = sorted_answer[i + 1]
        else:
            sorted_answer[i] = i
    answers = [0] * n
    for (_, original), answer in zip(ordered, sorted_answer):
        answers[original] = answer
    return answers


class _Fenwick:
    """Prefix-count tree over ranks 1..size."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, rank: int) -> None:
        while rank < len(self._tree):
            self._tree[rank] += 1
            rank += rank & -rank

    def count_upto(self, rank: int) -> int:
        total = 0
        while rank > 0:
            total += self._tree[rank]
            rank -= rank & -rank
        return total


def count_greetings(people: Iterable[tuple[int, int]]) -> int:
    """Count meetings of people walking from a to b, i.e. pairs whose paths nest."""
    ordered = sorted(people)
    targets = sorted({b for _, b in ordered})
    tree = _Fenwick(len(targets))
    total = 0
    processed = 0
    for _, b in ordered:
        rank = bisect_left(targets, b) + 1
        total += processed - tree.count_upto(rank)
        tree.add(rank)
        processed += 1
    return total


def can_sort_array(values: Sequence[int]) -> bool:
    """Tell whether the array can be made non-decreasing by the allowed operations."""
    if len(values) % 2:
        return True
    return sum(values[1::2]) - sum(values[0::2]) >= 0


def max_magnitude(values: Iterable[int]) -> int:
    """Return the largest final value when each step may add or take an absolute value."""
    low = 0
    high = 0
    for value in values:
        low, high = low + value, max(high + value, abs(low + value))
    return high


def points_min_distance(numbers: Sequence[int]) -> tuple[int, list[tuple[int, int]]]:
    """Pair 2n numbers into n points minimising the Manhattan length of a path through them.

    Returns the path length and the points in path order.
    """
    if len(numbers) % 2:
        raise ValueError("an even count of numbers is required")
    ordered = sorted(numbers)
    n = len(ordered) // 2
    points = list(zip(ordered[:n], ordered[n:]))
    length = sum(
        abs(x1 - x2) + abs(y1 - y2) for (x1, y1), (x2, y2) in zip(points, points[1:])
    )
    return length, points


def train_queries(
    stations: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[bool]:
    """Answer whether the train can carry a passenger from station a to station b."""
    first_seen: dict[int, int] = {}
    last_seen: dict[int, int] = {}
    for position, station in enumerate(stations):
        first_seen.setdefault(station, position)
        last_seen[station] = position
    return [
        start in first_seen and end in last_seen and first_seen[start] <= last_seen[end]
        for start, end in queries
    ]


def count_note_pairs(values: Iterable[int]) -> int:
    """Count pairs of notes 2**a, 2**b with (2**a)**(2**b) == (2**b)**(2**a)."""
    counts = Counter(values)
    pairs = sum(freq * (freq - 1) // 2 for freq in counts.values())
    return pairs + counts[1] * counts[2]