"""Contest problems on greedy choices, sliding windows and simple simulation."""

from collections import Counter, deque
from collections.abc import Iterable, Sequence

MOD = 10**9 + 7


def boring_day_wins(cards: Iterable[int], low: int, high: int) -> int:
    """Return how many rounds can be won by taking cards off the top of the deck.

    A round takes a consecutive run of cards and is won when the run's sum lies
    in ``[low, high]``.
    """
    window: deque[int] = deque()
    total = 0
    wins = 0
    for card in cards:
        window.append(card)
        total += card
        while total > high and window:
            total -= window.popleft()
        if low <= total <= high:
            wins += 1
            window.clear()
            total = 0
    return wins


def longest_contest(difficulties: Sequence[int]) -> int:
    """Return the longest run where each problem is at most twice the previous one."""
    if not difficulties:
        raise ValueError("at least one problem is required")
    best = 1
    start = 0
    for i in range(1, len(difficulties)):
        if difficulties[i] > 2 * difficulties[i - 1]:
            start = i
        best = max(best, i - start + 1)
    return best


def even_odd_winner(values: Iterable[int]) -> str:
    """Return "Alice", "Bob" or "Tie" for the even-odd game played optimally.

    Players alternately remove the largest remaining number; Alice scores even
    numbers she takes, Bob scores odd ones.
    """
    alice = bob = 0
    for turn, value in enumerate(sorted(values, reverse=True)):
        if turn % 2 == 0:
            if value % 2 == 0:
                alice += value
        elif value % 2 != 0:
            bob += value
    if alice > bob:
        return "Alice"
    if bob > alice:
        return "Bob"
    return "Tie"


def joystick_minutes(first: int, second: int) -> int:
    """Return how many minutes the game lasts, charging the weaker joystick each minute."""
    minutes = 0
    while first > 0 and second > 0:
        if first >= second:
            first -= 2
            second += 1
        else:
            second -= 2
            first += 1
        if first >= 0 and second >= 0:
            minutes += 1
    return minutes


def max_plus_size(values: Sequence[int]) -> int:
    """Return the best max-of-red plus count-of-red with no two adjacent reds."""
    if not values:
        raise ValueError("values must not be empty")
    top = max(values)
    position = values.index(top)
    evens, odds = values[0::2], values[1::2]
    same, other = (evens, odds) if position % 2 == 0 else (odds, evens)
    with_top = top + len(same)
    without_top = max([1, *other]) + len(other)
    return max(with_top, without_top)


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not values:
        raise ValueError("values must not be empty")
    current = best = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def maximum_sum(values: Sequence[int], k: int) -> int:
    """Return the largest array sum modulo 1e9+7 after ``k`` subarray-sum insertions."""
    best = max(0, max_subarray_sum(values))
    growth = (pow(2, k, MOD) - 1) % MOD
    return (sum(values) + best * growth) % MOD


def fill_red_blue(pattern: str) -> str:
    """Fill each '?' with 'B' or 'R' so as few neighbours as possible share a colour."""
    cells = list(pattern)
    for i in range(1, len(cells)):
        if cells[i] == "?" and cells[i - 1] != "?":
            cells[i] = "R" if cells[i - 1] == "B" else "B"
    for i in range(len(cells) - 2, -1, -1):
        if cells[i] == "?" and cells[i + 1] != "?":
            cells[i] = "R" if cells[i + 1] == "B" else "B"
    if cells and cells[0] == "?":
        cells = ["B" if i % 2 == 0 else "R" for i in range(len(cells))]
    return "".join(cells)


def odd_subarrays(permutation: Sequence[int]) -> int:
    """Return the most pieces with an odd number of inversions the permutation splits into."""
    count = 0
    i = 0
    while i < len(permutation) - 1:
        if permutation[i] > permutation[i + 1]:
            count += 1
            i += 1
        i += 1
    return count


def santa_candies(n: int) -> list[int]:
    """Split ``n`` candies among as many children as possible, each a different amount."""
    amounts: list[int] = []
    total = 0
    nxt = 1
    while total + nxt <= n:
        amounts.append(nxt)
        total += nxt
        nxt += 1
    if total < n:
        amounts[-1] += n - total
    return amounts


def stone_game_moves(powers: Sequence[int]) -> int:
    """Return the fewest end removals that destroy both the weakest and strongest stone."""
    if not powers:
        raise ValueError("powers must not be empty")
    n = len(powers)
    ranked = [(power, index) for index, power in enumerate(powers)]
    a = min(ranked)[1]
    b = max(ranked)[1]
    wrap = n + a + 1 - b if a < b else n + b + 1 - a
    if n % 2 == 0:
        if a == n - 1 - b:
            return min(2 * (a + 1), b + 1) if a < b else min(2 * (b + 1), a + 1)
        if abs(a - b) >= n // 2:
            return wrap
        return min(
            max(a + 1, b + 1),
            min(n + a + 1 - b, n + b + 1 - a),
            max(n - a, n - b),
        )
    return min(max(a, b) + 1, max(n - a, n - b), wrap)


def team_training(skills: Iterable[int], x: int) -> int:
    """Return how many teams reach strength ``x`` (size times weakest member's skill)."""
    skills = list(skills)
    weaker = sorted((skill for skill in skills if skill < x), reverse=True)
    teams = len(skills) - len(weaker)
    group = 0
    for skill in weaker:
        group += 1
        if group == -(-x // skill):
            teams += 1
            group = 0
    return teams


def thorns_coins(path: str) -> int:
    """Return the coins collected moving one or two cells at a time, never onto a thorn."""

    def cell(i: int) -> str:
        return path[i] if i < len(path) else ""

    coins = 0
    i = 0
    while i < len(path) - 1:
        if cell(i + 1) == "*":
            if cell(i + 2) == "*":
                break
            if cell(i + 2) == "@":
                coins += 1
            i += 2
        else:
            if cell(i + 1) == "@":
                coins += 1
            i += 1
    return coins


def two_large_bags(values: Sequence[int]) -> bool:
    """Tell whether the numbers can be split into two equal bags by the allowed moves.

    Each value must lie between 0 and the number of values.
    """
    n = len(values)
    if any(not 0 <= value <= n for value in values):
        raise ValueError("values must lie between 0 and the count of values")
    counts = Counter(values)
    for i in range(1, n):
        if counts[i] == 0:
            continue
        if counts[i] == 1:
            return False
        counts[i + 1] += counts[i] - 2
    return True


def ugu_operations(bits: str) -> int:
    """Return the suffix flips needed to make a binary string non-decreasing."""
    operations = 0
    flipped = False
    for current, following in zip(bits, bits[1:]):
        if flipped:
            current = "0" if current == "1" else "1"
            following = "0" if following == "1" else "1"
        if current == "1" and following == "0":
            operations += 1
            flipped = not flipped
    return operations