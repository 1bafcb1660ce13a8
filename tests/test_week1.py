import pytest

from contestkit.week1 import (
    beautiful_matrix_moves,
    compare_ignore_case,
    flipping_game,
    is_translation,
    lucky_number,
    max_books,
    next_distinct_year,
    queue_after,
    rooms_with_space,
    stones_to_remove,
)


def _matrix_with_one(row, col):
    matrix = [[0] * 5 for _ in range(5)]
    matrix[row][col] = 1
    return matrix


def test_matrix_center_needs_no_moves():
    assert beautiful_matrix_moves(_matrix_with_one(2, 2)) == 0


def test_matrix_symmetry():
    corners = {beautiful_matrix_moves(_matrix_with_one(r, c)) for r in (0, 4) for c in (0, 4)}
    assert len(corners) == 1
    assert beautiful_matrix_moves(_matrix_with_one(1, 3)) == beautiful_matrix_moves(
        _matrix_with_one(3, 1)
    )
    assert beautiful_matrix_moves(_matrix_with_one(0, 0)) > beautiful_matrix_moves(
        _matrix_with_one(1, 1)
    )


def test_matrix_wrong_shape():
    with pytest.raises(ValueError):
        beautiful_matrix_moves([[0] * 5 for _ in range(4)])
    with pytest.raises(ValueError):
        beautiful_matrix_moves([[0] * 4 for _ in range(5)])


@pytest.mark.parametrize("year", [1000, 1987, 2013, 8999, 9000])
def test_next_distinct_year_properties(year):
    result = next_distinct_year(year)
    assert result > year
    assert len(set(str(result))) == len(str(result))
    for between in range(year + 1, result):
        assert len(set(str(between))) < len(str(between))


def test_next_distinct_year_immediate():
    assert next_distinct_year(2012) == 2013


def test_max_books_all_fit():
    times = [3, 1, 2, 1]
    assert max_books(times, sum(times)) == len(times)


def test_max_books_window_is_valid():
    times = [3, 1, 2, 1, 4, 1, 1]
    limit = 5
    best = max_books(times, limit)
    assert any(sum(times[i : i + best]) <= limit for i in range(len(times) - best + 1))
    assert all(
        sum(times[i : i + best + 1]) > limit for i in range(len(times) - best)
    )


def test_max_books_nothing_fits():
    assert max_books([5, 6, 7], 4) == max_books([], 4)


def test_flipping_all_ones_loses_one():
    bits = [1, 1, 1, 1]
    assert flipping_game(bits) == len(bits) - 1


def test_flipping_all_zeros():
    bits = [0, 0, 0]
    assert flipping_game(bits) == len(bits)


@pytest.mark.parametrize("bits", [[1, 0, 0, 1, 0], [0], [1, 0, 1, 0, 1], [0, 1, 1, 0]])
def test_flipping_appending_one_adds_one(bits):
    assert flipping_game(bits + [1]) == flipping_game(bits) + 1
    assert flipping_game(bits) <= len(bits)


def test_rooms_with_space():
    spacious = [(0, 2), (1, 10), (5, 7)]
    assert rooms_with_space(spacious) == len(spacious)
    assert rooms_with_space(spacious + [(3, 3), (1, 2)]) == len(spacious)


def test_lucky_number_impossible():
    assert lucky_number(10) is None


@pytest.mark.parametrize("n", [4, 7, 11, 28, 40, 100])
def test_lucky_number_properties(n):
    result = lucky_number(n)
    assert sum(int(d) for d in result) == n
    assert set(result) <= {"4", "7"}
    assert list(result) == sorted(result)


def test_compare_ignore_case():
    assert compare_ignore_case("aaaa", "aaaA") == 0
    assert compare_ignore_case("abc", "ABD") < 0
    assert compare_ignore_case("abc", "ABD") == -compare_ignore_case("ABD", "abc")


def test_queue_zero_seconds():
    assert queue_after("BGGBG", 0) == "BGGBG"


def test_queue_single_swap():
    assert queue_after("BG", 1) == "BG"[::-1]


def test_queue_settles_with_girls_first():
    order = "BBGBGGBG"
    result = queue_after(order, len(order))
    assert result == "G" * order.count("G") + "B" * order.count("B")


def test_stones():
    assert stones_to_remove("RRRRR") == len("RRRRR") - 1
    base = "RGBRB"
    assert stones_to_remove(base + base[-1]) == stones_to_remove(base) + 1


def test_translation():
    assert is_translation("code", "edoc")
    assert not is_translation("abb", "aba")
    assert not is_translation("code", "code")