# contestkit

Solutions to short algorithmic contest problems, written as ordinary Python
functions. Each function takes its input as Python values (integers, strings,
lists, tuples) and returns the answer. Nothing is read from standard input or
printed.

## Modules

- `contestkit.week1`: grids, digits, sliding windows and string basics:
  `beautiful_matrix_moves`, `next_distinct_year`, `max_books`,
  `flipping_game`, `rooms_with_space`, `lucky_number`,
  `compare_ignore_case`, `queue_after`, `stones_to_remove`,
  `is_translation`.
- `contestkit.week2`: grid search, sorting, prefix sums and counting:
  `arrow_path_reachable`, `basketball_wins`, `binary_path`,
  `collecting_game`, `count_greetings`, `can_sort_array`, `max_magnitude`,
  `points_min_distance`, `train_queries`, `count_note_pairs`.
- `contestkit.week3`: greedy choices, games and simple simulation:
  `boring_day_wins`, `longest_contest`, `even_odd_winner`,
  `joystick_minutes`, `max_plus_size`, `max_subarray_sum`, `maximum_sum`
  (result modulo `MOD` = 10**9 + 7), `fill_red_blue`, `odd_subarrays`,
  `santa_candies`, `stone_game_moves`, `team_training`, `thorns_coins`,
  `two_large_bags`, `ugu_operations`.
- `contestkit.week4`: arithmetic and binary search:
  `brightness_begins`, `journey_day`, `meme_problem`, `is_perfect_square`,
  `square_year`.

Where a problem has no answer, the function returns `None` (for example
`lucky_number`, `meme_problem`, `square_year`). Inputs that the function
cannot work with, such as rows of different lengths or an empty list where
one element is needed, raise `ValueError`.

## Installation

```
pip install .
```

## Example

```python
from contestkit.week1 import lucky_number, queue_after, stones_to_remove
from contestkit.week3 import even_odd_winner
from contestkit.week4 import journey_day, square_year

stones_to_remove("RRG")             # 1
queue_after("BGGBG", 1)             # "GBGGB"
lucky_number(11)                    # "47"
lucky_number(10)                    # None
even_odd_winner([5, 2, 7, 3])       # "Bob"
journey_day(12, 1, 5, 5)            # 4
square_year(16)                     # (0, 4)
```

## What it does not do

There is no command-line program: the package does not parse contest-style
input with a count of test cases, nor format answers as output lines. Reading
input and printing results is left to the caller.

## Running the tests

```
pip install ".[test]"
pytest
```