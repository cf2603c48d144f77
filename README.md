# algodrills

Plain-Python solutions to a collection of classic programming puzzles. Each
solution is a function that takes ordinary Python values (lists, strings,
integers) and returns its answer. Nothing is read from standard input and
nothing is printed.

## Installation

```
pip install algodrills
```

The package has no runtime dependencies. To run the test suite:

```
pip install "algodrills[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `algodrills.grids` | `surface_area`, `bomber_man`, `cavity_map`, `grid_search`, `rotate_matrix_layers`, `forming_magic_square`, `organizing_containers` |
| `algodrills.permutations` | `almost_sorted`, `absolute_permutation`, `bigger_is_greater`, `permutation_equation`, `circular_array_rotation` |
| `algodrills.arrays` | `climbing_leaderboard`, `cut_the_sticks`, `picking_numbers`, `non_divisible_subset`, `minimum_distances`, `equalize_array`, `beautiful_triplets`, `divisible_sum_pairs`, `sock_merchant`, `breaking_records`, `migratory_birds`, `birthday_chocolate` |
| `algodrills.numbers` | `beautiful_days`, `between_two_sets`, `chocolate_feast`, `page_count`, `electronics_shop`, `find_digits`, `kaprekar_numbers`, `strange_counter`, `utopian_tree`, `viral_advertising`, `save_the_prisoner`, `how_many_games`, `josephus` |
| `algodrills.strings` | `acm_team`, `designer_pdf_viewer`, `encryption`, `happy_ladybugs`, `repeated_string`, `time_in_words` |
| `algodrills.dates` | `library_fine`, `day_of_programmer` |
| `algodrills.everyday` | `angry_professor`, `bon_appetit`, `fair_rations`, `flatland_space_stations`, `hurdle_race`, `jumping_on_clouds`, `jumping_on_clouds_revisited`, `lisa_workbook`, `service_lane` |

## Examples

```python
from algodrills.permutations import bigger_is_greater
from algodrills.arrays import sock_merchant
from algodrills.numbers import utopian_tree
from algodrills.strings import time_in_words

bigger_is_greater("ab")        # "ba"
sock_merchant([10, 20, 20, 10, 10, 30, 50, 10, 20])  # 3
utopian_tree(4)                # 7
time_in_words(5, 47)           # "thirteen minutes to six"
```

Grid functions take rows as lists of strings or lists of lists of integers and
return new values without changing their input:

```python
from algodrills.grids import cavity_map

cavity_map(["1112", "1912", "1892", "1234"])
# ["1112", "1X12", "18X2", "1234"]
```

## Return conventions

Answers come back as Python values rather than printed text:

- Yes/no questions return `bool`: `grid_search`, `organizing_containers`,
  `happy_ladybugs`, and `angry_professor` (`True` means the class is cancelled).
- `almost_sorted` returns `"yes"`, `"no"`, or `"yes"` followed on a second line
  by `"swap l r"` or `"reverse l r"`.
- `absolute_permutation` returns `[-1]` when no permutation exists.
- `bigger_is_greater` returns `"no answer"` when there is no larger rearrangement.
- `kaprekar_numbers` returns an empty list for a range with no such numbers.
- `fair_rations` returns `None` when the loaves cannot be made even.
- `minimum_distances` and `electronics_shop` return `-1` when nothing qualifies.
- `acm_team` and `breaking_records` return a pair of integers.

Inputs that have no sensible answer, such as an empty pattern, a zero divisor or
an hour outside 1 to 12, raise `ValueError`.

## What it does not do

The package is a library only. It has no command-line program, and it does not
read puzzle input in any text format; callers parse their own input and pass
the values in.