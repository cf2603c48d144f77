import itertools

import pytest

from algodrills.permutations import (
    absolute_permutation,
    almost_sorted,
    bigger_is_greater,
    circular_array_rotation,
    permutation_equation,
)


def _apply(answer, values):
    lines = answer.split("\n")
    assert lines[0] == "yes"
    result = list(values)
    if len(lines) == 1:
        return result
    operation, left, right = lines[1].split()
    lo, hi = int(left) - 1, int(right) - 1
    if operation == "swap":
        result[lo], result[hi] = result[hi], result[lo]
    else:
        result[lo:hi + 1] = reversed(result[lo:hi + 1])
    return result


def test_sorted_input_needs_nothing():
    assert almost_sorted([1, 2, 3, 4]) == "yes"


def test_two_elements_out_of_order():
    assert almost_sorted([2, 1]) == "yes\nswap 1 2"


@pytest.mark.parametrize("i, j", [(2, 3), (1, 4), (0, 5)])
def test_swapped_pair_is_found(i, j):
    values = list(range(1, 7))
    values[i], values[j] = values[j], values[i]
    answer = almost_sorted(values)
    assert answer == f"yes\nswap {i + 1} {j + 1}"
    assert _apply(answer, values) == sorted(values)


def test_reversed_stretch_is_found():
    lo, hi = 1, 4
    base = list(range(1, 7))
    values = base[:lo] + base[lo:hi + 1][::-1] + base[hi + 1:]
    answer = almost_sorted(values)
    assert answer == f"yes\nreverse {lo + 1} {hi + 1}"
    assert _apply(answer, values) == base


def test_whole_sequence_reversed():
    values = [4, 3, 2, 1]
    assert almost_sorted(values) == f"yes\nreverse 1 {len(values)}"


def test_unsortable_sequence():
    assert almost_sorted([3, 1, 2]) == "no"


@pytest.mark.parametrize("n, k", [(n, k) for n in range(1, 11) for k in range(0, 4)])
def test_absolute_permutation_is_valid_when_found(n, k):
    result = absolute_permutation(n, k)
    if result != [-1]:
        assert sorted(result) == list(range(1, n + 1))
        assert all(abs(value - pos) == k for pos, value in enumerate(result, 1))
    else:
        assert k > 0


def test_absolute_permutation_zero_offset_is_identity():
    assert absolute_permutation(10, 0) == list(range(1, 11))


def test_absolute_permutation_impossible():
    assert absolute_permutation(3, 2) == [-1]


def test_absolute_permutation_found_for_even_blocks():
    result = absolute_permutation(4, 2)
    assert sorted(result) == [1, 2, 3, 4]
    assert all(abs(value - pos) == 2 for pos, value in enumerate(result, 1))


@pytest.mark.parametrize("word", ["bb", "dcba", "a"])
def test_bigger_is_greater_no_answer(word):
    assert bigger_is_greater(word) == "no answer"


def test_bigger_is_greater_two_letters():
    assert bigger_is_greater("ab") == "ab"[::-1]


@pytest.mark.parametrize("word", ["hefg", "dhck", "dkhc", "abdc", "lmno", "aabb"])
def test_bigger_is_greater_is_next_permutation(word):
    result = bigger_is_greater(word)
    assert result > word
    assert sorted(result) == sorted(word)
    between = [
        "".join(p)
        for p in itertools.permutations(word)
        if word < "".join(p) < result
    ]
    assert between == []


def test_permutation_equation_identity():
    assert permutation_equation([1, 2, 3, 4]) == [1, 2, 3, 4]


@pytest.mark.parametrize("p", [[5, 2, 1, 3, 4], [4, 3, 5, 1, 2], [2, 3, 1]])
def test_permutation_equation_solves_equation(p):
    result = permutation_equation(p)
    assert len(result) == len(p)
    for x, y in enumerate(result, start=1):
        assert p[p[y - 1] - 1] == x


def test_rotation_by_zero_and_full_turn():
    values = [3, 4, 5]
    queries = [0, 1, 2]
    assert circular_array_rotation(values, 0, queries) == values
    assert circular_array_rotation(values, len(values), queries) == values


def test_rotation_wraps_modulo_length():
    values = [1, 2, 3, 4]
    queries = [0, 1, 2, 3]
    assert circular_array_rotation(values, 5, queries) == circular_array_rotation(
        values, 1, queries
    )


def test_single_rotation_moves_last_to_front():
    values = [1, 2, 3, 4]
    assert circular_array_rotation(values, 1, [0, 1]) == [values[-1], values[0]]


def test_rotation_of_empty_sequence_raises():
    with pytest.raises(ValueError):
        circular_array_rotation([], 3, [0])