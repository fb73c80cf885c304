import itertools
import random

import pytest

from pushswap.sorter import sort_operations, sort_stacks
from pushswap.stacks import Operation, Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for operation in operations:
        stacks.apply(operation)
    return stacks


def test_sorted_input_needs_no_operations():
    assert sort_operations([1, 2, 3, 4, 5]) == []


def test_empty_input_needs_no_operations():
    assert sort_operations([]) == []


def test_single_value_needs_no_operations():
    assert sort_operations([42]) == []


def test_two_values_swapped():
    assert sort_operations([2, 1]) == [Operation.SA]


def test_three_values_worked_example():
    assert sort_operations([1, 3, 2]) == [Operation.RRA, Operation.SA]


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_three_values_take_at_most_two_moves(values):
    operations = sort_operations(values)
    assert len(operations) <= 2
    assert _replay(values, operations).is_sorted()


@pytest.mark.parametrize("size", [4, 5, 6])
def test_every_small_permutation_is_sorted(size):
    for values in itertools.permutations(range(size)):
        operations = sort_operations(values)
        result = _replay(values, operations)
        assert result.is_sorted(), values
        assert sorted(result.a) == sorted(values)


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_random_inputs_are_sorted(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), 30)
    operations = sort_operations(values)
    result = _replay(values, operations)
    assert result.is_sorted()
    assert result.a == sorted(values)
    assert result.b == []


def test_hundred_values_are_sorted():
    rng = random.Random(2024)
    values = rng.sample(range(-2147483648, 2147483647), 100)
    operations = sort_operations(values)
    assert _replay(values, operations).a == sorted(values)


def test_sort_stacks_mutates_and_matches_sort_operations():
    values = [5, -3, 9, 0, 12, 7, -8]
    stacks = Stacks(values)
    operations = sort_stacks(stacks)
    assert stacks.a == sorted(values)
    assert stacks.b == []
    assert operations == sort_operations(values)


def test_sort_stacks_leaves_sorted_stacks_alone():
    stacks = Stacks([-2, 0, 3])
    assert sort_stacks(stacks) == []
    assert stacks.a == [-2, 0, 3]


def test_operations_are_operation_members_without_plain_swaps_of_b():
    rng = random.Random(7)
    values = rng.sample(range(500), 40)
    operations = sort_operations(values)
    assert all(isinstance(op, Operation) for op in operations)
    assert Operation.SB not in operations
    assert Operation.SS not in operations


def test_output_is_deterministic():
    values = [8, 3, 11, -4, 6, 0, 2, 15]
    assert sort_operations(values) == sort_operations(list(values))


def test_duplicates_are_rejected():
    with pytest.raises(ValueError):
        sort_operations([3, 1, 3])


def test_duplicates_in_stacks_are_rejected():
    with pytest.raises(ValueError):
        sort_stacks(Stacks([4, 4]))