from collections import Counter

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from dsakit.arrays import (
    build_array,
    find_kth_largest,
    find_max_consecutive_ones,
    find_min_rotated,
    find_min_rotated_with_duplicates,
    is_trionic,
    move_zeroes,
    num_subarrays_with_sum,
    pivot_index,
    remove_element,
    running_sum,
    sorted_squares,
    total_fruit,
    two_sum,
    valid_mountain_array,
)

small_ints = st.integers(min_value=-50, max_value=50)


@given(st.lists(small_ints, min_size=2, max_size=30), st.data())
def test_two_sum_finds_a_valid_pair(nums, data):
    i, j = sorted(data.draw(st.lists(st.integers(0, len(nums) - 1), min_size=2, max_size=2, unique=True)))
    target = nums[i] + nums[j]
    a, b = two_sum(nums, target)
    assert a < b
    assert nums[a] + nums[b] == target


def test_two_sum_with_equal_values():
    assert two_sum([3, 3], 6) == (0, 1)


def test_two_sum_without_pair_raises():
    with pytest.raises(ValueError):
        two_sum([1, 2], 10)


@given(st.lists(st.integers(0, 4), max_size=30), st.integers(0, 4))
def test_remove_element(nums, val):
    original = list(nums)
    k = remove_element(nums, val)
    assert k == len(original) - original.count(val)
    assert val not in nums[:k]
    assert Counter(nums[:k]) + Counter({val: original.count(val)}) == +Counter(original)
    assert nums[k:] == original[k:]


@given(st.lists(st.integers(), min_size=1, unique=True), st.integers(min_value=0))
def test_find_min_rotated(values, shift):
    values.sort()
    shift %= len(values)
    rotated = values[shift:] + values[:shift]
    assert find_min_rotated(rotated) == values[0]


@given(st.lists(st.integers(-5, 5), min_size=1), st.integers(min_value=0))
def test_find_min_rotated_with_duplicates(values, shift):
    values.sort()
    shift %= len(values)
    rotated = values[shift:] + values[:shift]
    assert find_min_rotated_with_duplicates(rotated) == values[0]


def test_find_min_of_empty_raises():
    with pytest.raises(ValueError):
        find_min_rotated([])
    with pytest.raises(ValueError):
        find_min_rotated_with_duplicates([])


@given(st.lists(small_ints, min_size=1), st.data())
def test_find_kth_largest(nums, data):
    k = data.draw(st.integers(1, len(nums)))
    original = list(nums)
    result = find_kth_largest(nums, k)
    assert result in nums
    assert sum(1 for x in nums if x > result) < k <= sum(1 for x in nums if x >= result)
    assert nums == original


def test_find_kth_largest_example():
    assert find_kth_largest([3, 2, 1, 5, 6, 4], 2) == 5


@pytest.mark.parametrize("k", [0, 4])
def test_find_kth_largest_out_of_range(k):
    with pytest.raises(ValueError):
        find_kth_largest([1, 2, 3], k)


@given(st.lists(st.integers(-3, 3), max_size=30))
def test_move_zeroes(nums):
    original = list(nums)
    move_zeroes(nums)
    nonzero = [x for x in original if x != 0]
    assert len(nums) == len(original)
    assert nums[: len(nonzero)] == nonzero
    assert all(x == 0 for x in nums[len(nonzero):])


def test_max_consecutive_ones_example():
    assert find_max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3


@given(st.integers(0, 40))
def test_max_consecutive_ones_uniform(count):
    assert find_max_consecutive_ones([1] * count) == count
    assert find_max_consecutive_ones([0] * count) == 0


@given(st.lists(st.integers(-10, 10), max_size=25))
def test_pivot_index_invariant(nums):
    def balanced(j):
        return sum(nums[:j]) == sum(nums[j + 1:])

    result = pivot_index(nums)
    if result == -1:
        assert not any(balanced(j) for j in range(len(nums)))
    else:
        assert balanced(result)
        assert not any(balanced(j) for j in range(result))


def test_pivot_index_none():
    assert pivot_index([1, 2, 3]) == -1


def test_total_fruit_whole_input():
    fruits = [1, 2, 1]
    assert total_fruit(fruits) == len(fruits)


@given(st.lists(st.integers(0, 4), max_size=25))
def test_total_fruit_is_longest_window(fruits):
    best = total_fruit(fruits)
    n = len(fruits)
    assert 0 <= best <= n
    if best:
        assert any(len(set(fruits[i:i + best])) <= 2 for i in range(n - best + 1))
    assert not any(len(set(fruits[i:i + best + 1])) <= 2 for i in range(n - best))


def test_num_subarrays_with_sum_example():
    assert num_subarrays_with_sum([1, 0, 1, 0, 1], 2) == 4


@given(st.lists(st.integers(0, 1), max_size=30))
def test_num_subarrays_counts_every_subarray_once(nums):
    n = len(nums)
    counts = [num_subarrays_with_sum(nums, goal) for goal in range(sum(nums) + 1)]
    assert sum(counts) == n * (n + 1) // 2
    assert num_subarrays_with_sum(nums, -1) == 0
    assert num_subarrays_with_sum(nums, sum(nums) + 1) == 0


@pytest.mark.parametrize(
    "arr, expected",
    [
        ([0, 3, 2, 1], True),
        ([3, 5, 5], False),
        ([2, 1], False),
        ([0, 1, 2], False),
        ([2, 1, 0], False),
        ([], False),
    ],
)
def test_valid_mountain_array(arr, expected):
    assert valid_mountain_array(arr) is expected


@given(
    st.lists(st.integers(-100, 100), min_size=1, unique=True),
    st.lists(st.integers(-100, 100), min_size=1, unique=True),
)
def test_valid_mountain_built(rise, fall):
    rise.sort()
    fall.sort(reverse=True)
    peak = max(rise[-1], fall[0]) + 1
    assert valid_mountain_array(rise + [peak] + fall)


@given(st.lists(st.integers(-100, 100), max_size=30))
def test_sorted_squares(nums):
    nums.sort()
    result = sorted_squares(nums)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(x * x for x in nums)


@given(st.lists(small_ints, max_size=30))
def test_running_sum(nums):
    result = running_sum(nums)
    assert len(result) == len(nums)
    assert [b - a for a, b in zip([0] + result, result)] == nums
    if nums:
        assert result[-1] == sum(nums)


@given(st.permutations(list(range(12))))
def test_build_array_gives_permutation(nums):
    assert sorted(build_array(nums)) == sorted(nums)


@given(st.integers(0, 30))
def test_build_array_identity(n):
    identity = list(range(n))
    assert build_array(identity) == identity


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 3, 5, 4, 2, 6], True),
        ([2, 1, 3], False),
        ([1, 3, 2], False),
        ([1, 2, 3, 4], False),
        ([1, 3, 2, 2, 4], False),
    ],
)
def test_is_trionic(nums, expected):
    assert is_trionic(nums) is expected


@given(
    st.lists(st.integers(0, 100), min_size=2, unique=True),
    st.lists(st.integers(0, 100), min_size=1, unique=True),
)
def test_is_trionic_built(rise, rise_again):
    rise.sort()
    rise_again.sort()
    valley = min(rise[0], rise_again[0]) - 1
    assume(len(rise) >= 2)
    nums = rise + [valley] + rise_again
    assert is_trionic(nums)
    assert not is_trionic(sorted(set(nums)))