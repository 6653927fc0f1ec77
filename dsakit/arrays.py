"""Array and sequence algorithms."""

from __future__ import annotations

import heapq
import operator
from collections import Counter, deque
from collections.abc import Callable, Sequence
from itertools import accumulate, groupby, pairwise


def _run_end(values: Sequence[int], start: int, holds: Callable[[int, int], bool]) -> int:
    """Index where the run starting at ``start`` whose neighbours satisfy ``holds`` ends."""
    end = start
    for a, b in pairwise(values[start:]):
        if not holds(a, b):
            break
        end += 1
    return end


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices ``(i, j)``, ``i < j``, of two values summing to ``target``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        match = seen.get(target - value)
        if match is not None:
            return match, index
        seen[value] = index
    raise ValueError(f"no two values sum to {target}")


def remove_element(nums: list[int], val: int) -> int:
    """Move every value other than ``val`` to the front in order; return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def find_min_rotated(nums: Sequence[int]) -> int:
    """Minimum of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("empty sequence")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[right]:
            left = mid + 1
        else:
            right = mid
    return nums[left]


def find_min_rotated_with_duplicates(nums: Sequence[int]) -> int:
    """Minimum of a rotated sorted sequence that may hold duplicates."""
    if not nums:
        raise ValueError("empty sequence")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        elif nums[mid] < nums[low]:
            high = mid
        else:
            high -= 1
    return nums[low]


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """The ``k``-th largest value, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping the order of the rest."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def pivot_index(nums: Sequence[int]) -> int:
    """Leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left_sum = 0
    for index, value in enumerate(nums):
        if left_sum == total - left_sum - value:
            return index
        left_sum += value
    return -1


def total_fruit(fruits: Sequence[int]) -> int:
    """Length of the longest stretch holding at most two distinct values."""
    counts: Counter[int] = Counter()
    left = 0
    best = 0
    for right, fruit in enumerate(fruits):
        counts[fruit] += 1
        if len(counts) > 2:
            dropped = fruits[left]
            counts[dropped] -= 1
            if counts[dropped] == 0:
                del counts[dropped]
            left += 1
        if len(counts) <= 2:
            best = max(best, right - left + 1)
    return best


def _count_at_most(nums: Sequence[int], goal: int) -> int:
    if goal < 0:
        return 0
    total = 0
    count = 0
    left = 0
    for right, value in enumerate(nums):
        total += value
        while total > goal:
            total -= nums[left]
            left += 1
        count += right - left + 1
    return count


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Number of contiguous subarrays of a binary sequence summing to ``goal``."""
    return _count_at_most(nums, goal) - _count_at_most(nums, goal - 1)


def valid_mountain_array(arr: Sequence[int]) -> bool:
    """True if ``arr`` strictly rises to an inner peak and then strictly falls."""
    peak = _run_end(arr, 0, operator.lt)
    if peak == 0 or peak == len(arr) - 1:
        return False
    return _run_end(arr, peak, operator.gt) == len(arr) - 1


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of a sorted sequence, in ascending order."""
    pending = deque(nums)
    squares: list[int] = []
    while pending:
        if abs(pending[0]) > abs(pending[-1]):
            value = pending.popleft()
        else:
            value = pending.pop()
        squares.append(value * value)
    squares.reverse()
    return squares


def running_sum(nums: Sequence[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def build_array(nums: Sequence[int]) -> list[int]:
    """Return ``ans`` with ``ans[i] == nums[nums[i]]``."""
    return [nums[index] for index in nums]


def is_trionic(nums: Sequence[int]) -> bool:
    """True if ``nums`` strictly rises, strictly falls, then strictly rises to its end."""
    last = len(nums) - 1
    peak = _run_end(nums, 0, operator.lt)
    if peak == 0:
        return False
    valley = _run_end(nums, peak, operator.gt)
    if valley == peak or valley >= last:
        return False
    return _run_end(nums, valley, operator.lt) == last