"""Binary-search based problems."""

import math
from itertools import pairwise


def can_place_stations(stations, k, max_dist):
    """Return whether at most k new stations bring every gap down to max_dist."""
    placed = 0
    for left, right in pairwise(stations):
        placed += math.ceil((right - left) / max_dist) - 1
        if placed > k:
            return False
    return True


def min_max_gas_station_distance(stations, k):
    """Return the smallest possible largest gap after adding k stations.

    Stations are sorted positions; the answer is accurate to about 1e-6.
    """
    if not stations:
        raise ValueError("stations must not be empty")
    left, right = 0.0, float(stations[-1] - stations[0])
    while right - left > 1e-6:
        mid = (left + right) / 2
        if can_place_stations(stations, k, mid):
            right = mid
        else:
            left = mid
    return right


def can_partition(nums, k, max_sum):
    """Return whether nums splits into at most k runs each summing to at most max_sum."""
    current = 0
    parts = 1
    for num in nums:
        if num > max_sum:
            return False
        current += num
        if current > max_sum:
            current = num
            parts += 1
        if parts > k:
            return False
    return True


def split_array(nums, k):
    """Return the minimal largest run sum when nums is split into k contiguous runs."""
    if not nums:
        raise ValueError("nums must not be empty")
    left, right = max(nums), sum(nums)
    while left < right:
        mid = left + (right - left) // 2
        if can_partition(nums, k, mid):
            right = mid
        else:
            left = mid + 1
    return right


def bitonic_max(values):
    """Return the maximum of a strictly increasing then strictly decreasing sequence."""
    if not values:
        raise ValueError("values must not be empty")
    low, high = 0, len(values) - 1
    while True:
        if low == high:
            return values[low]
        if high == low + 1:
            return max(values[low], values[high])
        mid = (low + high) // 2
        prev, cur, nxt = values[mid - 1], values[mid], values[mid + 1]
        if cur > prev and cur > nxt:
            return cur
        if prev < cur < nxt:
            low = mid + 1
        elif prev > cur > nxt:
            high = mid - 1
        else:
            raise ValueError("values are not strictly increasing then decreasing")


def find_min_rotated(nums):
    """Return the minimum of a rotated sorted sequence of distinct values."""
    n = len(nums)
    if n == 0:
        raise ValueError("nums must not be empty")
    if n == 1 or nums[0] < nums[-1]:
        return nums[0]
    left, right = 0, n - 1
    while left <= right:
        mid = left + (right - left) // 2
        if mid > 0 and nums[mid] < nums[mid - 1]:
            return nums[mid]
        if mid < n - 1 and nums[mid] > nums[mid + 1]:
            return nums[mid + 1]
        if nums[mid] >= nums[left]:
            left = mid + 1
        else:
            right = mid - 1
    raise ValueError("nums is not a rotated sequence of distinct values")