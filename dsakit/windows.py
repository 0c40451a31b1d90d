"""Sliding-window and two-pointer counting problems."""

from collections import Counter


def binary_subarrays_with_sum(nums, goal):
    """Return how many non-empty contiguous subarrays of nums sum to goal."""
    seen = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += seen[prefix - goal]
        seen[prefix] += 1
    return count


def nice_subarrays(nums, k):
    """Return how many contiguous subarrays hold exactly k odd numbers."""
    if k < 1:
        raise ValueError("k must be at least 1")
    nums = list(nums)
    odd = 0
    nice = 0
    prefix = 0
    left = 0
    for value in nums:
        if value % 2:
            odd += 1
            prefix = 0
        while odd == k:
            prefix += 1
            if nums[left] % 2:
                odd -= 1
            left += 1
        nice += prefix
    return nice


def _at_most_distinct(nums, k):
    counts = Counter()
    left = 0
    total = 0
    for right, value in enumerate(nums):
        if counts[value] == 0:
            k -= 1
        counts[value] += 1
        while k < 0:
            counts[nums[left]] -= 1
            if counts[nums[left]] == 0:
                k += 1
            left += 1
        total += right - left + 1
    return total


def subarrays_with_k_distinct(nums, k):
    """Return how many contiguous subarrays hold exactly k distinct values."""
    if k < 1:
        raise ValueError("k must be at least 1")
    nums = list(nums)
    return _at_most_distinct(nums, k) - _at_most_distinct(nums, k - 1)


def trap_rain_water(heights):
    """Return how much rain water an elevation map traps, using two pointers."""
    heights = list(heights)
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    total = 0
    while left < right:
        if heights[left] <= heights[right]:
            if left_max > heights[left]:
                total += left_max - heights[left]
            else:
                left_max = heights[left]
            left += 1
        else:
            if right_max > heights[right]:
                total += right_max - heights[right]
            else:
                right_max = heights[right]
            right -= 1
    return total