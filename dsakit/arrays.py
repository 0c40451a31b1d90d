"""Classic array problems: subarrays, permutations, triplets, knapsack, medians."""

import heapq
from itertools import accumulate


def longest_subarray_with_sum(values, k):
    """Return the length of the longest contiguous run of values summing to k."""
    longest = 0
    first_seen = {}
    prefix = 0
    for i, value in enumerate(values):
        prefix += value
        if prefix == k:
            longest = i + 1
        elif prefix - k in first_seen:
            longest = max(longest, i - first_seen[prefix - k])
        first_seen.setdefault(prefix, i)
    return longest


def max_product_subarray(nums):
    """Return the largest product of a non-empty contiguous run of nums."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = high = low = nums[0]
    for value in nums[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, high * value)
        low = min(value, low * value)
        best = max(best, high)
    return best


def _best_crossing(nums, left, right):
    if left > right:
        return None
    mid = (left + right) // 2
    left_sum = max(0, max(accumulate(reversed(nums[left:mid])), default=0))
    right_sum = max(0, max(accumulate(nums[mid + 1:right + 1]), default=0))
    candidates = [left_sum + nums[mid] + right_sum]
    for part in (_best_crossing(nums, left, mid - 1), _best_crossing(nums, mid + 1, right)):
        if part is not None:
            candidates.append(part)
    return max(candidates)


def max_subarray(nums):
    """Return the largest sum of a non-empty contiguous run, by divide and conquer."""
    if not nums:
        raise ValueError("nums must not be empty")
    return _best_crossing(list(nums), 0, len(nums) - 1)


def next_permutation(nums):
    """Return the next lexicographic permutation of nums, wrapping to the smallest."""
    result = list(nums)
    for i in range(len(result) - 2, -1, -1):
        if result[i] < result[i + 1]:
            j = len(result) - 1
            while result[j] <= result[i]:
                j -= 1
            result[i], result[j] = result[j], result[i]
            result[i + 1:] = reversed(result[i + 1:])
            return result
    result.sort()
    return result


def three_sum(nums):
    """Return every distinct sorted triplet from nums that sums to zero."""
    ordered = sorted(nums)
    n = len(ordered)
    triplets = []
    for i in range(n - 2):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        lo, hi = i + 1, n - 1
        target = -ordered[i]
        while lo < hi:
            total = ordered[lo] + ordered[hi]
            if total == target:
                triplets.append([ordered[i], ordered[lo], ordered[hi]])
                while lo < hi and ordered[lo] == ordered[lo + 1]:
                    lo += 1
                while lo < hi and ordered[hi] == ordered[hi - 1]:
                    hi -= 1
                lo += 1
                hi -= 1
            elif total < target:
                lo += 1
            else:
                hi -= 1
    return triplets


def fractional_knapsack(values, weights, capacity):
    """Return the best total value when items may be taken in fractions."""
    items = sorted(
        zip(values, weights, strict=True),
        key=lambda item: item[0] / item[1],
        reverse=True,
    )
    profit = 0.0
    for value, weight in items:
        if weight <= capacity:
            profit += value
            capacity -= weight
        else:
            profit += value / weight * capacity
            capacity = 0
    return profit


def running_medians(values):
    """Return the median of the values seen so far after each one is read."""
    lower = []  # max-heap, stored negated
    upper = []
    medians = []
    for value in values:
        if not lower or value <= -lower[0]:
            heapq.heappush(lower, -value)
        else:
            heapq.heappush(upper, value)
        if len(lower) - len(upper) > 1:
            heapq.heappush(upper, -heapq.heappop(lower))
        elif len(upper) - len(lower) > 1:
            heapq.heappush(lower, -heapq.heappop(upper))
        if len(lower) != len(upper):
            middle = -lower[0] if len(lower) > len(upper) else upper[0]
            medians.append(float(middle))
        else:
            medians.append((-lower[0] + upper[0]) / 2.0)
    return medians