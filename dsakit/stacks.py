"""Monotonic-stack and deque problems over sequences and matrices."""

import operator
from collections import deque

MOD = 10**9 + 7


def largest_rectangle_area(heights):
    """Return the area of the largest rectangle in a histogram of unit-width bars."""
    heights = list(heights)
    stack = []
    best = 0
    for i, current in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] > current:
            height = heights[stack.pop()]
            width = i - stack[-1] - 1 if stack else i
            best = max(best, height * width)
        stack.append(i)
    return best


def longest_valid_parentheses(s):
    """Return the length of the longest well-formed parenthesis substring of s.

    Any character other than '(' is treated as a closing parenthesis.
    """
    stack = [-1]
    longest = 0
    for i, char in enumerate(s):
        if char == "(":
            stack.append(i)
            continue
        stack.pop()
        if stack:
            longest = max(longest, i - stack[-1])
        else:
            stack.append(i)
    return longest


def maximal_rectangle(matrix):
    """Return the area of the largest all-ones rectangle in a binary matrix.

    Cells may be the characters '0'/'1' or the integers 0/1.
    """
    rows = [list(row) for row in matrix]
    if not rows:
        return 0
    width = len(rows[0])
    heights = [0] * width
    best = 0
    for row in rows:
        if len(row) != width:
            raise ValueError("matrix rows must all have the same length")
        heights = [h + 1 if cell in ("1", 1) else 0 for h, cell in zip(heights, row)]
        best = max(best, largest_rectangle_area(heights))
    return best


def next_greater_circular(nums):
    """Return, for each value, the next greater value searching circularly, or None."""
    nums = list(nums)
    result = [None] * len(nums)
    stack = []
    for _ in range(2):
        for i, value in reversed(list(enumerate(nums))):
            while stack and stack[-1] <= value:
                stack.pop()
            result[i] = stack[-1] if stack else None
            stack.append(value)
    return result


def previous_smaller(values):
    """Return, for each value, the nearest strictly smaller value to its left, or None."""
    stack = []
    result = []
    for value in values:
        while stack and stack[-1] >= value:
            stack.pop()
        result.append(stack[-1] if stack else None)
        stack.append(value)
    return result


def remove_k_digits(num, k):
    """Return the smallest number left after removing k digits from the digit string num."""
    if k < 0:
        raise ValueError("k must be non-negative")
    if k >= len(num):
        return "0"
    stack = []
    for digit in num:
        while k and stack and digit < stack[-1]:
            stack.pop()
            k -= 1
        stack.append(digit)
        if len(stack) == 1 and digit == "0":
            stack.pop()
    if k:
        del stack[-k:]
    return "".join(stack) or "0"


def sliding_window_max(nums, k):
    """Return the maximum of every window of k consecutive values."""
    nums = list(nums)
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of values")
    window = deque()
    result = []
    for j, value in enumerate(nums):
        if window and window[0] <= j - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(j)
        if j >= k - 1:
            result.append(nums[window[0]])
    return result


def sum_subarray_mins(arr):
    """Return the sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""
    arr = list(arr)
    n = len(arr)
    left = []
    stack = []
    for i, value in enumerate(arr):
        while stack and arr[stack[-1]] > value:
            stack.pop()
        left.append(i - stack[-1] if stack else i + 1)
        stack.append(i)
    right = [0] * n
    stack = []
    for i in reversed(range(n)):
        while stack and arr[stack[-1]] >= arr[i]:
            stack.pop()
        right[i] = stack[-1] - i if stack else n - i
        stack.append(i)
    return sum(value * l * r for value, l, r in zip(arr, left, right)) % MOD


def _extreme_total(nums, should_pop):
    n = len(nums)
    total = 0
    stack = []
    for i in range(n + 1):
        while stack and (i == n or should_pop(nums[stack[-1]], nums[i])):
            mid = stack.pop()
            left = stack[-1] if stack else -1
            total += nums[mid] * (i - mid) * (mid - left)
        stack.append(i)
    return total


def sum_subarray_ranges(nums):
    """Return the sum over all contiguous subarrays of their largest minus smallest value."""
    nums = list(nums)
    return _extreme_total(nums, operator.le) - _extreme_total(nums, operator.ge)


def find_celebrity(matrix):
    """Return the index of the person everyone knows and who knows no one, or None.

    matrix[i][j] is truthy when person i knows person j.
    """
    n = len(matrix)
    candidates = list(range(n))
    while len(candidates) > 1:
        a = candidates.pop()
        b = candidates.pop()
        if matrix[a][b]:
            candidates.append(b)
        elif matrix[b][a]:
            candidates.append(a)
    if not candidates:
        return None
    person = candidates.pop()
    for other in range(n):
        if other != person and (not matrix[other][person] or matrix[person][other]):
            return None
    return person


def trap_rain_water_stack(heights):
    """Return how much rain water an elevation map traps, using a stack of bars."""
    heights = list(heights)
    stack = []
    water = 0
    for i, current in enumerate(heights):
        while stack and current > heights[stack[-1]]:
            bottom = heights[stack.pop()]
            if not stack:
                break
            distance = i - stack[-1] - 1
            bounded = min(current, heights[stack[-1]]) - bottom
            water += distance * bounded
        stack.append(i)
    return water