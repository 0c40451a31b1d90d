"""Backtracking generators and searches: strings, permutations, subsets, coins, grids."""

from collections import Counter


def binary_strings_without_consecutive_ones(k):
    """Return every binary string of length k with no two adjacent '1's, in ascending order."""
    if k <= 0:
        return []
    results = []

    def extend(prefix):
        if len(prefix) == k:
            results.append(prefix)
            return
        extend(prefix + "0")
        if prefix[-1] == "0":
            extend(prefix + "1")

    extend("0")
    extend("1")
    return results


def unique_permutations(s):
    """Return every distinct arrangement of the characters of s, in ascending order."""
    counts = Counter(s)
    alphabet = sorted(counts)
    length = len(s)
    results = []
    current = []

    def build():
        if len(current) == length:
            results.append("".join(current))
            return
        for char in alphabet:
            if not counts[char]:
                continue
            counts[char] -= 1
            current.append(char)
            build()
            current.pop()
            counts[char] += 1

    build()
    return results


def generate_parentheses(n):
    """Return every well-formed string of n pairs of parentheses.

    Strings that open earlier come first.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    results = []

    def build(current, opened, closed):
        if len(current) == 2 * n:
            results.append(current)
            return
        if opened < n:
            build(current + "(", opened + 1, closed)
        if closed < opened:
            build(current + ")", opened, closed + 1)

    build("", 0, 0)
    return results


def min_coins(coins, total):
    """Return the fewest coins, each usable any number of times, that sum to total.

    Non-positive denominations are ignored. Returns None when total cannot be made.
    """
    if total < 0:
        return None
    usable = [coin for coin in coins if coin > 0]
    best = [0] + [None] * total
    for amount in range(1, total + 1):
        best[amount] = min(
            (
                best[amount - coin] + 1
                for coin in usable
                if coin <= amount and best[amount - coin] is not None
            ),
            default=None,
        )
    return best[total]


def subsets(nums):
    """Return every subset of nums, in lexicographic order of the chosen positions."""
    nums = list(nums)
    results = []
    current = []

    def build(start):
        results.append(list(current))
        for i in range(start, len(nums)):
            current.append(nums[i])
            build(i + 1)
            current.pop()

    build(0)
    return results


_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def word_exists(board, word):
    """Return whether word can be traced through horizontally or vertically adjacent cells.

    Each cell is used at most once. Rows may be strings or sequences of characters.
    """
    grid = [list(row) for row in board]
    if not word or not grid or not grid[0]:
        return False
    rows = len(grid)
    visited = set()

    def trace(r, c, idx):
        if idx == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < len(grid[r])):
            return False
        if (r, c) in visited or grid[r][c] != word[idx]:
            return False
        visited.add((r, c))
        found = any(trace(r + dr, c + dc, idx + 1) for dr, dc in _STEPS)
        visited.discard((r, c))
        return found

    return any(
        cell == word[0] and trace(r, c, 0)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
    )