"""String problems: distinct-character counts, anagrams, palindromes and windows."""

from collections import Counter, defaultdict

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _substrings_with_at_most(s, k):
    counts = Counter()
    total = 0
    left = 0
    distinct = 0
    for right, char in enumerate(s):
        if counts[char] == 0:
            distinct += 1
        counts[char] += 1
        while distinct > k:
            counts[s[left]] -= 1
            if counts[s[left]] == 0:
                distinct -= 1
            left += 1
        total += right - left + 1
    return total


def count_substrings_with_k_distinct(s, k):
    """Return how many substrings of s hold exactly k distinct characters."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return _substrings_with_at_most(s, k) - _substrings_with_at_most(s, k - 1)


def group_anagrams(strs):
    """Group strings that are anagrams of each other, groups in order of first appearance."""
    groups = defaultdict(list)
    for word in strs:
        groups["".join(sorted(word))].append(word)
    return list(groups.values())


def longest_palindrome(s):
    """Return the longest palindromic substring of s; the earliest wins a tie."""
    best = ""
    for centre in range(len(s)):
        for left, right in ((centre, centre), (centre, centre + 1)):
            while left >= 0 and right < len(s) and s[left] == s[right]:
                if right - left + 1 > len(best):
                    best = s[left:right + 1]
                left -= 1
                right += 1
    return best


def character_replacement(s, k):
    """Return the longest run of one repeated character reachable with k replacements."""
    counts = Counter()
    left = 0
    max_freq = 0
    max_len = 0
    for right, char in enumerate(s):
        counts[char] += 1
        max_freq = max(max_freq, counts[char])
        if right - left + 1 - max_freq > k:
            counts[s[left]] -= 1
            max_freq = 0
            left += 1
        if right - left + 1 - max_freq <= k:
            max_len = max(max_len, right - left + 1)
    return max_len


def min_window(s, t):
    """Return the shortest substring of s holding every character of t, or ""."""
    if not t or len(s) < len(t):
        return ""
    needed = Counter(t)
    matched = 0
    left = 0
    best_start, best_len = None, len(s) + 1
    for right, char in enumerate(s):
        if needed[char] > 0:
            matched += 1
        needed[char] -= 1
        while matched == len(t):
            if right - left + 1 < best_len:
                best_start, best_len = left, right - left + 1
            needed[s[left]] += 1
            if needed[s[left]] > 0:
                matched -= 1
            left += 1
    if best_start is None:
        return ""
    return s[best_start:best_start + best_len]


def frequency_sort(s):
    """Return s with its characters grouped, most frequent first.

    Characters of equal frequency come in descending character order.
    """
    ranked = sorted(Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(char * count for char, count in ranked)


def parse_int(s):
    """Parse a leading signed decimal integer, clamped to the signed 32-bit range.

    Leading spaces are skipped; parsing stops at the first non-digit, and a
    string without digits gives 0.
    """
    rest = s.lstrip(" ")
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        digit = ord(char) - ord("0")
        if value > (INT_MAX - digit) // 10:
            return INT_MIN if negative else INT_MAX
        value = value * 10 + digit
    return -value if negative else value


def find_different_binary_string(nums):
    """Return the smallest n-bit binary string absent from the n given n-bit strings."""
    n = len(nums)
    if n == 0:
        return ""
    for word in nums:
        if len(word) != n or set(word) - {"0", "1"}:
            raise ValueError(f"{word!r} is not a binary string of length {n}")
    present = {int(word, 2) for word in nums}
    for value in range(1 << n):
        if value not in present:
            return format(value, f"0{n}b")
    return ""