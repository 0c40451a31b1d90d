"""Counting problems solved with merge sort."""


def count_greater_to_right(arr, indices):
    """For each queried index, count the later elements strictly greater than arr[index]."""
    arr = list(arr)
    n = len(arr)
    counts = [0] * n

    def merge_sort(items):
        if len(items) <= 1:
            return items
        mid = (len(items) + 1) // 2
        left = merge_sort(items[:mid])
        right = merge_sort(items[mid:])
        merged = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i][0] < right[j][0]:
                counts[left[i][1]] += len(right) - j
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    merge_sort([(value, i) for i, value in enumerate(arr)])
    result = []
    for index in indices:
        if not 0 <= index < n:
            raise IndexError(f"index {index} is out of range")
        result.append(counts[index])
    return result