"""Fixed-capacity caches with least-frequently- and least-recently-used eviction."""

from collections import OrderedDict, defaultdict


def _check_capacity(capacity):
    if capacity < 0:
        raise ValueError("capacity must be non-negative")


class LFUCache:
    """Cache that evicts the least frequently used key, oldest use first on ties.

    Every get or put of a key counts as one use; get returns None on a miss.
    """

    def __init__(self, capacity):
        _check_capacity(capacity)
        self.capacity = capacity
        self._entries = {}  # key -> [value, frequency]
        self._buckets = defaultdict(OrderedDict)  # frequency -> keys, oldest first
        self._min_freq = 0

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries

    def _touch(self, key):
        entry = self._entries[key]
        freq = entry[1]
        bucket = self._buckets[freq]
        del bucket[key]
        if not bucket:
            del self._buckets[freq]
            if freq == self._min_freq:
                self._min_freq += 1
        entry[1] = freq + 1
        self._buckets[freq + 1][key] = None

    def get(self, key):
        """Return the value for key, counting a use, or None if it is absent."""
        if key not in self._entries:
            return None
        self._touch(key)
        return self._entries[key][0]

    def put(self, key, value):
        """Store value under key, evicting the least frequently used key if full."""
        if self.capacity == 0:
            return
        if key in self._entries:
            self._entries[key][0] = value
            self._touch(key)
            return
        if len(self._entries) >= self.capacity:
            bucket = self._buckets[self._min_freq]
            victim, _ = bucket.popitem(last=False)
            if not bucket:
                del self._buckets[self._min_freq]
            del self._entries[victim]
        self._entries[key] = [value, 1]
        self._min_freq = 1
        self._buckets[1][key] = None


class LRUCache:
    """Cache that evicts the least recently used key; get returns None on a miss."""

    def __init__(self, capacity):
        _check_capacity(capacity)
        self.capacity = capacity
        self._entries = OrderedDict()

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries

    def get(self, key):
        """Return the value for key, marking it most recently used, or None."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key, value):
        """Store value under key, evicting the least recently used key if full."""
        if self.capacity == 0:
            return
        self._entries.pop(key, None)
        if len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value