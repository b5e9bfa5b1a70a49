import logging
import math

from chain import Chain

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 16
MAX_LOAD_FACTOR = 0.75
HASH_MULTIPLIER = 31
MULTIPLICATION_CONSTANT = 0.631312491412


def default_hash(key, bucket_count):
    """Polynomial rolling hash over the characters of ``str(key)``.

    The running code is reduced modulo ``bucket_count`` at every step, so the
    result depends on the table size and must be recomputed after a resize.
    """
    hash_code = 0
    for ch in str(key):
        hash_code = (hash_code * HASH_MULTIPLIER + ord(ch)) % bucket_count
    return hash_code


def multiplication_hash(key, bucket_count):
    """Multiplicative hashing on top of :func:`default_hash`.

    Works for any positive ``bucket_count``, not only powers of two.
    """
    value = default_hash(key, bucket_count) * MULTIPLICATION_CONSTANT
    return math.floor(bucket_count * (value - math.floor(value)))


class HashMap:
    def __init__(self, hash_fn=default_hash, bucket_count=DEFAULT_BUCKET_COUNT,
                 max_load_factor=MAX_LOAD_FACTOR):
        if not callable(hash_fn):
            raise TypeError("hash_fn must be callable")
        if not isinstance(max_load_factor, (int, float)) or max_load_factor <= 0:
            raise ValueError("max_load_factor must be a positive number")
        self._hash_fn = hash_fn
        self._max_load_factor = max_load_factor
        self._length = 0
        self._buckets = []
        self.resize(bucket_count)

    @property
    def bucket_count(self):
        return len(self._buckets)

    @property
    def hash_fn(self):
        return self._hash_fn

    @property
    def max_load_factor(self):
        return self._max_load_factor

    def hash(self, key):
        return self._hash_fn(key, len(self._buckets)) % len(self._buckets)

    def _bucket(self, key):
        return self._buckets[self.hash(key)]

    def load_factor(self):
        return self._length / len(self._buckets)

    def resize(self, bucket_count):
        """Replace the bucket array with ``bucket_count`` empty chains.

        Every stored entry is dropped. Callers that need the entries must
        snapshot them first and set them again afterwards.
        """
        if isinstance(bucket_count, bool) or not isinstance(bucket_count, int) or bucket_count <= 0:
            raise ValueError("bucket_count must be a positive integer")
        self._buckets = [Chain() for _ in range(bucket_count)]
        self._length = 0

    def resize_buckets_if_needed(self):
        if self.load_factor() < self._max_load_factor:
            return False
        elements = self.entries()
        old_count = len(self._buckets)
        self.resize(old_count * 2)
        for key, value in elements:
            self.set(key, value)
        logger.debug("resized buckets %d -> %d (%d entries)",
                     old_count, len(self._buckets), len(elements))
        return True

    def set(self, key, value):
        self.resize_buckets_if_needed()
        bucket = self._bucket(key)
        before = bucket.count
        bucket.append(key, value)
        self._length += bucket.count - before

    def get(self, key, default=None):
        entry = self._bucket(key).search(key)
        if entry is None:
            return default
        return entry.value

    def has(self, key):
        return self._bucket(key).search(key) is not None

    def remove(self, key):
        bucket = self._bucket(key)
        entry = bucket.search(key)
        if entry is None:
            return False
        bucket.remove(entry)
        self._length -= 1
        return True

    def length(self):
        return self._length

    def is_empty(self):
        return self._length == 0

    def clear(self):
        for bucket in self._buckets:
            bucket.clear()
        self._length = 0

    def keys(self):
        result = []
        for bucket in self._buckets:
            for entry in bucket:
                result.append(entry.key)
        return result

    def values(self):
        result = []
        for bucket in self._buckets:
            for entry in bucket:
                result.append(entry.value)
        return result

    def entries(self):
        result = []
        for bucket in self._buckets:
            for entry in bucket:
                result.append((entry.key, entry.value))
        return result

    def bucket_sizes(self):
        return [bucket.count for bucket in self._buckets]

    def copy(self):
        """Create a copy of this HashMap.

        Note: This performs a shallow copy of values. The copy uses the same
        hash function, bucket count and load factor threshold.
        """
        new_map = HashMap(self._hash_fn, len(self._buckets), self._max_load_factor)
        for key, value in self.entries():
            new_map.set(key, value)
        return new_map

    def format_buckets(self):
        lines = [f"load factor: {self.load_factor()}"]
        for index, bucket in enumerate(self._buckets):
            lines.append(f"-- bucket {index} --")
            parts = [f"(key: {entry.key}, value: {entry.value})" for entry in bucket]
            parts.append("None")
            lines.append(" -> ".join(parts))
        return "\n".join(lines)

    def print_buckets(self, file=None):
        print(self.format_buckets(), file=file)

    def __len__(self):
        return self._length

    def __contains__(self, key):
        return self.has(key)

    def __getitem__(self, key):
        entry = self._bucket(key).search(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self):
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key

    def __repr__(self):
        pairs = ", ".join(f"{key!r}: {value!r}" for key, value in self.entries())
        return f"HashMap({{{pairs}}})"
