class Entry:
    def __init__(self, key, value):
        self.key = key
        self.value = value
        self.prev = None
        self.next = None
        self._owner = None

    def __repr__(self):
        return f"Entry(key={self.key!r}, value={self.value!r})"


class Chain:
    """Doubly linked list of key/value entries, used as one hash bucket.

    New keys go in at the head, so traversal runs newest first. Keys are
    unique within a chain: appending an existing key updates its value.
    """

    def __init__(self):
        self._head = None
        self._tail = None
        self._count = 0
        # Entries carry this token while linked; clear() swaps it out.
        self._token = object()

    @property
    def head(self):
        return self._head

    @property
    def tail(self):
        return self._tail

    @property
    def count(self):
        return self._count

    def search(self, key):
        current = self._head
        while current is not None and current.key != key:
            current = current.next
        return current

    def append(self, key, value):
        existing = self.search(key)
        if existing is not None:
            existing.value = value
            return existing

        entry = Entry(key, value)
        entry._owner = self._token
        entry.next = self._head
        if self._head is not None:
            self._head.prev = entry
        self._head = entry
        if self._tail is None:
            self._tail = entry
        self._count += 1
        return entry

    def remove(self, entry):
        if self._count == 0 or entry._owner is not self._token:
            raise ValueError("Chain.remove: entry does not belong to this chain")

        if entry.prev is None:
            self._head = entry.next
        else:
            entry.prev.next = entry.next

        if entry.next is None:
            self._tail = entry.prev
        else:
            entry.next.prev = entry.prev

        entry.prev = None
        entry.next = None
        entry._owner = None
        self._count -= 1

    def clear(self):
        self._head = None
        self._tail = None
        self._count = 0
        self._token = object()

    def for_each(self, visit):
        for entry in self:
            visit(entry)

    def size(self):
        return self._count

    def is_empty(self):
        return self._count == 0

    def __iter__(self):
        current = self._head
        while current is not None:
            # Read ahead so visit() may remove the current entry.
            following = current.next
            yield current
            current = following

    def __len__(self):
        return self._count
