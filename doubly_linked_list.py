from typing import Optional


class LinkedListError(RuntimeError):
    pass


# Raised when an operation needs an existing node (head or tail) but the list is empty.
class EmptyListError(LinkedListError):
    pass


# Raised when `initialize()` is called on a list that already holds nodes.
class InvalidState(LinkedListError):
    pass


# A doubly linked list of integers.
# The nodes are not separate objects. They live in an "arena": three parallel slot lists
# (`_values`, `_prev`, `_next`), and a node is addressed by its slot index (its "handle").
# `_prev[h]` / `_next[h]` hold the handles of the neighbours of node `h`, or None.
# A removed node's slot is pushed to `_free_slots` and reused by the next allocation,
# so a handle stays valid exactly as long as its node is in the list.
class DoublyLinkedList:
    def __init__(self):
        self._values = []
        self._prev = []
        self._next = []
        self._free_slots = []
        self._head = None
        self._tail = None
        self._count = 0

    @classmethod
    def create_empty(cls):
        return cls()

    # Factory function. The first value initializes the list and the rest are appended.
    @classmethod
    def from_values(cls, values):
        linked_list = cls()
        for value in values:
            if linked_list.is_empty():
                linked_list.initialize(value)
            else:
                linked_list.append(value)
        return linked_list

    @property
    def head(self) -> Optional[int]:
        return self._head

    @property
    def tail(self) -> Optional[int]:
        return self._tail

    def is_empty(self):
        return self._count == 0

    def value_of(self, handle: int) -> int:
        self._check_handle(handle)
        return self._values[handle]

    def next_of(self, handle: int) -> Optional[int]:
        self._check_handle(handle)
        return self._next[handle]

    def prev_of(self, handle: int) -> Optional[int]:
        self._check_handle(handle)
        return self._prev[handle]

    def initialize(self, value: int) -> int:
        if not self.is_empty():
            raise InvalidState('Cannot initialize a non-empty linked list (it holds {} nodes)'.format(self._count))
        new_node = self._allocate_node(value, None, None)
        self._head = new_node
        self._tail = new_node
        self._count = 1
        return new_node

    def append(self, value: int) -> int:
        if self._tail is None:
            raise EmptyListError('Cannot append to an empty linked list, initialize it first')
        new_node = self._allocate_node(value, self._tail, None)
        self._next[self._tail] = new_node
        self._tail = new_node
        self._count += 1
        return new_node

    # Insert a new node so that it takes the index `position` (0 is the head).
    # A position past the last node is clamped: the value is appended at the tail.
    def insert_at(self, value: int, position: int) -> int:
        if position < 0:
            raise ValueError('Insert position must be non-negative, got {}'.format(position))
        if position == 0:
            if self._head is None:
                raise EmptyListError('Cannot insert at the head of an empty linked list, initialize it first')
            new_node = self._allocate_node(value, None, self._head)
            self._prev[self._head] = new_node
            self._head = new_node
            self._count += 1
            return new_node

        # Walk forward until the node currently at index `position` is found.
        cursor = self._head
        index = 0
        while cursor is not None and index < position:
            cursor = self._next[cursor]
            index += 1
        if cursor is None:
            return self.append(value)

        # `cursor` is not the head (position >= 1), so it has a predecessor.
        predecessor = self._prev[cursor]
        assert predecessor is not None
        new_node = self._allocate_node(value, predecessor, cursor)
        self._next[predecessor] = new_node
        self._prev[cursor] = new_node
        self._count += 1
        return new_node

    # Remove the first node (scanning from the head) holding `value`.
    # Returns whether a node was removed. A missing value is not an error.
    def remove_by_value(self, value: int) -> bool:
        cursor = self._head
        while cursor is not None and self._values[cursor] != value:
            cursor = self._next[cursor]
        if cursor is None:
            return False
        self._detach_node(cursor)
        self._release_node(cursor)
        self._count -= 1
        return True

    def _detach_node(self, node):
        predecessor = self._prev[node]
        successor = self._next[node]
        if predecessor is not None:
            self._next[predecessor] = successor
        else:
            assert self._head == node
            self._head = successor
        if successor is not None:
            self._prev[successor] = predecessor
        else:
            assert self._tail == node
            self._tail = predecessor

    def traverse_forward(self):
        cursor = self._head
        while cursor is not None:
            yield self._values[cursor]
            cursor = self._next[cursor]

    def traverse_backward(self):
        cursor = self._tail
        while cursor is not None:
            yield self._values[cursor]
            cursor = self._prev[cursor]

    # Releases all of the nodes. The list can be initialized again afterwards.
    def clear(self):
        self._values.clear()
        self._prev.clear()
        self._next.clear()
        self._free_slots.clear()
        self._head = None
        self._tail = None
        self._count = 0

    def render(self) -> str:
        return ' <-> '.join(str(value) for value in self.traverse_forward())

    def __iter__(self):
        return self.traverse_forward()

    def __reversed__(self):
        return self.traverse_backward()

    def __len__(self):
        return self._count

    def __contains__(self, value):
        return any(node_value == value for node_value in self.traverse_forward())

    def __repr__(self):
        return 'DoublyLinkedList([{}])'.format(self.render())

    def _allocate_node(self, value, prev_node, next_node):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('Linked list values must be integers, got {!r}'.format(value))
        if self._free_slots:
            handle = self._free_slots.pop()
            self._values[handle] = value
            self._prev[handle] = prev_node
            self._next[handle] = next_node
            return handle
        self._values.append(value)
        self._prev.append(prev_node)
        self._next.append(next_node)
        return len(self._values) - 1

    def _release_node(self, handle):
        self._values[handle] = None
        self._prev[handle] = None
        self._next[handle] = None
        self._free_slots.append(handle)

    def _check_handle(self, handle):
        if not isinstance(handle, int) or not 0 <= handle < len(self._values) or self._values[handle] is None:
            raise ValueError('`{}` is not a handle of a node in this linked list'.format(handle))

    def assert_valid(self):
        assert (self._head is None) == (self._tail is None)
        assert (self._head is None) == (self._count == 0)
        assert len(self._values) == len(self._prev) == len(self._next)
        assert self._count + len(self._free_slots) == len(self._values)
        if self._head is not None:
            assert self._prev[self._head] is None
            assert self._next[self._tail] is None

        # Forward walk: every `next` link must be mirrored by the matching `prev` link.
        cursor = self._head
        prev = None
        size = 0
        while cursor is not None:
            assert self._values[cursor] is not None
            assert self._prev[cursor] == prev
            size += 1
            assert size <= self._count, 'cycle detected in the next links'
            prev = cursor
            cursor = self._next[cursor]
        assert prev == self._tail
        assert size == self._count

        # Backward walk must visit the same number of nodes, ending at the head.
        cursor = self._tail
        size = 0
        last = None
        while cursor is not None:
            size += 1
            assert size <= self._count, 'cycle detected in the prev links'
            last = cursor
            cursor = self._prev[cursor]
        assert last == self._head
        assert size == self._count
