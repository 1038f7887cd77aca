from abc import ABC, abstractmethod
from doubly_linked_list import DoublyLinkedList
from logger import Logger


OPERATION_TYPES = {'init', 'append', 'insert', 'remove', 'print'}
MUTATING_OPERATION_TYPES = {'init', 'append', 'insert', 'remove'}

PRINT_LINE_PREFIX = 'Linked List Forward: '


# This is a pure abstract class for an operation on a `DoublyLinkedList`.
# It is inherited by `InitializeOperation`, `AppendOperation`, `InsertOperation`,
# `RemoveOperation` and `PrintOperation`. The list scripts and the demo driver are
# sequences of operations.
# An operation is born un-completed. It becomes completed after `perform(..)` returns,
# and then its `result` holds the return value of the matching list method.
# If the list method raises, the error propagates and the operation stays un-completed.
class ListOperation(ABC):
    def __init__(self, operation_type):
        assert operation_type in OPERATION_TYPES
        self._operation_type = operation_type
        self._is_completed = False
        self._result = None

    def get_type(self):
        return self._operation_type

    @property
    def is_mutating(self):
        return self._operation_type in MUTATING_OPERATION_TYPES

    @property
    def is_completed(self):
        return self._is_completed

    @property
    def result(self):
        assert self._is_completed
        return self._result

    def perform(self, linked_list: DoublyLinkedList):
        assert not self._is_completed
        self._result = self._perform(linked_list)
        self._is_completed = True
        return self._result

    # Each inherited operation type must override & implement this method.
    @abstractmethod
    def _perform(self, linked_list: DoublyLinkedList):
        ...

    # The script-syntax form of the operation (see `ListScriptPatterns`).
    @abstractmethod
    def __str__(self):
        ...


class InitializeOperation(ListOperation):
    def __init__(self, value: int):
        super().__init__(operation_type='init')
        self._value = value

    @property
    def value(self):
        return self._value

    def _perform(self, linked_list):
        return linked_list.initialize(self._value)

    def __str__(self):
        return 'init {}'.format(self._value)


class AppendOperation(ListOperation):
    def __init__(self, value: int):
        super().__init__(operation_type='append')
        self._value = value

    @property
    def value(self):
        return self._value

    def _perform(self, linked_list):
        return linked_list.append(self._value)

    def __str__(self):
        return 'append {}'.format(self._value)


class InsertOperation(ListOperation):
    def __init__(self, value: int, position: int):
        super().__init__(operation_type='insert')
        self._value = value
        self._position = position

    @property
    def value(self):
        return self._value

    @property
    def position(self):
        return self._position

    def _perform(self, linked_list):
        return linked_list.insert_at(self._value, self._position)

    def __str__(self):
        return 'insert {} at {}'.format(self._value, self._position)


# The result is whether a node has been removed.
class RemoveOperation(ListOperation):
    def __init__(self, value: int):
        super().__init__(operation_type='remove')
        self._value = value

    @property
    def value(self):
        return self._value

    def _perform(self, linked_list):
        return linked_list.remove_by_value(self._value)

    def __str__(self):
        return 'remove {}'.format(self._value)


# The result is the printed line.
class PrintOperation(ListOperation):
    def __init__(self):
        super().__init__(operation_type='print')

    def _perform(self, linked_list):
        line = PRINT_LINE_PREFIX + linked_list.render()
        Logger().log(line)
        return line

    def __str__(self):
        return 'print'
