from list_script.list_script_patterns import ListScriptPatterns
from list_operation import ListOperation, InitializeOperation, AppendOperation, InsertOperation, \
    RemoveOperation, PrintOperation
from doubly_linked_list import DoublyLinkedList, LinkedListError
from logger import Logger
import regex  # for parsing the script file. we use `regex` rather than known `re` to collect repeated captures.


SCRIPT_PREFIX_WIDTH = 16


# Used to print the progress of a script run to the run-log.
class ListScriptExecutionLogger:
    @staticmethod
    def operation_performed(operation: ListOperation, linked_list: DoublyLinkedList):
        if operation.get_type() == 'print':
            return  # the print operation logs its own line.
        if operation.get_type() == 'remove':
            outcome = 'removed' if operation.result else 'not found'
        else:
            outcome = 'node #{}'.format(operation.result)
        Logger().log('{op:<24} {outcome:<12} length={length}'.format(
            op=str(operation), outcome=outcome, length=len(linked_list)),
            log_type_name='operations')

    @staticmethod
    def operation_failed(operation: ListOperation, error: LinkedListError):
        Logger().log('{op:<24} FAILED       {error_type}: {error}'.format(
            op=str(operation), error_type=type(error).__name__, error=error),
            log_type_name='errors')

    @staticmethod
    def invariants_checked(linked_list: DoublyLinkedList):
        Logger().log('     invariants hold: head={} tail={} length={}'.format(
            linked_list.head, linked_list.tail, len(linked_list)),
            log_type_name='invariants')


# A sequence of list operations, usually loaded from a list script file.
# Script syntax (one statement per line, `#` or `//` starts a comment):
#   init <int>
#   append <int> [<int> ...]
#   insert <int> at <position>
#   remove <int>
#   print
class ListScript:
    class ParseError(ValueError):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)

    def __init__(self, name='<script>'):
        self._name = name
        self._operations = []

    @property
    def name(self):
        return self._name

    @property
    def operations(self):
        return list(self._operations)

    def add_operation(self, operation: ListOperation):
        assert isinstance(operation, ListOperation)
        assert not operation.is_completed
        self._operations.append(operation)

    # Factory function. Creates a `ListScript` from already-built operations.
    @staticmethod
    def from_operations(operations, name='<script>'):
        script = ListScript(name)
        for operation in operations:
            script.add_operation(operation)
        return script

    # Factory function. Parses the given script file.
    @staticmethod
    def load(script_filename):
        with open(script_filename, 'r') as script_file:
            return ListScript.parse_lines(script_file, name=script_filename)

    # Factory function. Parses the given lines (any iterable of strings).
    @staticmethod
    def parse_lines(lines, name='<script>'):
        script = ListScript(name)
        for line_number, line in enumerate(lines, start=1):
            line = line.strip()
            if not line:
                continue  # ignore a blank line
            if ListScript.is_comment_line(line):
                continue
            script.parse_and_add_operation(line, line_number)
        return script

    @staticmethod
    def is_comment_line(script_line):
        comment_line_parser = regex.compile(ListScriptPatterns.comment_line_pattern)
        return comment_line_parser.match(script_line) is not None

    def parse_and_add_operation(self, operation_str, line_number=None):
        parsed_init = regex.match(ListScriptPatterns.init_operation_pattern, operation_str)
        parsed_append = regex.match(ListScriptPatterns.append_operation_pattern, operation_str)
        parsed_insert = regex.match(ListScriptPatterns.insert_operation_pattern, operation_str)
        parsed_remove = regex.match(ListScriptPatterns.remove_operation_pattern, operation_str)
        parsed_print = regex.match(ListScriptPatterns.print_operation_pattern, operation_str)

        number_of_parsed_op_types = bool(parsed_init) + bool(parsed_append) + bool(parsed_insert) + \
                                    bool(parsed_remove) + bool(parsed_print)
        if number_of_parsed_op_types != 1:
            where = ' (line {})'.format(line_number) if line_number is not None else ''
            raise ListScript.ParseError('{}{}: cannot parse statement `{}`.'.format(
                self._name, where, operation_str))

        if parsed_init:
            self.add_operation(InitializeOperation(ListScript._single_int(parsed_init, 'init_value')))

        elif parsed_append:
            for value in parsed_append.capturesdict()['append_value']:
                self.add_operation(AppendOperation(int(value)))

        elif parsed_insert:
            value = ListScript._single_int(parsed_insert, 'insert_value')
            position = ListScript._single_int(parsed_insert, 'insert_position')
            self.add_operation(InsertOperation(value, position))

        elif parsed_remove:
            self.add_operation(RemoveOperation(ListScript._single_int(parsed_remove, 'remove_value')))

        elif parsed_print:
            self.add_operation(PrintOperation())

    @staticmethod
    def _single_int(parsed_operation, group_name):
        captures = parsed_operation.capturesdict()[group_name]
        assert len(captures) == 1
        return int(captures[0])

    # Performs the operations in order on the given list.
    # A `LinkedListError` fails only its own operation: it is logged and the run goes on.
    # The invariants of the list are checked after each mutating operation.
    # Returns the number of failed operations.
    def run(self, linked_list: DoublyLinkedList):
        old_prefix = Logger().prefix
        if Logger().is_log_type_set_on('script_prefix'):
            Logger().prefix = self._name.ljust(SCRIPT_PREFIX_WIDTH) + '|  '

        nr_failed = 0
        try:
            for operation in self._operations:
                try:
                    operation.perform(linked_list)
                except LinkedListError as error:
                    nr_failed += 1
                    ListScriptExecutionLogger.operation_failed(operation, error)
                    continue
                ListScriptExecutionLogger.operation_performed(operation, linked_list)
                if operation.is_mutating:
                    linked_list.assert_valid()
                    ListScriptExecutionLogger.invariants_checked(linked_list)
        finally:
            Logger().prefix = old_prefix
        return nr_failed
