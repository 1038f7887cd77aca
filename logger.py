import sys
from utils import Singleton


# The names of the log types that can be turned on/off from the command line.
LOG_TYPES = ('operations', 'invariants', 'errors', 'script_prefix')


# The run-log of the demo driver and of the list scripts.
# There is a single logger instance (it is a `Singleton`), so every module calls `Logger().log(..)`.
# A log line may be tagged with a log type; it is printed only if that type is turned on.
# All types are turned on by default. Untagged lines are always printed.
class Logger(Singleton):
    def __init__(self):
        self._turned_off_log_type_names = set()
        self._prefix = ''
        self._stream = None

    # Restores the initial state. The instance is shared, so tests call it between runs.
    def reset(self):
        self._turned_off_log_type_names = set()
        self._prefix = ''
        self._stream = None

    def turn_on(self, log_type_name):
        assert log_type_name in LOG_TYPES
        self._turned_off_log_type_names.discard(log_type_name)

    def turn_off(self, log_type_name):
        assert log_type_name in LOG_TYPES
        self._turned_off_log_type_names.add(log_type_name)

    def toggle_log_type(self, log_type_name, set_on: bool):
        if set_on:
            self.turn_on(log_type_name)
        else:
            self.turn_off(log_type_name)

    def is_log_type_set_on(self, log_type_name):
        return log_type_name not in self._turned_off_log_type_names

    @property
    def prefix(self):
        return self._prefix

    @prefix.setter
    def prefix(self, new_prefix):
        self._prefix = new_prefix

    # Defaults to whatever `sys.stdout` is at the time of logging.
    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    @stream.setter
    def stream(self, new_stream):
        self._stream = new_stream

    def log(self, log_str='', log_type_name=None):
        assert log_type_name is None or log_type_name in LOG_TYPES
        if log_type_name is None or self.is_log_type_set_on(log_type_name):
            print(self._prefix + log_str, file=self.stream)
