import sys
import argparse
from doubly_linked_list import DoublyLinkedList
from list_operation import InitializeOperation, AppendOperation, InsertOperation, RemoveOperation, PrintOperation
from list_script.list_script import ListScript
from logger import Logger, LOG_TYPES
from utils import add_feature_to_parser

DEMO_SCRIPT_NAME = 'demo'


# Helper function to parse the (optional) arguments for this script.
def args_parser(argv=None):
    parser = argparse.ArgumentParser(
        description='Doubly linked list of integers / demonstration driver.')
    parser.add_argument('--scripts', '--script', '-s',
                        type=str, nargs='+', required=False,
                        help="""
List script file-names to run, each one on a fresh empty list.
If not specified, the built-in demonstration is run: initialize with 10, append 20..100,
insert 5 at position 0, insert 105 at position 11 (clamped to the end) and remove 5.
""")

    add_feature_to_parser(parser, ['--log-operations', '-lo'], default=True,
                          help='Verbose mode. Use in order to print each performed operation and its outcome.')
    add_feature_to_parser(parser, ['--log-invariants', '-li'], default=False,
                          help='Verbose mode. Use in order to print the invariants check after each mutation.')
    add_feature_to_parser(parser, ['--log-errors', '-le'], default=True,
                          help='Use in order to print the operations that failed with a list error.')
    add_feature_to_parser(parser, ['--log-script-prefix'], default=False,
                          help='Use in order to print the script name in the left side of each run-log line.')

    log_all_or_none = parser.add_mutually_exclusive_group(required=False)
    log_all_or_none.add_argument('--log-all', '-la', action='store_true', default=False,
                                 help='Turn on all logs.')
    log_all_or_none.add_argument('--log-none', '-ln', action='store_true', default=False,
                                 help='Turn off all logs.')

    return parser.parse_args(argv)


# Applies the `--log-*` arguments to the logger.
def configure_logger(args):
    for log_type_name in LOG_TYPES:
        set_on = getattr(args, 'log_' + log_type_name)
        if args.log_all:
            set_on = True
        elif args.log_none:
            set_on = False
        Logger().toggle_log_type(log_type_name, set_on)


# The fixed sequence of operations run when no script is given.
def demo_script():
    operations = [InitializeOperation(10), PrintOperation()]
    operations += [AppendOperation(value * 10) for value in range(2, 11)]
    operations += [PrintOperation(),
                   InsertOperation(5, 0), PrintOperation(),
                   InsertOperation(105, 11), PrintOperation(),
                   RemoveOperation(5), PrintOperation()]
    return ListScript.from_operations(operations, name=DEMO_SCRIPT_NAME)


def run_script(script: ListScript):
    header = '/' * 12 + ' BEGIN: `{}` '.format(script.name) + '\\' * 12
    Logger().log(header)
    linked_list = DoublyLinkedList.create_empty()
    nr_failed = script.run(linked_list)
    Logger().log('\\' * 12 + ' END: `{}` ({} failed operations) '.format(script.name, nr_failed) + '/' * 12)
    Logger().log()
    return linked_list


def main(argv=None):
    # Parse all input (optional) arguments for the script.
    args = args_parser(argv)
    configure_logger(args)

    if not args.scripts:
        run_script(demo_script())
        return 0

    for script_filename in args.scripts:
        try:
            script = ListScript.load(script_filename)
        except (ListScript.ParseError, OSError) as error:
            Logger().log('Cannot load list script `{}`: {}'.format(script_filename, error))
            return 1
        run_script(script)
    return 0


if __name__ == '__main__':
    sys.exit(main())
