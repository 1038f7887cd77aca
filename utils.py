import argparse


class _Singleton(type):
    """ A metaclass that creates a Singleton base class when called. """
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super(_Singleton, cls).__call__(*args, **kwargs)
        return cls._instances[cls]


class Singleton(_Singleton('SingletonMeta', (object,), {})):
    pass


# Turns a flag name like `--log-operations` into its argparse destination `log_operations`.
def flag_to_dest(flag_name: str):
    assert flag_name.startswith('-')
    return flag_name.lstrip('-').replace('-', '_')


# Turns a flag name into its negated form: `--log-operations` -> `--no-log-operations`, `-lo` -> `-nlo`.
def negated_flag(flag_name: str):
    assert len(flag_name) > 1 and flag_name[0] == '-'
    if flag_name[1] == '-':  # long flag name
        return '--no-' + flag_name[2:]
    return '-n' + flag_name[1:]


# Adds a pair of mutually exclusive on/off flags to the parser, for a single boolean destination.
# The on-flags are the given names, and the off-flags are their negated forms (see `negated_flag`).
def add_feature_to_parser(parser: argparse.ArgumentParser, feature_names, help='', default=False, dest=None):
    if isinstance(feature_names, str):
        feature_names = [feature_names]
    assert isinstance(feature_names, list) and len(feature_names) > 0

    if dest is None:
        dest = flag_to_dest(feature_names[0])
    off_feature_names = [negated_flag(feature_name) for feature_name in feature_names]

    feature_parser = parser.add_mutually_exclusive_group(required=False)
    feature_parser.add_argument(*feature_names, action='store_true', dest=dest,
                                help='{} By default turned {}. To turn it {} use: {}'.format(
                                    help, 'ON' if default else 'OFF', 'off' if default else 'off explicitly',
                                    ', '.join(off_feature_names)))
    feature_parser.add_argument(*off_feature_names, action='store_false', dest=dest, help=argparse.SUPPRESS)
    parser.set_defaults(**{dest: default})
    return feature_parser
