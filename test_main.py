import os

from logger import Logger
import main

SCRIPTS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'list_scripts')


def printed_lists(out):
    return [line for line in out.splitlines() if line.startswith('Linked List Forward:')]


def test_demo_runs_and_succeeds(capsys):
    assert main.main([]) == 0
    assert printed_lists(capsys.readouterr().out) == [
        'Linked List Forward: 10',
        'Linked List Forward: 10 <-> 20 <-> 30 <-> 40 <-> 50 <-> 60 <-> 70 <-> 80 <-> 90 <-> 100',
        'Linked List Forward: 5 <-> 10 <-> 20 <-> 30 <-> 40 <-> 50 <-> 60 <-> 70 <-> 80 <-> 90 <-> 100',
        'Linked List Forward: 5 <-> 10 <-> 20 <-> 30 <-> 40 <-> 50 <-> 60 <-> 70 <-> 80 <-> 90 <-> 100 <-> 105',
        'Linked List Forward: 10 <-> 20 <-> 30 <-> 40 <-> 50 <-> 60 <-> 70 <-> 80 <-> 90 <-> 100 <-> 105',
    ]


def test_demo_with_all_logs_off_prints_only_the_lists_and_banners(capsys):
    assert main.main(['--log-none']) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert len(printed_lists('\n'.join(lines))) == 5
    assert len(lines) == 5 + 2  # BEGIN/END banners


def test_log_flags_configure_the_logger():
    main.main(['--no-log-operations', '--log-invariants', '--log-none'])
    assert not Logger().is_log_type_set_on('operations')
    assert not Logger().is_log_type_set_on('invariants')

    main.main(['--no-log-operations', '--log-invariants'])
    assert not Logger().is_log_type_set_on('operations')
    assert Logger().is_log_type_set_on('invariants')
    assert Logger().is_log_type_set_on('errors')
    assert not Logger().is_log_type_set_on('script_prefix')


def test_run_script_files(capsys):
    scripts = [os.path.join(SCRIPTS_DIR, 'basic.txt'), os.path.join(SCRIPTS_DIR, 'errors.txt')]
    assert main.main(['--scripts'] + scripts) == 0
    out = capsys.readouterr().out
    assert 'BEGIN: `{}`'.format(scripts[0]) in out
    assert '(3 failed operations)' in out
    assert 'Linked List Forward: 1 <-> -3' in out


def test_bad_script_exits_with_failure(tmp_path, capsys):
    bad_script = tmp_path / 'bad.txt'
    bad_script.write_text('init 1\npop\n')
    assert main.main(['--scripts', str(bad_script)]) == 1
    assert 'Cannot load list script' in capsys.readouterr().out


def test_missing_script_exits_with_failure(tmp_path, capsys):
    assert main.main(['-s', str(tmp_path / 'missing.txt')]) == 1
    assert 'Cannot load list script' in capsys.readouterr().out
