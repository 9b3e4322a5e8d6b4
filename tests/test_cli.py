# -*- coding: utf-8 -*-
#
import logging
import sys

import pytest

from sinedft import cli, transform


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger('sinedft')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.mark.parametrize('n, frequency, bins', [
    (8, 1, [1, 7]),
    (16, 3, [3, 13]),
    (16, -3, [3, 13]),
    ])
def test_main(capsys, n, frequency, bins):
    assert cli.main([str(n), str(frequency)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    for line, k in zip(lines, bins):
        assert line.startswith('Frequency %d: ' % k)
        assert line.endswith('5.000000e-01 i')
    return


def test_signs(capsys):
    assert cli.main(['8', '1']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(' + -5.000000e-01 i')
    assert lines[1].endswith(' + 5.000000e-01 i')
    return


def test_zero_frequency(capsys):
    assert cli.main(['16', '0']) == 0
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == ''
    return


@pytest.mark.parametrize('argv', [
    [],
    ['8'],
    ['8', '1', '3'],
    ['eight', '1'],
    ['8', '1.5'],
    ['0', '1'],
    ['-4', '1'],
    ['8', '1', '--policy', 'relative'],
    ['8', '1', '--tolerance', '0'],
    ])
def test_usage(capsys, monkeypatch, argv):
    def fail(*args, **kwargs):
        raise AssertionError('computation must not run')
    monkeypatch.setattr(cli, 'run', fail)

    assert cli.main(argv, prog='sinedft') == 1
    out = capsys.readouterr().out
    assert out.splitlines()[0] == 'Usage: sinedft <N> <FREQUENCY>'
    assert 'error' in out
    return


@pytest.mark.parametrize('backend', ['numpy', 'scipy', 'direct'])
def test_options(capsys, backend):
    argv = [
        '--backend', backend, '--policy', 'componentwise',
        '--tolerance', '1e-8', '100', '7'
        ]
    assert cli.main(argv) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(':')[0] for line in lines] \
        == ['Frequency 7', 'Frequency 93']
    return


def test_huge_tolerance(capsys):
    assert cli.main(['--tolerance', '1.0', '8', '1']) == 0
    assert capsys.readouterr().out == ''
    return


def test_verbose(capsys):
    assert cli.main(['-v', '8', '1']) == 0
    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 2
    assert 'INFO: Sampling sin(1 x) at 8 points' in captured.err
    assert 'expected bins: [1, 7]' in captured.err
    # debug output only with -vv
    assert 'Allocating' not in captured.err

    assert cli.main(['-vv', '8', '1']) == 0
    assert 'DEBUG:' in capsys.readouterr().err
    return


def test_run(capsys):
    assert cli.run(16, 3) == 2
    assert cli.run(16, 8) == 0
    out = capsys.readouterr().out.splitlines()
    assert [line.split(':')[0] for line in out] \
        == ['Frequency 3', 'Frequency 13']
    return


def test_version(capsys):
    assert cli.main(['--version'], prog='sinedft') == 0
    assert capsys.readouterr().out.startswith('sinedft ')
    return


def test_help(capsys):
    assert cli.main(['--help'], prog='sinedft') == 0
    assert 'FREQUENCY' in capsys.readouterr().out
    return


@pytest.mark.parametrize('argv, message', [
    (['eight', '1'], "argument N: invalid int value: 'eight'"),
    (['8', '1', '--tolerance', 'tiny'], "invalid float value: 'tiny'"),
    (['0', '1'], 'argument N: must be positive, got 0'),
    ])
def test_error_message(capsys, argv, message):
    assert cli.main(argv, prog='sinedft') == 1
    out = capsys.readouterr().out
    assert message in out
    assert '_positive' not in out
    return


def test_program_name(capsys, monkeypatch):
    monkeypatch.setattr(sys, 'argv', ['/usr/local/bin/freqdemo', '8'])
    assert cli.main(['8']) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == 'Usage: freqdemo <N> <FREQUENCY>'
    assert out[1].startswith('freqdemo: error: ')

    assert cli.main(['8'], prog='python -m sinedft') == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == 'Usage: python -m sinedft <N> <FREQUENCY>'
    return


def test_out_of_memory(capsys, monkeypatch):
    def zeros(*args, **kwargs):
        raise MemoryError('Unable to allocate')
    monkeypatch.setattr(transform.numpy, 'zeros', zeros)

    with pytest.raises(MemoryError):
        cli.main(['8', '1'], prog='sinedft')
    # nothing reported
    assert capsys.readouterr().out == ''
    return
