"""
End-to-end tests of the command line entry point with patched network calls.
"""

import io
import json
import unittest
from unittest.mock import patch

import pytest
import requests

from sdstatus.cli.main import main
from sdstatus.cli.runtime_args import NO_TARGETS_MSG, parse_args
from sdstatus.core.models import OutputFormat
from ._helpers import fake_get_factory
from .test_globals import ONION_A, ONION_B, SUCCESS_BODY


class RuntimeArgsTestCase(unittest.TestCase):
    """Argument parsing and conversion to a ScanConfig."""

    def test_defaults(self):
        args = parse_args([ONION_A])
        self.assertEqual(args.targets, [ONION_A])
        self.assertFalse(args.all)
        self.assertEqual(args.output, OutputFormat.JSON)

        cfg = args.to_scan_config()
        self.assertEqual(cfg.proxy_addr, '127.0.0.1:9050')
        self.assertEqual(cfg.metadata_path, '/metadata')
        self.assertEqual(cfg.targets_file, 'sdonion.txt')
        self.assertIsNone(cfg.timeout)

    def test_csv_and_table_flags(self):
        self.assertEqual(parse_args(['--csv', ONION_A]).output, OutputFormat.CSV)
        self.assertEqual(parse_args(['--table', ONION_A]).output, OutputFormat.TABLE)

    def test_csv_and_table_are_exclusive(self):
        with self.assertRaises(SystemExit) as ctx:
            parse_args(['--csv', '--table', ONION_A])
        self.assertEqual(ctx.exception.code, 2)

    def test_overrides(self):
        args = parse_args([
            '--all', '--proxy', '127.0.0.1:9150', '--metadata-path', 'meta',
            '--targets-file', 'list.txt', '--timeout', '12.5', '--loglevel', 'debug'
        ])
        cfg = args.to_scan_config()
        self.assertEqual(cfg.proxy_addr, '127.0.0.1:9150')
        self.assertEqual(cfg.metadata_path, '/meta')
        self.assertEqual(cfg.targets_file, 'list.txt')
        self.assertEqual(cfg.timeout, 12.5)
        self.assertEqual(args.loglevel, 'DEBUG')

    def test_invalid_timeout(self):
        for value in ('0', '-3', 'inf', 'nan'):
            with self.assertRaises(SystemExit, msg=value) as ctx:
                parse_args(['--timeout', value, ONION_A])
            self.assertEqual(ctx.exception.code, 2)


def test_no_targets_and_no_all(capsys):
    with pytest.raises(SystemExit) as exc_info:
        parse_args([])
    assert exc_info.value.code == 2
    assert NO_TARGETS_MSG in capsys.readouterr().err


@pytest.fixture
def network():
    """Route every request to a per-host behavior."""
    with patch('sdstatus.core.proxy.requests.get') as patched:
        patched.side_effect = fake_get_factory({
            ONION_A: SUCCESS_BODY,
            ONION_B: requests.ConnectionError('host unreachable'),
            'first.onion': SUCCESS_BODY,
            'second.onion': {'sd_version': '2.0'},
        })
        yield patched


def test_main_json_output(network):
    out = io.StringIO()
    assert main([ONION_A, ONION_B], stream=out) == 0

    data = json.loads(out.getvalue())
    assert len(data) == 2
    by_url = {item['Url']: item for item in data}
    assert by_url[ONION_A]['Available'] is True
    assert by_url[ONION_A]['Info'] == {'sd_version': '1.2', 'gpg_fpr': 'ABCD'}
    assert by_url[ONION_B]['Available'] is False
    assert by_url[ONION_B]['Info'] == {'sd_version': '', 'gpg_fpr': ''}


def test_main_csv_output(network):
    out = io.StringIO()
    assert main(['--csv', ONION_A, ONION_B], stream=out) == 0

    lines = sorted(out.getvalue().splitlines())
    assert lines == sorted([f'{ONION_A},1.2,ABCD', f'{ONION_B},,'])


def test_main_table_output(network):
    out = io.StringIO()
    assert main(['--table', ONION_A], stream=out) == 0
    assert 'Fingerprint' in out.getvalue()
    assert ONION_A in out.getvalue()


def test_main_all_reads_targets_file(network, targets_file):
    out = io.StringIO()
    assert main(['--all', '--csv', '--targets-file', str(targets_file)], stream=out) == 0

    lines = sorted(out.getvalue().splitlines())
    assert lines == ['first.onion,1.2,ABCD', 'second.onion,2.0,']
    assert network.call_count == 2


def test_main_positional_targets_override_all(network, tmp_path):
    """--all is ignored when targets are given: the missing file is never read."""
    out = io.StringIO()
    missing = tmp_path / 'missing.txt'
    assert main(['--all', '--targets-file', str(missing), ONION_A], stream=out) == 0

    data = json.loads(out.getvalue())
    assert [item['Url'] for item in data] == [ONION_A]


def test_main_missing_targets_file(network, tmp_path):
    out = io.StringIO()
    code = main(['--all', '--targets-file', str(tmp_path / 'missing.txt')], stream=out)
    assert code == 1
    assert out.getvalue() == ''
    network.assert_not_called()


def test_main_bad_proxy(network, capsys):
    out = io.StringIO()
    assert main(['--proxy', 'not-a-proxy', ONION_A], stream=out) == 1
    assert "can't connect to the proxy:" in capsys.readouterr().err
    assert out.getvalue() == ''
    network.assert_not_called()


def test_main_blank_only_targets(network):
    out = io.StringIO()
    assert main(['  ', ''], stream=out) == 0
    assert json.loads(out.getvalue()) == []
    network.assert_not_called()


def test_main_undecodable_targets_file(network, tmp_path):
    bad = tmp_path / 'sdonion.txt'
    bad.write_bytes(b'first.onion\n\xff\xfe\xfa.onion\n')
    out = io.StringIO()
    assert main(['--all', '--targets-file', str(bad)], stream=out) == 1
    assert out.getvalue() == ''
    network.assert_not_called()
