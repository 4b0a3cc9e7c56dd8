import argparse
import math
from dataclasses import dataclass, field
from typing import List, Optional

from sdstatus import __version__
from sdstatus.core.models import OutputFormat
from sdstatus.core.scan_config import (
    ScanConfig,
    DEFAULT_PROXY_ADDR,
    DEFAULT_METADATA_PATH,
    DEFAULT_TARGETS_FILE
)

NO_TARGETS_MSG = 'No args provided. Pass --all to use hardcoded list'


@dataclass
class RuntimeArgs:
    targets: List[str] = field(default_factory=list)
    csv: bool = False
    table: bool = False
    all: bool = False
    targets_file: str = DEFAULT_TARGETS_FILE
    proxy: str = DEFAULT_PROXY_ADDR
    metadata_path: str = DEFAULT_METADATA_PATH
    timeout: Optional[float] = None
    loglevel: str = 'WARNING'
    logfile: Optional[str] = None

    @property
    def output(self) -> OutputFormat:
        if self.csv:
            return OutputFormat.CSV
        if self.table:
            return OutputFormat.TABLE
        return OutputFormat.JSON

    def to_scan_config(self) -> ScanConfig:
        return ScanConfig(
            proxy_addr=self.proxy,
            metadata_path=self.metadata_path,
            targets_file=self.targets_file,
            output=self.output,
            timeout=self.timeout
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sdstatus',
        description='To scan SecureDrop instances'
    )
    parser.add_argument('targets', nargs='*', help='Onion addresses to scan')

    fmt = parser.add_mutually_exclusive_group()
    fmt.add_argument('--csv', action='store_true', help='Prints output in CSV format')
    fmt.add_argument('--table', action='store_true', help='Prints output as a table')

    parser.add_argument('--all', action='store_true',
                        help='Scans all known instances, via hardcoded list')
    parser.add_argument('--targets-file', type=str, default=DEFAULT_TARGETS_FILE,
                        help='Target list read by --all')
    parser.add_argument('--proxy', type=str, default=DEFAULT_PROXY_ADDR,
                        help='SOCKS5 proxy as host:port')
    parser.add_argument('--metadata-path', type=str, default=DEFAULT_METADATA_PATH,
                        help='Path requested on each instance')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Per-request timeout in seconds (default: wait forever)')
    parser.add_argument('--loglevel', type=str.upper, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set the logger\'s log level')
    parser.add_argument('--logfile', type=str, default=None,
                        help='Also write logs to this file')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> RuntimeArgs:
    """
    Parse the command line.

    Positional targets take precedence over --all; with neither,
    the parser exits with a usage error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.targets and not args.all:
        parser.error(NO_TARGETS_MSG)
    if args.timeout is not None and not (math.isfinite(args.timeout) and args.timeout > 0):
        parser.error('--timeout must be a finite number greater than zero')

    return RuntimeArgs(**vars(args))
