import logging
import sys
import traceback
from typing import List, Optional, TextIO

from sdstatus import __version__
from sdstatus.cli.logger import configure_logging
from sdstatus.cli.runtime_args import parse_args
from sdstatus.core.errors import ProxyConfigError, TargetFileError
from sdstatus.core.models import OutputFormat, ProbeResult
from sdstatus.core.output import CsvStreamer, render_json, render_table
from sdstatus.core.proxy import ProxyClient, build_proxy_client
from sdstatus.core.scan_config import ScanConfig
from sdstatus.core.scanner import StatusScanner
from sdstatus.core.targets import resolve_targets

log = logging.getLogger('core')


def run_scan(
    config: ScanConfig,
    targets: List[str],
    client: ProxyClient,
    stream: TextIO
) -> List[ProbeResult]:
    """
    Scan the targets and write the results in the configured format.
    CSV lines are written as results arrive, other formats once at the end.
    """
    scanner = StatusScanner(config, client=client)

    if config.output == OutputFormat.CSV:
        return scanner.scan(targets, on_result=CsvStreamer(stream))

    results = scanner.scan(targets)
    if config.output == OutputFormat.TABLE:
        print(render_table(results), file=stream)
    else:
        print(render_json(results), file=stream)
    return results


def main(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.loglevel, args.logfile)
    stream = stream or sys.stdout

    config = args.to_scan_config()
    log.info(f'sdstatus v{__version__} - {config}')

    try:
        client = build_proxy_client(config.proxy_addr, config.timeout)
    except ProxyConfigError as e:
        print(f"can't connect to the proxy: {e}", file=sys.stderr)
        return 1

    if args.targets and args.all:
        log.info('Positional targets given, ignoring --all')

    try:
        targets = resolve_targets(args.targets, config.targets_file)
    except TargetFileError as e:
        log.critical(str(e))
        log.debug(traceback.format_exc())
        return 1

    if not targets:
        log.warning('Target list is empty, nothing to scan')

    run_scan(config, targets, client, stream)
    return 0


def cli() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log.info('Keyboard interrupt received, terminating...')
        sys.exit(130)


if __name__ == '__main__':
    cli()
