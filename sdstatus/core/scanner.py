"""Concurrent status scanning of SecureDrop instances."""

import logging
import traceback
from concurrent.futures import ThreadPoolExecutor, as_completed
from time import time
from typing import Callable, Iterable, List, Optional

import requests

from sdstatus.core.models import ProbeResult, SDMetadata
from sdstatus.core.proxy import ProxyClient, build_proxy_client
from sdstatus.core.scan_config import ScanConfig
from sdstatus.core.targets import clean_targets

log = logging.getLogger('Scanner')

ResultCallback = Callable[[ProbeResult], None]


def probe_target(client: ProxyClient, target: str, config: ScanConfig) -> ProbeResult:
    """
    Fetch the metadata document of a single target.

    Never raises: every failure is reported as an unavailable result.
    """
    url = config.metadata_url(target)
    try:
        response = client.get(url)
        metadata = SDMetadata.from_body(response.json())
    except requests.RequestException as e:
        log.debug(f'{target} unreachable: {e!r}')
        return ProbeResult.unavailable(target)
    except ValueError as e:
        log.debug(f'{target} returned invalid metadata: {e}')
        return ProbeResult.unavailable(target)
    except Exception as e:  # pylint: disable=broad-exception-caught
        log.debug(f'Probe error on {target} - {e!r}')
        log.debug(traceback.format_exc())
        return ProbeResult.unavailable(target)

    log.debug(f'{target} is up, version {metadata.version or "?"}')
    return ProbeResult.reachable(target, metadata)


class StatusScanner:
    """
    Fans out one probe per target and collects the results
    in the order they complete.
    """

    def __init__(self, config: ScanConfig, client: Optional[ProxyClient] = None):
        self.cfg = config
        self.client = client or build_proxy_client(config.proxy_addr, config.timeout)
        self.results: List[ProbeResult] = []
        self.dispatched = 0
        self.running = False
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def scan(
        self,
        targets: Iterable[str],
        on_result: Optional[ResultCallback] = None
    ) -> List[ProbeResult]:
        """
        Probe every non-empty target and block until all of them reported.

        ``on_result`` is called from the collecting thread for each
        result as soon as it arrives.
        """
        targets = clean_targets(targets)
        self.results = []
        self.dispatched = len(targets)
        self.running = True
        self.start_time = time()
        log.info(f'Scanning {self.dispatched} targets through {self.client.proxy_url}')

        if targets:
            # one worker per target, nothing waits on a free slot
            with ThreadPoolExecutor(max_workers=len(targets)) as executor:
                futures = [
                    executor.submit(probe_target, self.client, target, self.cfg)
                    for target in targets
                ]
                for future in as_completed(futures):
                    result = future.result()
                    self.results.append(result)
                    if on_result:
                        on_result(result)

        self.running = False
        self.end_time = time()
        log.info(
            f'Scan complete: {self.available_count()}/{len(self.results)} available '
            f'in {self.get_runtime():.2f}s'
        )
        return self.results

    def available_count(self) -> int:
        return sum(1 for r in self.results if r.available)

    def get_runtime(self) -> float:
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time is not None else time()
        return end - self.start_time
