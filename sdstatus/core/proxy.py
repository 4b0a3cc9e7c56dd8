"""
SOCKS5 proxy client used by every probe.

Requests are sent with ``socks5h`` so hostname resolution happens on the
proxy side, which is the only way ``.onion`` names resolve.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import requests

from sdstatus.core.errors import ProxyConfigError

log = logging.getLogger('Proxy')

SOCKS_SCHEME = 'socks5h'


@dataclass(frozen=True)
class ProxyClient:
    """
    Read-only HTTP client bound to a SOCKS5 proxy.

    Safe to share across threads: each call issues an independent
    request without a pooled session.
    """
    proxy_url: str
    timeout: Optional[float] = None

    @property
    def proxies(self) -> Dict[str, str]:
        return {'http': self.proxy_url, 'https': self.proxy_url}

    def get(self, url: str) -> requests.Response:
        return requests.get(url, proxies=self.proxies, timeout=self.timeout)


def parse_proxy_addr(proxy_addr: str) -> tuple:
    """
    Split ``host:port`` into its parts.

    Raises:
        ProxyConfigError: if the address is malformed
    """
    host, sep, port = (proxy_addr or '').strip().rpartition(':')
    host = host.strip('[]')
    if not sep or not host:
        raise ProxyConfigError(proxy_addr, 'proxy address must be host:port')
    try:
        port_num = int(port)
    except ValueError as exc:
        raise ProxyConfigError(proxy_addr, f'invalid proxy port {port!r}') from exc
    if not 0 < port_num < 65536:
        raise ProxyConfigError(proxy_addr, f'proxy port {port_num} out of range')
    return host, port_num


def build_proxy_client(proxy_addr: str, timeout: Optional[float] = None) -> ProxyClient:
    """
    Construct the shared proxy client.

    Raises:
        ProxyConfigError: if the proxy address is unusable
    """
    host, port = parse_proxy_addr(proxy_addr)
    if ':' in host:
        host = f'[{host}]'
    client = ProxyClient(proxy_url=f'{SOCKS_SCHEME}://{host}:{port}', timeout=timeout)
    log.debug(f'Using proxy {client.proxy_url} (timeout={timeout})')
    return client
