"""Errors that abort a scan before any probe is dispatched."""


class SDStatusError(Exception):
    """Base class for fatal setup errors."""


class ProxyConfigError(SDStatusError):
    """The SOCKS proxy client could not be constructed."""

    def __init__(self, proxy_addr: str, reason: str):
        self.proxy_addr = proxy_addr
        self.reason = reason
        super().__init__(f"{reason} ({proxy_addr})")


class TargetFileError(SDStatusError):
    """The fallback target list could not be read."""

    def __init__(self, path: str, exc: Exception):
        self.path = path
        self.original = exc
        super().__init__(f"Unable to read target file {path}: {exc}")
