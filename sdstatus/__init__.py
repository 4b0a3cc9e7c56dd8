"""
SecureDrop instance status scanner
"""
__version__ = '0.1.0'

# Scanner core functionality
from sdstatus.core.scanner import (
    StatusScanner,
    probe_target
)

# Configuration for scans
from sdstatus.core.scan_config import ScanConfig

from sdstatus.core.proxy import ProxyClient, build_proxy_client

from sdstatus.core.targets import (
    clean_targets,
    load_targets,
    resolve_targets
)

from sdstatus.core.output import (
    render_json,
    render_table,
    CsvStreamer
)

from sdstatus.core.errors import (
    SDStatusError,
    ProxyConfigError,
    TargetFileError
)

# Models for structured data
from sdstatus.core.models import (
    OutputFormat,
    SDMetadata,
    ProbeResult
)
