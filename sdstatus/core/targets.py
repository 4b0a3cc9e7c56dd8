"""Target list loading and resolution."""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from sdstatus.core.errors import TargetFileError

log = logging.getLogger('Targets')


def clean_targets(raw: Iterable[str]) -> List[str]:
    """
    Trim every entry and drop the ones left empty.
    Order is preserved and duplicates are kept.
    """
    return [entry.strip() for entry in raw if entry and entry.strip()]


def load_targets(path: str) -> List[str]:
    """
    Read a newline-delimited target file.

    Raises:
        TargetFileError: if the file is missing, unreadable or not UTF-8
    """
    try:
        data = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise TargetFileError(path, exc) from exc

    targets = clean_targets(data.splitlines())
    log.debug(f'Loaded {len(targets)} targets from {path}')
    return targets


def resolve_targets(explicit: Optional[Iterable[str]], targets_file: str) -> List[str]:
    """
    Pick the target source for a scan.

    Explicit targets win whenever any were given; the file is
    only read when none were, and is never merged with them.
    """
    explicit = list(explicit or [])
    if explicit:
        return clean_targets(explicit)
    log.info(f'No explicit targets, reading {targets_file}')
    return load_targets(targets_file)
