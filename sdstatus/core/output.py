"""
Rendering of collected probe results.
"""

import json
from typing import Iterable, TextIO

from tabulate import tabulate

from sdstatus.core.models import ProbeResult

TABLE_HEADERS = ['Target', 'Available', 'Version', 'Fingerprint']


def render_json(results: Iterable[ProbeResult]) -> str:
    """Tab-indented JSON array, in the order given."""
    return json.dumps([r.to_dict() for r in results], indent='\t')


def render_table(results: Iterable[ProbeResult]) -> str:
    rows = [
        [r.target, 'yes' if r.available else 'no', r.version, r.fingerprint]
        for r in results
    ]
    return tabulate(rows, headers=TABLE_HEADERS, tablefmt='grid')


class CsvStreamer:
    """Prints one CSV line per result as results are collected."""

    def __init__(self, stream: TextIO):
        self.stream = stream

    def __call__(self, result: ProbeResult) -> None:
        print(result.csv_line(), file=self.stream, flush=True)
