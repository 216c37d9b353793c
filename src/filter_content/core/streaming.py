"""NDJSON stream utilities."""

import json
from typing import Any, Iterable, List, TextIO


def read_ndjson(input_stream: TextIO) -> List[Any]:
    """Read every NDJSON record from input stream.

    Blank lines are skipped.

    Raises:
        ValueError: If a line is not valid JSON
    """
    records = []
    for number, line in enumerate(input_stream, start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON on line {number}: {e}") from e
    return records


def write_ndjson(records: Iterable[Any], output_stream: TextIO) -> None:
    """Write records to output stream, one JSON document per line."""
    for record in records:
        output_stream.write(json.dumps(record) + "\n")
