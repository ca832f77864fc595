"""
Rendering of maintenance API responses.
"""

import json
from typing import List

from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import ResponseParseError
from .models import MaintenanceRecord

OUTPUT_FORMATS = ["text", "table", "json"]


def parse_records(body: str) -> List[MaintenanceRecord]:
    """
    Parse a host status response into maintenance records.

    Raises:
        ResponseParseError: If the body is not a JSON list of records
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ResponseParseError(f"Parse response failed - {e}") from e

    # An empty result may be encoded as null
    if data is None:
        data = []

    if not isinstance(data, list):
        raise ResponseParseError(
            f"Parse response failed - expected a list of maintenances, got {type(data).__name__}"
        )

    try:
        return [MaintenanceRecord.model_validate(item) for item in data]
    except PydanticValidationError as e:
        raise ResponseParseError(f"Parse response failed - {e}") from e


def _record_fields(record: MaintenanceRecord) -> List[tuple]:
    return [
        ("maintenanceId", record.maintenance_id),
        ("name", record.name),
        ("type", record.type),
        ("hosts", ", ".join(record.hosts)),
        ("allServices", "true" if record.apply_to_all_services else "false"),
        ("startTime", record.start_time),
        ("endTime", record.end_time),
        ("createdBy", record.created_by),
        ("creationTime", record.creation_time),
        ("updatedBy", record.updated_by),
        ("updationTime", record.updation_time),
        ("status", record.status),
        ("comment", record.comment),
        ("rpd", str(record.ticket_number)),
    ]


def format_record(index: int, record: MaintenanceRecord) -> str:
    """Format one record as a labelled plain-text block."""
    lines = [f"\n ------------- Maintenance #{index} -------------"]
    lines.extend(f"{label}: {value}" for label, value in _record_fields(record))
    return "\n".join(lines)


def render_records(records: List[MaintenanceRecord], console: Console, output_format: str = "text") -> None:
    """
    Print maintenance records.

    Args:
        records: Records returned by the status query
        console: Console to print to (quiet when output is silenced)
        output_format: One of text, table or json
    """
    if output_format == "json":
        data = [r.model_dump(by_alias=True) for r in records]
        console.print(json.dumps(data, indent=2), markup=False, emoji=False, highlight=False, soft_wrap=True)
        return

    for i, record in enumerate(records, start=1):
        if output_format == "table":
            table = Table(title=f"Maintenance #{i}", show_header=True, header_style="bold magenta")
            table.add_column("Attribute", style="cyan")
            table.add_column("Value", style="green")
            for label, value in _record_fields(record):
                table.add_row(label, escape(value))
            console.print(table)
        else:
            console.print(format_record(i, record), markup=False, emoji=False, highlight=False, soft_wrap=True)


def render_raw(body: str, console: Console) -> None:
    """Print a response body exactly as received."""
    console.print(body, markup=False, emoji=False, highlight=False, soft_wrap=True)
