"""Terminal table and structured output rendering."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import Any, TextIO

import yaml
from pydantic import BaseModel

from rhoas_kafka.utils.errors import ValidationError

# Empty string selects the table renderer
TABLE_FORMAT = ""
JSON_FORMAT = "json"
YAML_FORMAT = "yaml"
YML_FORMAT = "yml"

VALID_OUTPUT_FORMATS = [JSON_FORMAT, YAML_FORMAT, YML_FORMAT]


def emoji(value: str, fallback: str, stream: TextIO | None = None) -> str:
    """Return the emoji if the output stream can encode it, else the fallback.

    Streams without an encoding (``io.StringIO``) hold text and accept any
    character.
    """
    stream = stream or sys.stdout
    encoding = getattr(stream, "encoding", None)
    if encoding is None:
        return value
    try:
        value.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return value


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Render a fixed-width table with ASCII borders.

    Args:
        headers: Column header strings.
        rows: List of row data (each row is a list of strings). Short
            rows are padded with empty cells.
    """
    if not headers:
        return ""

    num_cols = len(headers)

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if i < num_cols:
                col_widths[i] = max(col_widths[i], len(cell))

    border = "+-" + "-+-".join("-" * w for w in col_widths) + "-+"
    header_line = "| " + " | ".join(
        h.ljust(col_widths[i]) for i, h in enumerate(headers)
    ) + " |"
    data_lines = []
    for row in rows:
        padded = [(row[i] if i < len(row) else "").ljust(col_widths[i])
                  for i in range(num_cols)]
        data_lines.append("| " + " | ".join(padded) + " |")

    return "\n".join([border, header_line, border, *data_lines, border])


def table_headers(model: type[BaseModel]) -> list[str]:
    """Column headers for a row model, taken from each field's title."""
    return [info.title or name for name, info in model.model_fields.items()]


def dump_table(out: TextIO, rows: Sequence[BaseModel]) -> None:
    """Write row models to ``out`` as a table.

    Columns follow the field order of the row model; nothing is written
    for an empty sequence since there is no model to take headers from.
    """
    if not rows:
        return
    model = type(rows[0])
    headers = table_headers(model)
    data = [[str(getattr(row, name)) for name in model.model_fields] for row in rows]
    out.write(format_table(headers, data) + "\n")


def dump_formatted(out: TextIO, output_format: str, data: Any) -> None:
    """Write ``data`` to ``out`` as JSON or YAML.

    Pydantic models are dumped with only the fields that were actually set,
    so API responses are reproduced as received.

    Raises:
        ValidationError: If output_format is not a structured format.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json", exclude_unset=True)

    if output_format == JSON_FORMAT:
        out.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")
    elif output_format in (YAML_FORMAT, YML_FORMAT):
        out.write(yaml.safe_dump(data, sort_keys=False, allow_unicode=True))
    else:
        raise ValidationError(
            f"Unsupported output format '{output_format}'. "
            f"Valid values: {', '.join(VALID_OUTPUT_FORMATS)}"
        )
