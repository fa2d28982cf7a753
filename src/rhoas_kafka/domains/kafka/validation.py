"""Validation of user input for the Kafka commands."""

import argparse
import re

from rhoas_kafka.utils.errors import ValidationError
from rhoas_kafka.utils.formatting import TABLE_FORMAT, VALID_OUTPUT_FORMATS

_SEARCH_PATTERN = re.compile(r"^([a-zA-Z0-9_%-]*[a-zA-Z0-9_%-])?$")


def validate_output_format(value: str) -> None:
    """Check the --output value.

    Raises:
        ValidationError: If the value is not empty and not a known format.
    """
    if value == TABLE_FORMAT or value in VALID_OUTPUT_FORMATS:
        return
    raise ValidationError(
        f"Invalid value '{value}' for --output. "
        f"Valid values: {', '.join(VALID_OUTPUT_FORMATS)}"
    )


def validate_search_input(value: str) -> None:
    """Check the --search value.

    Only letters, digits, '-', '_' and '%' are allowed.

    Raises:
        ValidationError: If the value contains any other character.
    """
    if _SEARCH_PATTERN.fullmatch(value):
        return
    raise ValidationError(
        f"Illegal search value '{value}'. Search values may contain letters, "
        "numbers, hyphens ('-'), underscores ('_') and percent signs ('%')"
    )


def validate_page_value(value: str) -> int:
    """argparse type for --page and --limit: a positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid page value '{value}': must be an integer"
        ) from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"invalid page value '{value}': must be at least 1")
    return number
