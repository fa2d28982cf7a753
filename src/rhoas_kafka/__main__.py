"""Entry point for the rhoas-kafka CLI."""

import argparse
import logging
import sys
from typing import Any

from rhoas_kafka import __version__
from rhoas_kafka.config import LogLevel, load_config
from rhoas_kafka.domains.kafka.listing import ListOptions, list_command
from rhoas_kafka.domains.kafka.validation import validate_page_value
from rhoas_kafka.utils.errors import ConfigurationError, RHOASError
from rhoas_kafka.utils.formatting import VALID_OUTPUT_FORMATS

logger = logging.getLogger(__name__)


def setup_logging(level: LogLevel) -> None:
    """Configure logging to stderr.

    Informational messages are printed bare; debug output carries the
    logger name and timestamp.
    """
    if level == LogLevel.DEBUG:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        fmt = "%(message)s"
    logging.basicConfig(
        level=level.value,
        format=fmt,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="rhoas-kafka",
        description="Manage Red Hat OpenShift Streams for Apache Kafka instances",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser(
        "list",
        help="List all Kafka instances",
        description=(
            "List all Kafka instances for your organization, with the "
            "OpenShift cluster each one runs on"
        ),
    )
    list_parser.add_argument(
        "-o",
        "--output",
        default="",
        help=f"Format in which to display the Kafka instances ({', '.join(VALID_OUTPUT_FORMATS)})",
    )
    list_parser.add_argument(
        "--page",
        type=validate_page_value,
        default=None,
        help="Current page number for the list of Kafka instances",
    )
    list_parser.add_argument(
        "--limit",
        type=validate_page_value,
        default=None,
        help="Page limit for the list of Kafka instances",
    )
    list_parser.add_argument(
        "--search",
        default="",
        help="Text search to filter the Kafka instances by name, owner, cloud_provider, "
        "region and status",
    )

    # Hidden options for reaching a non-default cluster management API
    list_parser.add_argument(
        "--cluster-mgmt-api-url",
        default=None,
        help=argparse.SUPPRESS,
    )
    list_parser.add_argument(
        "--access-token",
        default=None,
        help=argparse.SUPPRESS,
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Build config from args, falling back to environment/defaults
    config_kwargs: dict[str, Any] = {}

    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    if args.cluster_mgmt_api_url:
        config_kwargs["cluster_mgmt_api_url"] = args.cluster_mgmt_api_url

    if args.access_token:
        config_kwargs["cluster_mgmt_access_token"] = args.access_token

    try:
        config = load_config(**config_kwargs)
    except ConfigurationError as e:
        setup_logging(LogLevel.INFO)
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level)

    options = ListOptions(
        output_format=args.output,
        page=args.page if args.page is not None else config.default_page_number,
        limit=args.limit if args.limit is not None else config.default_page_size,
        search=args.search,
    )

    try:
        list_command(options, config)
    except RHOASError as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
