"""
Scalar CLI - build, cast and render scalars from the command line.
"""

import argparse
import sys
import logging
from typing import List, Optional

from . import ScalarError, ScalarRegistry, load_config, set_config
from .core.scalars import Scalar
from .infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Parse and render typed scalars",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render an int8 scalar
  python -m colscalar.cli --type int8 -- -128

  # Parse a double and cast it to int16
  python -m colscalar.cli --type double --cast int16 42.0

  # Show kind, validity and value of a null
  python -m colscalar.cli --type uint8 --describe null
""",
    )

    parser.add_argument(
        "text",
        help="Textual value to parse (the null token builds a null scalar)",
    )
    parser.add_argument(
        "--type",
        dest="data_type",
        required=True,
        help="Data type of the value (e.g. int8, uint32, double, string)",
    )
    parser.add_argument(
        "--cast",
        help="Cast the parsed scalar to this type before printing",
    )
    parser.add_argument(
        "--describe",
        action="store_true",
        help="Print data type, validity and value instead of the rendering",
    )
    parser.add_argument(
        "--config",
        help="YAML scalar configuration file",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser.parse_args(argv)


def describe(value: Scalar) -> str:
    """Multi-line summary of a scalar."""
    return "\n".join([
        f"data_type: {value.data_type}",
        f"is_valid: {str(value.is_valid).lower()}",
        f"value: {value.to_string()}",
    ])


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the scalar CLI."""
    args = parse_args(argv)
    setup_logging(args.log_level, stream=sys.stderr)

    if args.config:
        try:
            set_config(load_config(args.config))
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load config: {e}")
            return 1

    try:
        value = ScalarRegistry.scalar_class_for(args.data_type).parse(args.text)
        if args.cast:
            value = value.cast(args.cast)
    except ScalarError as e:
        logger.error(str(e))
        return 1

    logger.debug(f"Built {value!r}")
    print(describe(value) if args.describe else value.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
