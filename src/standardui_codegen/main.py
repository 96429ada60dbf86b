"""Main entry point for the StandardUI model code generator."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .application.generators import ModelGenerator
from .domain.errors import CodegenError
from .domain.models.platform import OUTPUT_STRATEGIES
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate platform-specific StandardUI classes from the "
        "abstract model interface declarations",
        epilog="""
Examples:
  # Generate WPF classes for every model interface (default platform)
  python main.py src/StandardUI -o src

  # Generate for one declaration file
  python main.py src/StandardUI/Shapes/ILine.cs -p winui

  # Generate for every supported platform
  python main.py src/StandardUI --all-platforms

  # Using .env file for configuration
  echo 'TARGET_PLATFORM=maui' > .env
  python main.py src/StandardUI
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "inputs",
        type=Path,
        nargs="*",
        help="Declaration files or directories searched recursively for *.cs "
        "(optional if INPUT_PATHS is set)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output root directory (default: OUTPUT_DIR or ./src)",
    )
    parser.add_argument(
        "-p",
        "--platform",
        choices=sorted(OUTPUT_STRATEGIES),
        help="Target platform (default: TARGET_PLATFORM or wpf)",
    )
    parser.add_argument(
        "--all-platforms",
        action="store_true",
        help="Generate for every supported platform",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point: exits 0 on success, 1 with the error message otherwise."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            input_paths=args.inputs,
            output_dir=args.output,
            target_platform=args.platform,
            verbose=args.verbose or None,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Inputs: {[str(p) for p in config.input_paths]}")
    logger.debug(f"Output directory: {config.output_dir}")

    config.ensure_output_dir()

    platforms = sorted(OUTPUT_STRATEGIES) if args.all_platforms else [config.target_platform]

    try:
        written = ModelGenerator(config).run(platforms)
    except CodegenError as e:
        logger.error(f"[FAILED] {e}")
        print(str(e), file=sys.stderr)
        sys.exit(1)

    logger.info(f"[SUCCESS] Wrote {len(written)} file(s) under {config.output_dir}")
    sys.exit(0)


if __name__ == "__main__":
    main()
