"""Command line entry point."""

import argparse
import sys
from typing import Optional, Sequence

from .checker import ConfigError, load_config
from .info import system_info


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the system report, running first-time setup if needed."""
    parser = argparse.ArgumentParser(
        prog="rangefetch", description="Show a summary of this system."
    )
    parser.parse_args(argv)
    try:
        config = load_config()
    except ConfigError as error:
        print(f"Error: {error}", file=sys.stderr)
        raise SystemExit(1) from error
    print(system_info(config))
    return 0