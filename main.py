#!/usr/bin/env python3

"""
Entry point script that launches the command-line interface.
"""

import logging
import sys

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    try:
        from igc_decoder.ui.cli import main as cli_main
    except ImportError as e:
        logger.error(f"CLI module not available: {e}")
        return 1

    return cli_main()


if __name__ == '__main__':
    sys.exit(main())
