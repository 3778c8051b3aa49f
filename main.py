#!/usr/bin/env python3
"""rfc822time - RFC 822 Date and Time Parser

Development entry point; the installed package provides the rfc822time command.
"""

import sys
from pathlib import Path

# Adding src to path for development
sys.path.insert(0, str(Path(__file__).parent / "src"))


def main():
    """Main entry point for the rfc822time command."""
    from rfc822time.cli import main as cli_main

    sys.exit(cli_main())


if __name__ == "__main__":
    main()
