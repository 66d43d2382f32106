"""Allow running as ``python -m gqlpolicy``."""

from gqlpolicy.cli import main

main()
