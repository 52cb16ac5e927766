"""Allow ``python -m loxi``."""

from loxi.cli import main

main()
