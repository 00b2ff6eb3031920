"""Entry point for ``python -m joplin_mcp``."""

from .server import main

main()
