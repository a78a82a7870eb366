"""CLI entrypoint for the ASCII circuit animation."""

from __future__ import annotations

import sys

from circuit_engine.cli import main

if __name__ == "__main__":
    sys.exit(main())
