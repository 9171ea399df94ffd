"""Main entry point for the fish freshness application."""
from __future__ import annotations

import sys

from dotenv import load_dotenv

from app.startup import run_application


def main() -> None:
    """Application entry point."""
    # Load .env before configuration so its variables count as environment overrides
    load_dotenv()
    sys.exit(run_application())


__all__ = ["main"]

if __name__ == "__main__":
    main()
