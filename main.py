#!/usr/bin/env python

"""
Todo Application - Main Entry Point

A single-window to-do list with due dates, a calendar date picker and a
countdown timer. Tasks are kept in todos.json in the working directory.

Usage:
    python main.py

Requirements:
    - Python 3.10+
    - See pyproject.toml for dependencies
"""

import logging
import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))

from app.infra.config import get_settings
from app.ui import TodoApplication


def main():
    """Main entry point"""
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = TodoApplication()
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
