#!/usr/bin/env python
"""
Thin wrapper script to invoke the gitmoji_helper CLI.

Running ``python gitmoji.py`` is equivalent to running the
``gitmoji`` console script installed via ``pyproject.toml``.
"""

from gitmoji_helper.cli import main


if __name__ == "__main__":
    main(prog_name="gitmoji")
