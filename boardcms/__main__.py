"""Module entrypoint for running boardcms as ``python -m boardcms``."""

from __future__ import annotations

from boardcms.cli import main


if __name__ == "__main__":
    main()
