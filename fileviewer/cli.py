"""Command-line front door for fileviewer.

Parses the single document path, applies logging config, and dispatches into
the interactive viewer runtime.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .runtime import run_viewer
from .runtime.config import configure_logging, load_viewer_config


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the viewer on one document.

    A path that cannot be read opens as an empty document rather than
    aborting.
    """
    parser = argparse.ArgumentParser(
        prog="fv",
        description="View a text file with incremental search and match filtering.",
    )
    parser.add_argument("path", help="Path to the document to open.")
    args = parser.parse_args(argv)

    config = load_viewer_config()
    configure_logging(config)
    run_viewer(Path(args.path), config)


if __name__ == "__main__":
    main()
