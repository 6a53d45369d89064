"""Public package surface for fileviewer.

Exports ``main`` for programmatic CLI invocation.
The navigation/search engine lives in ``fileviewer.viewer`` and
``fileviewer.search``; terminal wiring lives in ``fileviewer.runtime``.
"""

from __future__ import annotations

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
