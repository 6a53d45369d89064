"""Module entrypoint for ``python -m fileviewer``.

This keeps module-mode execution behavior identical to the ``fv`` script.
All argument parsing and runtime setup happen in ``fileviewer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
