"""Module entrypoint for ``python -m folderwalk``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and sink setup happen in ``folderwalk.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
