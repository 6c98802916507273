"""Public package surface for folderwalk.

Exports ``main`` for programmatic CLI invocation.
The walker lives in ``folderwalk.file_tree_model`` and ``folderwalk.render``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
