"""Build a static documentation site from a folder of Markdown files.

This package exposes the ``docsite`` console entry point, which renders every
Markdown document into a shared HTML layout with sidebar and previous/next
navigation.

Exports
-------
- ``app``: Cyclopts application behind the ``docsite`` command.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docsite import main
>>> main()  # doctest: +SKIP
>>> from docsite import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
