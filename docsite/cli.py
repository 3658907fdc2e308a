"""Cyclopts CLI entrypoint for building the documentation site.

The ``docsite`` console script renders every Markdown file in the source
directory into the HTML layout and prints one line per generated page. Running
it with no arguments builds from the default locations; flags, an optional
``docsite.yaml``, or ``INPUT_*`` environment variables override them.

Examples
--------
Build with the defaults:

>>> from docsite.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from docsite.cli import app
>>> app(["build", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import DEFAULT_CONFIG_PATH, load_site_config
from .generator import SiteBuilder

app = App(name="docsite", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


@app.default
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to optional site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG_PATH,
    source_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the markdown source folder", env_var="INPUT_SOURCE_DIR"),
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    template: typ.Annotated[
        Path | None,
        Parameter(help="Override the page layout template", env_var="INPUT_TEMPLATE"),
    ] = None,
) -> None:
    """Build HTML pages for every Markdown document in the source folder.

    Parameters
    ----------
    config : Path, optional
        Path to the ``docsite.yaml`` file; skipped when it does not exist.
    source_dir : Path or None, optional
        Override for the folder scanned for Markdown files.
    output_dir : Path or None, optional
        Override for the folder receiving generated HTML.
    template : Path or None, optional
        Override for the layout template holding the placeholder markers.

    Returns
    -------
    None
        Writes the pages and prints ``Generated: <file>`` for each one.

    Raises
    ------
    OSError
        Propagated from the build when an input is missing or a write fails.
    """
    site_config = load_site_config(config)
    overrides: dict[str, Path] = {}
    if source_dir is not None:
        overrides["source_dir"] = source_dir
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if template is not None:
        overrides["template_path"] = template
    if overrides:
        site_config = dc.replace(site_config, **overrides)

    written = SiteBuilder(site_config).run()
    for path in written:
        print(f"Generated: {path.name}")


app.command(build, name="build")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
