"""Load and validate build configuration for docsite.

This subpackage resolves where the builder reads Markdown from, which layout
template it fills, and where the rendered pages land. A configuration file is
optional: :func:`load_site_config` returns the built-in defaults when the YAML
file is absent, so a bare ``docsite`` invocation needs no setup.

Examples
--------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> site = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
>>> site.output_dir  # doctest: +SKIP
PosixPath('public')
"""

from .loader import DEFAULT_CONFIG_PATH, load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
