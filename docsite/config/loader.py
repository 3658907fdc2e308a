"""Load site configuration YAML into a typed dataclass."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import SiteConfig, SiteConfigError

DEFAULT_CONFIG_PATH = Path("docsite.yaml")
_PATH_KEYS = {
    "source_dir": "source_dir",
    "output_dir": "output_dir",
    "template": "template_path",
}


def load_site_config(path: Path = DEFAULT_CONFIG_PATH) -> SiteConfig:
    """Load the optional YAML file describing where the site is built from.

    Parameters
    ----------
    path : Path, optional
        Filesystem path to the YAML configuration file. Defaults to
        ``docsite.yaml`` in the working directory.

    Returns
    -------
    SiteConfig
        Parsed configuration. When ``path`` does not exist the built-in
        defaults are returned unchanged.

    Raises
    ------
    SiteConfigError
        If the document or its ``site`` block is not a mapping, or a value has
        the wrong type.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite.config import load_site_config
    >>> load_site_config(Path("missing.yaml")).landing_name
    'index.md'
    """
    if not path.exists():
        return SiteConfig()

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise SiteConfigError(msg)

    site_raw = loaded.get("site") or {}
    if not isinstance(site_raw, dict):
        msg = f"The 'site' block in '{path}' must be a mapping."
        raise SiteConfigError(msg)
    return _build_site_config(site_raw)


def _build_site_config(payload: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a SiteConfig from the ``site`` mapping, keeping defaults for gaps."""
    overrides: dict[str, typ.Any] = {}
    for key, field_name in _PATH_KEYS.items():
        if key in payload:
            overrides[field_name] = Path(_require_str(payload[key], key))
    if "landing" in payload:
        overrides["landing_name"] = _require_str(payload["landing"], "landing")
    if "suffixes" in payload:
        overrides["suffixes"] = _parse_suffixes(payload["suffixes"])
    if "pygments_style" in payload:
        overrides["pygments_style"] = _require_str(
            payload["pygments_style"], "pygments_style"
        )
    return SiteConfig(**overrides)


def _require_str(value: object, key: str) -> str:
    """Return ``value`` stripped when it is a non-empty string."""
    match value:
        case str() as text if text.strip():
            return text.strip()
        case _:
            msg = f"Config key '{key}' must be a non-empty string."
            raise SiteConfigError(msg)


def _parse_suffixes(value: object) -> tuple[str, ...]:
    """Normalize the suffix list, requiring each entry to start with a dot."""
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, cabc.Sequence) or not value:
        msg = "Config key 'suffixes' must be a non-empty list of strings."
        raise SiteConfigError(msg)
    suffixes: list[str] = []
    for entry in value:
        suffix = _require_str(entry, "suffixes")
        if not suffix.startswith(".") or len(suffix) < 2:
            msg = f"Markdown suffix '{suffix}' must look like '.md'."
            raise SiteConfigError(msg)
        suffixes.append(suffix)
    return tuple(suffixes)


__all__ = ["DEFAULT_CONFIG_PATH", "load_site_config"]
