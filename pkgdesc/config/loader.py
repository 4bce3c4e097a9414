"""Helpers for loading generator configuration from TOML/JSON sources.

`load_generator_config` accepts:

* None -> default GeneratorConfig
* dict -> validated mapping
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from pkgdesc.config.schema import GeneratorConfig
from pkgdesc.errors import ConfigurationError

logger = logging.getLogger("pkgdesc.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _from_mapping(data: Dict[str, Any]) -> GeneratorConfig:
    # Accept both a bare mapping and one nested under [generator].
    section = data.get("generator", data)
    if not isinstance(section, dict):
        raise ConfigurationError("[generator] section must be a mapping")
    try:
        return GeneratorConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid generator configuration: {e}") from e


def load_generator_config(source: ConfigSource) -> GeneratorConfig:
    """Load GeneratorConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns GeneratorConfig.default()
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        GeneratorConfig instance.

    Raises:
        ConfigurationError: If the source cannot be parsed or fails
            validation.
    """
    if source is None:
        logger.debug("No config source provided; using default GeneratorConfig")
        return GeneratorConfig.default()

    if isinstance(source, dict):
        logger.debug("Loading GeneratorConfig from provided dict")
        return _from_mapping(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        text: Optional[str] = None
        fmt: Optional[str] = None

        if path.is_file():
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigurationError(
                    f"Cannot read configuration file {path}: {e}"
                ) from e
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                stripped = text.lstrip()
                fmt = "json" if stripped.startswith(("{", "[")) else "toml"
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            stripped = text.lstrip()
            fmt = "json" if stripped.startswith(("{", "[")) else "toml"
            logger.info("Loading configuration from inline %s string", fmt)

        try:
            data = json.loads(text) if fmt == "json" else tomllib.loads(text)
        except (json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Cannot parse {fmt} configuration: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError("Top-level configuration must be a mapping/dict")

        return _from_mapping(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["ConfigSource", "load_generator_config"]
