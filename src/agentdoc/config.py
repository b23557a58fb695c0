"""Loader configuration.

``LoaderConfig`` gathers every knob the loader exposes: the sandbox root,
document extensions, the front-matter delimiter and which store backend
to use.  It can be built directly, from a mapping, or from a YAML file::

    # agentdoc.yaml
    root: prompts
    default_extension: .md
    extensions: [.md, .markdown]
    store: filesystem

Relative roots in a YAML file are taken relative to the file itself.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from agentdoc.core.errors import ConfigError

DEFAULT_EXTENSION = ".md"
DEFAULT_DELIMITER = "---"


def _normalize_extension(ext: str) -> str:
    ext = ext.strip()
    if not ext:
        raise ConfigError("Document extensions must not be empty")
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class LoaderConfig:
    """Settings for a :class:`agentdoc.loader.Loader`.

    Parameters
    ----------
    root:
        Sandbox root directory.  No document outside it is ever read.
    default_extension:
        Suffix appended to names and references lacking a recognized one.
    extensions:
        Suffixes recognized as already naming a document.  The default
        extension is always recognized.
    delimiter:
        Marker line opening and closing the front-matter block.
    encoding:
        Text encoding handed to the filesystem store.
    store:
        Name of the store backend in :data:`agentdoc.store.store_registry`.
    store_options:
        Extra keyword arguments for the store backend's constructor.
    """

    root: str = "."
    default_extension: str = DEFAULT_EXTENSION
    extensions: tuple[str, ...] = (DEFAULT_EXTENSION,)
    delimiter: str = DEFAULT_DELIMITER
    encoding: str = "utf-8"
    store: str = "filesystem"
    store_options: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        default = _normalize_extension(self.default_extension)
        extensions = tuple(_normalize_extension(e) for e in self.extensions)
        if default not in extensions:
            extensions = (default, *extensions)
        if not self.delimiter.strip():
            raise ConfigError("Front-matter delimiter must not be blank")
        object.__setattr__(self, "root", os.fspath(self.root))
        object.__setattr__(self, "default_extension", default)
        object.__setattr__(self, "extensions", extensions)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LoaderConfig":
        """Build a config from a plain mapping.

        Raises
        ------
        ConfigError
            If *data* contains unknown keys or values of the wrong shape.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(
                f"Unknown loader config key(s): {unknown}. Valid keys: {sorted(known)}"
            )
        values = dict(data)
        if "extensions" in values:
            exts = values["extensions"]
            if isinstance(exts, str):
                exts = [exts]
            if not isinstance(exts, (list, tuple)):
                raise ConfigError(f"'extensions' must be a list, got {type(exts).__name__}")
            values["extensions"] = tuple(str(e) for e in exts)
        if "store_options" in values and not isinstance(values["store_options"], Mapping):
            raise ConfigError("'store_options' must be a mapping")
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | os.PathLike[str]) -> "LoaderConfig":
        """Load a config from a YAML file.

        Raises
        ------
        ConfigError
            If the file cannot be read or parsed, or is not a mapping.
        """
        config_path = Path(path)
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in config file {config_path}: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
        config = cls.from_mapping(data)
        if not os.path.isabs(config.root):
            config = replace(config, root=str(config_path.parent / config.root))
        return config
