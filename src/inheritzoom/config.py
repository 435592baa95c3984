"""Read inheritzoom settings from .inheritzoom.toml or pyproject.toml."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path

from inheritzoom.assembler import DanglingPolicy, MergePolicy
from inheritzoom.extractors.java.members import DOC_SCOPE_DECLARATION, DOC_SCOPES

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".inheritzoom.toml"


class ConfigError(ValueError):
    """Raised when a setting has an unusable value."""


@dataclass
class ExtractionConfig:
    """Settings for one extraction run."""

    exclude: list[str] = field(default_factory=list)
    merge_policy: str = MergePolicy.FIRST
    dangling_edges: str = DanglingPolicy.DROP
    doc_scope: str = DOC_SCOPE_DECLARATION
    workers: int = 4

    def __post_init__(self) -> None:
        if self.merge_policy not in MergePolicy.ALL:
            raise ConfigError(
                f"merge_policy must be one of {MergePolicy.ALL}, got {self.merge_policy!r}"
            )
        if self.dangling_edges not in DanglingPolicy.ALL:
            raise ConfigError(
                f"dangling_edges must be one of {DanglingPolicy.ALL}, "
                f"got {self.dangling_edges!r}"
            )
        if self.doc_scope not in DOC_SCOPES:
            raise ConfigError(
                f"doc_scope must be one of {DOC_SCOPES}, got {self.doc_scope!r}"
            )
        if not isinstance(self.workers, int) or self.workers < 1:
            raise ConfigError(f"workers must be a positive integer, got {self.workers!r}")
        if not isinstance(self.exclude, list):
            raise ConfigError(f"exclude must be a list, got {self.exclude!r}")

    @classmethod
    def from_dict(cls, data: dict) -> ExtractionConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown inheritzoom settings: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})


def _as_table(value, where: str) -> dict:
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be a table, got {value!r}")
    return value


def _read_table(project_dir: Path) -> dict | None:
    # Try .inheritzoom.toml first
    config_toml = project_dir / CONFIG_FILENAME
    if config_toml.exists():
        try:
            with open(config_toml, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not read %s: %s", config_toml, e)
        else:
            return _as_table(data.get("inheritzoom", {}), f"[inheritzoom] in {config_toml}")

    # Fall back to [tool.inheritzoom] in pyproject.toml
    pyproject = project_dir / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not read %s: %s", pyproject, e)
        else:
            tool = _as_table(data.get("tool", {}), f"[tool] in {pyproject}")
            table = tool.get("inheritzoom")
            if table is not None:
                return _as_table(table, f"[tool.inheritzoom] in {pyproject}")

    return None


def load_config(project_dir: Path, **overrides) -> ExtractionConfig:
    """Build the config for *project_dir*; non-None *overrides* win over file values."""
    data = dict(_read_table(project_dir) or {})
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ExtractionConfig.from_dict(data)
