"""
Draft metadata and output settings.

Defaults describe the brand category type; a YAML file can override any of
them, and command-line flags override the file.
"""

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError

DEFAULT_DELIMITER = "___"


@dataclass(frozen=True)
class DraftConfig:
    key: str = "Brand"
    name: str = "Brand"
    description: str = "Fields definitions for brand (top-level category)"
    resource_type_ids: List[str] = field(default_factory=lambda: ["category"])
    locale: str = "en"
    delimiter: str = DEFAULT_DELIMITER
    report_path: Path = Path("verification.json")
    draft_path: Path = Path("brand-type.json")

    def with_overrides(self, **overrides: Any) -> "DraftConfig":
        """Return a copy with every override that is not None applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return _coerce(replace(self, **values))


def _coerce(config: DraftConfig) -> DraftConfig:
    if not config.delimiter:
        raise ConfigError("delimiter must not be empty")
    if isinstance(config.resource_type_ids, str):
        raise ConfigError("resource_type_ids must be a list of strings")
    return replace(
        config,
        resource_type_ids=[str(r) for r in config.resource_type_ids],
        report_path=Path(config.report_path),
        draft_path=Path(config.draft_path),
    )


def load_config(path: Optional[str | Path] = None) -> DraftConfig:
    """
    Load a DraftConfig, optionally overriding defaults from a YAML file.

    The file must hold a mapping whose keys are DraftConfig field names.
    """
    config = DraftConfig()
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return config
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(raw).__name__}")

    known = {f.name for f in fields(DraftConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(map(str, unknown))}")

    overrides: Dict[str, Any] = dict(raw)
    return config.with_overrides(**overrides)
