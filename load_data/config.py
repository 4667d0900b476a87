"""
Configuration models and YAML I/O for load-data.

Key models:
- LoaderConfig: Top-level config (parse + fetch).
- ParseConfig: Annotation syntax and output shape of tabular data.
- FetchConfig: HTTP client settings and body decoding.

Key functions:
- load_config(path) -> LoaderConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- resolve_config(config) -> LoaderConfig: Accept a model, a YAML path, or None.

Every field has a default, so an empty ``LoaderConfig()`` reproduces the
standard ATSV conventions (``&`` prefix, ``date`` sentinel column).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from load_data.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ParseConfig(BaseModel):
    """Parsing settings for delimited and annotated bodies."""

    annotation_prefix: str = Field(
        "&", description="Leading marker of metadata rows in ATSV bodies"
    )
    sentinel_name: str = Field(
        "date",
        description="Header name substituted for a bare annotation prefix in the first column",
    )
    as_frame: bool = Field(
        False,
        description="If True, tabular data is returned as a pandas DataFrame of strings",
    )

    @field_validator("annotation_prefix")
    @classmethod
    def _check_prefix_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("annotation_prefix must be a non-empty string")
        return value


class FetchConfig(BaseModel):
    """Settings for the default HTTP fetcher."""

    timeout: float | None = Field(
        None, description="Per-request timeout in seconds; None disables timeouts"
    )
    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra request headers"
    )
    encoding: str = Field(
        "utf-8-sig", description="Codec used to decode fetched bytes"
    )
    follow_redirects: bool = True


class LoaderConfig(BaseModel):
    """Top-level configuration for load-data."""

    parse: ParseConfig = Field(default_factory=ParseConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)


def load_config(path: str | Path) -> LoaderConfig:
    """Load and validate a YAML file into a LoaderConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return LoaderConfig.model_validate(raw)


def save_config(config: LoaderConfig, path: str | Path) -> None:
    """Serialize a LoaderConfig to YAML with a short header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# load-data configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def resolve_config(config: LoaderConfig | str | os.PathLike | None) -> LoaderConfig:
    """Normalise the ``config`` argument accepted by ``load()``."""
    if config is None:
        return LoaderConfig()
    if isinstance(config, LoaderConfig):
        return config
    return load_config(config)
