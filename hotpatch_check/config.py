import logging
import pathlib
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from hotpatch_check.exceptions import ConfigError
from hotpatch_check.lib.utils import load_yaml
from hotpatch_check.validators.completion_checker import DEFAULT_COMPLETION_MARKER
from hotpatch_check.validators.log_scanner import DEFAULT_ERROR_MARKER
from hotpatch_check.validators.version_validator import DEFAULT_MIN_VERSION

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = "test/hotpatch.log"


class HotpatchConfig(BaseModel):
    log_path: str = Field(default=DEFAULT_LOG_PATH, description="Hotpatch log to inspect")
    min_version: float = Field(
        default=DEFAULT_MIN_VERSION, ge=0, description="Lowest accepted version number"
    )
    error_marker: str = Field(
        default=DEFAULT_ERROR_MARKER, min_length=1, description="Substring marking an error line"
    )
    completion_marker: str = Field(
        default=DEFAULT_COMPLETION_MARKER,
        min_length=1,
        description="Substring expected in the last line",
    )

    @field_validator("log_path")
    @classmethod
    def validate_log_path(cls, v):
        # Stored as given; a backslash is a legal POSIX file name character.
        if not v.strip():
            raise ValueError("log_path must not be empty")
        return v


def _format_errors(e: ValidationError) -> str:
    return "; ".join(
        f"{' -> '.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
    )


def load_config(path: str | pathlib.Path | None = None) -> HotpatchConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: YAML file path; None returns the defaults

    Returns:
        HotpatchConfig: validated configuration

    Raises:
        ConfigError: file missing, not YAML, not a mapping, or failing validation
    """
    if path is None:
        return HotpatchConfig()

    p = pathlib.Path(path)
    try:
        data: Any = load_yaml(p)
    except OSError as e:
        raise ConfigError(f"cannot read config file {p}: {e}", cause=e) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {p}: {e}", cause=e) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {p} must contain a mapping, got {type(data).__name__}")

    try:
        config = HotpatchConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {p}: {_format_errors(e)}", cause=e) from e

    logger.debug("Loaded config from %s: %s", p, config.model_dump())
    return config


def apply_overrides(config: HotpatchConfig, **overrides: Any) -> HotpatchConfig:
    """
    Return a copy of ``config`` with command-line overrides applied and re-validated.

    Raises:
        ConfigError: an override fails validation
    """
    try:
        return HotpatchConfig.model_validate({**config.model_dump(), **overrides})
    except ValidationError as e:
        raise ConfigError(f"invalid option: {_format_errors(e)}", cause=e) from e
