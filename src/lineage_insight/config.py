"""Configuration loading and management for Lineage Insight.

Configuration sources are merged in priority order:
    1. Defaults (defined in InsightConfig)
    2. Global config (~/.lineage-insight.toml)
    3. Project config (./lineage-insight.toml)
    4. Explicit config file
    5. Environment variables (LINEAGE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, max_couplings=30)
    >>> config.verbosity
    'verbose'
    >>> config.max_couplings
    30
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import tzinfo
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

GROUP_BY_LEVELS = ("hour", "day", "week", "month")


@dataclass(frozen=True)
class ThresholdConfig:
    """Heuristic thresholds.

    The defaults define the behaviour of the classifiers; changing them
    changes results, it does not tune accuracy.

    Attributes:
        Coupling:
            coupling_min_count: Co-changes required before a file pair is reported

        Re-prompt detection:
            reprompt_overlap: Word overlap a pair must exceed to count
            reprompt_prefix_chars: Leading characters of each prompt compared
            reprompt_min_chars: Both prefixes must be longer than this

        Activity:
            peak_hour_count: Number of peak hours in the developer profile
            velocity_weeks: Trailing weeks shown in the velocity chart
    """

    # === Coupling ===
    coupling_min_count: int = 3

    # === Re-prompt detection ===
    reprompt_overlap: float = 0.6
    reprompt_prefix_chars: int = 50
    reprompt_min_chars: int = 10

    # === Activity ===
    peak_hour_count: int = 3
    velocity_weeks: int = 12

    def __post_init__(self) -> None:
        """Validate threshold configuration."""
        if not 0.0 <= self.reprompt_overlap <= 1.0:
            raise ValueError("reprompt_overlap must be between 0.0 and 1.0")
        if self.coupling_min_count < 1:
            raise ValueError("coupling_min_count must be at least 1")
        if self.reprompt_prefix_chars < 1:
            raise ValueError("reprompt_prefix_chars must be at least 1")
        if self.reprompt_min_chars < 0:
            raise ValueError("reprompt_min_chars must be non-negative")
        if self.peak_hour_count < 1:
            raise ValueError("peak_hour_count must be at least 1")
        if self.velocity_weeks < 1:
            raise ValueError("velocity_weeks must be at least 1")


DEFAULT_THRESHOLDS = ThresholdConfig()


@dataclass(frozen=True)
class InsightConfig:
    """Configuration for deriving and displaying insights.

    Attributes:
        timezone: IANA zone used for hour/day bucketing (None = host local time)
        max_couplings: Coupled file pairs shown by the patterns view
        top_files: Entries shown in most-modified lists
        prompt_preview_chars: Prompt text shown before truncation
        default_group_by: Session grouping used when none is requested
        verbosity: Logging verbosity level
        log_file: Optional file that log records are also written to
        thresholds: Heuristic thresholds (nested config)
    """

    timezone: Optional[str] = None
    max_couplings: int = 15
    top_files: int = 8
    prompt_preview_chars: int = 200
    default_group_by: str = "day"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_couplings < 1:
            raise ValueError("max_couplings must be at least 1")
        if self.top_files < 1:
            raise ValueError("top_files must be at least 1")
        if self.prompt_preview_chars < 1:
            raise ValueError("prompt_preview_chars must be at least 1")
        if self.default_group_by not in GROUP_BY_LEVELS:
            raise ValueError(f"default_group_by must be one of {', '.join(GROUP_BY_LEVELS)}")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be quiet, normal or verbose")
        if self.timezone is not None:
            try:
                ZoneInfo(self.timezone)
            except (ZoneInfoNotFoundError, ValueError):
                raise ValueError(f"unknown timezone '{self.timezone}'")

    @property
    def tzinfo(self) -> Optional[tzinfo]:
        """Zone for bucketing, or None to use the host's local time."""
        if self.timezone is None:
            return None
        return ZoneInfo(self.timezone)


def load_config(config_file: Optional[Path] = None, **overrides) -> InsightConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated InsightConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable, or a value
            fails validation
        InvalidConfigError: If a LINEAGE_* variable cannot be parsed
    """
    merged: dict = {}

    global_config = Path.home() / ".lineage-insight.toml"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / "lineage-insight.toml"
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update(overrides)

    thresholds_dict = merged.pop("thresholds", None)
    if thresholds_dict is not None:
        if isinstance(thresholds_dict, dict):
            try:
                merged["thresholds"] = ThresholdConfig(**thresholds_dict)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Invalid [thresholds] config: {e}")
        elif isinstance(thresholds_dict, ThresholdConfig):
            merged["thresholds"] = thresholds_dict

    try:
        return InsightConfig(**merged)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from LINEAGE_* environment variables.

    Supported environment variables:
        LINEAGE_TIMEZONE: str
        LINEAGE_MAX_COUPLINGS: int
        LINEAGE_TOP_FILES: int
        LINEAGE_PROMPT_PREVIEW_CHARS: int
        LINEAGE_DEFAULT_GROUP_BY: hour/day/week/month
        LINEAGE_VERBOSITY: quiet/normal/verbose
        LINEAGE_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any LINEAGE_* vars found.
    """
    type_hints = get_type_hints(InsightConfig)

    result: dict[str, Any] = {}

    for field_name in InsightConfig.__dataclass_fields__:
        env_key = f"LINEAGE_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed as a single variable
    (nested configs).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict."""
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
