"""
Sizing Engine Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict

from kafka_sizing_core.domain.constants import CURRENCY_SYMBOL, EXPORT_FILENAME

VALIDATION_POLICIES = ("reject", "clamp")
TOPOLOGY_CHOICES = ("unified", "per-domain")


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


def _env_choice(key: str, default: str, choices: tuple[str, ...]) -> str:
    """Get an environment variable restricted to a set of choices"""
    val = os.environ.get(key)
    if val is None:
        return default
    val = val.strip().lower()
    if val not in choices:
        raise ValueError(
            f"The value '{val}' of environment variable '{key}' is not one of {list(choices)}."
        )
    return val


@dataclass
class ValidationConfig:
    """Input validation policy configuration"""
    policy: str = "reject"  # reject / clamp

    def __post_init__(self):
        if self.policy not in VALIDATION_POLICIES:
            raise ValueError(f"Invalid validation policy: {self.policy}. Valid values: {list(VALIDATION_POLICIES)}")


@dataclass
class ExportConfig:
    """CSV export configuration"""
    currency_symbol: str = CURRENCY_SYMBOL
    filename: str = EXPORT_FILENAME


@dataclass
class DefaultsConfig:
    """Defaults applied when a scenario leaves a choice open"""
    topology: str = "unified"  # unified / per-domain

    def __post_init__(self):
        if self.topology not in TOPOLOGY_CHOICES:
            raise ValueError(f"Invalid topology: {self.topology}. Valid values: {list(TOPOLOGY_CHOICES)}")


@dataclass
class SizingConfig:
    """Overall sizing engine configuration"""
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"sizing_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "SizingConfig":
        """Create from dictionary (handles presence/absence of sizing_config key)"""
        config_data = data.get("sizing_config", data)
        return cls(
            validation=ValidationConfig(**config_data.get("validation", {})),
            export=ExportConfig(**config_data.get("export", {})),
            defaults=DefaultsConfig(**config_data.get("defaults", {})),
        )


def load_config() -> SizingConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        SizingConfig

    Raises:
        ValueError: If an environment variable holds an unsupported value
    """
    validation = ValidationConfig(
        policy=_env_choice("SIZING_VALIDATION_POLICY", "reject", VALIDATION_POLICIES),
    )
    export = ExportConfig(
        currency_symbol=_env_str("SIZING_CURRENCY_SYMBOL", CURRENCY_SYMBOL),
        filename=_env_str("SIZING_EXPORT_FILENAME", EXPORT_FILENAME),
    )
    defaults = DefaultsConfig(
        topology=_env_choice("SIZING_DEFAULT_TOPOLOGY", "unified", TOPOLOGY_CHOICES),
    )
    return SizingConfig(
        validation=validation,
        export=export,
        defaults=defaults,
    )
