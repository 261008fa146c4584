"""
Configuration management for gfxmath.

Provides the Config dataclass holding library-wide defaults (storage dtype,
device, comparison tolerances) and helpers to load and save it as JSON.
The default config is read whenever a value is constructed without an
explicit dtype or device.
"""

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Any, Dict
from pathlib import Path

import torch

from ..core.constants import (
    DEFAULT_DTYPE_NAME,
    DEFAULT_DEVICE,
    DEFAULT_RTOL,
    DEFAULT_ATOL,
    DEFAULT_UNIT_TOLERANCE,
    SUPPORTED_DTYPE_NAMES,
)

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Library-wide defaults for gfxmath.

    Attributes:
        # Storage
        dtype: Name of the torch dtype for new values ('float32' or 'float64')
        device: Device for new values ('cpu', 'cuda', ...)

        # Comparison
        rtol: Relative tolerance used by is_close
        atol: Absolute tolerance used by is_close

        # Input validation
        validate_unit_inputs: Reject non-unit axes/vectors in rotor factories
        unit_tolerance: Accepted deviation of |v| from 1 when validating
    """

    # Storage
    dtype: str = DEFAULT_DTYPE_NAME
    device: str = DEFAULT_DEVICE

    # Comparison
    rtol: float = DEFAULT_RTOL
    atol: float = DEFAULT_ATOL

    # Input validation
    validate_unit_inputs: bool = False
    unit_tolerance: float = DEFAULT_UNIT_TOLERANCE

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.dtype not in SUPPORTED_DTYPE_NAMES:
            raise ValueError(
                f"Unsupported dtype: {self.dtype}. "
                f"Supported: {', '.join(SUPPORTED_DTYPE_NAMES)}"
            )

    @property
    def torch_dtype(self) -> torch.dtype:
        """The torch dtype named by `dtype`."""
        return getattr(torch, self.dtype)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        config = cls(**known_kwargs)
        config.extra.update(extra_kwargs)
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


_default_config = Config()


def get_default_config() -> Config:
    """Return the config used for values built without explicit options."""
    return _default_config


def set_default_config(config: Config) -> Config:
    """
    Replace the default config.

    Args:
        config: New default config

    Returns:
        The previous default config, so callers can restore it
    """
    global _default_config
    if not isinstance(config, Config):
        raise TypeError(f"Expected Config, got {type(config).__name__}")
    previous = _default_config
    _default_config = config
    return previous


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded gfxmath config from {filepath}")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved gfxmath config to {filepath}")
