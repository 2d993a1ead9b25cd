#!/usr/bin/env python3
"""
Configuration System for demtree

Centralized configuration for quad tree tunables and logging.
Provides typed configuration with validation and defaults.
"""

import json
import logging
import os
from typing import Dict, Any
from dataclasses import dataclass, field

import yaml

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class TreeConfig:
    """Configuration for quad tree node subdivision."""
    leaf_capacity: int = 1000       # points per leaf before it subdivides
    boundary_epsilon: float = 0.01  # quadrant overlap absorbing float error
    max_depth: int = 32             # leaves at this depth never subdivide


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_level: str = "INFO"
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


@dataclass
class DemTreeConfig:
    """
    Master configuration class for demtree.

    Groups tree and logging settings and validates them on construction.
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_config()

    def _validate_config(self):
        """Validate configuration parameters."""
        if self.tree.leaf_capacity <= 0:
            raise ValueError("leaf_capacity must be positive")
        if self.tree.boundary_epsilon <= 0:
            raise ValueError("boundary_epsilon must be positive")
        if self.tree.max_depth <= 0:
            raise ValueError("max_depth must be positive")

        if self.logging.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'DemTreeConfig':
        """Create configuration from a nested dictionary."""
        config_dict = config_dict or {}
        tree_dict = config_dict.get('tree', {})
        logging_dict = config_dict.get('logging', {})

        return cls(
            tree=TreeConfig(**tree_dict),
            logging=LoggingConfig(**logging_dict)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'tree': {
                'leaf_capacity': self.tree.leaf_capacity,
                'boundary_epsilon': self.tree.boundary_epsilon,
                'max_depth': self.tree.max_depth
            },
            'logging': {
                'log_level': self.logging.log_level,
                'log_format': self.logging.log_format
            }
        }

    def configure_logging(self):
        """Apply the logging section to the root logger."""
        logging.basicConfig(
            level=getattr(logging, self.logging.log_level.upper()),
            format=self.logging.log_format
        )

    def log_configuration_summary(self):
        """Log a summary of the current configuration."""
        logger.info("=== DEMTREE CONFIGURATION SUMMARY ===")
        logger.info(f"Tree: leaf_capacity={self.tree.leaf_capacity}, "
                    f"boundary_epsilon={self.tree.boundary_epsilon}, max_depth={self.tree.max_depth}")
        logger.info(f"Logging: level={self.logging.log_level}")


# Global default configuration instance
DEFAULT_CONFIG = DemTreeConfig()


def get_default_config() -> DemTreeConfig:
    """Get default configuration instance."""
    return DEFAULT_CONFIG


def create_config_from_file(config_path: str) -> DemTreeConfig:
    """
    Create configuration from YAML or JSON file.

    Args:
        config_path: Path to configuration file

    Returns:
        DemTreeConfig instance
    """
    config_path = str(config_path)
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    if config_path.endswith('.yaml') or config_path.endswith('.yml'):
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    elif config_path.endswith('.json'):
        with open(config_path, 'r') as f:
            config_dict = json.load(f)
    else:
        raise ValueError("Configuration file must be .yaml, .yml, or .json")

    return DemTreeConfig.from_dict(config_dict)


def save_config_to_file(config: DemTreeConfig, config_path: str):
    """
    Save configuration to YAML or JSON file.

    Args:
        config: Configuration to save
        config_path: Path to save configuration
    """
    config_path = str(config_path)
    config_dict = config.to_dict()

    if config_path.endswith('.yaml') or config_path.endswith('.yml'):
        with open(config_path, 'w') as f:
            yaml.dump(config_dict, f, default_flow_style=False)
    elif config_path.endswith('.json'):
        with open(config_path, 'w') as f:
            json.dump(config_dict, f, indent=2)
    else:
        raise ValueError("Configuration file must be .yaml, .yml, or .json")
