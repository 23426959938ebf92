"""Configuration management"""

import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

# Property name used by the analysis platform to disable the check
SKIP_KEY = 'sonar.buildbreaker.skip'


def parse_bool(value: Any) -> bool:
    """Parse a boolean setting given as bool or 'true'/'false' string"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
        return value.strip().lower() == 'true'
    raise ValueError(f"Invalid boolean value: {value!r}. Must be true or false")


@dataclass
class BreakerConfig:
    """Settings of the build breaker check"""
    skip: bool = False

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'BreakerConfig':
        """Create from a loaded configuration dictionary"""
        section = config.get('build_breaker', {})
        return cls(skip=parse_bool(section.get('skip', False)))

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> 'BreakerConfig':
        """Create from flat host platform properties"""
        return cls(skip=parse_bool(properties.get(SKIP_KEY, False)))


def get_default_config() -> Dict[str, Any]:
    """Get default configuration"""
    return {
        'logging': {
            'log_level': 'INFO',
            'log_file': None,
            'log_format': 'text',
        },
        'build_breaker': {
            'skip': False,
        },
        'metrics': {
            'enabled': False,
            'textfile': None,
        },
    }


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file and environment variables

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary
    """
    # Start with defaults
    config = get_default_config()

    # Load from YAML file if provided
    if config_path and Path(config_path).exists():
        try:
            with open(config_path, 'r') as f:
                yaml_config = yaml.safe_load(f)
                if yaml_config:
                    config = merge_configs(config, yaml_config)
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")

    # Override with environment variables
    config = override_from_env(config)

    validate_config(config)

    return config


def merge_configs(base: Dict, override: Dict) -> Dict:
    """Recursively merge two configuration dictionaries"""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def override_from_env(config: Dict) -> Dict:
    """Override configuration from environment variables"""

    # Logging settings
    if 'LOG_LEVEL' in os.environ:
        config['logging']['log_level'] = os.environ['LOG_LEVEL'].upper()
    if 'LOG_FILE' in os.environ:
        config['logging']['log_file'] = os.environ['LOG_FILE']
    if 'LOG_FORMAT' in os.environ:
        config['logging']['log_format'] = os.environ['LOG_FORMAT'].lower()

    # Check settings
    if 'BUILD_BREAKER_SKIP' in os.environ:
        config['build_breaker']['skip'] = _env_bool('BUILD_BREAKER_SKIP')

    # Metrics settings
    if 'METRICS_ENABLED' in os.environ:
        config['metrics']['enabled'] = _env_bool('METRICS_ENABLED')
    if 'METRICS_TEXTFILE' in os.environ:
        config['metrics']['textfile'] = os.environ['METRICS_TEXTFILE']

    return config


def _env_bool(name: str) -> bool:
    try:
        return parse_bool(os.environ[name])
    except ValueError as e:
        raise ValueError(f"Invalid {name}: {e}")


def validate_config(config: Dict):
    """
    Validate configuration values

    Raises:
        ValueError: If configuration is invalid
    """
    valid_log_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    log_level = str(config['logging']['log_level']).upper()
    if log_level not in valid_log_levels:
        raise ValueError(f"Invalid log level: {log_level}. Must be one of {valid_log_levels}")

    valid_formats = ['text', 'json']
    log_format = config['logging']['log_format']
    if log_format not in valid_formats:
        raise ValueError(f"Invalid log format: {log_format}. Must be one of {valid_formats}")

    skip = config['build_breaker']['skip']
    if not isinstance(skip, bool):
        raise ValueError(f"Invalid build_breaker.skip: {skip!r}. Must be true or false")

    if config['metrics'].get('enabled', False) and not config['metrics'].get('textfile'):
        raise ValueError("Metrics enabled but textfile not set")
