"""
Configuration Loader

Loads layered YAML configuration for the browser suite.

Loading order for a config name:
1. config/base/{name}.yaml
2. config/environments/{environment}.yaml, section {name} (overrides)
3. config/local/overrides.yaml, section {name} (overrides, gitignored)
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent


class ConfigLoader:
    """Load and merge configuration from YAML files."""

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        environment: str = "development",
    ):
        self.config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self.environment = environment
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load(self, config_name: str) -> Dict[str, Any]:
        """
        Load a named configuration with environment and local overrides.

        Args:
            config_name: Name of config file (without .yaml extension)

        Returns:
            Merged configuration dictionary (a copy, safe to mutate)

        Raises:
            FileNotFoundError if the base file does not exist
        """
        if config_name not in self._cache:
            self._cache[config_name] = self._load_uncached(config_name)
        return copy.deepcopy(self._cache[config_name])

    def _load_uncached(self, config_name: str) -> Dict[str, Any]:
        base_path = self.config_dir / "base" / f"{config_name}.yaml"
        if not base_path.exists():
            raise FileNotFoundError(f"Base config not found: {base_path}")

        config = self._read_yaml(base_path)

        env_path = self.config_dir / "environments" / f"{self.environment}.yaml"
        if env_path.exists():
            logger.debug(f"Applying {self.environment} overrides to {config_name}")
            config = merge_config(config, self._read_yaml(env_path).get(config_name) or {})
        else:
            logger.debug(f"No overrides for environment {self.environment}")

        local_path = self.config_dir / "local" / "overrides.yaml"
        if local_path.exists():
            logger.info(f"Applying local overrides from {local_path}")
            config = merge_config(config, self._read_yaml(local_path).get(config_name) or {})

        return config

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at top level of {path}")
        return data

    def clear_cache(self) -> None:
        """Forget previously loaded configs."""
        self._cache.clear()


def merge_config(base: Dict, override: Dict) -> Dict:
    """Deep merge override config into base config."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_config(result[key], value)
        else:
            result[key] = value
    return result
