"""Configuration loader and dataclasses for sea router settings."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


CONFIG_ENV_VAR = "SEA_ROUTER_CONFIG"
GRAPH_ENV_VAR = "SEA_ROUTER_GRAPH"


@dataclass
class GridConfig:
    """Spatial grid index configuration."""
    target_nodes_per_cell: int = 20


@dataclass
class NearestConfig:
    """Nearest-node resolution configuration."""
    max_search_radius: int = 5


@dataclass
class GraphConfig:
    """Graph data source configuration."""
    path: Optional[str] = None


@dataclass
class RouterConfig:
    """Complete router configuration."""
    grid: GridConfig = field(default_factory=GridConfig)
    nearest: NearestConfig = field(default_factory=NearestConfig)
    graph: GraphConfig = field(default_factory=GraphConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "RouterConfig":
        """Load configuration from a YAML file."""
        with open(path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls(
            grid=GridConfig(**(data.get('grid') or {})),
            nearest=NearestConfig(**(data.get('nearest') or {})),
            graph=GraphConfig(**(data.get('graph') or {})),
        )

    def graph_path(self) -> Optional[Path]:
        """Graph data path, with ``SEA_ROUTER_GRAPH`` taking precedence over the file."""
        env = os.environ.get(GRAPH_ENV_VAR)
        if env:
            return Path(env)
        if self.graph.path:
            path = Path(self.graph.path)
            if not path.is_absolute():
                path = _project_root() / path
            return path
        return None


def _project_root() -> Path:
    """Project root (three levels up from the package directory)."""
    return Path(__file__).resolve().parents[3]


# Global config instance - lazily loaded
_config: Optional[RouterConfig] = None


def get_config(config_path: Optional[Path] = None) -> RouterConfig:
    """Get the global configuration, loading from file if not already loaded.

    Args:
        config_path: Path to the config file. If None, uses ``SEA_ROUTER_CONFIG``
            or ``configs/routing_defaults.yaml`` under the project root.

    Returns:
        The RouterConfig instance.
    """
    global _config

    if _config is None or config_path is not None:
        if config_path is None:
            env = os.environ.get(CONFIG_ENV_VAR)
            config_path = Path(env) if env else _project_root() / "configs" / "routing_defaults.yaml"

        if config_path.exists():
            _config = RouterConfig.from_yaml(config_path)
        else:
            # Use defaults if config file not found
            _config = RouterConfig()

    return _config


def reload_config(config_path: Optional[Path] = None) -> RouterConfig:
    """Force reload of configuration from file.

    Args:
        config_path: Path to the config file.

    Returns:
        The newly loaded RouterConfig instance.
    """
    global _config
    _config = None
    return get_config(config_path)
