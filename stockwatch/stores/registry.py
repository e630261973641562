"""Store registry backed by YAML configuration files."""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from stockwatch.core.config import Settings

from .base import Store

logger = logging.getLogger(__name__)


class StoreRegistry:
    """Registry of monitored stores."""

    _stores: Dict[str, Store] = {}

    @classmethod
    def load_configs(cls, config_dir: Optional[Union[str, Path]] = None) -> Dict[str, Store]:
        """
        Load store definitions from YAML files.

        Args:
            config_dir: Directory containing store YAML files.
                       Defaults to stockwatch/config/stores/

        Returns:
            Dictionary of store name -> Store
        """
        if config_dir is None:
            config_dir = Path(__file__).parent.parent / "config" / "stores"
        else:
            config_dir = Path(config_dir)

        if not config_dir.exists():
            return {}

        stores = {}
        for yaml_file in sorted(config_dir.glob("*.yaml")):
            try:
                with open(yaml_file) as f:
                    data = yaml.safe_load(f)

                if not data:
                    continue

                store = cls._parse_config(data)
                stores[store.name] = store
                cls._stores[store.name] = store

            except (yaml.YAMLError, KeyError, TypeError, ValueError) as e:
                logger.warning("Error loading %s: %s", yaml_file, e)

        return stores

    @classmethod
    def load_from_settings(cls, settings: Settings) -> Dict[str, Store]:
        """Load stores from the directory named in settings (or the default)."""
        return cls.load_configs(settings.stores_config_dir)

    @classmethod
    def _parse_config(cls, data: dict) -> Store:
        """Parse a YAML config dict into a Store."""
        proxies = data.get("proxies")
        if proxies is not None:
            proxies = tuple(str(p) for p in proxies)

        return Store(
            name=str(data["name"]),
            bulk=bool(data.get("bulk", False)),
            current_proxy_index=0 if proxies else None,
            proxy_list=proxies if proxies else None,
        )

    @classmethod
    def get(cls, name: str) -> Optional[Store]:
        """Get a store by name."""
        return cls._stores.get(name)

    @classmethod
    def all(cls) -> List[Store]:
        """Get all loaded stores."""
        return list(cls._stores.values())

    @classmethod
    def clear(cls):
        """Clear all loaded stores (for testing)."""
        cls._stores.clear()
