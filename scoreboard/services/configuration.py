"""
Configuration management service for the scoring engine.

Provides dotted-key tunables (weighting table, suggestion thresholds, chart
geometry) seeded from DEFAULT_CONFIGS, optionally overlaid by a JSON file
and by explicit overrides.
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Optional

from scoreboard.config import Config
from scoreboard.services.seed_configurations import DEFAULT_CONFIGS

logger = logging.getLogger(__name__)

class ConfigurationService:
    """Manages scoring tunables with simple caching."""

    def __init__(self, overrides: Optional[Dict[str, Any]] = None, config_path: Optional[str] = None):
        """
        Initialize configuration service and load all values.

        Args:
            overrides: Explicit key/value pairs applied last
            config_path: JSON file of overrides; defaults to Config.SCOREBOARD_CONFIG_PATH
        """
        self._overrides: Dict[str, Any] = dict(overrides or {})
        self._config_path = config_path if config_path is not None else Config.SCOREBOARD_CONFIG_PATH
        self._cache: Dict[str, Any] = {}
        self.load_all()

    def load_all(self):
        """Rebuild the cache from defaults, the JSON file and explicit overrides."""
        new_cache = dict(DEFAULT_CONFIGS)

        if self._config_path:
            new_cache.update(self._load_file(Path(self._config_path)))

        new_cache.update(self._overrides)
        self._cache = new_cache
        logger.info(f"Loaded {len(self._cache)} configuration parameters")

    def _load_file(self, path: Path) -> Dict[str, Any]:
        """Read overrides from a JSON object file; keys without a category prefix are skipped."""
        with path.open(encoding='utf-8') as handle:
            raw = json.load(handle)

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration file {path} must contain a JSON object")

        loaded = {}
        for key, value in raw.items():
            if '.' not in key:
                logger.warning(f"Config key '{key}' has no category prefix, skipping")
                continue
            loaded[key] = value
        logger.debug(f"Read {len(loaded)} configuration overrides from {path}")
        return loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a tunable.

        Args:
            key: Dotted key such as 'suggested.thresholds'
            default: Returned when the key is not set anywhere

        Returns:
            The effective value after file and explicit overrides
        """
        return self._cache.get(key, default)

    def set(self, key: str, value: Any):
        """
        Override one tunable for the lifetime of this service.

        The value is kept as an explicit override, so it survives load_all().
        """
        old_value = self._cache.get(key)
        self._overrides[key] = value
        self.load_all()
        logger.info(f"Config '{key}' changed from {old_value!r} to {value!r}")

    def list_all(self) -> Dict[str, Any]:
        """Snapshot of every effective tunable; editing it does not affect the service."""
        return self._cache.copy()

    def get_by_category(self, category: str) -> Dict[str, Any]:
        """
        Tunables of one category with the prefix stripped.

        Example: get_by_category('matrix') -> {'width': 700, 'height': 700, ...}
        """
        prefix = f"{category}."
        return {
            key[len(prefix):]: value
            for key, value in self._cache.items()
            if key.startswith(prefix)
        }

    def get_categories(self) -> Dict[str, int]:
        """Number of tunables per category, e.g. {'weighting': 3, 'suggested': 2, 'matrix': 4}"""
        return dict(Counter(key.partition('.')[0] for key in self._cache if '.' in key))
