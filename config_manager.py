"""Configuration management for the N-Queens local-search benchmark.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize benchmark settings and hill-climbing/annealing limits.

File format (high-level)
------------------------
- experiment_settings: board sizes, algorithms to run and output directory.
- search_settings: hill-climbing caps and the annealing zero-temperature policy.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist the benchmark configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return benchmark settings (sizes, algorithms, output dir)."""
        return self.config.get("experiment_settings", {})

    def get_search_settings(self):
        """Return hill-climbing caps and the annealing zero-temperature policy."""
        return self.config.get("search_settings", {})

    def get_algorithms(self):
        """Return the list of algorithm labels to benchmark (e.g., ["HC", "SA"])."""
        return self.get_experiment_settings().get("algorithms", ["HC", "SA"])

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
