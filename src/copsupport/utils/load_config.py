import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "cop_support.yaml"


class _Config:
    def __init__(self, path=None):
        self.path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
        logger.debug("Loading config from %s", self.path)
        with open(self.path) as f:
            self.config = yaml.full_load(f) or {}

    def __getattr__(self, name):
        # only reached for names that are not regular attributes
        if name == "config":
            raise AttributeError(name)
        try:
            return self.config[name]
        except KeyError:
            raise AttributeError(f"'{name}' is not a config key of {self.path}") from None

    def get(self, name, default=None):
        return self.config.get(name, default)


def load_config(path=None):
    """Read a YAML config; the packaged defaults are used when `path` is None."""
    return _Config(path)


cop_config = load_config()
