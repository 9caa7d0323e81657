import functools
import json
import logging
import pathlib

import box

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = pathlib.Path(__file__).resolve().parent / "config.json"


class Config:
    def __init__(self, conf_filename: pathlib.Path):
        self.filename = pathlib.Path(conf_filename).absolute()
        try:
            with self.filename.open("r") as conf_file:
                self._config = box.Box(json.load(conf_file))
        except FileNotFoundError as exc:
            raise ConfigError(f"No configuration file at {self.filename}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid configuration file {self.filename}: {exc}") from exc
        logger.debug(f"Config.__init__ | loaded {self.filename.name}")

    def __call__(self, *args, **kwargs):
        return self._config

    @property
    def config(self):
        return self._config


@functools.lru_cache(maxsize=None)
def default_config():
    return Config(DEFAULT_CONFIG)
