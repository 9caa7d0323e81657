import json
import logging
import logging.config
import pathlib
from functools import partial, update_wrapper

import colorama
from colorama import Back, Fore, Style

PACKAGE_DIR = pathlib.Path(__file__).resolve().parent


class ColorFormatter(logging.Formatter):
    COLORS = {
        'WARNING':  (Style.DIM + Fore.BLACK, Back.YELLOW),
        'INFO':     (Style.BRIGHT + Fore.WHITE, Back.CYAN),
        'DEBUG':    (Style.NORMAL + Fore.WHITE, Back.BLUE),
        'CRITICAL': (Style.DIM + Fore.BLACK, Back.YELLOW),
        'ERROR':    (Style.BRIGHT + Fore.WHITE, Back.RED),
    }

    def format(self, record):
        color, bg_color = self.COLORS.get(record.levelname, self.COLORS['DEBUG'])
        message = super().format(record)
        message = message.replace("$RESET", Style.RESET_ALL) \
            .replace("$BRIGHT", Style.BRIGHT) \
            .replace("$BGCOLOR", bg_color) \
            .replace("$COLOR", color)
        return message + Style.RESET_ALL


def loginit(root_dir=PACKAGE_DIR):
    """Configure logging from the ``logging.json`` found in ``root_dir``."""
    colorama.init()
    with (pathlib.Path(root_dir) / 'logging.json').open('r') as config_file:
        logging.config.dictConfig(json.load(config_file))


START_STR = "starting"
FINISH_STR = "finished"


def logger_deco_factory(logger):
    class decorator:
        def __init__(self, f):
            self._f = f
            update_wrapper(self, f)

        def __call__(self, instance, *args, **kwargs):
            f = self._f

            name_str = f"{type(instance).__name__}.{f.__name__}"

            args_kwargs_str = "; ".join(i for i in (f"args = {args}" if args else "",
                                                    f"kwargs = {kwargs}" if kwargs else "") if i)
            logger.debug(" | ".join(i for i in (name_str, START_STR, args_kwargs_str) if i))
            ret = f(instance, *args, **kwargs)
            ret_str = f"returned {ret}" if ret is not None else ""
            logger.debug(" | ".join(i for i in (name_str, FINISH_STR, ret_str) if i))
            return ret

        def __get__(self, instance, owner):
            if instance is None:
                return self
            return partial(self.__call__, instance)

    return decorator
