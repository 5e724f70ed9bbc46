import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load Environment Variables (may include a UTF-8 BOM if file saved with BOM)
load_dotenv()

_BOM = "\ufeff"

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_MAX_SIDE = 4096
DEFAULT_COLOR_START = "#4DFE44"
DEFAULT_COLOR_END = "#1B95EC"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    max_side: int = DEFAULT_MAX_SIDE
    color_start: str = DEFAULT_COLOR_START
    color_end: str = DEFAULT_COLOR_END
    log_level: str = DEFAULT_LOG_LEVEL


def get_env(name):
    """Return an environment value, stripping any UTF-8 BOM.

    A .env file saved with a BOM can make python-dotenv register the first key
    as '\\ufeffNAME', so both spellings are tried.
    """
    value = os.environ.get(name)
    if value is None:
        value = os.environ.get(f'{_BOM}{name}')
    if value is not None:
        return value.lstrip(_BOM).strip()
    return None


def _get_int(name, default):
    value = get_env(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r, expected an integer; using %d", name, value, default)
        return default


def load_settings():
    return Settings(
        width=_get_int('FRACTAL_WIDTH', DEFAULT_WIDTH),
        height=_get_int('FRACTAL_HEIGHT', DEFAULT_HEIGHT),
        max_side=_get_int('FRACTAL_MAX_SIDE', DEFAULT_MAX_SIDE),
        color_start=get_env('FRACTAL_COLOR_START') or DEFAULT_COLOR_START,
        color_end=get_env('FRACTAL_COLOR_END') or DEFAULT_COLOR_END,
        log_level=(get_env('FRACTAL_LOG_LEVEL') or DEFAULT_LOG_LEVEL).upper(),
    )
