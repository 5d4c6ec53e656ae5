# bgg_wrapped/utils/logging.py

from colorama import Fore, Style
from datetime import datetime

from bgg_wrapped.config import settings

_LEVELS = {"DEBUG": 10, "INFO": 20, "SUCCESS": 25, "WARNING": 30, "ERROR": 40}


def timestamp() -> str:
    return f"[{datetime.now():%Y-%m-%d %H:%M:%S}]"


def _enabled(level: str) -> bool:
    threshold = _LEVELS.get(settings.LOG_LEVEL.upper(), _LEVELS["INFO"])
    return _LEVELS[level] >= threshold


def _emit(color: str, level: str, msg: str):
    if _enabled(level):
        print(color + f"{timestamp()} [{level}] {msg}" + Style.RESET_ALL)


def log_debug(msg: str):
    _emit(Fore.WHITE, "DEBUG", msg)

def log_info(msg: str):
    _emit(Fore.CYAN, "INFO", msg)

def log_success(msg: str):
    _emit(Fore.GREEN, "SUCCESS", msg)

def log_warning(msg: str):
    _emit(Fore.YELLOW, "WARNING", msg)

def log_error(msg: str):
    _emit(Fore.RED, "ERROR", msg)
