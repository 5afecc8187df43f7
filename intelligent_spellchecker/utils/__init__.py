# intelligent_spellchecker/utils/__init__.py
# support code around the engine: config, logging, input, threading

from .config_manager import Config, ConfigError
from .input_reader import InputError, read_lines
from .logger_utils import Log
from .threaded_runner import run_parallel, run_serial

__all__ = [
    "Config",
    "ConfigError",
    "InputError",
    "read_lines",
    "Log",
    "run_parallel",
    "run_serial",
]
