# library_search/utils - logging, config and metrics helpers

from .logger_utils import Log, get_logger
from .config_manager import Config
from .metrics_tracker import Metrics

__all__ = ["Log", "get_logger", "Config", "Metrics"]
