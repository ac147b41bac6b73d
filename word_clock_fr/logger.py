import os
import logging
from datetime import datetime

from .config import get_log_level

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def get_log_file():
    """Shared log file for all clock components"""
    log_dir = os.getenv('WORD_CLOCK_LOG_DIR')
    if not log_dir:
        log_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.abspath(os.path.join(log_dir, 'word_clock.log'))

def has_log_file(log_file):
    return any(isinstance(h, logging.FileHandler) and h.baseFilename == log_file
               for h in logging.root.handlers)

def setup_logger(name, testing=False):
    """Module logger; in testing mode the clock also logs to word_clock.log"""
    logger = logging.getLogger(name)
    if not testing:
        return logger

    log_file = get_log_file()
    if has_log_file(log_file):
        return logger

    level = get_log_level()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level}")

    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(level)

    logging.info('='*50)
    logging.info(f'Word clock logging at {level} since {datetime.now()}')
    logging.info('='*50)

    return logger
