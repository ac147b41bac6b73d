import os
import json

DEFAULT_CONFIG = {
    'testing_mode': False,
    'timezone': None,
    'num_pixels': 72,
    'log_level': 'DEBUG',
}

def get_config_file():
    """Path of the JSON config file, overridable through the environment"""
    config_file = os.getenv('WORD_CLOCK_CONFIG')
    if not config_file:
        config_file = os.path.join(os.path.dirname(__file__), 'config.json')
    return config_file

def load_config():
    """Load config.json merged over the defaults"""
    config = dict(DEFAULT_CONFIG)
    try:
        with open(get_config_file(), 'r') as f:
            loaded = json.load(f)
    except (OSError, ValueError):
        return config
    if isinstance(loaded, dict):
        config.update(loaded)
    return config

def get_testing_mode():
    """Check if testing mode is enabled"""
    return bool(load_config().get('testing_mode', False))

def get_timezone():
    """Configured IANA timezone name, or None for the local zone"""
    return load_config().get('timezone') or None

def get_num_pixels():
    """Number of lights on the physical strip"""
    num_pixels = load_config().get('num_pixels')
    if num_pixels is None:
        return DEFAULT_CONFIG['num_pixels']
    return int(num_pixels)

def get_log_level():
    """Level name for the log file; WORD_CLOCK_LOG_LEVEL wins over config.json"""
    level = os.getenv('WORD_CLOCK_LOG_LEVEL') or load_config().get('log_level')
    return str(level or DEFAULT_CONFIG['log_level']).upper()
