import logging
import os
import sys


def _env_int(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        parsed = 0
    if parsed < 1:
        print(f"Warning: {name}={value!r} is not a positive integer. Using the default of {default}.", file=sys.stderr)
        return default
    return parsed


def _env_level(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    level = value.strip().upper()
    if level.isdigit():
        return int(level)
    # getLevelName() maps a registered name back to its number, anything else to a string
    if not isinstance(logging.getLevelName(level), int):
        print(f"Warning: {name}={value!r} is not a logging level. Using the default of {default}.", file=sys.stderr)
        return default
    return level


# --- Generation Configuration ---
# Each value can be overridden from the environment; command-line options take precedence.
DEFAULT_WORDS = _env_int('WORDCHAIN_WORDS', 100)   # Maximum number of words to print
DEFAULT_PREFIX = _env_int('WORDCHAIN_PREFIX', 2)   # Prefix length in words (Markov order)

# --- Logging Configuration ---
LOG_LEVEL = _env_level('WORDCHAIN_LOG_LEVEL', 'WARNING')
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
