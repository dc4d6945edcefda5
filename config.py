"""Database settings for the Flask host, read from the environment."""

import os

def _flag(name: str, default: str = '0') -> bool:
    """Read a boolean switch from the environment."""
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'y', 'on')

DB_CONFIG = {
    'conn_str': os.environ.get('QUICKDB_CONN_STR', 'sqlite:///quickdb.sqlite3'),
    'log_queries': _flag('QUICKDB_LOG_QUERIES'),
    'echo': _flag('QUICKDB_ECHO'),
    'pool_size': int(os.environ.get('QUICKDB_POOL_SIZE', '5')),
    'pool_timeout': int(os.environ.get('QUICKDB_POOL_TIMEOUT', '30')),
}
