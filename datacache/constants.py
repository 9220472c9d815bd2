"""
datacache Global Constants

Centralized location for all package-wide constants and defaults.
"""

# Package Constants
APP_NAME = "datacache"
APP_VERSION = "1.0.0"

# Cache defaults
DEFAULT_MAX_SIZE = 100
DEFAULT_TTL_SECONDS = 5 * 60
DEFAULT_CLEANUP_INTERVAL_SECONDS = 60.0

# Cache key prefixes
GET_KEY_PREFIX = "get"
SELECT_KEY_PREFIX = "select"
KEY_WILDCARD = "*"

# Version reported by the bundled JSON data provider
JSON_PROVIDER_DATA_VERSION = "1.0.0"
