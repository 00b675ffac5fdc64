"""Central configuration defaults and constants for the warrior API."""

import os

# Server Defaults
DEFAULT_HOST = os.getenv("WARRIORAPI_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("WARRIORAPI_PORT", "3000"))
DEFAULT_DEBUG = os.getenv("WARRIORAPI_DEBUG", "false").lower() in ("true", "1", "yes", "on")
DEFAULT_LOG_LEVEL = os.getenv("WARRIORAPI_LOG_LEVEL", "DEBUG").upper()

# Store Defaults
# "client_or_next": keep a caller supplied id, otherwise assign max + 1
# "server": always assign max + 1
DEFAULT_ID_POLICY = os.getenv("WARRIORAPI_ID_POLICY", "client_or_next")

# Random source seed for critical hit rolls (unset means the process-wide generator)
_random_seed_env = os.getenv("WARRIORAPI_RANDOM_SEED")
DEFAULT_RANDOM_SEED = int(_random_seed_env) if _random_seed_env else None
