# typegallery/config.py
# Runtime settings. Every value can be overridden with TYPEGALLERY_<NAME>.

import os


def _env(name: str, default):
    return os.environ.get(f"TYPEGALLERY_{name}", default)


def _env_float(name: str):
    raw = _env(name, "")
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None


# --------------------------------------------------------------------------- #
# Remote data source
# --------------------------------------------------------------------------- #

POKEAPI_BASE_URL = _env("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2").rstrip("/")

# Only the first N listing entries are fetched in detail
LISTING_LIMIT = int(_env("LISTING_LIMIT", 20))

# Detail stage pool size (20 = every retained entry in flight at once)
DETAIL_WORKERS = int(_env("DETAIL_WORKERS", 20))

# None means requests wait forever
REQUEST_TIMEOUT = _env_float("REQUEST_TIMEOUT")

# --------------------------------------------------------------------------- #
# Theme colors
# --------------------------------------------------------------------------- #

DEFAULT_BORDER = "#ffde00"
DEFAULT_BACKGROUND = "rgba(255, 255, 255, 0.15)"
CARD_FALLBACK = "#e63947"
BADGE_FALLBACK = "#A8A878"
BACKGROUND_ALPHA = 0.15

PLACEHOLDER_IMAGE = _env("PLACEHOLDER_IMAGE", "https://via.placeholder.com/140?text=Pokemon")

# Shown to the user for every kind of fetch failure
ERROR_MESSAGE = _env("ERROR_MESSAGE", "Pokémon could not be loaded. Try again later.")

# --------------------------------------------------------------------------- #
# Logging
# --------------------------------------------------------------------------- #

LOG_LEVEL = _env("LOG_LEVEL", "INFO").upper()
LOG_FILE = _env("LOG_FILE", "") or None
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 3
VERBOSE = _env("VERBOSE", "").lower() in ("1", "true", "yes", "on")
