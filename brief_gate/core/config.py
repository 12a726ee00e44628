from __future__ import annotations

import os


def env_bool(key: str, default: str = "0") -> bool:
    """
    Env bool parser.
    Accepts: 1/0, true/false, yes/no (case-insensitive)
    """
    v = os.getenv(key, default)
    if v is None:
        v = default
    return str(v).strip().lower() in ("1", "true", "yes", "y")


def env_str(key: str, default: str = "") -> str:
    v = os.getenv(key, default)
    if v is None:
        v = default
    return str(v).strip()


def env_int(key: str, default: int) -> int:
    try:
        return int(env_str(key, str(default)) or default)
    except ValueError:
        return int(default)


# -------------------------------------------------
# Runtime getters (read on every call, so env changes apply without restart)
# -------------------------------------------------
def show_debug() -> bool:
    return env_bool("SHOW_DEBUG", "0")


def min_budget() -> int:
    return env_int("MIN_BUDGET", 10000)


def min_lead_time_days() -> int:
    return env_int("MIN_LEAD_TIME_DAYS", 10)


def max_file_size_bytes() -> int:
    return env_int("MAX_FILE_SIZE_MB", 10) * 1024 * 1024


def max_pdf_pages() -> int:
    """0 means every page."""
    return env_int("MAX_PDF_PAGES", 0)


DATA_DIR = env_str("DATA_DIR", "data")
EXPORTS_DIR = os.path.join(DATA_DIR, "exports")
