# static_ids/config.py

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv


def load_env() -> bool:
    """
    Loads the nearest .env, searching upward from the working directory.

    Variables already set in the environment keep their values. Settings are
    read on each call of the getters below, so they see whatever this loaded.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if not dotenv_path:
        return False
    return load_dotenv(dotenv_path=dotenv_path)


# --- Logging ---
def get_log_level() -> str:
    return os.getenv("STATIC_IDS_LOG_LEVEL", "INFO")


# --- Derivation ---
def get_default_program_id() -> Optional[str]:
    """ Program id used by `derive`/`validate` when none is given on the command line. """
    return os.getenv("STATIC_IDS_DEFAULT_PROGRAM_ID") or None  # No default
