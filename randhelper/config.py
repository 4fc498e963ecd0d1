"""
Configuration settings for randhelper.
"""
import math
import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str):
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return int(raw)


# Seed settings
# Pin the default seed (otherwise it is taken from the startup tick count).
RANDHELPER_SEED = _env_int("RANDHELPER_SEED")

# Debug logging (set DEBUG_RNG=1 to see reseed / default-init events)
DEBUG_RNG = os.getenv("DEBUG_RNG", "").strip().lower() in ("1", "true", "yes", "on")

# Sampling settings
TAU = math.pi * 2.0  # full turn, radians
PERCENT_SCALE = 100  # chance_percent() rolls against [0, 100)
