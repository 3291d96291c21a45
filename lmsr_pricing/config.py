"""Environment-driven settings for LMSR pricing.

Reads ``.env`` (via python-dotenv) and then the process environment:

* ``LMSR_LIQUIDITY`` - default liquidity parameter ``b`` (100.0)
* ``LMSR_STABLE`` - ``1``/``true``/``yes``/``on`` turns on max-shift log-sum-exp
* ``LMSR_DEBUG`` - same flags; enables DEBUG logging for ``lmsr_pricing``
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    liquidity: float = 100.0
    stable: bool = False
    debug: bool = False


def _flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in _TRUTHY


def load_settings() -> Settings:
    load_dotenv()
    raw = os.getenv("LMSR_LIQUIDITY")
    liquidity = Settings.liquidity
    if raw:
        try:
            liquidity = float(raw)
        except ValueError:
            raise ValueError(f"LMSR_LIQUIDITY must be a number, got {raw!r}") from None
    settings = Settings(
        liquidity=liquidity, stable=_flag("LMSR_STABLE"), debug=_flag("LMSR_DEBUG")
    )
    if settings.debug:
        logging.getLogger("lmsr_pricing").setLevel(logging.DEBUG)
    return settings
