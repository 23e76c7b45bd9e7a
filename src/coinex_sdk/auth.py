"""
auth.py – Credential holder and configuration loading for CoinEx.

CoinEx's v1 API authenticates each private request individually:

1. The request parameters include ``access_id`` (the API key) and
   ``tonce`` (current Unix time in milliseconds).
2. The parameters are serialised and signed together with the API
   secret (see signing.py).
3. The signature travels in the ``authorization`` header.

There is no session to keep alive, so this module only has to hold the
key/secret pair and know where to load it from.

Usage
-----
    from coinex_sdk import CoinExAuth

    auth = CoinExAuth(api_key="...", api_secret="...")
    auth = CoinExAuth.from_file("~/.coinex/config.json")
    auth = CoinExAuth.from_env()               # COINEX_API_KEY / COINEX_API_SECRET

    auth.is_configured()                       # False unless both are set
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Environment variable names read by CoinExAuth.from_env()
# ---------------------------------------------------------------------------

ENV_API_KEY    = "COINEX_API_KEY"
ENV_API_SECRET = "COINEX_API_SECRET"

# Callable with no args that returns the current tonce (epoch milliseconds)
TonceProvider = Callable[[], int]


def tonce_ms() -> int:
    """Default tonce provider: wall-clock Unix time in milliseconds."""
    return int(time.time() * 1000)


# ---------------------------------------------------------------------------
# Config file schema
# ---------------------------------------------------------------------------

class ApiInformation(BaseModel):
    """
    On-disk credential file.

    Accepts either the camelCase keys written by other CoinEx tooling
    (``apiKey`` / ``apiSecret``) or snake_case equivalents.
    """
    model_config = ConfigDict(populate_by_name=True)

    api_key:    str = Field(default="", alias="apiKey")
    api_secret: str = Field(default="", alias="apiSecret")


# ---------------------------------------------------------------------------
# Credential holder
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CoinExAuth:
    """
    Immutable CoinEx API key / secret pair.

    Parameters
    ----------
    api_key    : CoinEx API key, sent as ``access_id``
    api_secret : CoinEx API secret, appended to the signed string

    Either may be empty; the holder is then only good for public
    market-data calls and ``is_configured()`` reports False.
    """

    api_key:    str = ""
    api_secret: str = field(default="", repr=False)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "CoinExAuth":
        """Load credentials from a JSON config file."""
        config_path = Path(path).expanduser()
        if not config_path.is_file():
            raise ConfigurationError(f"Config file not found: {config_path}")

        try:
            info = ApiInformation.model_validate_json(config_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigurationError(f"Cannot read CoinEx config file {config_path}: {exc}") from exc
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid CoinEx config file {config_path}: {exc}") from exc

        logger.info("Loaded CoinEx credentials from %s", config_path)
        return cls(api_key=info.api_key, api_secret=info.api_secret)

    @classmethod
    def from_env(cls) -> "CoinExAuth":
        """Load credentials from COINEX_API_KEY / COINEX_API_SECRET."""
        return cls(
            api_key=os.environ.get(ENV_API_KEY, ""),
            api_secret=os.environ.get(ENV_API_SECRET, ""),
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def is_configured(self) -> bool:
        """True only when both the key and the secret are non-empty."""
        return bool(self.api_key) and bool(self.api_secret)

    def validate_exchange_configured(self) -> bool:
        return self.is_configured()

    def require_configured(self) -> None:
        """Raise ConfigurationError unless signed calls are possible."""
        if not self.is_configured():
            raise ConfigurationError(
                "CoinEx API key and secret are required for signed endpoints"
            )
