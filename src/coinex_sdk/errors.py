"""
errors.py – Exception hierarchy for the CoinEx SDK.

Every failure surfaced by a public operation is one of:

  ConfigurationError : credentials missing / config file absent or invalid
  TransportError     : network or connection failure (cause chained)
  ProtocolError      : no body, undecodable body, or unexpected payload shape
  CoinExAPIError     : the exchange answered with a non-zero ``code``

All share the CoinExError base so callers can catch the whole family.
"""

from __future__ import annotations

from typing import Optional


class CoinExError(Exception):
    """Base class for all CoinEx SDK errors."""


class ConfigurationError(CoinExError):
    """Raised when the client is not configured for the requested call."""


class TransportError(CoinExError):
    """Raised when the HTTP round trip itself fails."""

    def __init__(self, message: str, method: str = "", url: str = "") -> None:
        self.method = method.upper()
        self.url    = url
        location = f" {self.method} {self.url}" if url else ""
        super().__init__(f"CoinEx transport error{location}: {message}")


class ProtocolError(CoinExError):
    """Raised when a response cannot be read as a CoinEx envelope."""


class CoinExAPIError(CoinExError):
    """Raised when CoinEx returns an envelope with ``code != 0``."""

    def __init__(
        self,
        code: int,
        message: str,
        method: str = "",
        path: str = "",
    ) -> None:
        self.code    = code
        self.message = message
        self.method  = method.upper()
        self.path    = path
        location = f" {self.method} {self.path}" if path else ""
        super().__init__(f"CoinEx API error [{code}]{location}: {message}")

    @property
    def cause(self) -> Optional[int]:
        """Machine-readable cause: the exchange's numeric error code."""
        return self.code
