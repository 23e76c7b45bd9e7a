"""
signing.py – Canonical parameter serialisation and request signing for CoinEx.

How it works
------------
1. Serialise the request parameters to ``k1=v1&k2=v2…``.  No URL-encoding
   is applied; values are inserted verbatim.
2. Append ``&secret_key=<api secret>``.
3. Digest the UTF-8 bytes and send the uppercase hex string in the
   ``authorization`` header.

Two serialisation rules exist and are kept apart on purpose:

  canonical_from_bag         : mapping, insertion order, never sorted
  canonical_from_sorted_list : pre-formatted "k=v" strings, sorted ascending

The query string of the outgoing URL is always built from the bag in
insertion order.  Which rule feeds the signature is chosen explicitly by
SigningOrder, so a mismatch between URL and signature is visible at the
call site.  Every endpoint in this SDK inserts its parameters in
alphabetical order, which makes both rules agree.

Digest
------
CoinEx v1 documents an MD5 digest of the signed string.  Deployments that
front the API with an HMAC scheme can pass ``hmac_key`` (a constant agreed
with the exchange, independent of the user's credentials) and optionally a
different ``hash_name``.

References
----------
- CoinEx v1 auth : https://github.com/coinexcom/coinex_exchange_api/wiki/012security_authorization
"""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum, unique
from typing import Any, Optional, Union

_SECRET_SUFFIX = "&secret_key="

DEFAULT_HASH = "md5"


@unique
class SigningOrder(str, Enum):
    """Which canonical rule produces the string that gets signed."""
    INSERTION = "insertion"   # canonical_from_bag
    SORTED    = "sorted"      # canonical_from_sorted_list


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------

def format_value(value: Any) -> str:
    """
    Render a parameter value the way CoinEx expects it on the wire.

    Decimals and floats use plain positional notation (never ``1E-8``),
    enums contribute their value, bools are lowercase.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    return str(value)


# ---------------------------------------------------------------------------
# Canonical serialisers
# ---------------------------------------------------------------------------

def canonical_from_bag(params: Optional[Mapping[str, Any]]) -> str:
    """Join ``key=value`` pairs with ``&`` in the mapping's own order."""
    if not params:
        return ""
    return "&".join(f"{key}={format_value(value)}" for key, value in params.items())


def canonical_from_sorted_list(pairs: Optional[Iterable[str]]) -> str:
    """Sort pre-formatted ``key=value`` strings ascending and join with ``&``."""
    if not pairs:
        return ""
    return "&".join(sorted(pairs))


def bag_to_pairs(params: Mapping[str, Any]) -> list[str]:
    """Turn a parameter bag into the ``key=value`` list form."""
    return [f"{key}={format_value(value)}" for key, value in params.items()]


def canonical_string(
    params: Optional[Mapping[str, Any]],
    order: Union[SigningOrder, str] = SigningOrder.INSERTION,
) -> str:
    """Canonicalise a bag using the rule selected by ``order``."""
    if SigningOrder(order) is SigningOrder.SORTED:
        return canonical_from_sorted_list(bag_to_pairs(params or {}))
    return canonical_from_bag(params)


# ---------------------------------------------------------------------------
# Signer
# ---------------------------------------------------------------------------

def sign(
    canonical: str,
    secret: str,
    *,
    hash_name: str = DEFAULT_HASH,
    hmac_key: Optional[Union[str, bytes]] = None,
) -> str:
    """
    Sign ``canonical + "&secret_key=" + secret``.

    By default this is a plain, unkeyed ``hashlib`` digest (MD5), which is
    what the CoinEx v1 API verifies.  It is NOT an HMAC: the secret is only
    appended to the message.  Pass ``hmac_key`` to get an HMAC instead.

    Parameters
    ----------
    canonical : serialised parameters (see canonical_from_*)
    secret    : CoinEx API secret
    hash_name : hashlib algorithm name (default "md5")
    hmac_key  : if given, compute an HMAC keyed by this constant instead
                of a plain digest

    Returns
    -------
    Uppercase hex digest.
    """
    message = (canonical + _SECRET_SUFFIX + secret).encode("utf-8")

    if hmac_key is not None:
        key = hmac_key.encode("utf-8") if isinstance(hmac_key, str) else hmac_key
        digest = hmac.new(key, message, hash_name).hexdigest()
    else:
        digest = hashlib.new(hash_name, message).hexdigest()

    return digest.upper()


def sign_from_bag(params: Optional[Mapping[str, Any]], secret: str, **kwargs: Any) -> str:
    """Sign a parameter bag serialised in insertion order."""
    return sign(canonical_from_bag(params), secret, **kwargs)


def sign_from_sorted_list(pairs: Optional[Iterable[str]], secret: str, **kwargs: Any) -> str:
    """Sign a list of ``key=value`` strings after sorting it."""
    return sign(canonical_from_sorted_list(pairs), secret, **kwargs)
