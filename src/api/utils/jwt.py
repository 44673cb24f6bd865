"""
Bearer token verification against the identity provider's JWKS.
"""

import asyncio
import logging
from typing import Optional

import httpx
from jose import ExpiredSignatureError, JWTError, jwt

from config import ApplicationConfig
from src.domain.errors import UnauthorizedError

logger = logging.getLogger(__name__)

_jwks: Optional[dict] = None
_jwks_lock = asyncio.Lock()


def _has_key(jwks: dict, kid: Optional[str]) -> bool:
    return any(key.get("kid") == kid for key in jwks.get("keys", []))


async def _fetch_jwks() -> dict:
    async with httpx.AsyncClient(timeout=10.0) as client:
        response = await client.get(ApplicationConfig.JWKS_URI)
        response.raise_for_status()
        return response.json()


async def get_jwks(kid: Optional[str] = None) -> dict:
    """
    Signing keys holding `kid`, refetched at most once for concurrent
    requests that miss the cache.
    """
    global _jwks
    if _jwks is not None and (kid is None or _has_key(_jwks, kid)):
        return _jwks
    async with _jwks_lock:
        # Another request may have refreshed while this one waited
        if _jwks is None or (kid is not None and not _has_key(_jwks, kid)):
            _jwks = await _fetch_jwks()
    return _jwks


async def verify_jwt(token: str) -> dict:
    """
    Verify and decode a bearer token

    Args:
        token: JWT token string

    Returns:
        Decoded claims

    Raises:
        UnauthorizedError: token is malformed, expired, badly signed, from
            another issuer or meant for an audience that is not allowed
    """
    try:
        header = jwt.get_unverified_header(token)
    except JWTError:
        raise UnauthorizedError("Invalid token")

    try:
        jwks = await get_jwks(header.get("kid"))
    except httpx.HTTPError as exc:
        logger.error(f"Unable to fetch JWKS: {exc}")
        raise UnauthorizedError("Unable to verify token")

    try:
        claims = jwt.decode(
            token,
            jwks,
            algorithms=ApplicationConfig.JWT_ALGORITHMS,
            issuer=ApplicationConfig.JWT_ISSUER,
            options={"verify_aud": False},
        )
    except ExpiredSignatureError:
        raise UnauthorizedError("Token has expired")
    except JWTError as exc:
        logger.info(f"Token rejected: {exc}")
        if "signature" in str(exc).lower():
            raise UnauthorizedError("Invalid token signature")
        raise UnauthorizedError("Invalid token")

    audience = claims.get("aud") or claims.get("audience")
    audiences = audience if isinstance(audience, list) else [audience]
    if not any(aud in ApplicationConfig.ALLOWED_AUDIENCES for aud in audiences):
        raise UnauthorizedError("Token audience is not allowed for this API")

    return claims
