"""
Thin wrapper around python-jose.

Only this module imports jose; the JWT service and tests go through
``encode``/``decode`` and the re-exported exception types.
"""

from typing import Any, cast

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JWTClaimsError

__all__ = ["ExpiredSignatureError", "JWTClaimsError", "JWTError", "decode", "encode"]

# Claims every access token must carry
REQUIRED_CLAIMS = ("exp", "sub")


def encode(claims: dict[str, Any], key: str, algorithm: str = "HS256") -> str:
    """Sign ``claims`` into a compact JWT."""
    return cast(str, jwt.encode(claims, key, algorithm=algorithm))


def decode(
    token: str,
    key: str,
    algorithms: list[str],
    audience: str | None = None,
    issuer: str | None = None,
) -> dict[str, Any]:
    """
    Verify ``token`` and return its claims.

    Audience and issuer are only checked when configured. Expiry and the
    subject claim are always required.

    Raises:
        ExpiredSignatureError: If the token has expired
        JWTError: For any other signature or claim failure
    """
    options: dict[str, Any] = {
        "verify_aud": audience is not None,
        "verify_iss": issuer is not None,
        "leeway": 0,
    }
    options.update({f"require_{claim}": True for claim in REQUIRED_CLAIMS})
    return cast(
        dict[str, Any],
        jwt.decode(
            token, key, algorithms=algorithms, audience=audience, issuer=issuer, options=options
        ),
    )
