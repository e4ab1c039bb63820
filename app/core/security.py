"""
Token verification.

Users authenticate against the hosted auth provider, which signs access
tokens with a shared secret.  The API only verifies those tokens and reads
the subject (the user's UUID).  ``create_access_token`` mints tokens in the
same format for scripts and tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from app.core.config import settings

# tokenUrl only feeds the OpenAPI docs; login happens at the auth provider.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/v1/token")


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token for *subject* the way the auth provider does."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=1))
    to_encode = {"sub": subject, "aud": settings.JWT_AUDIENCE, "exp": expire}
    return jwt.encode(to_encode, settings.SUPABASE_JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """Return the token subject, or ``None`` if the token is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.SUPABASE_JWT_SECRET, algorithms=[settings.JWT_ALGORITHM],
                             audience=settings.JWT_AUDIENCE, )
    except JWTError:
        return None
    return payload.get("sub")
