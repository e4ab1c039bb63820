"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access.
"""

from fastapi import Depends, HTTPException, status

from app.core.security import decode_access_token, oauth2_scheme


def get_current_user_id(token: str = Depends(oauth2_scheme)) -> str:
    """Extract and validate the current user's id from the hosted-auth JWT."""
    user_id = decode_access_token(token)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    return user_id
