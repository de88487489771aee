"""Dependencies for FastAPI routes"""

from typing import Annotated, Any, Dict
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.auth import verify_token
from app.db.session import get_db
from app.services.slug import SlugService
from app.utils.exceptions import AuthenticationError, AuthorizationError

# Security schemes
bearer_scheme = HTTPBearer()


async def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)]
) -> Dict[str, Any]:
    """Get claims from an already-issued JWT access token"""
    try:
        return verify_token(credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


async def require_admin(
    claims: Annotated[Dict[str, Any], Depends(get_token_claims)]
) -> Dict[str, Any]:
    """Require admin privileges"""
    if claims.get("role") != "admin":
        raise AuthorizationError("Admin privileges required")
    return claims


def get_slug_service(db: Annotated[Session, Depends(get_db)]) -> SlugService:
    return SlugService(db)
