from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from dotenv import load_dotenv
import os
import logging

from app.core.config import settings
from app.utils.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

load_dotenv()

SECRET_KEY = os.getenv("JWT_SECRET_KEY") or settings.JWT_SECRET_KEY
ALGORITHM = settings.JWT_ALGORITHM
ACCESS_TOKEN_EXPIRE_MINUTES = settings.ACCESS_TOKEN_EXPIRE_MINUTES

def validate_config():
    if not SECRET_KEY:
        raise ValueError("JWT_SECRET_KEY is not set")
    if len(SECRET_KEY) < 32:
        raise ValueError("JWT_SECRET_KEY must be at least 32 characters long")
    if ACCESS_TOKEN_EXPIRE_MINUTES <= 0:
        raise ValueError("ACCESS_TOKEN_EXPIRE_MINUTES must be greater than 0")

validate_config()

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    try:
        if expires_delta is None:
            expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + expires_delta
        to_encode.update({
            "exp": expire,
            "iat": datetime.now(timezone.utc),
            "type": "access"
            })
        encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
        logger.info("Access token created successfully")
        return encoded_jwt
    except Exception as e:
        logger.error(f"Error creating access token: {e}")
        raise

def verify_token(token: str, token_type: str = "access") -> Dict[str, Any]:
    """Decode a bearer token issued by the auth collaborator"""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])

        if payload.get("type") != token_type:
            raise JWTError("Invalid token type")

        return payload

    except JWTError as e:
        logger.error(f"Error verifying token: {e}")
        raise AuthenticationError("Invalid or expired token") from e
