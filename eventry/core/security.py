from typing import Optional

from jose import jwt, JWTError
from eventry.core.config import settings

# Tokens are minted by the platform's auth service with the shared secret
ALGORITHM = "HS256"


def decode_token(token: str) -> Optional[str]:
    """Returns user ID (sub claim) or None if token is invalid/expired."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
        return payload.get("sub")
    except JWTError:
        return None
