from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from eventry.core.config import settings
from eventry.core.security import decode_token
from eventry.db.session import get_db
from eventry.models.user import User, UserRole
from eventry.services.analytics_service import AnalyticsService
from eventry.stores.interfaces import AnalyticsStore
from eventry.stores.sqlalchemy_store import SqlAlchemyAnalyticsStore

# Tokens are issued by the platform's auth service; this API only verifies them
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_V1_STR}/auth/login", auto_error=False
)

REPORT_ROLES = (UserRole.ORGANIZER, UserRole.ADMIN)


def _forbidden(detail: str = "Not authorized") -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the bearer token to an active user, or deny."""
    if not token:
        raise _forbidden()

    subject = decode_token(token)
    if not subject:
        raise _forbidden()

    try:
        user_id = UUID(subject)
    except ValueError:
        raise _forbidden()

    user = db.get(User, user_id)
    if not user or not user.is_active:
        raise _forbidden()
    return user


def get_current_organizer_user(current_user: User = Depends(get_current_user)) -> User:
    """Reports are restricted to organizers and admins."""
    if current_user.role not in REPORT_ROLES:
        raise _forbidden()
    return current_user


def get_analytics_store(db: Session = Depends(get_db)) -> AnalyticsStore:
    return SqlAlchemyAnalyticsStore(db)


def get_analytics_service(
    store: AnalyticsStore = Depends(get_analytics_store),
) -> AnalyticsService:
    return AnalyticsService(store)
