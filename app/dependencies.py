from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.revoked_token import RevokedToken
from app.models.user import RoleName, User
from app.utils.exceptions import AccountInactiveException, ForbiddenException, UnauthorizedException
from app.utils.security import verify_access_token

# auto_error=False: a missing header becomes our 401 envelope, not FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


def get_token_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> dict:
    """Verified claims of the bearer token; 401 if missing, invalid, expired or logged out."""
    if credentials is None:
        raise UnauthorizedException("No authentication token provided")

    claims = verify_access_token(credentials.credentials)
    jti = claims.get("jti")
    if not jti:
        raise UnauthorizedException("Invalid token payload")
    if db.query(RevokedToken.id).filter(RevokedToken.jti == jti).first():
        raise UnauthorizedException("Token has been revoked")
    return claims


def get_current_user(
    claims: dict = Depends(get_token_claims),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the bearer token to an active back-office user.
    401 when the token is unusable or its user is gone;
    403 when the account has been deactivated.
    """
    subject = claims.get("sub")
    if not subject or not str(subject).isdigit():
        raise UnauthorizedException("Invalid token payload")

    user = db.get(User, int(subject))
    if user is None:
        raise UnauthorizedException("User no longer exists")
    if not user.isActive:
        raise AccountInactiveException()
    return user


def get_admin_user(current_user: User = Depends(get_current_user)) -> User:
    """Guard for every back-office route."""
    if current_user.role != RoleName.ADMIN:
        raise ForbiddenException("This action requires the ADMIN role")
    return current_user
