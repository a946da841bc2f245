from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.config import settings
from app.models.revoked_token import RevokedToken
from app.models.user import User
from app.schemas.auth import LoginRequest
from app.utils.security import verify_password, create_access_token
from app.utils.audit import log_action
from app.utils.exceptions import UnauthorizedException, AccountInactiveException


def serialize_user(user: User) -> dict:
    return {
        "id":       user.id,
        "name":     user.name,
        "email":    user.email,
        "role":     user.role.value,
        "isActive": user.isActive,
    }


class AuthService:

    # ─── Login ────────────────────────────────────────────────────────────────
    def login(self, db: Session, data: LoginRequest) -> dict:
        user = db.query(User).filter(User.email == data.email.lower()).first()

        if not user or not verify_password(data.password, user.password):
            raise UnauthorizedException("Invalid email or password")

        if not user.isActive:
            raise AccountInactiveException()

        access_token = create_access_token(user.id, user.role.value)

        log_action(db, user.id, "LOGIN", "User", user.id, f"{user.name} logged in")
        db.commit()

        return {
            "accessToken": access_token,
            "tokenType":   "Bearer",
            "expiresIn":   settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
            "user":        serialize_user(user),
        }

    # ─── Logout ───────────────────────────────────────────────────────────────
    def logout(self, db: Session, claims: dict, user_id: int) -> None:
        """Deny-list the presented access token until it would have expired anyway."""
        db.add(RevokedToken(
            jti=claims["jti"],
            userId=user_id,
            expiresAt=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
        ))
        log_action(db, user_id, "LOGOUT", "User", user_id, "User logged out")
        db.commit()


auth_service = AuthService()
