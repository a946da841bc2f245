from sqlalchemy import Column, Integer, String, ForeignKey, TIMESTAMP
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class RevokedToken(Base):
    """Access token (by its jti claim) invalidated by logout before it expires."""
    __tablename__ = "revoked_tokens"

    id        = Column(Integer, primary_key=True, index=True)
    jti       = Column(String(64), nullable=False, unique=True, index=True)
    userId    = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expiresAt = Column(TIMESTAMP(timezone=True), nullable=False)   # rows past this can be purged
    revokedAt = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    user = relationship("User", back_populates="revoked_tokens")

    def __repr__(self):
        return f"<RevokedToken id={self.id} userId={self.userId} jti={self.jti}>"
