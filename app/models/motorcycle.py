import enum
from sqlalchemy import Column, Integer, String, Text, Numeric, Enum, TIMESTAMP, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class MotorcycleStatus(str, enum.Enum):
    AVAILABLE   = "available"
    UNAVAILABLE = "unavailable"


class Motorcycle(Base):
    __tablename__ = "motorcycles"
    __table_args__ = (
        CheckConstraint("\"pricePerDay\" >= 0", name="ck_motorcycles_price_non_negative"),
    )

    id          = Column(Integer, primary_key=True, index=True)
    name        = Column(String(255), nullable=False)
    brand       = Column(String(255), nullable=False, index=True)
    type        = Column(String(255), nullable=False, index=True)
    pricePerDay = Column(Numeric(12, 2), nullable=False)
    imageUrl    = Column(String(2048), nullable=True)
    # Manual admin toggle, independent of booked dates
    status      = Column(Enum(MotorcycleStatus, values_callable=lambda e: [m.value for m in e]),
                         default=MotorcycleStatus.AVAILABLE, nullable=False)
    description = Column(Text, nullable=True)
    createdAt   = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    updatedAt   = Column(TIMESTAMP(timezone=True), server_default=func.now(),
                         onupdate=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    bookings = relationship("Booking", back_populates="motorcycle",
                            cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<Motorcycle id={self.id} name={self.name} status={self.status}>"
