import enum
from sqlalchemy import Column, Integer, String, Text, Date, Numeric, ForeignKey, TIMESTAMP, Enum, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class BookingStatus(str, enum.Enum):
    PENDING   = "Pending"
    APPROVED  = "Approved"
    REJECTED  = "Rejected"
    COMPLETED = "Completed"
    EXPIRED   = "Expired"      # system-only: pending hold ran out


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        Index("ix_bookings_motorcycle_status", "motorcycleId", "status"),
    )

    id              = Column(Integer, primary_key=True, index=True)
    motorcycleId    = Column(Integer, ForeignKey("motorcycles.id", ondelete="CASCADE"), nullable=False)
    customerName    = Column(String(255), nullable=False)
    customerPhone   = Column(String(20), nullable=False)
    customerAddress = Column(Text, nullable=False)
    startDate       = Column(Date, nullable=False)
    endDate         = Column(Date, nullable=False)
    totalPrice      = Column(Numeric(14, 2), nullable=False)
    status          = Column(Enum(BookingStatus, values_callable=lambda e: [m.value for m in e]),
                             default=BookingStatus.PENDING, nullable=False, index=True)
    createdAt       = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)
    updatedAt       = Column(TIMESTAMP(timezone=True), server_default=func.now(),
                             onupdate=func.now(), nullable=False)

    # ─── Relationships ─────────────────────────────────────────────────────────
    motorcycle = relationship("Motorcycle", back_populates="bookings")

    def __repr__(self):
        return f"<Booking id={self.id} status={self.status} motorcycleId={self.motorcycleId}>"
