import uuid
from sqlalchemy import Column, String, DateTime, func, DECIMAL, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from eventry.db.session import Base

class Ticket(Base):
    __tablename__ = "tickets"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    event_id = Column(UUID(as_uuid=True), ForeignKey("events.id"), nullable=False, index=True)
    code = Column(String(64), unique=True, nullable=False)
    # LIST, TABLE, PRESALE, FREE, VIP, DOOR_ONLY, FULL_TICKET, PAID, ...
    type = Column(String(20), nullable=False)
    price = Column(DECIMAL(10, 2), nullable=True)
    status = Column(String(20), default="NEW")  # NEW, USED, CANCELLED
    # At most one of these is set
    list_entry_id = Column(UUID(as_uuid=True), ForeignKey("list_entries.id"), nullable=True)
    guest_id = Column(UUID(as_uuid=True), ForeignKey("guests.id"), nullable=True, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=True)
    issued_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    event = relationship("Event", back_populates="tickets")
    list_entry = relationship("ListEntry")
    guest = relationship("Guest")
    check_ins = relationship("CheckIn", back_populates="ticket")
