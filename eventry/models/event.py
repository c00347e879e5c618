import uuid
import enum
from sqlalchemy import Column, String, DateTime, func, Text, ForeignKey, Enum as SAEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from eventry.db.session import Base

class EventStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    CANCELLED = "CANCELLED"
    CLOSED = "CLOSED"

class Event(Base):
    __tablename__ = "events"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    venue_id = Column(UUID(as_uuid=True), ForeignKey("venues.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date_start = Column(DateTime(timezone=True), nullable=False, index=True)
    date_end = Column(DateTime(timezone=True), nullable=True)
    status = Column(SAEnum(EventStatus, native_enum=False), default=EventStatus.DRAFT, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    venue = relationship("Venue", back_populates="events")
    lists = relationship("GuestList", back_populates="event")
    tickets = relationship("Ticket", back_populates="event")
    consumptions = relationship("Consumption", back_populates="event")
