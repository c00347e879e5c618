import uuid
import enum
from sqlalchemy import Column, String, DateTime, func, Integer, ForeignKey, Enum as SAEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from eventry.db.session import Base

class ListType(str, enum.Enum):
    PR = "PR"
    GUEST = "GUEST"
    STAFF = "STAFF"

class GuestList(Base):
    __tablename__ = "lists"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    event_id = Column(UUID(as_uuid=True), ForeignKey("events.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(SAEnum(ListType, native_enum=False), nullable=False, default=ListType.PR)
    quota_total = Column(Integer, nullable=True)
    quota_per_pr = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    event = relationship("Event", back_populates="lists")
    entries = relationship("ListEntry", back_populates="list")

class ListEntry(Base):
    __tablename__ = "list_entries"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    list_id = Column(UUID(as_uuid=True), ForeignKey("lists.id"), nullable=False, index=True)
    guest_id = Column(UUID(as_uuid=True), ForeignKey("guests.id"), nullable=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    status = Column(String(20), default="PENDING")  # PENDING, CONFIRMED, REJECTED
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    list = relationship("GuestList", back_populates="entries")
    guest = relationship("Guest")
