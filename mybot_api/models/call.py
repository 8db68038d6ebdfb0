"""Call model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from mybot_api.database import Base


class Call(Base):
    """Call records, written by the voice gateway and only read here"""
    __tablename__ = "calls"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    restaurant_id = Column(UUID(as_uuid=True), ForeignKey("restaurants.id"), nullable=False, index=True)

    # Timing; ended_at stays NULL while the call is in progress
    started_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    ended_at = Column(DateTime)

    # Call details
    from_phone_e164 = Column(String(20))
    to_phone_e164 = Column(String(20))
    language_detected = Column(String(16))
    flow = Column(String(50))
    outcome = Column(String(50))

    reservation_id = Column(UUID(as_uuid=True))

    # "metadata" is reserved on declarative classes
    metadata_json = Column("metadata", JSON, default=dict)

    # Relationships
    restaurant = relationship("Restaurant", back_populates="calls")
