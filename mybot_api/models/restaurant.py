"""Restaurant model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from mybot_api.database import Base


class Restaurant(Base):
    """Restaurant answered by the phone bot"""
    __tablename__ = "restaurants"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    timezone = Column(String(64), default="America/New_York")  # IANA name
    language_default = Column(String(16))  # locale code, e.g. en-US
    public_phone = Column(String(32))

    # Telephony provider and its opaque settings blob
    provider = Column(String(50))
    provider_config = Column(JSON, default=dict)

    created_at = Column(DateTime, default=datetime.utcnow, server_default=func.now())
    updated_at = Column(DateTime, default=datetime.utcnow, server_default=func.now())

    # Relationships
    calls = relationship("Call", back_populates="restaurant")
