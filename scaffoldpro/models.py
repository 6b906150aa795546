from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from .database import Base


class WaitlistEntry(Base):
    """Early-access signups from the landing page."""
    __tablename__ = "waitlist"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
