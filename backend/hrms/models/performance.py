import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from hrms.database import Base


class CampaignStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


class ReviewStatus(str, enum.Enum):
    PENDING_SELF = "PENDING_SELF"
    PENDING_MANAGER = "PENDING_MANAGER"
    COMPLETED = "COMPLETED"


class PerformanceCampaign(Base):
    __tablename__ = "performance_campaigns"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
    status = Column(String(32), nullable=False, default=CampaignStatus.DRAFT.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class PerformanceReview(Base):
    """One employee's review for a campaign, owned by their manager."""

    __tablename__ = "performance_reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    campaign_id = Column(Integer, ForeignKey("performance_campaigns.id", ondelete="SET NULL"), nullable=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    manager_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(32), nullable=False, default=ReviewStatus.PENDING_SELF.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    campaign = relationship("PerformanceCampaign")
