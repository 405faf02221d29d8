import enum
from sqlalchemy import (
    Column, String, Text, Integer, Float, Date, DateTime, ForeignKey, CheckConstraint,
)
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from hrms.database import Base


class ObjectiveType(str, enum.Enum):
    INDIVIDUAL = "INDIVIDUAL"
    TEAM = "TEAM"
    COMPANY = "COMPANY"


class MetricType(str, enum.Enum):
    PERCENTAGE = "PERCENTAGE"
    NUMERIC = "NUMERIC"
    BOOLEAN = "BOOLEAN"
    CURRENCY = "CURRENCY"


class ObjectiveStatus(str, enum.Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class KeyResultStatus(str, enum.Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Objective(Base):
    __tablename__ = "performance_objectives"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    review_id = Column(Integer, ForeignKey("performance_reviews.id", ondelete="SET NULL"), nullable=True, index=True)

    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(32), nullable=False, default=ObjectiveType.INDIVIDUAL.value)
    category = Column(String(255), nullable=True)
    metric_type = Column(String(32), nullable=False, default=MetricType.PERCENTAGE.value)
    target_value = Column(Float, nullable=True)
    current_value = Column(Float, nullable=False, default=0)
    weight = Column(Integer, nullable=False, default=100)
    start_date = Column(Date, nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String(32), nullable=False, default=ObjectiveStatus.NOT_STARTED.value)

    self_progress = Column(Integer, nullable=True)
    self_comments = Column(Text, nullable=True)
    manager_progress = Column(Integer, nullable=True)
    manager_comments = Column(Text, nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    employee = relationship("Employee")
    review = relationship("PerformanceReview")
    key_results = relationship(
        "KeyResult",
        back_populates="objective",
        cascade="all, delete-orphan",
        order_by="KeyResult.id",
    )

    __table_args__ = (
        CheckConstraint("weight >= 1 AND weight <= 100", name="ck_objective_weight_range"),
        CheckConstraint(
            "self_progress IS NULL OR (self_progress >= 0 AND self_progress <= 100)",
            name="ck_objective_self_progress_range",
        ),
        CheckConstraint(
            "manager_progress IS NULL OR (manager_progress >= 0 AND manager_progress <= 100)",
            name="ck_objective_manager_progress_range",
        ),
    )


class KeyResult(Base):
    __tablename__ = "objective_key_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    objective_id = Column(
        Integer, ForeignKey("performance_objectives.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    title = Column(String(500), nullable=False)
    target_value = Column(Float, nullable=True)
    current_value = Column(Float, nullable=False, default=0)
    unit = Column(String(100), nullable=True)
    status = Column(String(32), nullable=False, default=KeyResultStatus.NOT_STARTED.value)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    objective = relationship("Objective", back_populates="key_results")
