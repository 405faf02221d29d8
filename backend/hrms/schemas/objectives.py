from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime

from hrms.models.objective import ObjectiveType, MetricType, ObjectiveStatus, KeyResultStatus


# --- Key Results ---

class KeyResultCreate(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    target_value: Optional[float] = None
    current_value: Optional[float] = None
    unit: Optional[str] = None


class KeyResultUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    target_value: Optional[float] = None
    current_value: Optional[float] = None
    unit: Optional[str] = None
    status: Optional[KeyResultStatus] = None


class KeyResultResponse(BaseModel):
    id: int
    objective_id: int
    title: str
    target_value: Optional[float] = None
    current_value: float
    unit: Optional[str] = None
    status: KeyResultStatus
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


# --- Objectives ---

class ObjectiveCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    employee_id: int
    review_id: Optional[int] = None
    title: str = Field(min_length=1, max_length=500)
    description: Optional[str] = None
    type: Optional[ObjectiveType] = None
    category: Optional[str] = None
    metric_type: Optional[MetricType] = None
    target_value: Optional[float] = None
    current_value: Optional[float] = None
    weight: Optional[int] = Field(default=None, ge=1, le=100)
    start_date: date
    due_date: date
    key_results: list[KeyResultCreate] = []


class ObjectiveUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = None
    type: Optional[ObjectiveType] = None
    category: Optional[str] = None
    metric_type: Optional[MetricType] = None
    target_value: Optional[float] = None
    current_value: Optional[float] = None
    weight: Optional[int] = Field(default=None, ge=1, le=100)
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    status: Optional[ObjectiveStatus] = None


class ProgressUpdate(BaseModel):
    progress: int = Field(ge=0, le=100)
    comments: Optional[str] = None
    current_value: Optional[float] = None


class LinkReviewRequest(BaseModel):
    review_id: int


class ObjectiveQuery(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    employee_id: Optional[int] = None
    review_id: Optional[int] = None
    status: Optional[ObjectiveStatus] = None
    type: Optional[ObjectiveType] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


# --- Responses ---

class EmployeeSummary(BaseModel):
    id: int
    full_name: str
    position_title: Optional[str] = None

    model_config = {"from_attributes": True}


class CampaignSummary(BaseModel):
    id: int
    title: str
    year: int

    model_config = {"from_attributes": True}


class ReviewSummary(BaseModel):
    id: int
    status: str
    campaign: Optional[CampaignSummary] = None

    model_config = {"from_attributes": True}


class ObjectiveResponse(BaseModel):
    id: int
    employee_id: int
    review_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    type: ObjectiveType
    category: Optional[str] = None
    metric_type: MetricType
    target_value: Optional[float] = None
    current_value: float
    weight: int
    start_date: date
    due_date: date
    status: ObjectiveStatus
    self_progress: Optional[int] = None
    self_comments: Optional[str] = None
    manager_progress: Optional[int] = None
    manager_comments: Optional[str] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    employee: Optional[EmployeeSummary] = None
    review: Optional[ReviewSummary] = None
    key_results: list[KeyResultResponse] = []

    model_config = {"from_attributes": True}
