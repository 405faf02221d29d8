"""Performance objectives (OKR) router."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional

from hrms.database import get_db
from hrms.dependencies import get_current_user_id, get_current_role, require_manager
from hrms.models.objective import ObjectiveStatus, ObjectiveType
from hrms.schemas.common import ApiResponse, PageMeta
from hrms.schemas.objectives import (
    ObjectiveCreate, ObjectiveUpdate, ObjectiveResponse, ObjectiveQuery,
    ProgressUpdate, LinkReviewRequest,
    KeyResultCreate, KeyResultUpdate, KeyResultResponse,
)
from hrms.services import objectives as objective_service

router = APIRouter(prefix="/api/v1/performance/objectives", tags=["Objectives"])


def _one(obj, message: Optional[str] = None) -> ApiResponse[ObjectiveResponse]:
    return ApiResponse[ObjectiveResponse](data=ObjectiveResponse.model_validate(obj), message=message)


def _many(items) -> list[ObjectiveResponse]:
    return [ObjectiveResponse.model_validate(o) for o in items]


# ── CRUD ──

@router.post("/", response_model=ApiResponse[ObjectiveResponse], status_code=201)
def create_objective(
    body: ObjectiveCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    obj = objective_service.create_objective(db, body, user_id)
    return _one(obj, "Objective created")


@router.get("/", response_model=ApiResponse[list[ObjectiveResponse]])
def list_objectives(
    employee_id: Optional[int] = Query(None),
    review_id: Optional[int] = Query(None),
    status: Optional[ObjectiveStatus] = Query(None),
    type: Optional[ObjectiveType] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    _user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    query = ObjectiveQuery(
        employee_id=employee_id, review_id=review_id, status=status, type=type, page=page, limit=limit,
    )
    items, meta = objective_service.find_all(db, query)
    return ApiResponse[list[ObjectiveResponse]](data=_many(items), meta=PageMeta(**meta))


@router.get("/my", response_model=ApiResponse[list[ObjectiveResponse]])
def my_objectives(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return ApiResponse[list[ObjectiveResponse]](data=_many(objective_service.find_my(db, user_id)))


@router.get("/team", response_model=ApiResponse[list[ObjectiveResponse]])
def team_objectives(
    user_id: int = Depends(get_current_user_id),
    _role: str = Depends(require_manager),
    db: Session = Depends(get_db),
):
    return ApiResponse[list[ObjectiveResponse]](data=_many(objective_service.find_team(db, user_id)))


@router.get("/{objective_id}", response_model=ApiResponse[ObjectiveResponse])
def get_objective(
    objective_id: int,
    _user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return _one(objective_service.find_one(db, objective_id))


@router.patch("/{objective_id}", response_model=ApiResponse[ObjectiveResponse])
def update_objective(
    objective_id: int,
    body: ObjectiveUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    obj = objective_service.update_objective(db, objective_id, body, user_id)
    return _one(obj, "Objective updated")


@router.patch("/{objective_id}/progress", response_model=ApiResponse[ObjectiveResponse])
def update_progress(
    objective_id: int,
    body: ProgressUpdate,
    as_manager: bool = Query(False),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    obj = objective_service.update_progress(db, objective_id, body, user_id, as_manager)
    return _one(obj, "Progress updated")


@router.post("/{objective_id}/link-review", response_model=ApiResponse[ObjectiveResponse])
def link_review(
    objective_id: int,
    body: LinkReviewRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    obj = objective_service.link_to_review(db, objective_id, body.review_id, user_id)
    return _one(obj, "Objective linked to review")


@router.delete("/{objective_id}", response_model=ApiResponse[None])
def delete_objective(
    objective_id: int,
    user_id: int = Depends(get_current_user_id),
    role: str = Depends(get_current_role),
    db: Session = Depends(get_db),
):
    objective_service.delete_objective(db, objective_id, user_id, role)
    return ApiResponse[None](message="Objective deleted")


# ── Key Results ──

@router.post(
    "/{objective_id}/key-results",
    response_model=ApiResponse[KeyResultResponse],
    status_code=201,
)
def add_key_result(
    objective_id: int,
    body: KeyResultCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    kr = objective_service.add_key_result(db, objective_id, body, user_id)
    return ApiResponse[KeyResultResponse](data=KeyResultResponse.model_validate(kr), message="Key result added")


@router.patch("/{objective_id}/key-results/{kr_id}", response_model=ApiResponse[KeyResultResponse])
def update_key_result(
    objective_id: int,
    kr_id: int,
    body: KeyResultUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    kr = objective_service.update_key_result(db, objective_id, kr_id, body, user_id)
    return ApiResponse[KeyResultResponse](data=KeyResultResponse.model_validate(kr), message="Key result updated")


@router.delete("/{objective_id}/key-results/{kr_id}", response_model=ApiResponse[None])
def delete_key_result(
    objective_id: int,
    kr_id: int,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    objective_service.delete_key_result(db, objective_id, kr_id, user_id)
    return ApiResponse[None](message="Key result deleted")
