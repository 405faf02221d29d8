"""
Objective lifecycle: creation, dual-actor progress and review linkage.

Authorization rules:
  Create with review: creator is the review's manager or the target employee.
  Update:             owner, or the manager of the linked review.
  Progress (self):    owner only.
  Progress (manager): manager of the linked review; for an unlinked objective,
                      the owner's line manager.
  Link to review:     same predicate as Create, then employee match.
  Delete:             linked -> review's manager; unlinked -> owner or admin.

Each public function is one unit of work and commits once.
"""

import logging
import math
from datetime import datetime, timezone

from sqlalchemy import case
from sqlalchemy.orm import Session

from hrms.models.employee import ADMIN_ROLES
from hrms.models.objective import (
    Objective, KeyResult, ObjectiveType, MetricType, ObjectiveStatus, KeyResultStatus,
)
from hrms.models.performance import PerformanceReview
from hrms.schemas.objectives import (
    ObjectiveCreate, ObjectiveUpdate, ProgressUpdate, ObjectiveQuery,
    KeyResultCreate, KeyResultUpdate,
)
from hrms.services import employees
from hrms.services.audit import log_action
from hrms.services.errors import NotFoundError, ForbiddenError, BadRequestError
from hrms.services.objective_status import next_status

logger = logging.getLogger(__name__)

RESOURCE = "performance_objective"
KR_RESOURCE = "objective_key_result"

# Columns that may be explicitly cleared by a general update
_CLEARABLE_FIELDS = {"description", "category", "target_value"}
_KR_CLEARABLE_FIELDS = {"target_value", "unit"}

_STATUS_ORDER = case(
    {
        ObjectiveStatus.NOT_STARTED.value: 0,
        ObjectiveStatus.IN_PROGRESS.value: 1,
        ObjectiveStatus.COMPLETED.value: 2,
    },
    value=Objective.status,
    else_=3,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Lookups ──

def _get_objective(db: Session, objective_id: int) -> Objective:
    objective = db.query(Objective).filter(Objective.id == objective_id).first()
    if not objective:
        raise NotFoundError(f"Objective #{objective_id} not found")
    return objective


def _get_review(db: Session, review_id: int) -> PerformanceReview:
    review = db.query(PerformanceReview).filter(PerformanceReview.id == review_id).first()
    if not review:
        raise NotFoundError(f"Review #{review_id} not found")
    return review


def _get_key_result(db: Session, objective_id: int, kr_id: int) -> KeyResult:
    kr = (
        db.query(KeyResult)
        .filter(KeyResult.id == kr_id, KeyResult.objective_id == objective_id)
        .first()
    )
    if not kr:
        raise NotFoundError(f"Key result #{kr_id} not found on objective #{objective_id}")
    return kr


def _can_act_on_review(review: PerformanceReview, user_id: int, employee_id: int) -> bool:
    """Shared predicate for Create and Link: review manager or the owner themself."""
    return review.manager_id == user_id or user_id == employee_id


def _is_objective_manager(db: Session, objective: Objective, user_id: int) -> bool:
    if objective.review_id is not None:
        return objective.review is not None and objective.review.manager_id == user_id
    return employees.is_line_manager(db, user_id, objective.employee_id)


# ── Reads ──

def find_all(db: Session, query: ObjectiveQuery) -> tuple[list[Objective], dict]:
    """Paginated listing. Returns (items, meta)."""
    q = db.query(Objective)
    if query.employee_id:
        q = q.filter(Objective.employee_id == query.employee_id)
    if query.review_id:
        q = q.filter(Objective.review_id == query.review_id)
    if query.status:
        q = q.filter(Objective.status == query.status)
    if query.type:
        q = q.filter(Objective.type == query.type)

    total = q.count()
    items = (
        q.order_by(Objective.created_at.desc(), Objective.id.desc())
        .offset((query.page - 1) * query.limit)
        .limit(query.limit)
        .all()
    )
    meta = {
        "total": total,
        "page": query.page,
        "limit": query.limit,
        "totalPages": math.ceil(total / query.limit),
    }
    return items, meta


def find_my(db: Session, user_id: int) -> list[Objective]:
    return (
        db.query(Objective)
        .filter(Objective.employee_id == user_id)
        .order_by(_STATUS_ORDER, Objective.due_date.asc())
        .all()
    )


def find_team(db: Session, manager_id: int) -> list[Objective]:
    reportee_ids = employees.get_reportee_ids(db, manager_id)
    if not reportee_ids:
        return []
    return (
        db.query(Objective)
        .filter(Objective.employee_id.in_(reportee_ids))
        .order_by(_STATUS_ORDER, Objective.due_date.asc())
        .all()
    )


def find_one(db: Session, objective_id: int) -> Objective:
    return _get_objective(db, objective_id)


# ── Create ──

def create_objective(db: Session, data: ObjectiveCreate, creator_id: int) -> Objective:
    if data.review_id is not None:
        review = _get_review(db, data.review_id)
        if not _can_act_on_review(review, creator_id, data.employee_id):
            raise ForbiddenError("Not allowed to create objectives for this review")
        if review.employee_id != data.employee_id:
            raise BadRequestError("Objective and review must belong to the same employee")

    if not employees.get_employee(db, data.employee_id):
        raise NotFoundError(f"Employee #{data.employee_id} not found")

    objective = Objective(
        review_id=data.review_id,
        employee_id=data.employee_id,
        title=data.title,
        description=data.description,
        type=data.type or ObjectiveType.INDIVIDUAL.value,
        category=data.category,
        metric_type=data.metric_type or MetricType.PERCENTAGE.value,
        target_value=data.target_value,
        current_value=data.current_value or 0,
        weight=data.weight or 100,
        start_date=data.start_date,
        due_date=data.due_date,
        status=ObjectiveStatus.NOT_STARTED.value,
    )
    for kr_data in data.key_results:
        objective.key_results.append(KeyResult(
            title=kr_data.title,
            target_value=kr_data.target_value,
            current_value=kr_data.current_value or 0,
            unit=kr_data.unit,
            status=KeyResultStatus.NOT_STARTED.value,
        ))

    db.add(objective)
    db.flush()
    log_action(db, creator_id, "create", RESOURCE, objective.id, details={
        "employee_id": objective.employee_id,
        "review_id": objective.review_id,
        "key_results": len(data.key_results),
    })
    db.commit()
    db.refresh(objective)
    return objective


# ── Update ──

def update_objective(db: Session, objective_id: int, data: ObjectiveUpdate, user_id: int) -> Objective:
    objective = _get_objective(db, objective_id)

    is_owner = objective.employee_id == user_id
    is_manager = objective.review is not None and objective.review.manager_id == user_id
    if not is_owner and not is_manager:
        raise ForbiddenError("Not allowed to modify this objective")

    changes = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field in _CLEARABLE_FIELDS
    }
    for field, value in changes.items():
        setattr(objective, field, value)

    # Administrative override, independent of progress values
    if changes.get("status") == ObjectiveStatus.COMPLETED.value:
        objective.completed_at = _utcnow()

    log_action(db, user_id, "update", RESOURCE, objective.id, details={"fields": sorted(changes)})
    db.commit()
    db.refresh(objective)
    return objective


def update_progress(
    db: Session,
    objective_id: int,
    data: ProgressUpdate,
    user_id: int,
    as_manager: bool,
) -> Objective:
    objective = _get_objective(db, objective_id)

    if as_manager:
        if not _is_objective_manager(db, objective, user_id):
            raise ForbiddenError("Only the employee's manager may report manager progress")
        objective.manager_progress = data.progress
        if "comments" in data.model_fields_set:
            objective.manager_comments = data.comments
    else:
        if objective.employee_id != user_id:
            raise ForbiddenError("Only the objective owner may report self progress")
        objective.self_progress = data.progress
        if "comments" in data.model_fields_set:
            objective.self_comments = data.comments

    if data.current_value is not None:
        objective.current_value = data.current_value

    status = next_status(objective.status, data.progress)
    # every full submission re-stamps completed_at
    if status == ObjectiveStatus.COMPLETED:
        objective.completed_at = _utcnow()
        logger.info("Objective #%d completed by %s progress", objective.id, "manager" if as_manager else "self")
    objective.status = status.value

    log_action(db, user_id, "progress", RESOURCE, objective.id, details={
        "as_manager": as_manager,
        "progress": data.progress,
        "status": objective.status,
    })
    db.commit()
    db.refresh(objective)
    return objective


# ── Review linkage ──

def link_to_review(db: Session, objective_id: int, review_id: int, user_id: int) -> Objective:
    objective = _get_objective(db, objective_id)
    if objective.review_id is not None:
        raise BadRequestError("This objective is already linked to a review")

    review = _get_review(db, review_id)
    if not _can_act_on_review(review, user_id, objective.employee_id):
        raise ForbiddenError("Not allowed to link objectives to this review")
    if review.employee_id != objective.employee_id:
        raise BadRequestError("Objective and review must belong to the same employee")

    objective.review_id = review.id
    log_action(db, user_id, "link_review", RESOURCE, objective.id, details={"review_id": review.id})
    db.commit()
    db.refresh(objective)
    return objective


# ── Delete ──

def delete_objective(db: Session, objective_id: int, user_id: int, role: str) -> None:
    objective = _get_objective(db, objective_id)

    if objective.review is not None:
        if objective.review.manager_id != user_id:
            raise ForbiddenError("Only the review manager may delete this objective")
    elif objective.employee_id != user_id and role not in ADMIN_ROLES:
        raise ForbiddenError("Only the owner or an administrator may delete this objective")

    log_action(db, user_id, "delete", RESOURCE, objective.id, details={"employee_id": objective.employee_id})
    db.delete(objective)
    db.commit()


# ── Key Results ──

def add_key_result(db: Session, objective_id: int, data: KeyResultCreate, user_id: int) -> KeyResult:
    _get_objective(db, objective_id)
    kr = KeyResult(
        objective_id=objective_id,
        title=data.title,
        target_value=data.target_value,
        current_value=0,
        unit=data.unit,
        status=KeyResultStatus.NOT_STARTED.value,
    )
    db.add(kr)
    db.flush()
    log_action(db, user_id, "create", KR_RESOURCE, kr.id, details={"objective_id": objective_id})
    db.commit()
    db.refresh(kr)
    return kr


def update_key_result(
    db: Session,
    objective_id: int,
    kr_id: int,
    data: KeyResultUpdate,
    user_id: int,
) -> KeyResult:
    kr = _get_key_result(db, objective_id, kr_id)
    changes = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field in _KR_CLEARABLE_FIELDS
    }
    for field, value in changes.items():
        setattr(kr, field, value)

    log_action(db, user_id, "update", KR_RESOURCE, kr.id, details={
        "objective_id": objective_id,
        "fields": sorted(changes),
    })
    db.commit()
    db.refresh(kr)
    return kr


def delete_key_result(db: Session, objective_id: int, kr_id: int, user_id: int) -> None:
    kr = _get_key_result(db, objective_id, kr_id)
    log_action(db, user_id, "delete", KR_RESOURCE, kr.id, details={"objective_id": objective_id})
    db.delete(kr)
    db.commit()
