"""
Employee directory lookups used by the objective lifecycle.
"""

from sqlalchemy.orm import Session

from hrms.models.employee import Employee


def get_employee(db: Session, employee_id: int) -> Employee | None:
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_reportee_ids(db: Session, manager_id: int) -> list[int]:
    """Ids of the active employees whose line manager is `manager_id`."""
    rows = (
        db.query(Employee.id)
        .filter(Employee.manager_user_id == manager_id, Employee.active == True)
        .all()
    )
    return [row.id for row in rows]


def is_line_manager(db: Session, manager_id: int, employee_id: int) -> bool:
    employee = get_employee(db, employee_id)
    return employee is not None and employee.manager_user_id == manager_id
