from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.sql import func

from hrms.database import Base


# ---------------------------------------------------
# Roles
# ---------------------------------------------------

EMPLOYEE_ROLE = String(50)  # keep String to avoid enum migration issues

MANAGER_ROLES = ("manager", "hr_admin", "super_admin")
ADMIN_ROLES = ("hr_admin", "super_admin")


# ---------------------------------------------------
# Employee
# ---------------------------------------------------

class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=True, unique=True, index=True)
    role = Column(EMPLOYEE_ROLE, nullable=False, default="employee")
    position_title = Column(String(200), nullable=True)

    # Line manager, used for team listings and unlinked objectives
    manager_user_id = Column(
        Integer,
        ForeignKey("employees.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
