"""
Seed script: a demo manager with reportees, an active campaign and their reviews.

Run: python -m hrms.seed
"""
import logging
import sys
from datetime import date

from hrms.database import Base, SessionLocal, engine
from hrms.models import audit_log, employee, objective, performance  # noqa: F401 (register tables)
from hrms.models.employee import Employee
from hrms.models.performance import PerformanceCampaign, PerformanceReview, CampaignStatus, ReviewStatus

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEMO_MANAGER = {"full_name": "Amina Diallo", "email": "amina.diallo@example.com", "role": "manager",
                "position_title": "Engineering Manager"}
DEMO_REPORTEES = [
    {"full_name": "Karim Benali", "email": "karim.benali@example.com", "position_title": "Backend Engineer"},
    {"full_name": "Lea Martin", "email": "lea.martin@example.com", "position_title": "Frontend Engineer"},
]
DEMO_CAMPAIGN_TITLE = "Annual Review {year}"


def _ensure_employee(db, data: dict, manager_id: int | None = None) -> Employee:
    emp = db.query(Employee).filter(Employee.email == data["email"]).first()
    if emp:
        logger.info("Employee %s already exists, skipping.", data["email"])
        return emp
    emp = Employee(
        full_name=data["full_name"],
        email=data["email"],
        role=data.get("role", "employee"),
        position_title=data.get("position_title"),
        manager_user_id=manager_id,
        active=True,
    )
    db.add(emp)
    db.flush()
    logger.info("Created employee: %s (%s)", emp.full_name, emp.email)
    return emp


def seed_reviews(db):
    """Create the manager, reportees, current campaign and one review per reportee."""
    year = date.today().year
    manager = _ensure_employee(db, DEMO_MANAGER)

    title = DEMO_CAMPAIGN_TITLE.format(year=year)
    campaign = db.query(PerformanceCampaign).filter(PerformanceCampaign.title == title).first()
    if not campaign:
        campaign = PerformanceCampaign(title=title, year=year, status=CampaignStatus.ACTIVE.value)
        db.add(campaign)
        db.flush()
        logger.info("Created campaign: %s", title)

    for data in DEMO_REPORTEES:
        emp = _ensure_employee(db, data, manager_id=manager.id)
        exists = (
            db.query(PerformanceReview)
            .filter(PerformanceReview.campaign_id == campaign.id, PerformanceReview.employee_id == emp.id)
            .first()
        )
        if not exists:
            db.add(PerformanceReview(
                campaign_id=campaign.id,
                employee_id=emp.id,
                manager_id=manager.id,
                status=ReviewStatus.PENDING_SELF.value,
            ))
            logger.info("Created review for %s", emp.full_name)

    db.commit()


def run_seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_reviews(db)
        logger.info("Seed complete.")
    except Exception:
        logger.exception("Seed failed")
        db.rollback()
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    run_seed()
