"""
Seed the default logins.

Run with ``python -m hostelmanix.db.seed``. Creates an ``admin`` login
and a ``student`` login linked to the ``STU001`` profile, skipping any
that already exist.
"""

from sqlalchemy.orm import Session

from hostelmanix.config.database import get_db_context
from hostelmanix.config.logging import get_logger, setup_logging
from hostelmanix.core.security import get_password_hasher
from hostelmanix.db.init_db import init_db
from hostelmanix.models.enums import UserRole
from hostelmanix.models.student import Student
from hostelmanix.models.user import User

logger = get_logger(__name__)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"
STUDENT_USERNAME = "student"
STUDENT_PASSWORD = "student123"
STUDENT_ID = "STU001"


def seed_users(session: Session) -> None:
    hasher = get_password_hasher()

    if session.query(User).filter_by(username=ADMIN_USERNAME).first():
        logger.info("Admin user already exists")
    else:
        session.add(
            User(
                username=ADMIN_USERNAME,
                password_hash=hasher.hash(ADMIN_PASSWORD),
                role=UserRole.ADMIN,
            )
        )
        logger.info(f"Admin user created: {ADMIN_USERNAME}")

    if session.query(User).filter_by(username=STUDENT_USERNAME).first():
        logger.info("Student user already exists")
        return

    student_user = User(
        username=STUDENT_USERNAME,
        password_hash=hasher.hash(STUDENT_PASSWORD),
        role=UserRole.STUDENT,
        student_id=STUDENT_ID,
    )
    session.add(student_user)
    session.flush()
    session.add(
        Student(
            student_id=STUDENT_ID,
            name="John Doe",
            email="student@hostel.com",
            phone="1234567890",
            user_id=student_user.id,
        )
    )
    logger.info(f"Student user created: {STUDENT_USERNAME} ({STUDENT_ID})")


def main() -> None:
    setup_logging()
    init_db()
    with get_db_context() as session:
        seed_users(session)


if __name__ == "__main__":
    main()
