import logging

from app.schemas.student import StudentCreate
from app.services.student.store import StudentStore

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    StudentCreate(name="Ann Lee", age=20, course="Computer Science", email="ann@example.com"),
    StudentCreate(name="Ben Carter", age=22, course="Mathematics", email="ben@example.com"),
    StudentCreate(name="Chloe Park", age=21, course="Physics", email="chloe@example.com"),
]


def seed_data(store: StudentStore) -> int:
    """
    Insert the sample students into an empty store.

    Returns the number of records added (0 when the store already has data).
    """
    # Skip when there is data already, to avoid duplicates
    if store.count():
        logger.info("Store already contains data. Skipping seed.")
        return 0

    logger.info("Seeding data...")
    for student in SAMPLE_STUDENTS:
        store.create(student)

    logger.info(f"Seeded {len(SAMPLE_STUDENTS)} students")
    return len(SAMPLE_STUDENTS)
