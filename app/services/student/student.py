import logging
from typing import List

from app.schemas.student import Student, StudentCreate, StudentUpdate
from app.services.student.store import StudentStore
from app.services.summary.base import Summarizer

logger = logging.getLogger(__name__)


def get_student(store: StudentStore, student_id: int) -> Student:
    """Get one student by id, StudentNotFoundError if missing"""
    return store.get_by_id(student_id)


def get_students(store: StudentStore) -> List[Student]:
    """Every student, in no particular order"""
    return store.get_all()


def create_student(store: StudentStore, student: StudentCreate) -> Student:
    """Create a student, the store assigns the id"""
    return store.create(student)


def update_student(store: StudentStore, student_id: int, student: StudentUpdate) -> Student:
    """Replace a student's fields, keeping its id"""
    return store.update(student_id, student)


def delete_student(store: StudentStore, student_id: int) -> None:
    """Delete a student"""
    store.delete(student_id)


def summarize_student(store: StudentStore, summarizer: Summarizer, student_id: int) -> str:
    """
    Describe one student in plain text.

    The record is copied out under the store lock, the summarizer then runs
    on that copy with the lock released so a slow backend never stalls
    other requests.
    """
    student = store.get_by_id(student_id)
    logger.info(f"Summarizing student {student_id} with {summarizer.provider}")
    try:
        return summarizer.summarize(student)
    except Exception:
        logger.error(f"Summary failed for student {student_id}")
        raise
