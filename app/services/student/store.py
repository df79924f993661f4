import logging
import threading
from typing import Dict, List

from app.core.exceptions import StudentNotFoundError
from app.schemas.student import Student, StudentBase

logger = logging.getLogger(__name__)


class StudentStore:
    """
    In-memory student records keyed by id.

    One lock guards both the record map and the id counter. Every method
    takes the lock for the whole operation and hands out copies, so callers
    never see a half-written record and can hold the result without the lock.
    Data is lost on restart.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._students: Dict[int, Student] = {}
        self._current_id = 0

    def _allocate_id(self) -> int:
        # caller holds self._lock
        self._current_id += 1
        return self._current_id

    @staticmethod
    def _not_found(student_id: int) -> StudentNotFoundError:
        logger.warning(f"Student {student_id} not found")
        return StudentNotFoundError(student_id)

    def next_id(self) -> int:
        """Reserve and return the next id. Strictly increasing, never reused."""
        with self._lock:
            return self._allocate_id()

    def create(self, data: StudentBase) -> Student:
        with self._lock:
            student = Student(id=self._allocate_id(), **data.model_dump(exclude={"id"}))
            self._students[student.id] = student
        logger.info(f"Created student {student.id}")
        return student.model_copy()

    def get_all(self) -> List[Student]:
        """Snapshot of every record. Order is not guaranteed."""
        with self._lock:
            return [student.model_copy() for student in self._students.values()]

    def get_by_id(self, student_id: int) -> Student:
        with self._lock:
            student = self._students.get(student_id)
            if student is None:
                raise self._not_found(student_id)
            return student.model_copy()

    def update(self, student_id: int, data: StudentBase) -> Student:
        """Replace every field except id. Unknown ids leave the store untouched."""
        with self._lock:
            if student_id not in self._students:
                raise self._not_found(student_id)
            student = Student(id=student_id, **data.model_dump(exclude={"id"}))
            self._students[student_id] = student
        logger.info(f"Updated student {student_id}")
        return student.model_copy()

    def delete(self, student_id: int) -> None:
        with self._lock:
            if self._students.pop(student_id, None) is None:
                raise self._not_found(student_id)
        logger.info(f"Deleted student {student_id}")

    def count(self) -> int:
        with self._lock:
            return len(self._students)

    def clear(self) -> None:
        """Drop every record and restart ids at 1."""
        with self._lock:
            self._students.clear()
            self._current_id = 0


student_store = StudentStore()
