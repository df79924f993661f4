from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from typing import List
from app.api.deps import get_store, get_summarizer
from app.services.student import student as crud_student
from app.services.student.store import StudentStore
from app.services.summary.base import Summarizer
from app.schemas.student import Student, StudentCreate, StudentUpdate

router = APIRouter()


@router.get("", response_model=List[Student])
def get_students(store: StudentStore = Depends(get_store)):
    """
    List every student. Order is not guaranteed.
    """
    return crud_student.get_students(store)


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: int,
    store: StudentStore = Depends(get_store)
):
    """
    Get one student by ID
    """
    return crud_student.get_student(store, student_id=student_id)


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    store: StudentStore = Depends(get_store)
):
    """
    Create a student

    - **name**, **age**, **course**, **email**: all required
    - any **id** in the body is ignored, the server assigns one
    """
    return crud_student.create_student(store, student=student)


@router.put("/{student_id}", response_model=Student)
def update_student(
    student_id: int,
    student: StudentUpdate,
    store: StudentStore = Depends(get_store)
):
    """
    Replace a student's data. The ID never changes.
    """
    return crud_student.update_student(store, student_id=student_id, student=student)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int,
    store: StudentStore = Depends(get_store)
):
    """
    Delete a student
    """
    crud_student.delete_student(store, student_id=student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{student_id}/summary", response_class=PlainTextResponse)
def get_student_summary(
    student_id: int,
    store: StudentStore = Depends(get_store),
    summarizer: Summarizer = Depends(get_summarizer)
):
    """
    Natural-language summary of a student, as plain text.
    """
    return crud_student.summarize_student(store, summarizer, student_id=student_id)
