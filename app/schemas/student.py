from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class StudentBase(BaseModel):
    # Missing fields fall back to zero values, wrong JSON types are rejected
    name: StrictStr = ""
    age: StrictInt = 0
    course: StrictStr = ""
    email: StrictStr = ""


class StudentCreate(StudentBase):
    # A client-supplied "id" is dropped, the store assigns ids
    model_config = ConfigDict(extra="ignore")


class StudentUpdate(StudentCreate):
    pass


class Student(StudentBase):
    id: int
