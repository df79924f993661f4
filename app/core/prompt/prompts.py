"""
PROMPT TEMPLATES - prompts sent to the text-generation backends.

Kept apart from the services so they can be edited and versioned
without touching the request flow.
"""

# ============= STUDENT SUMMARY =============

STUDENT_SUMMARY_PROMPT = (
    "Please generate a detailed summary of the student with the following "
    "information: Name: {name}, Age: {age}, Course: {course}, Email: {email}. "
    "Make sure the summary is clear and informative."
)

# Used by the local "template" backend, no model involved
STUDENT_SUMMARY_TEMPLATE = (
    "{name} is {age} years old and is enrolled in {course}. "
    "They can be reached at {email}."
)


# ============= HELPER FUNCTIONS =============

def _fields(student) -> dict:
    return {
        "name": student.name,
        "age": student.age,
        "course": student.course,
        "email": student.email,
    }


def build_student_summary_prompt(student) -> str:
    """
    Build the generation prompt for one student record.

    Args:
        student: any object with name, age, course and email attributes

    Returns:
        The prompt text, fields embedded verbatim
    """
    return STUDENT_SUMMARY_PROMPT.format(**_fields(student))


def render_student_summary(student) -> str:
    return STUDENT_SUMMARY_TEMPLATE.format(**_fields(student))
