"""Registry - In-memory course catalog, students and enrollment bookkeeping."""

from coursereg.registry.exceptions import (
    DuplicateCourseError,
    DuplicateStudentError,
    RegistryError,
)
from coursereg.registry.models import (
    Course,
    CourseRef,
    CourseState,
    DropOutcome,
    RegistrationOutcome,
    Student,
)
from coursereg.registry.registry import Registry

__all__ = [
    "Course",
    "CourseRef",
    "CourseState",
    "DropOutcome",
    "DuplicateCourseError",
    "DuplicateStudentError",
    "RegistrationOutcome",
    "Registry",
    "RegistryError",
    "Student",
]
