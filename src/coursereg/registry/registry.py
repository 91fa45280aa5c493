"""Registry - Owns courses and students and mediates registration."""

from __future__ import annotations

import logging

from coursereg.registry.exceptions import DuplicateCourseError, DuplicateStudentError
from coursereg.registry.models import (
    Course,
    CourseRef,
    DropOutcome,
    RegistrationOutcome,
    Student,
)

logger = logging.getLogger(__name__)


class Registry:
    """Main API for course registration.

    Holds the authoritative course and student collections in insertion
    order. Students refer to courses by CourseRef, the course's index in
    this registry, so a Registry must be passed around explicitly rather
    than shared as global state.
    """

    def __init__(self) -> None:
        self._courses: list[Course] = []
        self._students: list[Student] = []

    # --- Catalog Operations ---

    def add_course(self, course: Course) -> CourseRef:
        """Add a course to the catalog.

        Args:
            course: The course to add.

        Returns:
            The handle of the new course.

        Raises:
            DuplicateCourseError: If a course with the same code (ignoring
                case) already exists.
        """
        if self.find_course_by_code(course.code) is not None:
            raise DuplicateCourseError(f"Course with code '{course.code}' already exists")
        self._courses.append(course)
        ref = len(self._courses) - 1
        logger.debug("Added course %s (ref=%d, capacity=%d)", course.code, ref, course.capacity)
        return ref

    def add_student(self, student: Student) -> Student:
        """Add a student.

        Args:
            student: The student to add. Registrations only happen through
                register_student_for_course, so the student must arrive with
                none.

        Returns:
            The added student.

        Raises:
            DuplicateStudentError: If a student with the same ID (ignoring
                case) already exists.
            ValueError: If the student already holds course handles.
        """
        if self.find_student_by_id(student.student_id) is not None:
            raise DuplicateStudentError(f"Student with id '{student.student_id}' already exists")
        if student.registered:
            raise ValueError(
                f"Student '{student.student_id}' must be added without registrations, "
                f"got {len(student.registered)}"
            )
        self._students.append(student)
        logger.debug("Added student %s", student.student_id)
        return student

    def find_course_by_code(self, code: str) -> Course | None:
        """Find a course by code, ignoring case.

        Returns:
            The first matching course, or None.
        """
        ref = self._find_course_ref(code)
        return None if ref is None else self._courses[ref]

    def find_student_by_id(self, student_id: str) -> Student | None:
        """Find a student by ID, ignoring case.

        Returns:
            The first matching student, or None.
        """
        for student in self._students:
            if student.matches(student_id):
                return student
        return None

    def list_courses(self) -> list[Course]:
        """List all courses in insertion order."""
        return list(self._courses)

    def list_students(self) -> list[Student]:
        """List all students in insertion order."""
        return list(self._students)

    def course_at(self, ref: CourseRef) -> Course:
        """Resolve a course handle.

        Raises:
            IndexError: If the handle does not belong to this registry.
        """
        if not 0 <= ref < len(self._courses):
            raise IndexError(f"No course with ref {ref}")
        return self._courses[ref]

    def registered_courses(self, student: Student) -> list[Course]:
        """Get the courses a student is registered for, in registration order."""
        return [self.course_at(ref) for ref in student.registered]

    # --- Registration Operations ---

    def register_student_for_course(self, student_id: str, course_code: str) -> RegistrationOutcome:
        """Register a student for a course.

        Checks run in order: student exists, course exists, student not
        already registered, course has a free seat.

        Args:
            student_id: The student's ID (case-insensitive).
            course_code: The course code (case-insensitive).

        Returns:
            The outcome. Only SUCCESS changes state.
        """
        outcome = self._register(student_id, course_code)
        logger.info("Register %s for %s: %s", student_id, course_code, outcome.value)
        return outcome

    def drop_student_from_course(self, student_id: str, selection: int | str) -> DropOutcome:
        """Drop a student from one of their registered courses.

        Args:
            student_id: The student's ID (case-insensitive).
            selection: Either the 1-based position of the course in the
                student's registered list, or a course code.

        Returns:
            The outcome. Only SUCCESS changes state.
        """
        outcome = self._drop(student_id, selection)
        logger.info("Drop %s from %r: %s", student_id, selection, outcome.value)
        return outcome

    # --- Helpers ---

    def _find_course_ref(self, code: str) -> CourseRef | None:
        for ref, course in enumerate(self._courses):
            if course.matches(code):
                return ref
        return None

    def _register(self, student_id: str, course_code: str) -> RegistrationOutcome:
        student = self.find_student_by_id(student_id)
        if student is None:
            return RegistrationOutcome.STUDENT_NOT_FOUND

        ref = self._find_course_ref(course_code)
        if ref is None:
            return RegistrationOutcome.COURSE_NOT_FOUND

        if student.is_registered_for(ref):
            return RegistrationOutcome.ALREADY_REGISTERED

        if not student.register_for(ref, self._courses[ref]):
            return RegistrationOutcome.COURSE_FULL

        return RegistrationOutcome.SUCCESS

    def _drop(self, student_id: str, selection: int | str) -> DropOutcome:
        student = self.find_student_by_id(student_id)
        if student is None:
            return DropOutcome.STUDENT_NOT_FOUND

        if not student.registered:
            return DropOutcome.NO_REGISTERED_COURSES

        if isinstance(selection, str):
            ref = self._find_course_ref(selection)
            if ref is None or not student.is_registered_for(ref):
                return DropOutcome.NOT_REGISTERED
        elif isinstance(selection, int) and not isinstance(selection, bool):
            if not 1 <= selection <= len(student.registered):
                return DropOutcome.INVALID_SELECTION
            ref = student.registered[selection - 1]
        else:
            return DropOutcome.INVALID_SELECTION

        if not student.drop(ref, self._courses[ref]):
            return DropOutcome.FAILED

        return DropOutcome.SUCCESS
