"""Data models for the Registry module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

# Handle of a course inside a Registry: its index in the course collection.
CourseRef = int


class CourseState(StrEnum):
    """Course state enum."""

    HAS_SLOTS = "has_slots"
    FULL = "full"


class RegistrationOutcome(StrEnum):
    """Result of registering a student for a course."""

    SUCCESS = "success"
    STUDENT_NOT_FOUND = "student_not_found"
    COURSE_NOT_FOUND = "course_not_found"
    ALREADY_REGISTERED = "already_registered"
    COURSE_FULL = "course_full"


class DropOutcome(StrEnum):
    """Result of dropping a student from a course."""

    SUCCESS = "success"
    STUDENT_NOT_FOUND = "student_not_found"
    NO_REGISTERED_COURSES = "no_registered_courses"
    INVALID_SELECTION = "invalid_selection"
    NOT_REGISTERED = "not_registered"
    FAILED = "failed"


@dataclass
class Course:
    """A catalog entry with a capacity-bounded enrollment count.

    Attributes:
        code: Course code such as "CS101". Compared case-insensitively.
        title: Display title.
        description: Short description shown in listings.
        schedule: Free-form meeting times, e.g. "MWF 9:00-10:00".
        capacity: Maximum number of enrolled students. Must be >= 1.
        enrolled: Current enrollment count, always within [0, capacity].
    """

    code: str
    title: str
    description: str = ""
    schedule: str = ""
    capacity: int = 1
    enrolled: int = 0

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"Course '{self.code}' capacity must be >= 1, got {self.capacity}")
        if not 0 <= self.enrolled <= self.capacity:
            raise ValueError(
                f"Course '{self.code}' enrollment must be within [0, {self.capacity}], "
                f"got {self.enrolled}"
            )

    @property
    def state(self) -> CourseState:
        """Get the enrollment state derived from the counts."""
        return CourseState.FULL if self.is_full() else CourseState.HAS_SLOTS

    def matches(self, code: str) -> bool:
        """Check whether this course has the given code, ignoring case."""
        return self.code.casefold() == code.casefold()

    def available_slots(self) -> int:
        """Capacity minus current enrollment, never negative."""
        return max(self.capacity - self.enrolled, 0)

    def is_full(self) -> bool:
        return self.enrolled >= self.capacity

    def enroll(self) -> bool:
        """Take one seat.

        Returns:
            True if a seat was taken, False if the course is full (no change).
        """
        if self.is_full():
            return False
        self.enrolled += 1
        return True

    def drop(self) -> bool:
        """Release one seat.

        Returns:
            True if a seat was released, False if nobody is enrolled (no change).
        """
        if self.enrolled <= 0:
            return False
        self.enrolled -= 1
        return True


@dataclass
class Student:
    """A student and the courses they are currently registered for.

    Attributes:
        student_id: Identifier such as "S001". Compared case-insensitively.
        name: Display name.
        registered: Handles of registered courses, in registration order.
    """

    student_id: str
    name: str
    registered: list[CourseRef] = field(default_factory=list)

    def matches(self, student_id: str) -> bool:
        """Check whether this student has the given id, ignoring case."""
        return self.student_id.casefold() == student_id.casefold()

    def is_registered_for(self, ref: CourseRef) -> bool:
        return ref in self.registered

    def register_for(self, ref: CourseRef, course: Course) -> bool:
        """Enroll in a course and remember its handle.

        Duplicates are not checked here; the Registry rejects them.

        Args:
            ref: Handle of the course in the owning Registry.
            course: The course the handle resolves to.

        Returns:
            True on success, False if the course is full.
        """
        if not course.enroll():
            return False
        self.registered.append(ref)
        return True

    def drop(self, ref: CourseRef, course: Course) -> bool:
        """Drop one registration for a course.

        Args:
            ref: Handle of the course in the owning Registry.
            course: The course the handle resolves to.

        Returns:
            True if a registration was removed and a seat released. False if
            the student never registered for the course, or the course has no
            seat to release (no change either way).
        """
        if ref not in self.registered:
            return False
        if not course.drop():
            return False
        self.registered.remove(ref)
        return True
