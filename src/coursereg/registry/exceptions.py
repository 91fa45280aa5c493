"""Custom exceptions for Registry."""


class RegistryError(Exception):
    """Base exception for Registry errors."""


class DuplicateCourseError(RegistryError):
    """Course with given code already exists."""


class DuplicateStudentError(RegistryError):
    """Student with given ID already exists."""
