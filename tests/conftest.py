"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from coursereg.logging import reset_logging
from coursereg.registry import Course, Registry, Student


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def registry() -> Registry:
    """Create a Registry with two courses and two students."""
    registry = Registry()
    registry.add_course(
        Course(
            code="CS101",
            title="Intro to Computer Science",
            description="Learn the basics of CS.",
            schedule="MWF 9:00-10:00",
            capacity=1,
        )
    )
    registry.add_course(
        Course(
            code="MATH101",
            title="Calculus I",
            description="Differential and integral calculus.",
            schedule="TTh 11:00-12:30",
            capacity=25,
        )
    )
    registry.add_student(Student(student_id="S001", name="Alice"))
    registry.add_student(Student(student_id="S002", name="Bob"))
    return registry


@pytest.fixture(autouse=True)
def detach_log_handlers() -> Iterator[None]:
    """Close log files opened by setup_logging once each test is done."""
    yield
    reset_logging()
