"""Shell - Interactive menu on top of a Registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from coursereg.logging import get_logger
from coursereg.registry import DropOutcome, RegistrationOutcome

if TYPE_CHECKING:
    from coursereg.registry import Course, Registry

logger = get_logger("shell")

MENU_OPTIONS = (
    "Display Courses",
    "Register for a Course",
    "Drop a Course",
    "Exit",
)


class Shell:
    """Menu-driven text interface.

    Reads one choice at a time and forwards it to the Registry. Every
    refusal is reported as a message and the loop returns to the menu;
    only the Exit option or end of input stops it.
    """

    def __init__(self, registry: Registry, title: str = "Course Management System") -> None:
        """Initialize the Shell.

        Args:
            registry: Registry the menu operates on.
            title: Heading printed above the menu.
        """
        self.registry = registry
        self.title = title

    def run(self) -> None:
        """Run the menu loop until the user exits."""
        logger.info("Shell started")
        actions = {
            1: self.display_courses,
            2: self.register,
            3: self.drop,
        }
        try:
            while True:
                self._print_menu()
                choice = click.prompt("Enter your choice", type=int)
                if choice == len(MENU_OPTIONS):
                    click.echo("Exiting the system. Goodbye!")
                    break
                action = actions.get(choice)
                if action is None:
                    click.echo("Invalid choice. Try again.")
                    continue
                action()
        except click.Abort:
            # End of input or Ctrl-C at a prompt
            click.echo()
            logger.info("Shell aborted by end of input")
            return
        logger.info("Shell exited")

    def display_courses(self) -> None:
        """Print every course with its available slots."""
        click.echo("\nAvailable Courses:")
        for course in self.registry.list_courses():
            click.echo(format_course(course))
            click.echo()

    def register(self) -> None:
        """Register a student for a course."""
        student_id = click.prompt("\nEnter Student ID", type=str).strip()
        if self.registry.find_student_by_id(student_id) is None:
            click.echo("Student not found.")
            return

        self.display_courses()
        course_code = click.prompt("Enter Course Code to Register", type=str).strip()
        outcome = self.registry.register_student_for_course(student_id, course_code)
        course = self.registry.find_course_by_code(course_code)

        if outcome == RegistrationOutcome.SUCCESS:
            click.echo(f"Successfully registered for the course: {course.title}")
        elif outcome == RegistrationOutcome.COURSE_NOT_FOUND:
            click.echo("Course not found.")
        elif outcome == RegistrationOutcome.ALREADY_REGISTERED:
            click.echo(f"You are already registered for {course.title}.")
        elif outcome == RegistrationOutcome.COURSE_FULL:
            click.echo("Failed to register. The course might be full.")
        elif outcome == RegistrationOutcome.STUDENT_NOT_FOUND:
            click.echo("Student not found.")

    def drop(self) -> None:
        """Drop one of a student's registered courses, chosen by number."""
        student_id = click.prompt("\nEnter Student ID", type=str).strip()
        student = self.registry.find_student_by_id(student_id)
        if student is None:
            click.echo("Student not found.")
            return

        click.echo("\nRegistered Courses:")
        courses = self.registry.registered_courses(student)
        if not courses:
            click.echo("No registered courses to remove.")
            return

        for number, course in enumerate(courses, start=1):
            click.echo(f"{number}. {course.title} ({course.code})")

        choice = click.prompt("Enter the number of the course to drop", type=int)
        outcome = self.registry.drop_student_from_course(student_id, choice)

        if outcome == DropOutcome.SUCCESS:
            click.echo(f"Successfully dropped the course: {courses[choice - 1].title}")
        elif outcome == DropOutcome.INVALID_SELECTION:
            click.echo("Invalid choice.")
        else:
            click.echo("Failed to drop the course.")

    def _print_menu(self) -> None:
        click.echo(f"\n{self.title}")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            click.echo(f"{number}. {label}")


def format_course(course: Course) -> str:
    """Render a course as the multi-line block used in listings."""
    return "\n".join(
        [
            f"Course Code: {course.code}",
            f"Title: {course.title}",
            f"Description: {course.description}",
            f"Schedule: {course.schedule}",
            f"Available Slots: {course.available_slots()}",
        ]
    )
