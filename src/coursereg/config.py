"""Catalog configuration loading for coursereg."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from coursereg.registry import Course, Registry, Student

CONFIG_FILENAME = "coursereg.yaml"
DEFAULT_CATALOG_NAME = "Course Management System"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class CourseConfig:
    """Seed data for one course."""

    code: str
    title: str
    capacity: int
    description: str = ""
    schedule: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CourseConfig:
        """Create course config from a YAML mapping.

        Raises:
            ConfigError: If required fields are missing or capacity is not an integer.
        """
        _require(data, ["code", "title", "capacity"], "course")
        capacity = data["capacity"]
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise ConfigError(f"Course '{data['code']}' capacity must be an integer")
        return cls(
            code=str(data["code"]),
            title=str(data["title"]),
            capacity=capacity,
            description=str(data.get("description") or ""),
            schedule=str(data.get("schedule") or ""),
        )

    def to_course(self) -> Course:
        return Course(
            code=self.code,
            title=self.title,
            description=self.description,
            schedule=self.schedule,
            capacity=self.capacity,
        )


@dataclass
class StudentConfig:
    """Seed data for one student."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StudentConfig:
        """Create student config from a YAML mapping.

        Raises:
            ConfigError: If required fields are missing.
        """
        _require(data, ["id", "name"], "student")
        return cls(id=str(data["id"]), name=str(data["name"]))

    def to_student(self) -> Student:
        return Student(student_id=self.id, name=self.name)


@dataclass
class CatalogConfig:
    """Catalog configuration: the courses and students loaded at startup."""

    name: str = DEFAULT_CATALOG_NAME
    courses: list[CourseConfig] = field(default_factory=list)
    students: list[StudentConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CatalogConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If sections have the wrong shape or entries are incomplete.
        """
        courses_data = data.get("courses") or []
        students_data = data.get("students") or []
        for section, value in (("courses", courses_data), ("students", students_data)):
            if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
                raise ConfigError(f"'{section}' must be a list of mappings")

        return cls(
            name=str(data.get("name") or DEFAULT_CATALOG_NAME),
            courses=[CourseConfig.from_dict(item) for item in courses_data],
            students=[StudentConfig.from_dict(item) for item in students_data],
        )


def _require(data: dict[str, Any], fields: list[str], kind: str) -> None:
    missing = [f for f in fields if f not in data]
    if missing:
        raise ConfigError(f"Missing required {kind} fields: {', '.join(missing)}")


def default_config() -> CatalogConfig:
    """Get the built-in seed catalog."""
    return CatalogConfig(
        courses=[
            CourseConfig(
                code="CS101",
                title="Intro to Computer Science",
                description="Learn the basics of CS.",
                capacity=30,
                schedule="MWF 9:00-10:00",
            ),
            CourseConfig(
                code="MATH101",
                title="Calculus I",
                description="Differential and integral calculus.",
                capacity=25,
                schedule="TTh 11:00-12:30",
            ),
            CourseConfig(
                code="PHY101",
                title="Physics I",
                description="Introduction to mechanics.",
                capacity=20,
                schedule="MWF 10:00-11:00",
            ),
        ],
        students=[
            StudentConfig(id="S001", name="Alice"),
            StudentConfig(id="S002", name="Bob"),
        ],
    )


def load_config(config_path: Path | str) -> CatalogConfig:
    """Load catalog configuration from a YAML file.

    Args:
        config_path: Path to coursereg.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return CatalogConfig.from_dict(data)


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find coursereg.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to coursereg.yaml, or None if there is none.
    """
    current = (Path.cwd() if start_path is None else Path(start_path)).resolve()

    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILENAME
        if config_path.exists():
            return config_path
    return None


def build_registry(config: CatalogConfig) -> Registry:
    """Create a Registry seeded from configuration.

    Raises:
        ConfigError: If a course has an invalid capacity.
        RegistryError: If codes or IDs are duplicated.
    """
    registry = Registry()
    for course_config in config.courses:
        try:
            course = course_config.to_course()
        except ValueError as e:
            raise ConfigError(str(e)) from e
        registry.add_course(course)
    for student_config in config.students:
        registry.add_student(student_config.to_student())
    return registry
