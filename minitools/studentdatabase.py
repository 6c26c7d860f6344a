"""Student records: saving, loading, sorting, statistics and search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path

GRADE_COUNT = 5
MAX_NAME_LENGTH = 49
_FIELD_COUNT = 1 + 1 + GRADE_COUNT + 3


@dataclass(frozen=True)
class Date:
    day: int
    month: int
    year: int


@dataclass(frozen=True)
class Student:
    name: str
    id: int
    grades: tuple[float, ...]
    enrollment_date: Date

    def __post_init__(self) -> None:
        grades = tuple(float(grade) for grade in self.grades)
        if len(grades) != GRADE_COUNT:
            raise ValueError(f"a student has exactly {GRADE_COUNT} grades")
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(f"name longer than {MAX_NAME_LENGTH} characters")
        object.__setattr__(self, "grades", grades)

    @property
    def gpa(self) -> float:
        return sum(self.grades) / GRADE_COUNT


class SortKey(Enum):
    NAME = 1
    ID = 2
    GPA = 3


@dataclass(frozen=True)
class ClassStatistics:
    average_gpa: float
    highest_grade: float
    best_student: Student


def _format_record(student: Student) -> str:
    if any(char in student.name for char in ",\n\r"):
        raise ValueError(f"name may not contain a comma or line break: {student.name!r}")
    grades = ",".join(f"{grade:.2f}" for grade in student.grades)
    date = student.enrollment_date
    return f"{student.name},{student.id},{grades},{date.day},{date.month},{date.year}\n"


def save_records(students: Sequence[Student], path: str | PathLike[str]) -> None:
    """Write the student count, then one comma-separated record per line."""
    lines = [f"{len(students)}\n", *(_format_record(student) for student in students)]
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(lines)


def _parse_record(line: str) -> Student:
    fields = line.split(",")
    if len(fields) != _FIELD_COUNT:
        raise ValueError(f"malformed record: {line!r}")
    name, student_id, *rest = fields
    grades, (day, month, year) = rest[:GRADE_COUNT], rest[GRADE_COUNT:]
    return Student(
        name=name,
        id=int(student_id),
        grades=tuple(float(grade) for grade in grades),
        enrollment_date=Date(int(day), int(month), int(year)),
    )


def load_records(path: str | PathLike[str]) -> list[Student]:
    """Read records written by save_records."""
    lines = [line for line in Path(path).read_text(encoding="utf-8").splitlines() if line.strip()]
    if not lines:
        raise ValueError("record file is empty")
    count = int(lines[0])
    records = lines[1 : count + 1]
    if len(records) < count:
        raise ValueError(f"expected {count} records, found {len(records)}")
    return [_parse_record(line) for line in records]


_SORT_KEYS = {
    SortKey.NAME: lambda student: student.name,
    SortKey.ID: lambda student: student.id,
    SortKey.GPA: lambda student: student.gpa,
}


def sort_students(students: Iterable[Student], key: SortKey | int) -> list[Student]:
    """Students in ascending order of the key; equal keys keep their order."""
    return sorted(students, key=_SORT_KEYS[SortKey(key)])


def statistics(students: Sequence[Student]) -> ClassStatistics:
    if not students:
        raise ValueError("No students to analyze.")
    return ClassStatistics(
        average_gpa=sum(student.gpa for student in students) / len(students),
        highest_grade=max(grade for student in students for grade in student.grades),
        best_student=max(students, key=lambda student: student.gpa),
    )


def search(students: Iterable[Student], student_id: int) -> list[Student]:
    """All students with the given id."""
    return [student for student in students if student.id == student_id]


_SAMPLE = (
    Student("Alice Johnson", 12345, (85.5, 92.0, 78.5, 88.0, 91.5), Date(15, 2, 2023)),
    Student("Bob Smith", 12378, (76.0, 82.5, 79.0, 84.5, 80.0), Date(22, 1, 2023)),
    Student("Carol Davis", 12401, (95.5, 97.0, 93.5, 96.0, 94.5), Date(8, 3, 2023)),
    Student("David Wilson", 12289, (68.5, 72.0, 75.5, 70.0, 73.5), Date(12, 2, 2023)),
)


def main(argv: list[str] | None = None) -> int:
    """Save and reload sample records, then search and summarise them."""
    parser = argparse.ArgumentParser(prog="studentdatabase", description="Student records.")
    parser.add_argument("--file", default="students.txt", help="record file to write and read")
    args = parser.parse_args(argv)

    try:
        save_records(_SAMPLE, args.file)
        loaded = load_records(args.file)
    except OSError as exc:
        print(f"File couldn't open: {exc}", file=sys.stderr)
        return 1

    for student in search(loaded, 12401):
        print(f"Student found: {student.name}")

    students = list(_SAMPLE)
    for key in SortKey:
        students = sort_students(students, key)

    stats = statistics(students)
    best = stats.best_student
    print("Class Statistics:")
    print("=================")
    print(f"Average GPA: {stats.average_gpa:.2f}")
    print(f"Highest Grade: {stats.highest_grade:.2f}")
    print(f"Best Student: {best.name} (ID: {best.id}, GPA: {best.gpa:.2f})")
    return 0


if __name__ == "__main__":
    sys.exit(main())