"""Student grade records and a small interactive report."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

NUM_GRADES = 4
CLASS_SIZE = 5
DEFAULT_THRESHOLD = 75.0


@dataclass
class Student:
    """A student with a fixed number of marks."""

    name: str
    marks: list[int] = field(default_factory=lambda: [0] * NUM_GRADES)

    def __post_init__(self) -> None:
        self.marks = list(self.marks)
        if len(self.marks) != NUM_GRADES:
            raise ValueError(f"a student needs exactly {NUM_GRADES} marks")

    def average(self) -> float:
        """Mean of the student's marks."""
        return sum(self.marks) / NUM_GRADES


def sort_by_average(students: Iterable[Student]) -> list[Student]:
    """Return the students ordered from the highest average to the lowest."""
    return sorted(students, key=Student.average, reverse=True)


def top_student(students: Sequence[Student]) -> Student | None:
    """The student with the highest average; the first one wins a tie."""
    best: Student | None = None
    for student in students:
        if best is None or student.average() > best.average():
            best = student
    return best


def count_above(students: Iterable[Student], threshold: float = DEFAULT_THRESHOLD) -> int:
    """Count students whose average is strictly above the threshold."""
    return sum(1 for student in students if student.average() > threshold)


def format_menu() -> str:
    """The text of the report menu."""
    return (
        "\nMenu:\n"
        "1. Count students with average grade > 75%\n"
        "2. Get information about the top-performing student\n"
        "3. Sort students by average grade\n"
        "0. Exit\n"
    )


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_students(tokens: Iterator[str]) -> list[Student]:
    students = []
    for number in range(1, CLASS_SIZE + 1):
        print(f"Enter the name of student {number}: ", end="")
        name = next(tokens)
        print(f"Enter grades for {name} ({NUM_GRADES} grades): ", end="")
        marks = [int(next(tokens)) for _ in range(NUM_GRADES)]
        students.append(Student(name, marks))
    return students


def main(argv: Sequence[str] | None = None) -> int:
    """Read a class from standard input and answer menu queries about it."""
    tokens = _tokens(sys.stdin)
    try:
        students = _read_students(tokens)
    except StopIteration:
        print("\nUnexpected end of input.")
        return 1
    except ValueError:
        print("\nInvalid grade.")
        return 1

    while True:
        print(format_menu(), end="")
        print("Enter your choice (0-3): ", end="")
        try:
            choice = int(next(tokens))
        except StopIteration:
            return 0
        except ValueError:
            choice = -1

        if choice == 1:
            print(f"Number of students with average grade > 75%: {count_above(students)}")
        elif choice == 2:
            best = top_student(students)
            print(f"Top-performing student: {best.name} with an average grade of {best.average():g}")
        elif choice == 3:
            students = sort_by_average(students)
            print("Sorted students by average grade:")
            for student in students:
                print(f"{student.name}: {student.average():g}")
        elif choice == 0:
            print("Exiting the program...")
            return 0
        else:
            print("Invalid choice. Please enter a valid option.")


if __name__ == "__main__":
    sys.exit(main())