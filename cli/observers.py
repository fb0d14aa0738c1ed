# cli/observers.py

class ConsoleGradeObserver:
    """Prints a confirmation line to the console each time a grade is recorded."""

    def update(self, student_name: str, grade: int) -> None:
        print(f"\nGrade recorded: {student_name} received {grade}.")
