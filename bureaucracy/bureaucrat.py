"""Bureaucrats: named officials holding a grade between 1 (highest) and 150 (lowest)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bureaucracy.forms import Form

HIGHEST_GRADE = 1
LOWEST_GRADE = 150


class GradeError(Exception):
    """Base class for every error about a grade being out of range."""


class BureaucratGradeTooHighError(GradeError):
    """A bureaucrat's grade would rise above the highest grade."""

    def __init__(self, message: str = "Grade too high") -> None:
        super().__init__(message)


class BureaucratGradeTooLowError(GradeError):
    """A bureaucrat's grade would fall below the lowest grade."""

    def __init__(self, message: str = "Grade too low") -> None:
        super().__init__(message)


class Bureaucrat:
    """An official with an immutable name and a grade that can be promoted or demoted."""

    def __init__(self, name: str = "Default", grade: int = LOWEST_GRADE) -> None:
        if grade > LOWEST_GRADE:
            raise BureaucratGradeTooLowError()
        if grade < HIGHEST_GRADE:
            raise BureaucratGradeTooHighError()
        self._name = name
        self.grade = grade

    @property
    def name(self) -> str:
        return self._name

    def increment_grade(self) -> None:
        """Promote by one step (the grade number goes down)."""
        if self.grade > LOWEST_GRADE:
            raise BureaucratGradeTooLowError()
        if self.grade < HIGHEST_GRADE + 1:
            raise BureaucratGradeTooHighError()
        self.grade -= 1

    def decrement_grade(self) -> None:
        """Demote by one step (the grade number goes up)."""
        if self.grade > LOWEST_GRADE - 1:
            raise BureaucratGradeTooLowError()
        if self.grade < HIGHEST_GRADE:
            raise BureaucratGradeTooHighError()
        self.grade += 1

    def sign_form(self, form: Form) -> None:
        """Ask the form to be signed by this bureaucrat."""
        form.be_signed(self)

    def execute_form(self, form: Form) -> None:
        """Ask the form to be executed by this bureaucrat."""
        form.execute(self)

    def __str__(self) -> str:
        return f"{self.name}, bureaucrat grade {self.grade}."

    def __repr__(self) -> str:
        return f"Bureaucrat(name={self.name!r}, grade={self.grade!r})"