"""Forms that bureaucrats sign and, for actionable forms, execute."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from bureaucracy.bureaucrat import HIGHEST_GRADE, LOWEST_GRADE, GradeError

if TYPE_CHECKING:
    from bureaucracy.bureaucrat import Bureaucrat


class FormGradeTooHighError(GradeError):
    """A grade is above the allowed range, or an executor's grade is insufficient."""

    def __init__(self, message: str = "🚨 >>>> Grade too high") -> None:
        super().__init__(message)


class FormGradeTooLowError(GradeError):
    """A grade is below the allowed range, or a signer's grade is insufficient."""

    def __init__(self, message: str = "🚨 >>>> Grade too low") -> None:
        super().__init__(message)


class FormNotSignedError(Exception):
    """An attempt was made to execute a form that has not been signed."""

    def __init__(self, message: str = "🚨 >>>> Form is not signed") -> None:
        super().__init__(message)


def check_grade(grade: int) -> None:
    """Raise if ``grade`` lies outside the range 1..150."""
    if grade > LOWEST_GRADE:
        raise FormGradeTooLowError()
    if grade < HIGHEST_GRADE:
        raise FormGradeTooHighError()


class Form:
    """A named form with the grades needed to sign and to execute it."""

    _sign_prefix = ""

    def __init__(
        self,
        name: str = "Default",
        signed: bool = False,
        sign_grade: int = LOWEST_GRADE,
        execute_grade: int = LOWEST_GRADE,
    ) -> None:
        check_grade(sign_grade)
        check_grade(execute_grade)
        self._name = name
        self.signed = signed
        self._sign_grade = sign_grade
        self._execute_grade = execute_grade

    @property
    def name(self) -> str:
        return self._name

    @property
    def sign_grade(self) -> int:
        return self._sign_grade

    @property
    def execute_grade(self) -> int:
        return self._execute_grade

    def be_signed(self, bureaucrat: Bureaucrat) -> None:
        """Mark the form signed if the bureaucrat's grade is high enough."""
        check_grade(bureaucrat.grade)
        if self.sign_grade >= bureaucrat.grade:
            print(f"{self._sign_prefix}{bureaucrat.name} sign {self.name}.")
            self.signed = True
        else:
            print(
                f">>> 🚫 {bureaucrat.name}  couldn’t sign {bureaucrat.name}"
                " because he dosent have required grade to sign."
            )
            raise FormGradeTooLowError()

    def __str__(self) -> str:
        return (
            f"> 📋 From => Name {self.name}, signed {int(self.signed)}.\n"
            f"Grade required for signing: {self.sign_grade}\n"
            f"Grade required for execution: {self.execute_grade}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, signed={self.signed!r}, "
            f"sign_grade={self.sign_grade!r}, execute_grade={self.execute_grade!r})"
        )


class AForm(Form, ABC):
    """A form that carries out an action once signed; subclasses define the action."""

    _sign_prefix = "🟢 >> "

    def execute(self, executor: Bureaucrat) -> None:
        """Check the form is signed and the executor qualified, then perform the action."""
        if not self.signed:
            print("🔴 >> Form is not signed, cannot execute !")
            raise FormNotSignedError()
        if executor.grade > self.execute_grade:
            print("🔴 >> cannot execute grade too low")
            raise FormGradeTooHighError()
        print(f"🟢 >> {executor.name} executed {self.name}")
        self._perform(executor)

    @abstractmethod
    def _perform(self, executor: Bureaucrat) -> None:
        """Carry out the form's action."""