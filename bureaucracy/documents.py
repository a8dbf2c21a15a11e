"""Concrete actionable forms: shrubbery creation, robotomy request and presidential pardon."""

from __future__ import annotations

import os
import random
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Union

from bureaucracy.forms import AForm

if TYPE_CHECKING:
    from bureaucracy.bureaucrat import Bureaucrat

DEFAULT_TARGET = "default"

_SHRUBBERY = (
    "       *      ",
    "      ***     ",
    "     *****    ",
    "    *******   ",
    "   *********  ",
    "  *********** ",
    " *************",
    "      |||     ",
    "      |||     ",
)


class _CoinFlipper(Protocol):
    def randrange(self, stop: int) -> int: ...


class ShrubberyCreationForm(AForm):
    """Plants an ASCII tree in a file named ``<target>_shrubbery``."""

    SIGN_GRADE = 145
    EXECUTE_GRADE = 137

    def __init__(
        self,
        target: str = DEFAULT_TARGET,
        directory: Optional[Union[str, os.PathLike]] = None,
    ) -> None:
        super().__init__(
            "ShrubberyCreationForm", False, self.SIGN_GRADE, self.EXECUTE_GRADE
        )
        self._target = target
        self._directory = Path(directory) if directory is not None else Path(".")

    @property
    def target(self) -> str:
        return self._target

    @property
    def output_path(self) -> Path:
        """Where the tree is written when the form is executed."""
        return self._directory / f"{self._target}_shrubbery"

    def _perform(self, executor: Bureaucrat) -> None:
        with open(self.output_path, "w", encoding="utf-8") as outfile:
            outfile.writelines(f"{line}\n" for line in _SHRUBBERY)


class RobotomyRequestForm(AForm):
    """Attempts to robotomize the target; succeeds half of the time."""

    SIGN_GRADE = 72
    EXECUTE_GRADE = 45

    def __init__(
        self,
        target: Optional[str] = None,
        rng: Optional[_CoinFlipper] = None,
    ) -> None:
        name = "RobotomyRequestForm" if target is not None else DEFAULT_TARGET
        super().__init__(name, False, self.SIGN_GRADE, self.EXECUTE_GRADE)
        self._target = target if target is not None else DEFAULT_TARGET
        self._rng = rng if rng is not None else random.Random()

    @property
    def target(self) -> str:
        return self._target

    def _perform(self, executor: Bureaucrat) -> None:
        print("* DRILL NOISES*")
        if self._rng.randrange(2) == 1:
            print(f"🤖 >> {self._target} has been robotomized !")
        else:
            print(f"🤖 >> {self._target} failed to be robotomized !")


class PresidentialPardonForm(AForm):
    """Announces that the target has been pardoned."""

    SIGN_GRADE = 25
    EXECUTE_GRADE = 5

    def __init__(self, target: Optional[str] = None) -> None:
        name = "PresidentialPardonForm" if target is not None else DEFAULT_TARGET
        super().__init__(name, False, self.SIGN_GRADE, self.EXECUTE_GRADE)
        self._target = target if target is not None else DEFAULT_TARGET

    @property
    def target(self) -> str:
        return self._target

    def _perform(self, executor: Bureaucrat) -> None:
        print(f"🟢 >> {self._target} has been pardoned by Zaphod Beeblebrox.")