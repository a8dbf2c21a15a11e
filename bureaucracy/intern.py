"""Interns: nameless helpers that fill out forms on request."""

from __future__ import annotations

from typing import Callable, Dict

from bureaucracy.documents import (
    PresidentialPardonForm,
    RobotomyRequestForm,
    ShrubberyCreationForm,
)
from bureaucracy.forms import AForm

_FORM_FACTORIES: Dict[str, Callable[[str], AForm]] = {
    "PresidentialPardonForm": PresidentialPardonForm,
    "RobotomyRequestForm": RobotomyRequestForm,
    "ShrubberyCreationForm": ShrubberyCreationForm,
}


class Intern:
    """Creates actionable forms by name."""

    FORM_NAMES = tuple(_FORM_FACTORIES)

    def make_form(self, form_name: str, target: str) -> AForm:
        """Create the form called ``form_name`` aimed at ``target``.

        Raises ValueError when no form of that name exists.
        """
        try:
            factory = _FORM_FACTORIES[form_name]
        except KeyError:
            raise ValueError(
                f"Intern can not create a form called {form_name}"
            ) from None
        print(f"Intern creates {form_name} now")
        return factory(target)

    def __repr__(self) -> str:
        return "Intern()"