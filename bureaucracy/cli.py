"""Demonstration scenarios for bureaucrats, forms and interns."""

from __future__ import annotations

import argparse
import copy
import sys
from typing import Callable, Dict, Optional, Sequence

from bureaucracy.bureaucrat import (
    Bureaucrat,
    BureaucratGradeTooHighError,
    BureaucratGradeTooLowError,
    GradeError,
)
from bureaucracy.documents import (
    PresidentialPardonForm,
    RobotomyRequestForm,
    ShrubberyCreationForm,
)
from bureaucracy.forms import (
    AForm,
    Form,
    FormGradeTooHighError,
    FormGradeTooLowError,
    FormNotSignedError,
)
from bureaucracy.intern import Intern

_SEPARATOR = "\n " + "━" * 86 + " \n"


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def _create_bureaucrat(name: str, grade: int, label: str) -> Optional[Bureaucrat]:
    try:
        return Bureaucrat(name, grade)
    except GradeError as exc:
        _error(f"🔴 >>>> Erreur à la création de {label} : {exc}")
        return None


def run_grade_demo() -> None:
    """Promote a bureaucrat at the bottom grade, then try to demote another."""
    greg = _create_bureaucrat("greg", 150, "B1")
    if greg is not None:
        print(f"{greg}\n")
        try:
            greg.increment_grade()
            print(f"✅ Ok {greg}\n")
        except BureaucratGradeTooHighError as exc:
            _error(str(exc))
        print(f"{greg}\n")

    jean = _create_bureaucrat("jean", 150, "B2")
    if jean is not None:
        print(f"{jean}\n")
        try:
            jean.decrement_grade()
            print(f"✅ Ok {jean}\n")
        except BureaucratGradeTooLowError as exc:
            _error(str(exc))
        print(f"{jean}\n")


def run_form_demo() -> None:
    """Exercise grade limits and the signing of simple forms."""
    greg = _create_bureaucrat("greg", 1, "B1")
    if greg is not None:
        print(f"{greg}\n")
        try:
            greg.increment_grade()
            print(f"✅ Ok {greg}\n")
        except BureaucratGradeTooHighError as exc:
            _error(f"🔴 >>>> Erreur test B1.incrementGrade(); -> {exc}")

    jean = _create_bureaucrat("jean", 150, "B2")
    if jean is not None:
        print(f"{jean}\n")
        try:
            jean.decrement_grade()
            print(f"✅ Ok {jean}\n")
        except BureaucratGradeTooLowError as exc:
            _error(f"🔴 >>>> Erreur test B2.decrementGrade(); -> {exc}")

    print("\n----- TESTS DE LA CLASSE FORM -----\n\n")

    print("Test constructeur par défaut:")
    print(f"{Form()}\n")

    print("Test constructeur avec arguments:")
    holiday = Form("Demande de vacances", False, 50, 25)
    print(f"{holiday}\n")

    print("Test de signature avec un grade suffisant:")
    if greg is not None:
        print(f"{greg}\n")
        try:
            greg.sign_form(holiday)
            print("✅ Formulaire signé avec succès")
            print(f"{holiday}\n")
        except FormGradeTooLowError as exc:
            _error(f"🔴 >>>> Erreur test B1.signForm(F2); -> {exc}")

    print("Test de signature avec un grade insuffisant:")
    special = Form("Autorisation spéciale", False, 10, 5)
    try:
        pierre = Bureaucrat("Pierre", 20)
        pierre.sign_form(special)
        print("✅ Formulaire signé avec succès")
    except FormGradeTooLowError as exc:
        _error(f"🔴 >>>> Erreur test B3.signForm(F3); -> {exc}")

    print("\nTest avec grade invalide lors de la création:")
    try:
        print(f"{Form('Formulaire impossible', False, 0, 10)}\n")
    except FormGradeTooHighError as exc:
        _error(f"🔴 >>>> Erreur test Formulaire a 0 -> {exc}")
    try:
        print(f"{Form('Formulaire impossible', False, 151, 10)}\n")
    except FormGradeTooLowError as exc:
        _error(f"🔴 >>>> Erreur test Formulaire a 151 -> {exc}")

    print("Test du constructeur par copie:")
    print(f"{copy.copy(holiday)}\n")


def _sign_and_execute(form: AForm, bureaucrat: Bureaucrat, label: str) -> None:
    try:
        bureaucrat.sign_form(form)
    except FormGradeTooHighError as exc:
        _error(f"🔴 >>>> Erreur test signForm; -> {exc}")
    try:
        bureaucrat.execute_form(form)
    except (FormGradeTooHighError, FormNotSignedError) as exc:
        _error(f"🔴 >>>> Erreur test {label}->execute({bureaucrat.name}); -> {exc}")


def run_execution_demo() -> None:
    """Sign and execute one form of each actionable kind."""
    scenarios = (
        (ShrubberyCreationForm, "", "F", "jean"),
        (RobotomyRequestForm, " Robotomy", "F2", "guy"),
        (PresidentialPardonForm, " Presidential", "F3", "adrien"),
    )
    for form_class, kind, label, signer in scenarios:
        try:
            form = form_class("caca")
        except GradeError as exc:
            _error(f"🔴 >>>> Erreur à la création du formulaire{kind} : {exc}")
            continue
        _sign_and_execute(form, Bureaucrat(signer, 5), label)


def run_intern_demo() -> None:
    """Have an intern create each form, then sign and execute it."""
    intern = Intern()
    scenarios = (
        ("ShrubberyCreationForm", "azu", "F1", "jean"),
        ("PresidentialPardonForm", "aza", "F2", "guy"),
        ("RobotomyRequestForm", "Jean", "F3", "adrien"),
    )
    for position, (form_name, target, label, signer) in enumerate(scenarios):
        if position:
            print(f"{_SEPARATOR}\n")
        try:
            form = intern.make_form(form_name, target)
        except (ValueError, GradeError) as exc:
            _error(f"🔴 >>>> Erreur à la création du formulaire {label} : {exc}")
            continue
        _sign_and_execute(form, Bureaucrat(signer, 5), label)


_DEMOS: Dict[str, Callable[[], None]] = {
    "grade": run_grade_demo,
    "form": run_form_demo,
    "execution": run_execution_demo,
    "intern": run_intern_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demonstration, or all of them in turn."""
    parser = argparse.ArgumentParser(
        prog="bureaucracy", description="Run bureaucracy demonstrations."
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    demos = _DEMOS.values() if args.demo == "all" else (_DEMOS[args.demo],)
    for demo in demos:
        demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())