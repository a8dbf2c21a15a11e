import copy

import pytest

from bureaucracy.bureaucrat import Bureaucrat, GradeError
from bureaucracy.forms import (
    AForm,
    Form,
    FormGradeTooHighError,
    FormGradeTooLowError,
    FormNotSignedError,
    check_grade,
)


class _Task(AForm):
    def __init__(self, sign_grade=10, execute_grade=5):
        super().__init__("Task", False, sign_grade, execute_grade)
        self.performed_by = []

    def _perform(self, executor):
        self.performed_by.append(executor)


def test_default_form():
    f = Form()
    assert f.name == "Default"
    assert f.signed is False
    assert (f.sign_grade, f.execute_grade) == (150, 150)


def test_form_with_arguments():
    f = Form("Demande de vacances", False, 50, 25)
    assert f.name == "Demande de vacances"
    assert (f.sign_grade, f.execute_grade) == (50, 25)
    assert f.signed is False


@pytest.mark.parametrize("grade", [1, 75, 150])
def test_check_grade_accepts_valid(grade):
    check_grade(grade)
    assert Form("ok", False, grade, grade).sign_grade == grade


def test_check_grade_rejects_out_of_range():
    with pytest.raises(FormGradeTooHighError):
        check_grade(0)
    with pytest.raises(FormGradeTooLowError):
        check_grade(151)


def test_form_grade_zero_too_high():
    with pytest.raises(FormGradeTooHighError):
        Form("Formulaire impossible", False, 0, 10)


def test_form_grade_151_too_low():
    with pytest.raises(FormGradeTooLowError):
        Form("Formulaire impossible", False, 151, 10)


def test_form_execute_grade_is_checked_too():
    with pytest.raises(FormGradeTooLowError):
        Form("x", False, 10, 151)


def test_form_errors_are_grade_errors():
    with pytest.raises(GradeError):
        Form("x", False, 0, 0)


def test_sign_with_sufficient_grade(capsys):
    f = Form("Demande de vacances", False, 50, 25)
    Bureaucrat("greg", 1).sign_form(f)
    assert f.signed is True
    assert "greg sign Demande de vacances." in capsys.readouterr().out


def test_sign_at_exact_grade():
    f = Form("edge", False, 20, 20)
    Bureaucrat("b", 20).sign_form(f)
    assert f.signed is True


def test_sign_with_insufficient_grade():
    f = Form("Autorisation spéciale", False, 10, 5)
    with pytest.raises(FormGradeTooLowError):
        Bureaucrat("Pierre", 20).sign_form(f)
    assert f.signed is False


def test_be_signed_rejects_bureaucrat_with_invalid_grade():
    b = Bureaucrat("x", 5)
    b.grade = 0
    with pytest.raises(FormGradeTooHighError):
        Form("f", False, 10, 10).be_signed(b)
    b.grade = 151
    with pytest.raises(FormGradeTooLowError):
        Form("f", False, 150, 150).be_signed(b)


def test_copy_preserves_fields():
    f = Form("Demande de vacances", False, 50, 25)
    g = copy.copy(f)
    assert (g.name, g.signed, g.sign_grade, g.execute_grade) == (
        f.name,
        f.signed,
        f.sign_grade,
        f.execute_grade,
    )


def test_str_format():
    f = Form("Demande de vacances", False, 50, 25)
    assert str(f) == (
        "> 📋 From => Name Demande de vacances, signed 0.\n"
        "Grade required for signing: 50\n"
        "Grade required for execution: 25"
    )


def test_str_shows_signed_as_one():
    f = Form("x", True, 3, 4)
    assert "signed 1." in str(f)


def test_error_messages():
    assert str(FormGradeTooHighError()) == "🚨 >>>> Grade too high"
    assert str(FormGradeTooLowError()) == "🚨 >>>> Grade too low"
    assert str(FormNotSignedError()) == "🚨 >>>> Form is not signed"


def test_aform_is_abstract():
    with pytest.raises(TypeError):
        AForm("x", False, 1, 1)


def test_execute_unsigned_raises():
    task = _Task()
    with pytest.raises(FormNotSignedError):
        Bureaucrat("jean", 1).execute_form(task)
    assert task.performed_by == []


def test_execute_with_insufficient_grade_raises():
    task = _Task(sign_grade=10, execute_grade=5)
    b = Bureaucrat("jean", 8)
    b.sign_form(task)
    with pytest.raises(FormGradeTooHighError):
        b.execute_form(task)
    assert task.performed_by == []


def test_execute_signed_performs_action(capsys):
    task = _Task()
    b = Bureaucrat("jean", 5)
    b.sign_form(task)
    b.execute_form(task)
    assert task.performed_by == [b]
    out = capsys.readouterr().out
    assert "🟢 >> jean sign Task." in out
    assert "🟢 >> jean executed Task" in out