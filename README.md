# bureaucracy

A small model of an office where every action depends on rank.

## Concepts

### Bureaucrats (`bureaucracy.bureaucrat`)

A `Bureaucrat(name="Default", grade=150)` has a read-only `name` and a
`grade` from 1 (highest) to 150 (lowest).

- Creating one with a grade above 150 raises `BureaucratGradeTooLowError`;
  below 1 raises `BureaucratGradeTooHighError`.
- `increment_grade()` promotes by one step (the number goes down) and raises
  `BureaucratGradeTooHighError` at grade 1.
- `decrement_grade()` demotes by one step (the number goes up) and raises
  `BureaucratGradeTooLowError` at grade 150.
- `sign_form(form)` and `execute_form(form)` hand the bureaucrat to the form's
  `be_signed` and `execute` methods; any error from the form propagates.
- `str(bureaucrat)` gives `"<name>, bureaucrat grade <grade>."`.

All grade errors derive from `GradeError`.

### Forms (`bureaucracy.forms`)

`Form(name="Default", signed=False, sign_grade=150, execute_grade=150)` holds
the grade needed to sign it and the grade needed to execute it. Both grades
are checked with `check_grade(grade)`, which raises `FormGradeTooLowError`
above 150 and `FormGradeTooHighError` below 1.

- `be_signed(bureaucrat)` checks the bureaucrat's grade is in range, then
  marks the form signed if that grade is at least as good as `sign_grade`;
  otherwise it raises `FormGradeTooLowError`. A message is printed either way.
- `str(form)` shows the name, whether it is signed (`1` or `0`) and both
  required grades.

`AForm` is the abstract base for forms that carry out an action.
`execute(executor)` raises `FormNotSignedError` if the form is unsigned and
`FormGradeTooHighError` if the executor's grade is worse than
`execute_grade`; otherwise it prints who executed the form and performs the
action.

### Documents (`bureaucracy.documents`)

| Class | Sign | Execute | Action |
|---|---|---|---|
| `ShrubberyCreationForm(target="default", directory=None)` | 145 | 137 | writes an ASCII tree to `<directory>/<target>_shrubbery` (current directory by default; see `output_path`) |
| `RobotomyRequestForm(target=None, rng=None)` | 72 | 45 | prints drill noises, then that the target was or was not robotomized, with a 50% chance; pass `rng` (anything with `randrange(stop)`) to control the outcome |
| `PresidentialPardonForm(target=None)` | 25 | 5 | prints that the target has been pardoned by Zaphod Beeblebrox |

Each has a read-only `target`. Created without a target, the robotomy and
pardon forms are named `"default"` and aimed at `"default"`.

### Interns (`bureaucracy.intern`)

`Intern().make_form(form_name, target)` builds one of the documents above by
class name — `"PresidentialPardonForm"`, `"RobotomyRequestForm"` or
`"ShrubberyCreationForm"` (also listed in `Intern.FORM_NAMES`). Any other name
raises `ValueError`.

## Installation

```
pip install .
```

## Usage

```python
from bureaucracy.bureaucrat import Bureaucrat
from bureaucracy.intern import Intern

boss = Bureaucrat("jean", 5)
form = Intern().make_form("PresidentialPardonForm", "arthur")

boss.sign_form(form)
boss.execute_form(form)
print(boss)   # jean, bureaucrat grade 5.
```

Signing and executing print progress messages to standard output.

## Command line

The `bureaucracy` command runs demonstration scenarios:

```
bureaucracy [grade|form|execution|intern|all]
```

- `grade` — promoting and demoting bureaucrats at the edges of the range;
- `form` — creating plain forms and signing them with good and bad grades;
- `execution` — signing and executing one of each document (writes
  `caca_shrubbery` in the current directory);
- `intern` — having an intern produce each document, then signing and
  executing it (writes `azu_shrubbery` in the current directory);
- `all` (the default) — every scenario in turn.

Errors the scenarios provoke are reported on standard error.

## What it does not do

Everything lives in memory: bureaucrats and forms are not stored anywhere,
and the only file the package ever writes is the shrubbery tree.

## Tests

```
pip install .[test]
pytest
```