"""Bureaucrats, the forms they sign and execute, the intern who makes them, and a demo command."""

__version__ = "1.0.0"
__all__ = ["bureaucrat", "forms", "documents", "intern", "cli"]