# Clparser Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by clparser.

Parse-time failures and registration-time failures are kept apart: a command line
that breaks the declared rules raises `ParseError`, while a settings registry that
is declared incorrectly raises `SettingsError` at the moment of registration.

Exception Hierarchy:
- ClparserError
    ├── ParseError
    └── SettingsError (also a ValueError)
            └── ConstraintError

All exceptions inherit from `ClparserError`, the base exception for the package.
"""


class ClparserError(Exception):
    """Base exception for clparser."""


class ParseError(ClparserError):
    """
    Raised when a command line does not conform to the program settings.

    The message identifies exactly one root cause: the first rule found broken.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SettingsError(ClparserError, ValueError):
    """Raised when program settings, parameters or queries are given invalid input."""


class ConstraintError(SettingsError):
    """Raised when an option dependency or conflict cannot be registered."""
