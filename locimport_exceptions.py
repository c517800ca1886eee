# -*- coding: utf-8 -*-
"""
locimport Exceptions Module
Error and warning classes for the clipboard-to-Lua conversion.

Structural errors abort the import and are raised. Advisory warnings are
collected next to a successful result and never raised.
"""


class LocImportError(Exception):
    """
    Base exception class for all locimport errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Structural Errors (abort, no table, no output)
# =============================================================================

class StructuralError(LocImportError):
    """Base exception for input that cannot be turned into a table."""
    pass


class EmptyInputError(StructuralError):
    """Raised when the input text is empty or absent."""

    def __init__(self, message: str = "Clipboard is empty."):
        super().__init__(message)


class TooFewLinesError(StructuralError):
    """Raised when the input has fewer lines than a header plus one data row need."""

    def __init__(self, line_count: int, minimum: int):
        super().__init__(
            "Invalid localization data in clipboard.",
            details={'line_count': line_count, 'minimum': minimum},
        )
        self.line_count = line_count
        self.minimum = minimum


class MalformedRowError(StructuralError):
    """Raised when a row has no tab separated cells."""

    def __init__(self, message: str, line_number: int = None, line_content: str = None):
        super().__init__(message, details={'line_number': line_number, 'content': line_content})
        self.line_number = line_number
        self.line_content = line_content


class MissingHeaderRowError(StructuralError):
    """Raised when the first row already holds an identifier."""

    def __init__(self, first_value: str = None):
        super().__init__(
            "You must copy the entire sheet, including the headers.",
            details={'first_value': first_value},
        )
        self.first_value = first_value


class IdentifierColumnNotFoundError(StructuralError):
    """Raised when the first accepted column does not hold identifiers."""

    def __init__(self, found_value: str = None):
        super().__init__(
            "Could not find Text IDs (TIDs). It should be the first column.",
            details={'found': found_value},
        )
        self.found_value = found_value


# =============================================================================
# Model Errors
# =============================================================================

class InvalidTableError(LocImportError):
    """Raised when a LocalizationTable would break its invariants."""
    pass


# =============================================================================
# Advisory Warnings (recorded, processing continues)
# =============================================================================

class LocImportWarning(UserWarning):
    """
    Base class for advisory conditions.

    Instances are collected and forwarded to the log sink, not raised.
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        return self.message


class MismatchedColumnsWarning(LocImportWarning):
    """A row has a different number of cells than the first row."""

    def __init__(self, line_number: int, expected: int, found: int, line_content: str = ""):
        super().__init__(
            f"Mismatching columns. Expected {expected} columns, but found {found} in line {line_content}",
            details={'line_number': line_number, 'expected': expected, 'found': found},
        )
        self.line_number = line_number
        self.expected = expected
        self.found = found
        self.line_content = line_content


class DuplicateLanguageWarning(LocImportWarning):
    """A language column header appeared more than once; the later column is dropped."""

    def __init__(self, language: str, column: str = None):
        where = f" (column {column})" if column else ""
        super().__init__(
            f"Duplicate language column {language}{where}. Ignoring the second one.",
            details={'language': language, 'column': column},
        )
        self.language = language
        self.column = column


class BlankEntriesWarning(LocImportWarning):
    """A language has identifiers whose text is empty."""

    def __init__(self, language: str, count: int):
        super().__init__(
            f"Language {language} has {count} blank entries.",
            details={'language': language, 'count': count},
        )
        self.language = language
        self.count = count
