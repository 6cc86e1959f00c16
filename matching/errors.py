# matching/errors.py
"""
Error types raised while grouping a people CSV.
Everything here is an InvalidDataFormat so callers can catch one class.
"""


class InvalidDataFormat(ValueError):
    pass


class ConfigurationError(InvalidDataFormat):
    """Unknown matching mode."""


class InputAccessError(InvalidDataFormat):
    """Input file missing or empty."""


class SchemaError(InvalidDataFormat):
    """Header lacks the name or match-key columns the mode needs."""


class RowShapeError(InvalidDataFormat):
    def __init__(self, line_number: int, actual: int, expected: int):
        self.line_number = line_number
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Row {line_number} has {actual} values but expected {expected} (matching headers)"
        )
