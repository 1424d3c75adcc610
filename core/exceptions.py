# core/exceptions.py

"""
Aviation Tools Exceptions
Validation errors raised by the calculators and coordinate parsers.
"""

from enum import Enum


class ErrorKind(Enum):
    NON_NUMERIC = "non_numeric"
    RANGE = "range"
    FORMAT = "format"
    EXTERNAL = "external"


class AviationToolError(Exception):
    """Base class for all calculator errors"""
    pass


class ValidationError(AviationToolError, ValueError):
    """Input rejected by a calculator; the message is shown to the user as-is"""
    def __init__(self, message, kind=ErrorKind.RANGE, field=None):
        self.kind = kind
        self.field = field
        super().__init__(message)

    @property
    def message(self):
        return self.args[0]


class NonNumericInputError(ValidationError):
    """A form field could not be read as a number"""
    def __init__(self, message="Please fill in all fields with valid numbers.", field=None):
        super().__init__(message, kind=ErrorKind.NON_NUMERIC, field=field)


class CoordinateFormatError(ValidationError):
    """A DM/DMS string did not match the expected grammar"""
    def __init__(self, message, field=None):
        super().__init__(message, kind=ErrorKind.FORMAT, field=field)


class MGRSConversionError(ValidationError):
    """The grid reference library rejected the input"""
    def __init__(self, message="Invalid MGRS coordinate. Please check the grid zone and digits."):
        super().__init__(message, kind=ErrorKind.EXTERNAL, field="mgrs")
