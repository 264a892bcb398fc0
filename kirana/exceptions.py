from enum import Enum


class ErrorCode(str, Enum):
    """Failure kinds surfaced to the user."""

    # Entry validation, reported per field
    REQUIRED_FIELD = "RequiredField"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_CHOICE = "InvalidChoice"

    # Whole-file CSV decode
    INVALID_FORMAT = "InvalidFormat"
    MISSING_HEADERS = "MissingHeaders"


class CsvFormatError(ValueError):
    """Raised when a CSV file cannot be decoded at all. The catalog is left untouched."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message
