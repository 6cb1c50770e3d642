"""
exparse Utilities Package.

Error types, source locations, and diagnostics.
"""

from exparse.utils.diagnostics import (
    ERROR_DESCRIPTIONS,
    Diagnostic,
    DiagnosticLabel,
    DiagnosticLevel,
    ErrorCode,
    SourceSpan,
)
from exparse.utils.errors import (
    ExparseError,
    InitError,
    LexicalError,
    OutOfBounds,
    ParseError,
    SourceLocation,
    TrailingInput,
    UnexpectedToken,
    UnterminatedGroup,
)

__all__ = [
    # Errors
    "ExparseError",
    "InitError",
    "ParseError",
    "LexicalError",
    "UnexpectedToken",
    "UnterminatedGroup",
    "TrailingInput",
    "OutOfBounds",
    "SourceLocation",
    # Diagnostics
    "ErrorCode",
    "ERROR_DESCRIPTIONS",
    "DiagnosticLevel",
    "SourceSpan",
    "DiagnosticLabel",
    "Diagnostic",
]
