"""Result pattern for fallible conversions of form input.

Turning a half-filled application draft into a ``LoanRequest`` can fail in
ordinary ways (blank date of birth, unknown category). Those outcomes are
returned as a ``Result`` instead of raised, so a front-end can show the
message next to the form on every keystroke.
"""
from dataclasses import dataclass
from typing import Optional, TypeVar, Generic

T = TypeVar('T')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Represents the outcome of an operation.
    
    Attributes:
        success: Whether the operation succeeded.
        value: The return value on success, None on failure.
        error: Error message on failure, None on success.
        error_type: Category of error, one of the ErrorType constants.
        
    Usage:
        result = draft.snapshot()
        if result:
            quote = engine.quote(result.value)
        else:
            show_error(result.error)
    """
    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    
    @classmethod
    def ok(cls, value: T = None) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, value=value)
    
    @classmethod
    def fail(cls, error: str, error_type: str = None) -> 'Result[T]':
        """Create a failure result.
        
        Args:
            error: Error message describing what went wrong.
            error_type: Optional error category for programmatic handling.
        """
        return cls(success=False, error=error, error_type=error_type)
    
    def __bool__(self) -> bool:
        return self.success
    
    def unwrap(self) -> T:
        """Get the value, raising an exception if the operation failed.
        
        Raises:
            ValueError: If the operation failed.
        """
        if not self.success:
            raise ValueError(f"Result unwrap failed: {self.error}")
        return self.value
    
    def unwrap_or(self, default: T) -> T:
        return self.value if self.success else default


class ErrorType:
    """Standard error type constants."""
    VALIDATION = "VALIDATION"
    UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"
    INVALID_DATE = "INVALID_DATE"
