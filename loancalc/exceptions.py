"""Custom exceptions for the loan calculator."""


class LoanCalcError(Exception):
    """Base exception for all loan calculator errors."""
    
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self):
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvalidCategoryError(LoanCalcError):
    """Raised when a loan category is not one of the configured programs."""
    
    def __init__(self, category: str, known_categories=None):
        details = {'category': category}
        if known_categories:
            details['known_categories'] = list(known_categories)
        
        message = f"Unknown loan category '{category}'"
        super().__init__(message, details)


class InvalidRequestError(LoanCalcError):
    """Raised when numeric input violates a calculation precondition."""
    
    def __init__(self, field: str, value, reason: str):
        details = {
            'field': field,
            'value': value
        }
        message = f"Invalid {field}: {reason}"
        super().__init__(message, details)


class WizardStateError(LoanCalcError):
    """Raised when a wizard transition is attempted from the wrong step."""
    
    def __init__(self, action: str, current_step: str):
        details = {
            'action': action,
            'step': current_step
        }
        message = f"Cannot {action} while in step '{current_step}'"
        super().__init__(message, details)
