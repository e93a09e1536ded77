"""
Input Validation Utilities

FLOW OVERVIEW
- validate_email(email)
  • RFC-like syntax checks; returns sanitized lowercased value.
- validate_password_hash(hash)
  • Enforce bcrypt hash shape ($2a/$2b/$2y, 60 characters).
- validate_password(password)
  • Non-empty and within bcrypt's 72-byte input limit.
- validate_name(name) / validate_title(title) / validate_description(description)
  • Trimmed, bounded text fields; name and title are required.
- sanitize_input(input, max_length)
  • Trim, bound length, normalize, and remove null bytes.
"""

import re
from typing import Optional
from dataclasses import dataclass


@dataclass
class ValidationResult:
    """Result of validation operation"""
    is_valid: bool
    error_message: Optional[str] = None
    sanitized_value: Optional[str] = None


class InputValidator:
    """Input validation for user-submitted form fields"""
    
    # RFC 5322 compliant email regex (simplified)
    EMAIL_PATTERN = re.compile(
        r'^[a-zA-Z0-9.!#$%&\'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$'
    )
    
    BCRYPT_HASH_PATTERN = re.compile(r'^\$2[aby]\$\d{2}\$[./A-Za-z0-9]{53}$')
    
    MAX_PASSWORD_BYTES = 72
    MAX_NAME_LENGTH = 100
    MAX_TITLE_LENGTH = 120
    MAX_DESCRIPTION_LENGTH = 1000
    
    @classmethod
    def validate_email(cls, email: str) -> ValidationResult:
        """
        Validate an email address
        
        Args:
            email: Email address to validate
            
        Returns:
            ValidationResult with validation status and sanitized value
        """
        if not email or not isinstance(email, str):
            return ValidationResult(False, "Email is required")
        
        email = email.strip()
        if email == "":
            return ValidationResult(False, "Email is required")
        
        # RFC 5321 limits
        if len(email) > 254:
            return ValidationResult(False, "Email address too long (max 254 characters)")
        
        if not cls.EMAIL_PATTERN.match(email):
            return ValidationResult(False, "Invalid email format")
        
        local_part, domain = email.split('@')
        if len(local_part) > 64:
            return ValidationResult(False, "Email local part too long (max 64 characters)")
        
        if local_part.startswith('.') or local_part.endswith('.') or '..' in local_part:
            return ValidationResult(False, "Invalid email format")
        
        return ValidationResult(True, sanitized_value=email.lower())
    
    @classmethod
    def validate_password_hash(cls, password_hash: str) -> ValidationResult:
        """Validate that a stored password is a bcrypt hash, never plaintext"""
        if not password_hash or not isinstance(password_hash, str):
            return ValidationResult(False, "Password hash must be a non-empty string")
        
        password_hash = password_hash.strip()
        if not cls.BCRYPT_HASH_PATTERN.match(password_hash):
            return ValidationResult(False, "Invalid password hash format: expected a bcrypt hash")
        
        return ValidationResult(True, sanitized_value=password_hash)
    
    @classmethod
    def validate_password(cls, password: str) -> ValidationResult:
        if not password or not isinstance(password, str):
            return ValidationResult(False, "Password is required")
        
        if len(password.encode('utf-8')) > cls.MAX_PASSWORD_BYTES:
            return ValidationResult(False, f"Password too long (max {cls.MAX_PASSWORD_BYTES} bytes)")
        
        return ValidationResult(True, sanitized_value=password)
    
    @classmethod
    def validate_name(cls, name: str) -> ValidationResult:
        return cls._validate_required_text(name, 'Name', cls.MAX_NAME_LENGTH)
    
    @classmethod
    def validate_title(cls, title: str) -> ValidationResult:
        return cls._validate_required_text(title, 'Title', cls.MAX_TITLE_LENGTH)
    
    @classmethod
    def validate_description(cls, description: str) -> ValidationResult:
        """Optional free text; rejected rather than truncated when too long"""
        description = cls.sanitize_input(description, max_length=cls.MAX_DESCRIPTION_LENGTH + 1)
        if len(description) > cls.MAX_DESCRIPTION_LENGTH:
            return ValidationResult(False, f"Description too long (max {cls.MAX_DESCRIPTION_LENGTH} characters)")
        return ValidationResult(True, sanitized_value=description)
    
    @classmethod
    def sanitize_input(cls, input_string: str, max_length: int = MAX_DESCRIPTION_LENGTH) -> str:
        """
        Sanitize free-text user input
        
        Args:
            input_string: Input string to sanitize
            max_length: Maximum allowed length
            
        Returns:
            Sanitized string
        """
        if not input_string:
            return ""
        
        sanitized = str(input_string).strip()
        
        if len(sanitized) > max_length:
            sanitized = sanitized[:max_length]
        
        sanitized = sanitized.replace('\x00', '')
        
        # Normalize line endings
        sanitized = sanitized.replace('\r\n', '\n').replace('\r', '\n')
        
        return sanitized
    
    @classmethod
    def _validate_required_text(cls, value, label, max_length):
        if not value or not isinstance(value, str):
            return ValidationResult(False, f"{label} is required")
        
        value = cls.sanitize_input(value, max_length=max_length + 1)
        if value == "":
            return ValidationResult(False, f"{label} is required")
        
        if len(value) > max_length:
            return ValidationResult(False, f"{label} too long (max {max_length} characters)")
        
        return ValidationResult(True, sanitized_value=value)


# Convenience functions for common validations
def validate_email(email: str) -> ValidationResult:
    """Validate email address"""
    return InputValidator.validate_email(email)


def validate_password_hash(password_hash: str) -> ValidationResult:
    """Validate password hash"""
    return InputValidator.validate_password_hash(password_hash)


def validate_password(password: str) -> ValidationResult:
    """Validate a submitted password"""
    return InputValidator.validate_password(password)


def validate_name(name: str) -> ValidationResult:
    return InputValidator.validate_name(name)


def validate_title(title: str) -> ValidationResult:
    return InputValidator.validate_title(title)


def validate_description(description: str) -> ValidationResult:
    return InputValidator.validate_description(description)


def sanitize_input(input_string: str, max_length: int = InputValidator.MAX_DESCRIPTION_LENGTH) -> str:
    """Sanitize user input"""
    return InputValidator.sanitize_input(input_string, max_length)
