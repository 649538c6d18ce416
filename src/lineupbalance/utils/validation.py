"""Validation utilities for Lineup Balance.

This module provides reusable validation functions with consistent error handling.
"""

import math
from numbers import Real
from typing import Any, Optional

from lineupbalance.exceptions import (
    NameValidationException,
    RatingValidationException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def validate_name(name: Optional[str]) -> ValidationResult:
    """Validate a player name.

    Args:
        name: Name to validate

    Returns:
        ValidationResult with the stripped name
    """
    if not isinstance(name, str) or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Player name is required",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_name_strict(name: Optional[str]) -> str:
    """Validate a name and raise exception if invalid.

    Raises:
        NameValidationException: If name is empty or not a string
    """
    result = validate_name(name)
    if not result.is_valid:
        raise NameValidationException(result.error_message)
    return result.sanitized_value


# ========== Rating Validation ==========


def validate_rating(rating: Any) -> ValidationResult:
    """Validate a skill rating.

    Ratings are real numbers; strings holding a number are accepted and
    converted. Booleans, NaN and infinities are rejected.

    Args:
        rating: Rating to validate

    Returns:
        ValidationResult with the rating as float

    Example:
        >>> validate_rating("1.5").sanitized_value
        1.5
    """
    if isinstance(rating, bool) or rating is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid rating: {rating!r}",
        )

    if isinstance(rating, str):
        try:
            value = float(rating.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"Rating must be a number: {rating!r}",
            )
    elif isinstance(rating, Real):
        value = float(rating)
    else:
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be a number: {rating!r}",
        )

    if not math.isfinite(value):
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating must be finite: {rating!r}",
        )

    return ValidationResult(is_valid=True, sanitized_value=value)


def validate_rating_strict(rating: Any) -> float:
    """Validate rating and raise exception if invalid.

    Raises:
        RatingValidationException: If rating is invalid
    """
    result = validate_rating(rating)
    if not result.is_valid:
        raise RatingValidationException(result.error_message)
    return result.sanitized_value
