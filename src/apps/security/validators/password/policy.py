"""
Password policy evaluation
비밀번호 정책 평가

Django 에 의존하지 않는 순수 함수 계층. 호스트 프레임워크 연동은
validator.py / serializers.py / management command 에서 담당한다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .checker import PasswordStrengthChecker
from .patterns import SPECIAL_CHARACTERS

DEFAULT_MINIMUM_LENGTH = 8


class RuleKind(str, Enum):
    """Policy rules, declared in evaluation order."""

    TOO_SHORT = 'too_short'
    MISSING_UPPERCASE = 'missing_uppercase'
    MISSING_LOWERCASE = 'missing_lowercase'
    MISSING_DIGIT = 'missing_digit'
    MISSING_SPECIAL_CHAR = 'missing_special_char'
    SEQUENTIAL_OR_REPEATING_PATTERN = 'sequential_or_repeating_pattern'


class InvalidConfiguration(ValueError):
    """잘못된 정책 설정"""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        self.message = message
        self.field = field
        self.value = value
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'field': self.field,
            'value': self.value,
        }


@dataclass(frozen=True)
class PasswordPolicyConfig:
    """
    Immutable policy configuration.

    Validated once at construction so it can be reused across calls.
    """
    minimum_length: int = DEFAULT_MINIMUM_LENGTH
    special_characters: str = SPECIAL_CHARACTERS

    def __post_init__(self):
        # bool 은 int 의 하위 클래스이므로 별도로 거부
        if isinstance(self.minimum_length, bool) or not isinstance(self.minimum_length, int):
            raise InvalidConfiguration(
                f"minimum_length must be an integer, got {self.minimum_length!r}",
                field='minimum_length',
                value=self.minimum_length,
            )
        if self.minimum_length < 1:
            raise InvalidConfiguration(
                f"minimum_length must be at least 1, got {self.minimum_length}",
                field='minimum_length',
                value=self.minimum_length,
            )
        if not isinstance(self.special_characters, str) or not self.special_characters:
            raise InvalidConfiguration(
                "special_characters must be a non-empty string",
                field='special_characters',
                value=self.special_characters,
            )


DEFAULT_CONFIG = PasswordPolicyConfig()


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of one policy evaluation."""
    violations: Tuple[RuleKind, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.violations

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(kind.value for kind in self.violations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'passed': self.passed,
            'violations': list(self.codes),
        }


_checker = PasswordStrengthChecker()


def evaluate(password: str, config: Optional[PasswordPolicyConfig] = None) -> EvaluationResult:
    """
    Evaluate a password against the policy.

    Every check runs, so the result lists all failed rules in the order
    of RuleKind rather than only the first one.

    Args:
        password: Candidate password (any string, may be empty)
        config: Policy configuration, defaults to DEFAULT_CONFIG

    Returns:
        EvaluationResult with violations in check order

    Examples:
        >>> evaluate("AnotherValid1@").passed
        True
        >>> evaluate("Abc123").codes
        ('too_short', 'missing_special_char', 'sequential_or_repeating_pattern')
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be a str, got {type(password).__name__}")
    if config is None:
        config = DEFAULT_CONFIG

    checks = (
        (RuleKind.TOO_SHORT, _checker.is_too_short(password, config.minimum_length)),
        (RuleKind.MISSING_UPPERCASE, not _checker.has_uppercase(password)),
        (RuleKind.MISSING_LOWERCASE, not _checker.has_lowercase(password)),
        (RuleKind.MISSING_DIGIT, not _checker.has_digit(password)),
        (RuleKind.MISSING_SPECIAL_CHAR,
         not _checker.has_special_char(password, config.special_characters)),
        (RuleKind.SEQUENTIAL_OR_REPEATING_PATTERN,
         _checker.has_sequential_or_repeating_chars(password)),
    )
    return EvaluationResult(tuple(kind for kind, failed in checks if failed))


def is_valid(password: str, config: Optional[PasswordPolicyConfig] = None) -> bool:
    """단일 boolean 결과만 필요한 호출자를 위한 축약형"""
    return evaluate(password, config).passed
