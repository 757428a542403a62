"""
Password validation package
비밀번호 검증 패키지
"""

from .policy import (
    DEFAULT_CONFIG,
    EvaluationResult,
    InvalidConfiguration,
    PasswordPolicyConfig,
    RuleKind,
    evaluate,
    is_valid,
)
from .checker import PasswordStrengthChecker
from .patterns import SPECIAL_CHARACTERS
from .validator import ComplexPasswordValidator, get_policy_config, get_violation_message

__all__ = [
    'DEFAULT_CONFIG',
    'EvaluationResult',
    'InvalidConfiguration',
    'PasswordPolicyConfig',
    'RuleKind',
    'evaluate',
    'is_valid',
    'PasswordStrengthChecker',
    'SPECIAL_CHARACTERS',
    'ComplexPasswordValidator',
    'get_policy_config',
    'get_violation_message',
]
