"""passguard 보안 검증 시스템
"""

from .password import (
    ComplexPasswordValidator,
    EvaluationResult,
    InvalidConfiguration,
    PasswordPolicyConfig,
    RuleKind,
    evaluate,
    is_valid,
)

__all__ = [
    'ComplexPasswordValidator',
    'EvaluationResult',
    'InvalidConfiguration',
    'PasswordPolicyConfig',
    'RuleKind',
    'evaluate',
    'is_valid',
]

# 버전 정보
__version__ = '1.0.0'
__author__ = 'passguard Team'
