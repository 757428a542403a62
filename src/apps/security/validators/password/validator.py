"""
Password complexity validator
비밀번호 복잡성 검증기 (Django AUTH_PASSWORD_VALIDATORS 연동)
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.utils.translation import gettext as _

from .policy import (
    DEFAULT_MINIMUM_LENGTH,
    InvalidConfiguration,
    PasswordPolicyConfig,
    RuleKind,
    evaluate,
)

logger = logging.getLogger('apps.security')


def get_violation_message(kind, config):
    """RuleKind 별 사용자 메시지"""
    messages = {
        RuleKind.TOO_SHORT: _('Password must be at least %(min_length)d characters long.') % {
            'min_length': config.minimum_length,
        },
        RuleKind.MISSING_UPPERCASE: _('Password must contain at least one uppercase letter (A-Z).'),
        RuleKind.MISSING_LOWERCASE: _('Password must contain at least one lowercase letter (a-z).'),
        RuleKind.MISSING_DIGIT: _('Password must contain at least one number (0-9).'),
        RuleKind.MISSING_SPECIAL_CHAR: _('Password must contain at least one special character (%(chars)s).') % {
            'chars': ' '.join(config.special_characters),
        },
        RuleKind.SEQUENTIAL_OR_REPEATING_PATTERN: _(
            'Password must not contain three digits in a row or a letter repeated three times.'
        ),
    }
    return messages[kind]


def get_policy_config(min_length=None):
    """설정값으로부터 PasswordPolicyConfig 생성

    min_length 가 없으면 settings.PASSWORD_POLICY['MIN_LENGTH'] 를 사용한다.
    """
    if min_length is None:
        policy_settings = getattr(settings, 'PASSWORD_POLICY', {})
        min_length = policy_settings.get('MIN_LENGTH', DEFAULT_MINIMUM_LENGTH)
    # 환경변수에서 온 값은 문자열
    if isinstance(min_length, str):
        try:
            min_length = int(min_length)
        except ValueError as e:
            raise ImproperlyConfigured(
                f"Invalid password policy: MIN_LENGTH must be an integer, got {min_length!r}"
            ) from e
    try:
        return PasswordPolicyConfig(minimum_length=min_length)
    except InvalidConfiguration as e:
        raise ImproperlyConfigured(f"Invalid password policy: {e.message}") from e


class ComplexPasswordValidator:
    """고급 패스워드 복잡성 검증기"""

    def __init__(self, min_length=None):
        self.config = get_policy_config(min_length)

    @property
    def min_length(self):
        return self.config.minimum_length

    def validate(self, password, user=None):
        """패스워드 복잡성 검증"""
        result = evaluate(password, self.config)
        if result.passed:
            return

        logger.info(f"Password rejected by policy: {', '.join(result.codes)}")
        raise ValidationError([
            ValidationError(get_violation_message(kind, self.config), code=kind.value)
            for kind in result.violations
        ])

    def get_help_text(self):
        """도움말 텍스트"""
        return _(
            'Your password must be at least %(min_length)d characters long and contain '
            'an uppercase letter, a lowercase letter, a number and a special character. '
            'It must not contain three digits in a row or a letter repeated three times.'
        ) % {'min_length': self.min_length}
