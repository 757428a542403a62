"""비밀번호 정책 점검 명령어"""
import json

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from apps.security.validators.password import (
    InvalidConfiguration,
    PasswordPolicyConfig,
    evaluate,
    get_policy_config,
    get_violation_message,
)


class Command(BaseCommand):
    help = 'Check a password against the password policy'

    def add_arguments(self, parser):
        parser.add_argument('password', help='Candidate password')
        parser.add_argument(
            '--min-length',
            type=int,
            default=None,
            help='Minimum length (defaults to PASSWORD_POLICY["MIN_LENGTH"])',
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Print the result as JSON',
        )

    def handle(self, *args, **options):
        policy = self.get_policy(options['min_length'])
        result = evaluate(options['password'], policy)

        if options['json']:
            self.stdout.write(json.dumps(result.to_dict()))
        elif result.passed:
            self.stdout.write(self.style.SUCCESS('✓ Password satisfies the policy'))
        else:
            for kind in result.violations:
                self.stdout.write(self.style.ERROR(
                    f"✗ {kind.value}: {get_violation_message(kind, policy)}"
                ))

        if not result.passed:
            raise CommandError(
                f"Password violates {len(result.violations)} policy rule(s)"
            )

    def get_policy(self, min_length):
        """명령행 옵션 또는 설정으로부터 정책 생성"""
        if min_length is None:
            try:
                return get_policy_config()
            except ImproperlyConfigured as e:
                raise CommandError(str(e)) from e
        try:
            return PasswordPolicyConfig(minimum_length=min_length)
        except InvalidConfiguration as e:
            raise CommandError(e.message) from e
