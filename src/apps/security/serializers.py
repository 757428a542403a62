"""
비밀번호 설정 Serializer
"""

from rest_framework import serializers

from .validators.password import evaluate, get_policy_config, get_violation_message


class PasswordSetSerializer(serializers.Serializer):
    """새 비밀번호 설정 Serializer

    context['password_policy'] 로 PasswordPolicyConfig 를 넘기면 해당 정책을,
    없으면 settings.PASSWORD_POLICY 를 사용한다.
    """

    new_password = serializers.CharField(write_only=True, trim_whitespace=False)
    new_password_confirm = serializers.CharField(write_only=True, trim_whitespace=False)

    def get_policy(self):
        policy = self.context.get('password_policy')
        if policy is None:
            policy = get_policy_config()
        return policy

    def validate_new_password(self, value):
        """새 비밀번호 정책 검증"""
        policy = self.get_policy()
        result = evaluate(value, policy)
        if not result.passed:
            raise serializers.ValidationError(
                [get_violation_message(kind, policy) for kind in result.violations]
            )
        return value

    def validate(self, attrs):
        """전체 데이터 검증"""
        if attrs['new_password'] != attrs['new_password_confirm']:
            raise serializers.ValidationError("The two password fields didn't match.")
        return attrs
