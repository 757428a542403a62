"""비밀번호 설정 Serializer 테스트"""

from django.test import override_settings

from apps.security.serializers import PasswordSetSerializer
from apps.security.validators.password import PasswordPolicyConfig


class TestPasswordSetSerializer:
    """PasswordSetSerializer 테스트"""

    def test_valid_payload(self):
        serializer = PasswordSetSerializer(data={
            'new_password': 'AnotherValid1@',
            'new_password_confirm': 'AnotherValid1@',
        })

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data['new_password'] == 'AnotherValid1@'

    def test_policy_violations_reported_per_rule(self):
        serializer = PasswordSetSerializer(data={
            'new_password': 'Abc123',
            'new_password_confirm': 'Abc123',
        })

        assert not serializer.is_valid()
        messages = [str(error) for error in serializer.errors['new_password']]
        assert len(messages) == 3
        assert 'at least 8 characters' in messages[0]
        assert 'special character' in messages[1]
        assert 'three digits in a row' in messages[2]

    def test_password_mismatch(self):
        serializer = PasswordSetSerializer(data={
            'new_password': 'AnotherValid1@',
            'new_password_confirm': 'AnotherValid2@',
        })

        assert not serializer.is_valid()
        assert 'non_field_errors' in serializer.errors

    def test_whitespace_is_not_trimmed(self):
        serializer = PasswordSetSerializer(data={
            'new_password': ' Valid1@x ',
            'new_password_confirm': ' Valid1@x ',
        })

        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data['new_password'] == ' Valid1@x '

    def test_policy_from_context(self):
        serializer = PasswordSetSerializer(
            data={'new_password': 'Valid1@ab', 'new_password_confirm': 'Valid1@ab'},
            context={'password_policy': PasswordPolicyConfig(minimum_length=10)},
        )

        assert not serializer.is_valid()
        assert 'at least 10 characters' in str(serializer.errors['new_password'][0])

    @override_settings(PASSWORD_POLICY={'MIN_LENGTH': 4})
    def test_policy_from_settings(self):
        serializer = PasswordSetSerializer(data={
            'new_password': 'Va1@',
            'new_password_confirm': 'Va1@',
        })

        assert serializer.is_valid(), serializer.errors
