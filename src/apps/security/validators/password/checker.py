"""
Password strength checker utilities
비밀번호 강도 검사 유틸리티
"""

from .patterns import (
    SPECIAL_CHARACTERS,
    UPPERCASE_PATTERN,
    LOWERCASE_PATTERN,
    DIGIT_PATTERN,
    SEQUENTIAL_OR_REPEATING_PATTERN,
    special_character_pattern,
)


class PasswordStrengthChecker:
    """비밀번호 강도 검사기

    상태를 갖지 않으므로 여러 스레드에서 하나의 인스턴스를 공유해도 된다.
    """

    def is_too_short(self, password, minimum_length):
        """길이 확인 (유니코드 코드 포인트 기준)"""
        return len(password) < minimum_length

    def has_uppercase(self, password):
        return UPPERCASE_PATTERN.search(password) is not None

    def has_lowercase(self, password):
        return LOWERCASE_PATTERN.search(password) is not None

    def has_digit(self, password):
        return DIGIT_PATTERN.search(password) is not None

    def has_special_char(self, password, characters=SPECIAL_CHARACTERS):
        """특수문자 포함 여부"""
        return special_character_pattern(characters).search(password) is not None

    def has_sequential_or_repeating_chars(self, password):
        """연속 숫자 3자리 또는 3회 이상 반복되는 영문자 확인

        이름과 달리 '123' 같은 순차 여부는 보지 않는다. '135', '321' 도
        숫자 3개가 붙어 있으면 걸린다.
        """
        return SEQUENTIAL_OR_REPEATING_PATTERN.search(password) is not None
