"""
Password policy patterns
비밀번호 정책 패턴
"""

import re
from functools import lru_cache

# 허용되는 특수문자 집합
SPECIAL_CHARACTERS = '!@#$%^&*()-_=+[]{};:\'",.<>/?|\\'

UPPERCASE_PATTERN = re.compile(r'[A-Z]')
LOWERCASE_PATTERN = re.compile(r'[a-z]')
# \d 는 유니코드 숫자까지 허용하므로 ASCII 범위로 제한
DIGIT_PATTERN = re.compile(r'[0-9]')

# 숫자 3개 연속 (단조 증가/감소 여부와 무관) 또는 같은 영문자 3회 이상 반복
SEQUENTIAL_OR_REPEATING_PATTERN = re.compile(r'[0-9]{3}|([A-Za-z])\1{2}')


@lru_cache(maxsize=32)
def special_character_pattern(characters):
    """주어진 특수문자 집합에 대한 문자 클래스 정규식"""
    return re.compile('[' + re.escape(characters) + ']')
