"""비밀번호 정책 설정"""
import os

PASSWORD_POLICY = {
    # 유니코드 코드 포인트 기준 최소 길이
    # 문자열 값은 get_policy_config 에서 정수로 변환/검증
    'MIN_LENGTH': os.environ.get('PASSWORD_MIN_LENGTH', 8),
}
