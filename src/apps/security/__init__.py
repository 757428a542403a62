"""
passguard 비밀번호 정책 앱
"""
