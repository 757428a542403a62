"""
passguard Django settings
관심사별로 분리된 설정 모듈 통합
"""

from .base import *
from .logging import *
from .password_policy import *
