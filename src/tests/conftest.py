"""Pytest 설정 파일

테스트 픽스처와 공통 설정
"""

import pytest
import os
import sys
from pathlib import Path

# Django 설정
sys.path.insert(0, str(Path(__file__).parent.parent))
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

import django
django.setup()

from apps.security.validators.password import PasswordPolicyConfig


@pytest.fixture
def default_policy():
    """기본 정책 (최소 8자)"""
    return PasswordPolicyConfig()


@pytest.fixture
def long_policy():
    """최소 10자 정책"""
    return PasswordPolicyConfig(minimum_length=10)
