"""
工具函数模块
"""
from .validators import (
    ValidationError,
    parse_subject,
    parse_course_number,
    parse_number_filter,
    parse_title,
    parse_rating,
    validate_course_input,
    validate_login,
    validate_registration,
    is_valid_course_input
)

__all__ = [
    'ValidationError',
    'parse_subject',
    'parse_course_number',
    'parse_number_filter',
    'parse_title',
    'parse_rating',
    'validate_course_input',
    'validate_login',
    'validate_registration',
    'is_valid_course_input'
]
