"""
数据访问层（Repository）包
"""
from .result import Result, ErrorKind
from .course_filter import CourseFilter
from .user_repository import UserRepository
from .course_repository import CourseRepository
from .review_repository import ReviewRepository

__all__ = [
    'Result',
    'ErrorKind',
    'CourseFilter',
    'UserRepository',
    'CourseRepository',
    'ReviewRepository',
]
