"""
数据模型包
"""
from sqlalchemy.orm import declarative_base

# 创建 ORM 基类
Base = declarative_base()

# 导出所有模型
from .user import User
from .course import Course
from .review import Review

__all__ = [
    'Base',
    'User',
    'Course',
    'Review',
]
