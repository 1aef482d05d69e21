"""
业务逻辑层（Service）包
"""
from .session_state import SessionState
from .navigation import NavigationHistory, View, ViewDescriptor
from .auth_service import AuthService
from .course_service import CourseService
from .review_service import ReviewService
from .catalog_service import CourseCatalogService
from .integrity_service import DataIntegrityChecker
from .app_context import AppContext

__all__ = [
    'SessionState',
    'NavigationHistory',
    'View',
    'ViewDescriptor',
    'AuthService',
    'CourseService',
    'ReviewService',
    'CourseCatalogService',
    'DataIntegrityChecker',
    'AppContext',
]
