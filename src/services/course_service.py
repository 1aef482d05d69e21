"""
Course 业务逻辑服务
负责新建课程、搜索、浏览以及"我的评价"课程列表
"""
from repositories import Result, ErrorKind, CourseFilter
from utils import ValidationError, validate_course_input


def sort_by_title(courses):
    """按标题排序（不区分大小写）"""
    return sorted(courses, key=lambda course: course.title.lower())


class CourseService:
    """课程业务逻辑类"""

    def __init__(self, repository, session_state=None):
        """
        初始化服务

        Args:
            repository: CourseRepository 实例
            session_state: SessionState 实例，reviewed_courses 需要
        """
        self.repository = repository
        self.session_state = session_state

    def add_course(self, subject, number, title):
        """
        新建课程

        Args:
            subject: 2-4 个字母
            number: 4 位数字（字符串或整数）
            title: 1-50 个字符

        Returns:
            Result: 成功时 value 为新建的 Course；输入错误时 error_kind 为 VALIDATION
        """
        try:
            subject, number, title = validate_course_input(subject, number, title)
        except ValidationError as e:
            return Result.failure(ErrorKind.VALIDATION, str(e))

        result = self.repository.create(subject, number, title)
        if result:
            print(f"✓ 新建课程: {result.value}")
            result.message = "The course was added successfully."
        elif result.error_kind is ErrorKind.CONSTRAINT:
            result.message = f"Course {subject} {number} {title} already exists."
        return result

    def search_courses(self, subject=None, number=None, title=None):
        """
        搜索课程；所有条件都为空时返回全部课程

        Returns:
            Result: value 为 Course 列表；number 不是数字时 error_kind 为 VALIDATION
        """
        try:
            course_filter = CourseFilter(subject, number, title)
        except ValidationError as e:
            return Result.failure(ErrorKind.VALIDATION, str(e))

        courses = self.repository.search_by_filter(course_filter)
        return Result.success(courses, rows_affected=0)

    def browse_courses(self):
        """
        获取所有课程，按标题排序（不区分大小写）

        Returns:
            Course 对象列表
        """
        return sort_by_title(self.repository.get_all())

    def get_course(self, course_id):
        """
        Returns:
            Course 对象或 None
        """
        return self.repository.get_by_id(course_id)

    def reviewed_courses(self):
        """
        当前用户评价过的课程，average_rating 为用户自己给的分数

        Returns:
            Result: value 为 Course 列表；未登录时 error_kind 为 NOT_LOGGED_IN
        """
        if self.session_state is None or not self.session_state.is_logged_in():
            return Result.failure(ErrorKind.NOT_LOGGED_IN, "Please log in first.")
        courses = self.repository.get_reviewed_by_user(self.session_state.current_user_id)
        return Result.success(courses, rows_affected=0)
