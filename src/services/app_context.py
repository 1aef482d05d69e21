"""
应用上下文
由界面层创建并显式传递，持有数据库、各 Repository、会话状态、导航历史和业务服务
"""
from repositories import UserRepository, CourseRepository, ReviewRepository, Result, ErrorKind
from .session_state import SessionState
from .navigation import NavigationHistory, View, ViewDescriptor
from .auth_service import AuthService
from .course_service import CourseService
from .review_service import ReviewService


class AppContext:
    """应用上下文（一个进程一个活动会话）"""

    def __init__(self, database):
        """
        Args:
            database: Database 实例
        """
        self.database = database

        self.users = UserRepository(database)
        self.courses = CourseRepository(database)
        self.reviews = ReviewRepository(database)

        self.session = SessionState()
        self.history = NavigationHistory()

        self.auth = AuthService(self.users, self.session)
        self.catalog = CourseService(self.courses, self.session)
        self.review_service = ReviewService(self.reviews, self.courses, self.session)

    @property
    def current_user(self):
        return self.session.get_current()

    @property
    def current_view(self):
        return self.history.current

    def start(self):
        """进程启动：进入登录页"""
        return self.history.navigate(View.LOGIN)

    def login(self, username, password):
        """
        登录，成功后进入首页

        Returns:
            Result
        """
        result = self.auth.login(username, password)
        if result:
            self.history.navigate(View.HOME)
        return result

    def logout(self):
        """退出登录并回到登录页（清空导航历史）"""
        self.auth.logout()
        return self.history.navigate(View.LOGIN)

    def navigate(self, view, course_id=None):
        """
        进入一个页面

        Returns:
            ViewDescriptor: 当前页面
        """
        return self.history.navigate(ViewDescriptor(view, course_id))

    def open_course(self, course_id):
        """
        进入课程详情页

        Returns:
            Result: 成功时 value 为 Course；课程不存在时不切换页面
        """
        course = self.courses.get_by_id(course_id)
        if course is None:
            return Result.failure(ErrorKind.NOT_FOUND, "Course does not exist.")
        self.history.navigate(ViewDescriptor(View.COURSE_DETAIL, course.id))
        return Result.success(course, rows_affected=0)

    def go_back(self):
        """
        返回上一个页面

        课程详情页会重新加载课程；课程已不存在时回到首页。

        Returns:
            tuple: (ViewDescriptor, Course 或 None)
        """
        descriptor = self.history.go_back()
        if descriptor.view is not View.COURSE_DETAIL:
            return descriptor, None

        course = self.courses.get_by_id(descriptor.course_id)
        if course is None:
            print(f"⚠️ 课程 {descriptor.course_id} 不存在，回到首页")
            return self.history.reset_to_home(), None
        return descriptor, course
