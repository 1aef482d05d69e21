"""
Course 数据访问层
负责所有与 Course 表相关的数据库操作

每个方法单独打开一个会话，执行完立即关闭，不做缓存。
返回的 Course 都带有查询时计算的 average_rating。
"""
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from models import Course, Review
from utils.validators import MIN_NUMBER, MAX_NUMBER
from .course_filter import CourseFilter
from .result import Result, ErrorKind


def _with_rating(course, rating):
    """把查询得到的评分附加到 Course 上（MySQL 的 AVG 返回 Decimal）"""
    course.average_rating = float(rating) if rating is not None else None
    return course


class CourseRepository:
    """Course 数据访问类"""

    def __init__(self, database):
        """
        初始化 Repository

        Args:
            database: Database 实例
        """
        self.database = database

    def _rated_query(self, session):
        """课程 LEFT JOIN 评价，按课程分组计算平均分"""
        return session.query(
            Course,
            func.avg(Review.rating).label('avg_rating')
        ).outerjoin(
            Review, Review.course_id == Course.id
        ).group_by(Course.id)

    def get_all(self):
        """
        获取所有课程（带平均评分）

        Returns:
            Course 对象列表，按 id 排序
        """
        try:
            with self.database.get_session() as session:
                rows = self._rated_query(session).order_by(Course.id).all()
                return [_with_rating(course, rating) for course, rating in rows]
        except SQLAlchemyError as e:
            print(f"✗ 获取课程列表失败: {e}")
            return []

    def search(self, subject=None, number=None, title=None):
        """
        按条件搜索课程，各条件之间为 AND；不传任何条件时等同于 get_all

        Args:
            subject: 学科代码（不区分大小写，完全匹配）
            number: 课程编号（完全匹配）
            title: 标题片段（不区分大小写，包含匹配）

        Returns:
            Course 对象列表，顺序不保证

        Raises:
            ValidationError: number 不是数字或超出 0-9999
        """
        course_filter = CourseFilter(subject, number, title)
        return self.search_by_filter(course_filter)

    def search_by_filter(self, course_filter):
        """按 CourseFilter 搜索课程"""
        if course_filter.is_empty():
            return self.get_all()
        try:
            with self.database.get_session() as session:
                query = course_filter.apply(self._rated_query(session))
                return [_with_rating(course, rating) for course, rating in query.all()]
        except SQLAlchemyError as e:
            print(f"✗ 搜索课程失败 {course_filter}: {e}")
            return []

    def create(self, subject, number, title):
        """
        新建课程，subject 统一转为大写

        Args:
            subject: 学科代码
            number: 4 位课程编号（int 或数字字符串）
            title: 课程标题

        Returns:
            Result: 成功时 value 为新建的 Course；重复时 error_kind 为 CONSTRAINT；
                    subject / number 无法解析时 error_kind 为 VALIDATION
        """
        try:
            subject = subject.upper()
            number = int(number)
        except (AttributeError, TypeError, ValueError):
            print(f"✗ 课程参数无效: subject={subject!r} number={number!r}")
            return Result.failure(ErrorKind.VALIDATION, "Invalid course subject or number.")
        if not MIN_NUMBER <= number <= MAX_NUMBER:
            return Result.failure(
                ErrorKind.VALIDATION,
                f"Course number must be between {MIN_NUMBER} and {MAX_NUMBER}."
            )

        course = Course(subject=subject, number=number, title=title)
        with self.database.get_session() as session:
            try:
                session.add(course)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                print(f"✗ 创建课程失败 {subject} {number} {title}: {e}")
                return Result.from_exception(
                    e, "Failed to add course. It may already exist."
                )
        course.average_rating = None
        return Result.success(course)

    def get_by_id(self, course_id):
        """
        根据 ID 获取课程（带平均评分）

        Returns:
            Course 对象或 None
        """
        try:
            with self.database.get_session() as session:
                row = self._rated_query(session).filter(Course.id == course_id).first()
                if row is None:
                    return None
                course, rating = row
                return _with_rating(course, rating)
        except SQLAlchemyError as e:
            print(f"✗ 获取课程失败 {course_id}: {e}")
            return None

    def get_reviewed_by_user(self, user_id):
        """
        获取某用户评价过的所有课程

        注意：这里的 average_rating 是该用户自己给的分数，不是全体平均分。

        Args:
            user_id: 用户 ID

        Returns:
            Course 对象列表，每条评价一行
        """
        try:
            with self.database.get_session() as session:
                rows = session.query(Course, Review.rating).join(
                    Review, Review.course_id == Course.id
                ).filter(
                    Review.user_id == user_id
                ).all()
                return [_with_rating(course, rating) for course, rating in rows]
        except SQLAlchemyError as e:
            print(f"✗ 获取用户评价课程失败 user={user_id}: {e}")
            return []

    def count(self):
        """
        获取课程总数

        Returns:
            int: 课程数量，查询失败时为 0
        """
        try:
            with self.database.get_session() as session:
                return session.query(Course).count()
        except SQLAlchemyError as e:
            print(f"✗ 统计课程数量失败: {e}")
            return 0

    def exists(self, course_id):
        """
        检查课程是否存在

        Returns:
            bool: 是否存在，查询失败时为 False
        """
        try:
            with self.database.get_session() as session:
                return session.get(Course, course_id) is not None
        except SQLAlchemyError as e:
            print(f"✗ 检查课程失败 {course_id}: {e}")
            return False

    def get_rating_statistics(self):
        """
        获取每门课程的评价数量和平均分

        Returns:
            list: [(course, review_count), ...] 按评价数量降序
        """
        try:
            with self.database.get_session() as session:
                results = session.query(
                    Course,
                    func.avg(Review.rating),
                    func.count(Review.id).label('review_count')
                ).outerjoin(
                    Review, Review.course_id == Course.id
                ).group_by(
                    Course.id
                ).order_by(
                    func.count(Review.id).desc(), Course.id
                ).all()

                return [(_with_rating(course, rating), count) for course, rating, count in results]
        except SQLAlchemyError as e:
            print(f"✗ 获取评分统计失败: {e}")
            return []
