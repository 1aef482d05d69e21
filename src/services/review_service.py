"""
Review 业务逻辑服务
提交、修改、删除评价都以当前登录用户为准，只能操作自己的评价
"""
from models import Review
from repositories import Result, ErrorKind
from utils import ValidationError, parse_rating


def _clean_comment(comment):
    """评论去掉首尾空白，空评论存为 None"""
    if comment is None:
        return None
    comment = comment.strip()
    return comment or None


class ReviewService:
    """评价业务逻辑类"""

    def __init__(self, review_repository, course_repository, session_state):
        """
        Args:
            review_repository: ReviewRepository 实例
            course_repository: CourseRepository 实例
            session_state: SessionState 实例
        """
        self.review_repository = review_repository
        self.course_repository = course_repository
        self.session_state = session_state

    def _login_failure(self):
        """未登录时返回失败结果，已登录时返回 None"""
        if not self.session_state.is_logged_in():
            return Result.failure(ErrorKind.NOT_LOGGED_IN, "Please log in first.")
        return None

    def course_reviews(self, course_id):
        """
        获取某门课程的所有评价

        Returns:
            Review 对象列表
        """
        return self.review_repository.get_by_course(course_id)

    def my_review(self, course_id):
        """
        当前用户对某门课程的评价

        Returns:
            Review 对象或 None（未登录或尚未评价）
        """
        if not self.session_state.is_logged_in():
            return None
        return self.review_repository.get_by_user_and_course(
            self.session_state.current_user_id, course_id
        )

    def submit_review(self, course_id, rating, comment=None):
        """
        提交新评价

        Returns:
            Result: 成功时 value 为 Review；已评价过时 error_kind 为 CONSTRAINT
        """
        failure = self._login_failure()
        if failure is not None:
            return failure
        try:
            rating = parse_rating(rating)
        except ValidationError as e:
            return Result.failure(ErrorKind.VALIDATION, str(e))

        if not self.course_repository.exists(course_id):
            return Result.failure(ErrorKind.NOT_FOUND, "Course does not exist.")

        review = Review(
            user_id=self.session_state.current_user_id,
            course_id=course_id,
            rating=rating,
            comment=_clean_comment(comment),
        )
        result = self.review_repository.create(review)
        if result:
            print(f"✓ 提交评价: user={review.user_id} course={course_id} rating={rating}")
        elif result.error_kind is ErrorKind.CONSTRAINT:
            result.message = "You have already reviewed this course."
        return result

    def edit_review(self, course_id, rating, comment=None):
        """
        修改当前用户对某门课程的评价

        Returns:
            Result: 成功时 value 为更新后的 Review；还没有评价时 error_kind 为 NOT_FOUND
        """
        failure = self._login_failure()
        if failure is not None:
            return failure
        try:
            rating = parse_rating(rating)
        except ValidationError as e:
            return Result.failure(ErrorKind.VALIDATION, str(e))

        review = self.my_review(course_id)
        if review is None:
            return Result.failure(ErrorKind.NOT_FOUND, "You have not reviewed this course yet.")

        review.rating = rating
        review.comment = _clean_comment(comment)
        result = self.review_repository.update(review)
        if result:
            print(f"✓ 修改评价: id={review.id} rating={rating}")
        return result

    def delete_review(self, course_id):
        """
        删除当前用户对某门课程的评价

        Returns:
            Result: 还没有评价时 error_kind 为 NOT_FOUND
        """
        failure = self._login_failure()
        if failure is not None:
            return failure

        review = self.my_review(course_id)
        if review is None:
            return Result.failure(ErrorKind.NOT_FOUND, "You have not reviewed this course yet.")

        result = self.review_repository.delete(review.id)
        if result:
            print(f"✓ 删除评价: id={review.id}")
        return result

    def delete_review_by_id(self, review_id):
        """
        按 ID 删除评价，只允许所有者删除

        Returns:
            Result: 不是所有者时 error_kind 为 FORBIDDEN
        """
        failure = self._login_failure()
        if failure is not None:
            return failure

        review = self.review_repository.get_by_id(review_id)
        if review is None:
            return Result.failure(ErrorKind.NOT_FOUND, "Review no longer exists.")
        if review.user_id != self.session_state.current_user_id:
            return Result.failure(ErrorKind.FORBIDDEN, "You can only delete your own reviews.")
        return self.review_repository.delete(review_id)
