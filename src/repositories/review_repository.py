"""
Review 数据访问层
负责评价的增删改查

(user_id, course_id) 的唯一性由数据库约束保证，重复提交返回失败结果。
rating 范围不在这里校验（由 ReviewService 负责）。
"""
from datetime import datetime
from sqlalchemy.exc import SQLAlchemyError
from models import Review
from .result import Result, ErrorKind


class ReviewRepository:
    """Review 数据访问类"""

    def __init__(self, database):
        """
        Args:
            database: Database 实例
        """
        self.database = database

    def get_by_course(self, course_id):
        """
        获取某门课程的所有评价

        Returns:
            Review 对象列表，顺序不保证
        """
        try:
            with self.database.get_session() as session:
                return session.query(Review).filter(Review.course_id == course_id).all()
        except SQLAlchemyError as e:
            print(f"✗ 获取课程评价失败 course={course_id}: {e}")
            return []

    def get_by_user_and_course(self, user_id, course_id):
        """
        获取某用户对某门课程的评价（最多一条）

        Returns:
            Review 对象或 None
        """
        try:
            with self.database.get_session() as session:
                return session.query(Review).filter(
                    Review.user_id == user_id,
                    Review.course_id == course_id
                ).first()
        except SQLAlchemyError as e:
            print(f"✗ 获取用户评价失败 user={user_id} course={course_id}: {e}")
            return None

    def get_by_user(self, user_id):
        """获取某用户的所有评价"""
        try:
            with self.database.get_session() as session:
                return session.query(Review).filter(Review.user_id == user_id).all()
        except SQLAlchemyError as e:
            print(f"✗ 获取用户评价失败 user={user_id}: {e}")
            return []

    def get_by_id(self, review_id):
        try:
            with self.database.get_session() as session:
                return session.get(Review, review_id)
        except SQLAlchemyError as e:
            print(f"✗ 获取评价失败 id={review_id}: {e}")
            return None

    def create(self, review):
        """
        保存新评价，timestamp 为空时使用当前时间

        Args:
            review: 未持久化的 Review 对象

        Returns:
            Result: 成功时 value 为 review（已分配 id）；
                    同一用户重复评价同一课程时 error_kind 为 CONSTRAINT，原评价不变
        """
        record = Review(
            user_id=review.user_id,
            course_id=review.course_id,
            rating=review.rating,
            comment=review.comment,
            timestamp=review.timestamp or datetime.now()
        )
        with self.database.get_session() as session:
            try:
                session.add(record)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                print(f"✗ 创建评价失败 user={review.user_id} course={review.course_id}: {e}")
                return Result.from_exception(e, "Could not create review. Please try again.")
        review.id = record.id
        review.timestamp = record.timestamp
        return Result.success(review)

    def update(self, review):
        """
        按 review.id 更新 rating、comment，并把 timestamp 设为当前时间

        Returns:
            Result: id 不存在时 error_kind 为 NOT_FOUND，rows_affected 为 0
        """
        timestamp = datetime.now()
        with self.database.get_session() as session:
            try:
                rows = session.query(Review).filter(Review.id == review.id).update(
                    {
                        Review.rating: review.rating,
                        Review.comment: review.comment,
                        Review.timestamp: timestamp,
                    },
                    synchronize_session=False
                )
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                print(f"✗ 更新评价失败 id={review.id}: {e}")
                return Result.from_exception(e, "Could not update review. Please try again.")

        if rows == 0:
            print(f"⚠️ 更新评价失败: id={review.id} 不存在")
            return Result.failure(ErrorKind.NOT_FOUND, "Review no longer exists.")
        review.timestamp = timestamp
        return Result.success(review, rows_affected=rows)

    def delete(self, review_id):
        """
        删除评价

        Returns:
            Result: id 不存在时 error_kind 为 NOT_FOUND，rows_affected 为 0
        """
        with self.database.get_session() as session:
            try:
                rows = session.query(Review).filter(Review.id == review_id).delete(
                    synchronize_session=False
                )
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                print(f"✗ 删除评价失败 id={review_id}: {e}")
                return Result.from_exception(e, "Could not delete review. Please try again.")

        if rows == 0:
            print(f"⚠️ 删除评价失败: id={review_id} 不存在")
            return Result.failure(ErrorKind.NOT_FOUND, "Review no longer exists.")
        return Result.success(rows_affected=rows)
