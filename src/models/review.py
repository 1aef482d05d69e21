"""
Review 数据模型
记录用户对课程的评价

唯一性说明：
  - 数据库层：(user_id, course_id) 唯一约束，每个用户对每门课最多一条评价
  - rating 范围 1-5 由 ReviewService 校验，数据库层不做 CHECK
"""
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from . import Base


class Review(Base):
    """课程评价表"""
    __tablename__ = 'reviews'

    # 主键：自增整数
    id = Column(Integer, primary_key=True, autoincrement=True)

    # 外键
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    course_id = Column(Integer, ForeignKey('courses.id'), nullable=False, index=True)

    # 评价内容
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)

    # 创建或最后修改时间
    timestamp = Column(DateTime, default=datetime.now, nullable=False)

    # 关系
    user = relationship("User", back_populates="reviews")
    course = relationship("Course", back_populates="reviews")

    __table_args__ = (
        UniqueConstraint('user_id', 'course_id', name='uq_review_user_course'),
    )

    def __repr__(self):
        return f"<Review {self.id}: user={self.user_id} course={self.course_id} rating={self.rating}>"

    def __str__(self):
        return f"Rating: {self.rating} ({self.timestamp})"
