"""
Course 数据模型
使用 SQLAlchemy ORM 定义

average_rating 不是数据库列，由 CourseRepository 在查询时计算并附加。
"""
from sqlalchemy import Column, String, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from . import Base


class Course(Base):
    """课程表"""
    __tablename__ = 'courses'

    # 主键：自增整数
    id = Column(Integer, primary_key=True, autoincrement=True)

    # 基本信息
    subject = Column(String(4), nullable=False)   # "CS"，统一存大写
    number = Column(Integer, nullable=False)      # 2100
    title = Column(String(50), nullable=False)    # "Data Structures"

    # 关系：一对多 → Review
    reviews = relationship("Review", back_populates="course")

    # (subject, number, title) 唯一
    __table_args__ = (
        UniqueConstraint('subject', 'number', 'title', name='uq_course_subject_number_title'),
    )

    # 平均评分：没有评价时为 None
    average_rating = None

    @property
    def has_ratings(self):
        return self.average_rating is not None

    @property
    def formatted_average_rating(self):
        """
        格式化平均评分

        Returns:
            str: 没有评价时返回空字符串（界面显示"暂无评分"），否则保留两位小数
        """
        if self.average_rating is None:
            return ""
        return f"{self.average_rating:.2f}"

    def __repr__(self):
        return f"<Course {self.id}: {self.subject} {self.number}>"

    def __str__(self):
        return f"{self.subject} {self.number} - {self.title}"
