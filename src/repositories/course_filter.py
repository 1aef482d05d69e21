"""
课程搜索条件
把可选的 subject / number / title 过滤条件组合成一个查询（AND 关系）
"""
from sqlalchemy import and_, func
from models import Course
from utils import parse_number_filter


class CourseFilter:
    """
    课程过滤条件

    - subject: 不区分大小写，完全匹配
    - number:  完全匹配
    - title:   不区分大小写，包含匹配

    空字符串和 None 都表示不使用该条件。
    """

    def __init__(self, subject=None, number=None, title=None):
        """
        Args:
            subject: 学科代码，如 "cs"
            number: 课程编号，int 或数字字符串
            title: 标题片段

        Raises:
            ValidationError: number 不是数字或超出 0-9999
        """
        self.subject = (subject or "").strip() or None
        self.number = parse_number_filter(number)
        self.title = (title or "").strip() or None

    def is_empty(self):
        return self.subject is None and self.number is None and self.title is None

    def criteria(self):
        """
        生成 SQLAlchemy 条件表达式

        Returns:
            list: 条件列表，可能为空
        """
        conditions = []
        if self.subject is not None:
            conditions.append(func.upper(Course.subject) == self.subject.upper())
        if self.number is not None:
            conditions.append(Course.number == self.number)
        if self.title is not None:
            conditions.append(Course.title.icontains(self.title, autoescape=True))
        return conditions

    def apply(self, query):
        """把条件加到查询上；没有条件时原样返回"""
        conditions = self.criteria()
        if not conditions:
            return query
        return query.filter(and_(*conditions))

    def matches(self, course):
        """在内存中判断一门课程是否满足条件（与 criteria 语义一致）"""
        if self.subject is not None and course.subject.upper() != self.subject.upper():
            return False
        if self.number is not None and course.number != self.number:
            return False
        if self.title is not None and self.title.lower() not in course.title.lower():
            return False
        return True

    def __repr__(self):
        return f"<CourseFilter subject={self.subject!r} number={self.number!r} title={self.title!r}>"
