"""
数据完整性检查
评分范围、外键引用等在写入时不一定被重新校验，这里统一检查
"""
from collections import defaultdict
from sqlalchemy import func
from models import User, Course, Review
from utils.validators import MIN_RATING, MAX_RATING


class DataIntegrityChecker:
    """数据完整性检查器"""

    def __init__(self, database):
        """
        Args:
            database: Database 实例
        """
        self.database = database

        # 问题记录
        self.issues = {
            'ratings_out_of_range': [],
            'orphan_reviews': [],
            'lowercase_subjects': [],
            'duplicate_reviews': [],
        }
        self.summary = {}

    def run(self, verbose=True):
        """
        运行完整性检查

        Returns:
            dict: 问题记录
        """
        with self.database.get_session() as session:
            self._check_ratings(session)
            self._check_references(session)
            self._check_subjects(session)
            self._check_duplicates(session)
            self._collect_summary(session)

        if verbose:
            self.print_report()
        return self.issues

    @property
    def has_issues(self):
        return any(self.issues.values())

    def _check_ratings(self, session):
        """评分必须在 1-5 之间"""
        rows = session.query(Review).filter(
            (Review.rating < MIN_RATING) | (Review.rating > MAX_RATING)
        ).order_by(Review.id).all()
        self.issues['ratings_out_of_range'] = [
            (review.id, review.user_id, review.course_id, review.rating) for review in rows
        ]

    def _check_references(self, session):
        """评价引用的用户和课程必须存在"""
        missing_user = session.query(Review.id, Review.user_id).outerjoin(
            User, User.id == Review.user_id
        ).filter(User.id.is_(None))

        missing_course = session.query(Review.id, Review.course_id).outerjoin(
            Course, Course.id == Review.course_id
        ).filter(Course.id.is_(None))

        orphans = []
        for review_id, user_id in missing_user:
            orphans.append((review_id, f"user {user_id}"))
        for review_id, course_id in missing_course:
            orphans.append((review_id, f"course {course_id}"))
        self.issues['orphan_reviews'] = sorted(orphans)

    def _check_subjects(self, session):
        """subject 应该以大写保存"""
        rows = session.query(Course).filter(
            Course.subject != func.upper(Course.subject)
        ).order_by(Course.id).all()
        self.issues['lowercase_subjects'] = [(course.id, course.subject) for course in rows]

    def _check_duplicates(self, session):
        """同一用户对同一课程只能有一条评价"""
        rows = session.query(
            Review.user_id, Review.course_id, func.count(Review.id)
        ).group_by(
            Review.user_id, Review.course_id
        ).having(func.count(Review.id) > 1).all()
        self.issues['duplicate_reviews'] = [tuple(row) for row in rows]

    def _collect_summary(self, session):
        counts = defaultdict(int)
        counts['users'] = session.query(User).count()
        counts['courses'] = session.query(Course).count()
        counts['reviews'] = session.query(Review).count()
        counts['reviewed_courses'] = session.query(
            func.count(func.distinct(Review.course_id))
        ).scalar() or 0
        self.summary = dict(counts)

    def print_report(self):
        """打印汇总报告"""
        print(f"\n{'='*70}")
        print(f"{'数据完整性检查报告':^70}")
        print(f"{'='*70}\n")

        print(f"用户: {self.summary.get('users', 0)}, "
              f"课程: {self.summary.get('courses', 0)}, "
              f"评价: {self.summary.get('reviews', 0)} "
              f"(涉及 {self.summary.get('reviewed_courses', 0)} 门课程)")
        print()

        titles = {
            'ratings_out_of_range': f"评分不在 {MIN_RATING}-{MAX_RATING} 之间",
            'orphan_reviews': "评价引用了不存在的用户或课程",
            'lowercase_subjects': "subject 不是大写",
            'duplicate_reviews': "同一用户对同一课程有多条评价",
        }
        for idx, (key, title) in enumerate(titles.items(), 1):
            items = self.issues[key]
            if not items:
                continue
            print(f"【问题 {idx}】{title} ({len(items)} 条)")
            print("-" * 70)
            for item in items[:10]:
                print(f"  • {item}")
            if len(items) > 10:
                print(f"  ... 还有 {len(items) - 10} 条")
            print()

        print("=" * 70)
        if self.has_issues:
            print(f"{'✗ 发现数据问题，请检查上述内容':^70}")
        else:
            print(f"{'✓ 数据完整，没有发现问题':^70}")
        print("=" * 70)
