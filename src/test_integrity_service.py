from models import Course, Review
from services import DataIntegrityChecker


class TestDataIntegrityChecker:

    def test_clean_database(self, db, context, alice, data_structures):
        context.reviews.create(Review(user_id=alice.id, course_id=data_structures.id, rating=4))
        checker = DataIntegrityChecker(db)
        checker.run(verbose=False)
        assert not checker.has_issues
        assert checker.summary['reviews'] == 1
        assert checker.summary['reviewed_courses'] == 1

    def test_reports_out_of_range_ratings(self, db, context, alice, bob, data_structures):
        context.reviews.create(Review(user_id=alice.id, course_id=data_structures.id, rating=7))
        context.reviews.create(Review(user_id=bob.id, course_id=data_structures.id, rating=0))
        issues = DataIntegrityChecker(db).run(verbose=False)
        assert sorted(item[3] for item in issues['ratings_out_of_range']) == [0, 7]

    def test_reports_lowercase_subject(self, db):
        with db.get_session() as session:
            session.add(Course(subject="cs", number=2100, title="Written Directly"))
            session.commit()
        checker = DataIntegrityChecker(db)
        issues = checker.run()
        assert [subject for _, subject in issues['lowercase_subjects']] == ["cs"]
        assert checker.has_issues
