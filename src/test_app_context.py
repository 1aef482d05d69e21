import pytest
from services import View, ViewDescriptor


class TestScenario:
    """Register, log in, add a course, then submit / edit / delete a review."""

    def test_full_review_lifecycle(self, context):
        context.start()

        assert context.auth.register("alice", "password123", "password123").ok
        assert not context.auth.register("alice", "other1234", "other1234").ok

        assert context.login("alice", "password123").ok
        assert context.current_user.username == "alice"
        assert context.current_view.view is View.HOME

        added = context.catalog.add_course("CS", "2100", "Data Structures")
        assert added.ok
        course_id = added.value.id

        assert context.review_service.submit_review(course_id, 4, "good").ok
        assert context.catalog.get_course(course_id).average_rating == pytest.approx(4.0)

        assert not context.review_service.submit_review(course_id, 5, "again").ok
        assert context.catalog.get_course(course_id).average_rating == pytest.approx(4.0)

        assert context.review_service.edit_review(course_id, 2, "good").ok
        assert context.catalog.get_course(course_id).average_rating == pytest.approx(2.0)

        assert context.review_service.delete_review(course_id).ok
        course = context.catalog.get_course(course_id)
        assert course.average_rating is None
        assert course.formatted_average_rating == ""


class TestContextNavigation:

    @pytest.fixture(autouse=True)
    def logged_in(self, context, alice):
        context.start()
        assert context.login("alice", "password123").ok

    def test_login_lands_on_home_with_empty_history(self, context):
        assert context.current_view == ViewDescriptor(View.HOME)
        assert context.history.depth == 0

    def test_open_course_and_back(self, context, data_structures):
        context.navigate(View.SEARCH)
        assert context.open_course(data_structures.id).ok
        context.navigate(View.MY_REVIEWS)

        descriptor, course = context.go_back()
        assert descriptor.view is View.COURSE_DETAIL
        assert course.id == data_structures.id

        descriptor, course = context.go_back()
        assert descriptor.view is View.SEARCH
        assert course is None

        descriptor, _ = context.go_back()
        assert descriptor.view is View.HOME

    def test_open_missing_course_keeps_view(self, context):
        result = context.open_course(999)
        assert not result.ok
        assert context.current_view.view is View.HOME

    def test_back_to_missing_course_goes_home(self, context):
        context.navigate(View.COURSE_DETAIL, 999)
        context.navigate(View.MY_REVIEWS)
        descriptor, course = context.go_back()
        assert descriptor.view is View.HOME
        assert course is None

    def test_logout_resets_history(self, context):
        context.navigate(View.BROWSE)
        context.logout()
        assert not context.session.is_logged_in()
        assert context.current_view.view is View.LOGIN
        assert context.history.depth == 0
        descriptor, _ = context.go_back()
        assert descriptor.view is View.HOME
