import pytest
from utils import (
    ValidationError,
    parse_subject,
    parse_course_number,
    parse_number_filter,
    parse_title,
    parse_rating,
    validate_course_input,
    validate_login,
    validate_registration,
    is_valid_course_input,
)


class TestCourseInput:
    """Test subject / number / title rules."""

    @pytest.mark.parametrize("subject", ["CS", "cs", "Math", "APMA"])
    def test_valid_subjects_are_uppercased(self, subject):
        assert parse_subject(f"  {subject} ") == subject.upper()

    @pytest.mark.parametrize("subject", ["", "C", "ABCDE", "C5", "C S", None])
    def test_invalid_subjects(self, subject):
        with pytest.raises(ValidationError):
            parse_subject(subject)

    def test_number_must_be_four_digits(self):
        assert parse_course_number("2100") == 2100
        assert parse_course_number(" 0101 ") == 101
        for bad in ["210", "21000", "21a0", ""]:
            with pytest.raises(ValidationError):
                parse_course_number(bad)

    def test_title_length(self):
        assert parse_title("  Data Structures ") == "Data Structures"
        assert parse_title("x" * 50) == "x" * 50
        with pytest.raises(ValidationError):
            parse_title("   ")
        with pytest.raises(ValidationError):
            parse_title("x" * 51)

    def test_validate_course_input(self):
        assert validate_course_input("cs", "2100", "Data Structures") == ("CS", 2100, "Data Structures")
        assert is_valid_course_input("CS", "2100", "Data Structures")
        assert not is_valid_course_input("CS", "21", "Data Structures")

    def test_validation_error_is_value_error(self):
        assert issubclass(ValidationError, ValueError)


class TestSearchNumber:
    """Test number filter parsing for search."""

    def test_empty_means_no_filter(self):
        assert parse_number_filter("") is None
        assert parse_number_filter(None) is None
        assert parse_number_filter("   ") is None

    def test_numeric_values(self):
        assert parse_number_filter("3140") == 3140
        assert parse_number_filter(42) == 42

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError, match="numeric"):
            parse_number_filter("abc")

    @pytest.mark.parametrize("number", ["10000", "-1", 10000, "99999999999999999999999"])
    def test_out_of_range_rejected(self, number):
        with pytest.raises(ValidationError, match="between 0 and 9999"):
            parse_number_filter(number)


class TestRating:

    @pytest.mark.parametrize("rating", [1, 2, 3, 4, 5, "5"])
    def test_valid(self, rating):
        assert parse_rating(rating) == int(rating)

    @pytest.mark.parametrize("rating", [0, 6, -1, "", "four", None, 4.5])
    def test_invalid(self, rating):
        with pytest.raises(ValidationError):
            parse_rating(rating)


class TestCredentials:

    def test_login_requires_both_fields(self):
        assert validate_login(" alice ", " password123 ") == ("alice", "password123")
        with pytest.raises(ValidationError):
            validate_login("alice", "")
        with pytest.raises(ValidationError):
            validate_login("", "password123")

    def test_registration_rules_in_order(self):
        with pytest.raises(ValidationError, match="Username is required"):
            validate_registration("", "", "")
        with pytest.raises(ValidationError, match="Password is required"):
            validate_registration("alice", "", "")
        with pytest.raises(ValidationError, match="do not match"):
            validate_registration("alice", "short", "other")
        with pytest.raises(ValidationError, match="at least 8"):
            validate_registration("alice", "short", "short")
        assert validate_registration("alice", "password123", "password123") == ("alice", "password123")
