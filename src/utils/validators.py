"""
输入校验工具函数

课程格式：
- subject: 2-4 个字母，如 "CS", "MATH"
- number:  4 位数字，如 "2100"
- title:   1-50 个字符

评价评分：1-5 的整数
密码：至少 8 个字符
"""
import re

SUBJECT_PATTERN = re.compile(r'^[A-Za-z]{2,4}$')
NUMBER_PATTERN = re.compile(r'^\d{4}$')
MIN_NUMBER = 0
MAX_NUMBER = 9999
TITLE_MAX_LENGTH = 50
MIN_RATING = 1
MAX_RATING = 5
MIN_PASSWORD_LENGTH = 8


class ValidationError(ValueError):
    """输入格式错误，直接报告给调用方，不重试"""


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_subject(subject) -> str:
    """
    校验并规范化学科代码

    Args:
        subject: 学科代码，如 "cs"

    Returns:
        str: 大写的学科代码

    Raises:
        ValidationError: 不是 2-4 个字母

    Examples:
        >>> parse_subject(" cs ")
        'CS'
    """
    subject = _clean(subject)
    if not SUBJECT_PATTERN.match(subject):
        raise ValidationError("Subject must be 2-4 letters.")
    return subject.upper()


def parse_course_number(number) -> int:
    """
    校验课程编号（新建课程用，必须正好 4 位数字）

    Examples:
        >>> parse_course_number("2100")
        2100
    """
    number = _clean(number)
    if not NUMBER_PATTERN.match(number):
        raise ValidationError("Course number must be exactly 4 digits.")
    return int(number)


def parse_number_filter(number):
    """
    解析搜索用的课程编号，空值表示不过滤

    课程编号最多 4 位，超出 0-9999 的值直接判为格式错误

    Returns:
        int 或 None

    Examples:
        >>> parse_number_filter("") is None
        True
        >>> parse_number_filter(" 3140 ")
        3140
    """
    if not isinstance(number, int):
        number = _clean(number)
        if not number:
            return None
        try:
            number = int(number)
        except ValueError:
            raise ValidationError("Course number must be numeric.")
    if not MIN_NUMBER <= number <= MAX_NUMBER:
        raise ValidationError(f"Course number must be between {MIN_NUMBER} and {MAX_NUMBER}.")
    return number


def parse_title(title) -> str:
    """校验课程标题，返回去掉首尾空白后的标题"""
    title = _clean(title)
    if not title or len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Title must be between 1 and {TITLE_MAX_LENGTH} characters.")
    return title


def parse_rating(rating) -> int:
    """
    校验评分

    Examples:
        >>> parse_rating("4")
        4
    """
    try:
        value = int(_clean(rating))
    except ValueError:
        raise ValidationError(f"Rating must be a whole number from {MIN_RATING} to {MAX_RATING}.")
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValidationError(f"Rating must be a whole number from {MIN_RATING} to {MAX_RATING}.")
    return value


def validate_course_input(subject, number, title) -> tuple:
    """
    校验新建课程的三个字段

    Returns:
        tuple: (subject, number, title)，已规范化
    """
    return parse_subject(subject), parse_course_number(number), parse_title(title)


def validate_login(username, password) -> tuple:
    """
    校验登录输入

    Returns:
        tuple: (username, password)，已去掉首尾空白
    """
    username = _clean(username)
    password = _clean(password)
    if not username or not password:
        raise ValidationError("Username and password are required.")
    return username, password


def validate_registration(username, password, confirm_password) -> tuple:
    """
    校验注册输入（用户名唯一性由调用方另行检查）

    Returns:
        tuple: (username, password)
    """
    username = _clean(username)
    password = _clean(password)
    confirm_password = _clean(confirm_password)

    if not username:
        raise ValidationError("Username is required.")
    if not password:
        raise ValidationError("Password is required.")
    if password != confirm_password:
        raise ValidationError("Passwords do not match.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    return username, password


def is_valid_course_input(subject, number, title) -> bool:
    """
    判断课程输入是否合法

    Examples:
        >>> is_valid_course_input("CS", "2100", "Data Structures")
        True
        >>> is_valid_course_input("C", "2100", "Data Structures")
        False
    """
    try:
        validate_course_input(subject, number, title)
        return True
    except ValidationError:
        return False
