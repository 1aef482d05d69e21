"""
登录 / 注册业务逻辑
"""
from repositories import Result, ErrorKind
from utils import ValidationError, validate_login, validate_registration


class AuthService:
    """登录注册服务"""

    def __init__(self, user_repository, session_state):
        """
        Args:
            user_repository: UserRepository 实例
            session_state: SessionState 实例
        """
        self.user_repository = user_repository
        self.session_state = session_state

    def register(self, username, password, confirm_password):
        """
        注册新用户

        校验顺序：用户名必填 → 密码必填 → 两次密码一致 → 密码至少 8 位 → 用户名未被占用

        Returns:
            Result: 成功时 value 为新建的 User
        """
        try:
            username, password = validate_registration(username, password, confirm_password)
        except ValidationError as e:
            return Result.failure(ErrorKind.VALIDATION, str(e))

        if self.user_repository.get_by_username(username) is not None:
            return Result.failure(ErrorKind.CONSTRAINT, "Username already exists.")

        result = self.user_repository.create(username, password)
        if result:
            print(f"✓ 注册成功: {username}")
            result.message = "Your account has been created successfully. Please log in."
        elif result.error_kind is ErrorKind.CONSTRAINT:
            # 预检查之后被别人抢先注册
            result.message = "Username already exists."
        return result

    def login(self, username, password):
        """
        登录，成功后把用户写入会话

        Returns:
            Result: 成功时 value 为 User
        """
        try:
            username, password = validate_login(username, password)
        except ValidationError as e:
            return Result.failure(ErrorKind.VALIDATION, str(e))

        if not self.user_repository.authenticate(username, password):
            return Result.failure(ErrorKind.INVALID_CREDENTIALS, "Invalid username or password.")

        user = self.user_repository.get_by_username(username)
        if user is None:
            return Result.failure(ErrorKind.INVALID_CREDENTIALS, "Invalid username or password.")

        self.session_state.set_current(user)
        print(f"✓ 登录成功: {username}")
        return Result.success(user, message=f"Welcome, {username}!")

    def logout(self):
        """退出登录"""
        user = self.session_state.get_current()
        self.session_state.clear()
        if user is not None:
            print(f"✓ 已退出登录: {user.username}")
