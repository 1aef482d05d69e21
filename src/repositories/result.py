"""
操作结果类型
所有写操作和面向界面的服务调用都返回 Result，而不是 None / bool
"""
from enum import Enum
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError


class ErrorKind(Enum):
    """失败类型"""
    VALIDATION = 'validation'        # 输入格式错误
    NOT_LOGGED_IN = 'not_logged_in'  # 需要登录
    INVALID_CREDENTIALS = 'invalid_credentials'  # 用户名或密码错误
    FORBIDDEN = 'forbidden'          # 不是所有者
    CONSTRAINT = 'constraint'        # 唯一约束 / 外键约束
    NOT_FOUND = 'not_found'          # 影响行数为 0 或实体不存在
    CONNECTION = 'connection'        # 连接失败
    STORE = 'store'                  # 其他数据库错误


class Result:
    """
    成功/失败结果

    Attributes:
        ok: 是否成功
        value: 成功时的返回值（实体、列表等）
        error_kind: 失败时的 ErrorKind
        message: 给用户看的提示信息
        rows_affected: 写操作影响的行数
    """

    def __init__(self, ok, value=None, error_kind=None, message="", rows_affected=0):
        self.ok = ok
        self.value = value
        self.error_kind = error_kind
        self.message = message
        self.rows_affected = rows_affected

    @classmethod
    def success(cls, value=None, rows_affected=1, message=""):
        return cls(True, value=value, rows_affected=rows_affected, message=message)

    @classmethod
    def failure(cls, error_kind, message, rows_affected=0):
        return cls(False, error_kind=error_kind, message=message, rows_affected=rows_affected)

    @classmethod
    def from_exception(cls, error, message):
        """
        把 SQLAlchemy 异常转换为失败结果

        Args:
            error: SQLAlchemyError
            message: 给用户看的提示信息

        Returns:
            Result: 失败结果
        """
        if isinstance(error, IntegrityError):
            kind = ErrorKind.CONSTRAINT
        elif isinstance(error, OperationalError):
            kind = ErrorKind.CONNECTION
        elif isinstance(error, SQLAlchemyError):
            kind = ErrorKind.STORE
        else:
            raise error
        return cls.failure(kind, message)

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return f"<Result ok value={self.value!r}>"
        return f"<Result failed {self.error_kind.value}: {self.message}>"
