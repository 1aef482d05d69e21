"""
User 数据访问层
负责用户查询、注册和登录校验

注意：密码按原文保存并直接比较（不做哈希），这是已知的弱点，保持现有行为。
"""
from sqlalchemy.exc import SQLAlchemyError
from models import User
from .result import Result


class UserRepository:
    """User 数据访问类"""

    def __init__(self, database):
        """
        Args:
            database: Database 实例
        """
        self.database = database

    def get_by_username(self, username):
        """
        根据用户名获取用户（区分大小写，完全匹配）

        Returns:
            User 对象或 None
        """
        try:
            with self.database.get_session() as session:
                return session.query(User).filter(User.username == username).first()
        except SQLAlchemyError as e:
            print(f"✗ 获取用户失败 {username}: {e}")
            return None

    def get_by_id(self, user_id):
        """
        根据 ID 获取用户

        Returns:
            User 对象或 None
        """
        try:
            with self.database.get_session() as session:
                return session.get(User, user_id)
        except SQLAlchemyError as e:
            print(f"✗ 获取用户失败 id={user_id}: {e}")
            return None

    def create(self, username, password):
        """
        新建用户

        调用方应先检查用户名是否已存在，但以数据库唯一约束为准。

        Returns:
            Result: 成功时 value 为新建的 User
        """
        user = User(username=username, password=password)
        with self.database.get_session() as session:
            try:
                session.add(user)
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                print(f"✗ 创建用户失败 {username}: {e}")
                return Result.from_exception(e, "Failed to create account. Please try again.")
        return Result.success(user)

    def authenticate(self, username, password):
        """
        校验用户名和密码

        Returns:
            bool: 用户存在且密码完全一致
        """
        user = self.get_by_username(username)
        if user is None:
            return False
        return user.password == password
