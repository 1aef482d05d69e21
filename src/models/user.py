"""
User 数据模型
表示系统用户

注意：密码以原文保存并直接比较，不做哈希。
"""
from sqlalchemy import Column, String, Integer
from sqlalchemy.orm import relationship
from . import Base


class User(Base):
    """用户表"""
    __tablename__ = 'users'

    # 主键：自增整数（持久化前为 None）
    id = Column(Integer, primary_key=True, autoincrement=True)

    # 账号信息
    username = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)

    # 关系：一对多 → Review
    reviews = relationship("Review", back_populates="user")

    def __repr__(self):
        return f"<User {self.id}: {self.username}>"

    def __str__(self):
        return self.username
