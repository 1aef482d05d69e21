"""
当前会话状态
保存已登录的用户（最多一个），进程重启后不保留

单线程使用；多线程访问时需要调用方自行加锁。
"""


class SessionState:
    """会话状态"""

    def __init__(self):
        self._current_user = None

    def set_current(self, user):
        """登录成功后设置当前用户"""
        self._current_user = user

    def get_current(self):
        """
        Returns:
            User 对象或 None
        """
        return self._current_user

    def is_logged_in(self):
        return self._current_user is not None

    def clear(self):
        """退出登录"""
        self._current_user = None

    @property
    def current_user_id(self):
        if self._current_user is None:
            return None
        return self._current_user.id

    def __repr__(self):
        return f"<SessionState user={self._current_user!r}>"
