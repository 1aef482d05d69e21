"""
页面导航历史
用栈记录访问过的页面，实现"返回"功能

规则：
  - 进入登录页：清空整个栈（登录页永远是根）
  - 从登录页进入首页：清空栈；从其他页面进入首页：先把当前页压栈
  - 进入其他页面（搜索、浏览、课程详情、我的评价）：先把当前页压栈
  - 返回：弹出栈顶并回到该页面；栈为空或栈顶无效时回到首页
只有后退，没有前进。
"""
from collections import namedtuple
from enum import Enum


class View(Enum):
    """页面标识"""
    LOGIN = 'login'
    HOME = 'home'
    SEARCH = 'search'
    BROWSE = 'browse'
    COURSE_DETAIL = 'course_detail'
    MY_REVIEWS = 'my_reviews'


ViewDescriptor = namedtuple('ViewDescriptor', ['view', 'course_id'], defaults=(None,))
ViewDescriptor.__doc__ = "页面描述：页面标识 + 课程详情页对应的课程 ID"

HOME = ViewDescriptor(View.HOME)
LOGIN = ViewDescriptor(View.LOGIN)


def is_valid_descriptor(descriptor) -> bool:
    """
    判断页面描述是否完整可用

    Examples:
        >>> is_valid_descriptor(ViewDescriptor(View.SEARCH))
        True
        >>> is_valid_descriptor(ViewDescriptor(View.COURSE_DETAIL))
        False
    """
    if not isinstance(descriptor, ViewDescriptor) or not isinstance(descriptor.view, View):
        return False
    if descriptor.view is View.COURSE_DETAIL:
        return descriptor.course_id is not None
    return True


class NavigationHistory:
    """导航历史（后进先出）"""

    def __init__(self):
        self._stack = []
        self.current = None

    def navigate(self, descriptor) -> ViewDescriptor:
        """
        进入一个页面

        Args:
            descriptor: ViewDescriptor 或 View（非课程详情页可以直接传 View）

        Returns:
            ViewDescriptor: 进入后的当前页面

        Raises:
            ValueError: 课程详情页缺少 course_id
        """
        if isinstance(descriptor, View):
            descriptor = ViewDescriptor(descriptor)
        if not is_valid_descriptor(descriptor):
            raise ValueError(f"Invalid view descriptor: {descriptor!r}")

        if descriptor.view is View.LOGIN:
            self._stack.clear()
        elif descriptor.view is View.HOME and (
            self.current is None or self.current.view is View.LOGIN
        ):
            self._stack.clear()
        elif self.current is not None:
            self._stack.append(self.current)

        self.current = descriptor
        return descriptor

    def go_back(self) -> ViewDescriptor:
        """
        回到上一个页面，不会把当前页压栈

        Returns:
            ViewDescriptor: 回到的页面；栈为空或栈顶无效时为首页
        """
        if not self._stack:
            self.current = HOME
            return HOME

        previous = self._stack.pop()
        if not is_valid_descriptor(previous):
            print(f"⚠️ 历史记录无效，回到首页: {previous!r}")
            previous = HOME
        self.current = previous
        return previous

    def reset_to_home(self) -> ViewDescriptor:
        """直接回到首页（用于页面无法重建的情况），保留其余历史"""
        self.current = HOME
        return HOME

    def clear(self):
        self._stack.clear()
        self.current = None

    def peek(self):
        """
        Returns:
            栈顶的 ViewDescriptor，栈为空时为 None
        """
        return self._stack[-1] if self._stack else None

    @property
    def depth(self):
        return len(self._stack)

    def __len__(self):
        return len(self._stack)

    def __repr__(self):
        return f"<NavigationHistory current={self.current!r} depth={self.depth}>"
