"""
pytest 公共 fixture：每个测试使用独立的 SQLite 文件数据库
"""
import pytest
from database import Database
from services import AppContext


@pytest.fixture
def db(tmp_path):
    """已建表的临时数据库"""
    database = Database(f"sqlite:///{tmp_path / 'course_reviews.db'}")
    assert database.create_tables()
    yield database
    database.dispose()


@pytest.fixture
def context(db):
    return AppContext(db)


@pytest.fixture
def alice(context):
    result = context.users.create("alice", "password123")
    assert result.ok
    return result.value


@pytest.fixture
def bob(context):
    result = context.users.create("bob", "hunter2hunter2")
    assert result.ok
    return result.value


@pytest.fixture
def data_structures(context):
    result = context.courses.create("CS", 2100, "Data Structures")
    assert result.ok
    return result.value
