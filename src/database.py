"""
数据库连接管理
"""
import os
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
from models import Base

# 加载 .env 文件中的环境变量
load_dotenv()

DEFAULT_SQLITE_PATH = 'course_reviews.db'


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite 默认不检查外键，每个新连接都要打开"""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """数据库连接管理类"""

    def __init__(self, database_url=None):
        """
        Args:
            database_url: 可选，SQLAlchemy 连接 URL；不传则从环境变量读取
        """
        self.engine = None
        self.Session = None
        self._init_engine(database_url)

    @staticmethod
    def url_from_env():
        """
        从环境变量构建连接 URL

        优先级：
        1. DATABASE_URL
        2. DB_HOST 等 MySQL 配置（mysql+pymysql）
        3. DB_PATH 指定的 SQLite 文件（默认 course_reviews.db）

        Returns:
            str: SQLAlchemy 连接 URL

        Raises:
            ValueError: MySQL 配置不完整
        """
        database_url = os.getenv('DATABASE_URL')
        if database_url:
            return database_url

        db_host = os.getenv('DB_HOST')
        if db_host:
            db_port = os.getenv('DB_PORT', '3306')
            db_name = os.getenv('DB_NAME')
            db_user = os.getenv('DB_USER')
            db_password = os.getenv('DB_PASSWORD')

            # 验证配置完整性
            if not all([db_name, db_user, db_password]):
                raise ValueError(
                    "数据库配置不完整！请检查 .env 文件是否包含所有必需的配置：\n"
                    "DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASSWORD"
                )
            return f"mysql+pymysql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"

        db_path = os.getenv('DB_PATH', DEFAULT_SQLITE_PATH)
        return f"sqlite:///{db_path}"

    def _init_engine(self, database_url):
        """初始化数据库引擎"""
        database_url = database_url or self.url_from_env()
        echo = os.getenv('DB_ECHO', '0') == '1'

        if database_url.startswith('sqlite'):
            self.engine = create_engine(database_url, echo=echo)
            event.listen(self.engine, 'connect', _enable_sqlite_foreign_keys)
        else:
            self.engine = create_engine(
                database_url,
                pool_pre_ping=True,      # 连接前先 ping，确保连接有效
                pool_recycle=3600,       # 1小时后回收连接
                echo=echo,
            )

        # 提交后不过期，Repository 返回的对象在会话关闭后仍可读取
        self.Session = sessionmaker(bind=self.engine, expire_on_commit=False)

    @property
    def dialect(self):
        return self.engine.dialect.name

    def test_connection(self):
        """测试数据库连接"""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                version = self.engine.dialect.server_version_info
                print("✓ 数据库连接成功！")
                print(f"数据库: {self.dialect} {'.'.join(str(v) for v in version or ())}")
                return True
        except Exception as e:
            print(f"✗ 数据库连接失败: {e}")
            return False

    def create_tables(self):
        """创建所有数据表（仅创建不存在的表，可重复调用）"""
        try:
            Base.metadata.create_all(self.engine)
            # 验证关键表是否存在
            existing_tables = inspect(self.engine).get_table_names()
            expected_tables = [t.name for t in Base.metadata.sorted_tables]
            missing = [t for t in expected_tables if t not in existing_tables]
            if missing:
                print(f"⚠️ 以下表未创建成功: {missing}")
                return False
            print(f"✓ 数据表创建/确认成功: {expected_tables}")
            return True
        except Exception as e:
            print(f"✗ 创建数据表失败: {e}")
            return False

    def reset_tables(self):
        """删除并重建所有数据表（危险操作！会清空所有数据）"""
        try:
            print("正在删除所有表...")
            Base.metadata.drop_all(self.engine)
            print("正在重建所有表...")
            Base.metadata.create_all(self.engine)
            print("✓ 数据表重建成功！")
            return True
        except Exception as e:
            print(f"✗ 重建数据表失败: {e}")
            return False

    def get_session(self):
        """获取数据库会话（调用方负责关闭，推荐 with 语句）"""
        return self.Session()

    def dispose(self):
        """释放连接池"""
        self.engine.dispose()
