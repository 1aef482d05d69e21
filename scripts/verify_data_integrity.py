#!/usr/bin/env python3
"""
数据完整性检查脚本
检查评分范围、评价引用、subject 大小写和重复评价
"""
import sys
import os
import argparse

# 添加 src 目录到 Python 路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from database import Database
from services.integrity_service import DataIntegrityChecker


def parse_args():
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        description='检查课程评价数据库的完整性'
    )
    parser.add_argument(
        '--database-url',
        type=str,
        help='可选: SQLAlchemy 连接 URL，不指定则读取 .env 配置'
    )
    return parser.parse_args()


def main():
    """主函数"""
    args = parse_args()

    db = Database(args.database_url)
    if not db.test_connection():
        print("\n数据库连接失败，请检查 .env 配置")
        sys.exit(1)

    checker = DataIntegrityChecker(db)
    checker.run()
    db.dispose()

    if checker.has_issues:
        sys.exit(1)


if __name__ == "__main__":
    main()
