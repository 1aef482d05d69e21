#!/usr/bin/env python3
"""
课程目录导入脚本
读取 data/courses/ 下的 YAML 文件，经 schema 校验后写入数据库，已存在的课程跳过

使用方法：
  python scripts/import_courses.py                 # 导入全部
  python scripts/import_courses.py uva             # 导入 data/courses/uva.yml
  python scripts/import_courses.py --check-only    # 只做 schema 校验，不连数据库
"""
import sys
import os
import argparse
import glob

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from database import Database
from repositories import CourseRepository
from services import CourseCatalogService

DATA_DIR = os.path.join(os.path.dirname(__file__), '..', 'data', 'courses')


def catalog_paths(names):
    """按名字解析目录文件；不给名字时返回全部 .yml"""
    if not names:
        return sorted(glob.glob(os.path.join(DATA_DIR, '*.yml')))
    return [os.path.join(DATA_DIR, f"{name.lower()}.yml") for name in names]


def main(argv=None):
    parser = argparse.ArgumentParser(description='从 YAML 导入课程目录')
    parser.add_argument('names', nargs='*', metavar='NAME', help='目录文件名（不含 .yml），默认全部')
    parser.add_argument('--check-only', action='store_true', help='只校验 schema，不写入数据库')
    args = parser.parse_args(argv)

    paths = catalog_paths(args.names)
    missing = [path for path in paths if not os.path.exists(path)]
    if missing or not paths:
        print(f"✗ 找不到目录文件: {missing or DATA_DIR}")
        return 1

    invalid = {path: CourseCatalogService.validate_yaml(path) for path in paths}
    invalid = {path: errors for path, errors in invalid.items() if errors}
    for path, errors in invalid.items():
        print(f"✗ {os.path.basename(path)}")
        print('\n'.join(errors))
    if invalid:
        return 1
    if args.check_only:
        print(f"✓ {len(paths)} 个文件校验通过")
        return 0

    db = Database()
    if not db.test_connection() or not db.create_tables():
        return 1

    service = CourseCatalogService(CourseRepository(db))
    results = [service.import_from_yaml(path) for path in paths]
    db.dispose()

    failed = sum(stats['failed'] for stats in results)
    print(f"共 {len(results)} 个文件，新建 {sum(s['created'] for s in results)}，"
          f"跳过 {sum(s['skipped'] for s in results)}，失败 {failed}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
