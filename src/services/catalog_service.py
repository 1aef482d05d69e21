"""
课程目录导入服务
负责从 YAML 文件批量导入课程

YAML 格式：
  courses:
    - subject: CS
      number: 2100
      title: Data Structures and Algorithms 1
"""
import json
import os
import yaml
from jsonschema import Draft7Validator
from repositories import ErrorKind
from utils import ValidationError, validate_course_input


_SCHEMA_PATH = os.path.join(
    os.path.dirname(__file__),       # src/services/
    '..', '..', 'data', 'courses', 'schema.json'
)

_SCHEMA = None  # 延迟加载


def _load_schema():
    """加载 JSON Schema（只读一次，缓存在模块级别）"""
    path = os.path.normpath(_SCHEMA_PATH)
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


class CourseCatalogService:
    """课程目录导入服务"""

    @staticmethod
    def validate_yaml(yaml_path):
        """
        校验一个课程 YAML 文件是否符合 schema。

        Args:
            yaml_path: YAML 文件路径

        Returns:
            list[str]: 校验错误列表，空列表表示通过

        Raises:
            FileNotFoundError: YAML 或 schema 文件不存在
        """
        global _SCHEMA
        if _SCHEMA is None:
            _SCHEMA = _load_schema()

        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        validator = Draft7Validator(_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))

        messages = []
        for err in errors:
            path = ' -> '.join(str(p) for p in err.absolute_path) or '(root)'
            messages.append(f"  [{path}] {err.message}")

        return messages

    def __init__(self, course_repository):
        """
        Args:
            course_repository: CourseRepository 实例
        """
        self.course_repository = course_repository

    def import_from_yaml(self, yaml_path):
        """
        从 YAML 文件导入课程（可重复执行，已存在的课程跳过）

        流程：
        1. 校验 schema
        2. 逐门课程校验字段格式
        3. 写入数据库，唯一约束冲突计为跳过

        Args:
            yaml_path: YAML 文件路径

        Returns:
            dict: 统计信息

        Raises:
            ValueError: YAML 文件不符合 schema
        """
        errors = CourseCatalogService.validate_yaml(yaml_path)
        if errors:
            error_msg = '\n'.join(errors)
            raise ValueError(f"YAML 文件校验失败：{yaml_path}\n{error_msg}")

        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        courses = data.get('courses', [])

        print(f"\n{'='*60}")
        print(f"导入课程目录: {os.path.basename(yaml_path)}（{len(courses)} 门课程）")
        print(f"{'='*60}")

        stats = {
            'file': yaml_path,
            'created': 0,
            'skipped': 0,
            'failed': 0,
        }

        for idx, entry in enumerate(courses, 1):
            # number 在 YAML 里可能被写成整数，转回 4 位字符串再校验
            raw_number = entry.get('number')
            if isinstance(raw_number, int):
                raw_number = f"{raw_number:04d}"

            try:
                subject, number, title = validate_course_input(
                    entry.get('subject'), raw_number, entry.get('title')
                )
            except ValidationError as e:
                print(f"  [{idx}/{len(courses)}] ✗ 格式错误: {entry} - {e}")
                stats['failed'] += 1
                continue

            result = self.course_repository.create(subject, number, title)
            if result:
                stats['created'] += 1
                print(f"  [{idx}/{len(courses)}] ✓ {result.value}")
            elif result.error_kind is ErrorKind.CONSTRAINT:
                stats['skipped'] += 1
                print(f"  [{idx}/{len(courses)}] 已存在，跳过: {subject} {number} {title}")
            else:
                stats['failed'] += 1
                print(f"  [{idx}/{len(courses)}] ✗ 写入失败: {result.message}")

        print(f"\n{'='*60}")
        print("✓ 导入完成！")
        print(f"{'='*60}")
        print(f"  新建: {stats['created']}, 跳过: {stats['skipped']}, 失败: {stats['failed']}")
        print(f"{'='*60}\n")
        return stats
