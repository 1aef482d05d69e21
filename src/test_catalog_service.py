import os
import textwrap
import pytest
from services import CourseCatalogService

SAMPLE_YAML = os.path.join(os.path.dirname(__file__), '..', 'data', 'courses', 'uva.yml')


def _write(tmp_path, content):
    path = tmp_path / "catalog.yml"
    path.write_text(textwrap.dedent(content), encoding='utf-8')
    return str(path)


class TestValidateYaml:

    def test_sample_file_is_valid(self):
        assert CourseCatalogService.validate_yaml(SAMPLE_YAML) == []

    def test_schema_errors_reported(self, tmp_path):
        path = _write(tmp_path, """
            courses:
              - subject: COMPSCI
                number: 2100
                title: Data Structures
              - subject: CS
                title: Missing Number
        """)
        errors = CourseCatalogService.validate_yaml(path)
        assert len(errors) == 2
        assert any("courses -> 0 -> subject" in e for e in errors)
        assert any("number" in e for e in errors)


class TestImportFromYaml:

    def test_import_and_reimport(self, context):
        service = CourseCatalogService(context.courses)
        stats = service.import_from_yaml(SAMPLE_YAML)
        assert stats['created'] == 7
        assert stats['failed'] == 0
        assert context.courses.search(subject="MATH")[0].subject == "MATH"

        again = service.import_from_yaml(SAMPLE_YAML)
        assert again['created'] == 0
        assert again['skipped'] == 7
        assert context.courses.count() == 7

    def test_string_and_integer_numbers(self, context, tmp_path):
        path = _write(tmp_path, """
            courses:
              - subject: ENGR
                number: "0101"
                title: Intro Engineering
              - subject: ENGR
                number: 1410
                title: Engineering Foundations
        """)
        stats = CourseCatalogService(context.courses).import_from_yaml(path)
        assert stats['created'] == 2
        assert {c.number for c in context.courses.search(subject="engr")} == {101, 1410}

    def test_invalid_file_raises(self, context, tmp_path):
        path = _write(tmp_path, """
            courses:
              - subject: C
                number: 2100
                title: Bad Subject
        """)
        with pytest.raises(ValueError):
            CourseCatalogService(context.courses).import_from_yaml(path)
        assert context.courses.count() == 0
