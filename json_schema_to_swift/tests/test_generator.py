"""
Batch generation over schema directories.
"""

import shutil
from pathlib import Path

import pytest

from json_schema_to_swift.pipeline import GeneratorConfig, HeaderConfig, OutputConfig, OutputMode, PipelineGenerator
from json_schema_to_swift.pipeline.analyzer import SkippedSchema
from json_schema_to_swift.pipeline.loader import discover_schema_files, load_schema_file
from json_schema_to_swift.pipeline.schema_ast import SchemaFile

SCHEMAS = Path(__file__).parent / "test_data" / "schemas"


class TestLoader:
    """Schema discovery and decoding"""

    def test_directory_lists_json_files_sorted(self):
        names = [p.name for p in discover_schema_files(SCHEMAS)]
        assert names == sorted(names)
        assert "README.txt" not in names
        assert "user.json" in names

    def test_single_file(self):
        assert discover_schema_files(SCHEMAS / "user.json") == [SCHEMAS / "user.json"]

    def test_load(self):
        schema_file = load_schema_file(SCHEMAS / "user.json")
        assert isinstance(schema_file, SchemaFile)
        assert schema_file.name == "user"
        assert schema_file.content["type"] == "object"

    def test_parse_error_is_a_skip(self):
        result = load_schema_file(SCHEMAS / "broken.json")
        assert isinstance(result, SkippedSchema)
        assert result.reason.startswith("parse error")

    def test_missing_file_is_a_skip(self, tmp_path):
        result = load_schema_file(tmp_path / "nope.json")
        assert isinstance(result, SkippedSchema)

    def test_undecodable_file_is_a_skip(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"type": "object", "properties": {"\xff": {}}}')
        result = load_schema_file(path)
        assert isinstance(result, SkippedSchema)
        assert result.reason.startswith("parse error")


class TestRun:
    """PipelineGenerator.run"""

    def test_directory(self, tmp_path):
        out = tmp_path / "output"
        report = PipelineGenerator(GeneratorConfig(namespace="My")).run(SCHEMAS, out)

        written = sorted(p.name for p in report.written)
        assert written == ["MyAddress.swift", "MyBase.swift", "MyPerson.swift", "MyUser.swift"]
        assert sorted(Path(s.path).name for s in report.skipped) == ["broken.json", "not_a_model.json"]

        code = (out / "MyUser.swift").read_text(encoding="utf-8")
        assert "class MyUser {" in code

    def test_no_temp_files_left(self, tmp_path):
        PipelineGenerator().run(SCHEMAS, tmp_path)
        assert not [p for p in tmp_path.iterdir() if p.name.endswith(".tmp")]

    def test_undecodable_file_does_not_stop_the_batch(self, tmp_path):
        source = tmp_path / "schemas"
        source.mkdir()
        (source / "a_bad.json").write_bytes(b'{"type": "object", "properties": {"\xff": {}}}')
        shutil.copy(SCHEMAS / "user.json", source / "user.json")

        report = PipelineGenerator().run(source, tmp_path / "out")

        assert report.written == [tmp_path / "out" / "User.swift"]
        assert [Path(s.path).name for s in report.skipped] == ["a_bad.json"]

    def test_braces_in_header_text(self, tmp_path):
        config = GeneratorConfig(has_header=True, header=HeaderConfig(project="Proj}", company="Acme {EU"))

        report = PipelineGenerator(config).run(SCHEMAS / "user.json", tmp_path)

        assert report.written == [tmp_path / "User.swift"]
        assert "Acme {EU" in (tmp_path / "User.swift").read_text(encoding="utf-8")

    def test_single_file(self, tmp_path):
        report = PipelineGenerator().run(SCHEMAS / "user.json", tmp_path)
        assert report.written == [tmp_path / "User.swift"]
        assert report.skipped == []

    def test_force_overwrites(self, tmp_path):
        (tmp_path / "User.swift").write_text("old")
        PipelineGenerator().run(SCHEMAS / "user.json", tmp_path)
        assert "class User" in (tmp_path / "User.swift").read_text(encoding="utf-8")

    def test_error_if_exists(self, tmp_path):
        (tmp_path / "User.swift").write_text("old")
        config = GeneratorConfig(output=OutputConfig(mode=OutputMode.ERROR_IF_EXISTS))

        report = PipelineGenerator(config).run(SCHEMAS, tmp_path)

        assert (tmp_path / "User.swift").read_text() == "old"
        assert tmp_path / "Person.swift" in report.written
        assert any("already exists" in s.reason for s in report.skipped)

    def test_deep_types_batch(self, tmp_path):
        source = tmp_path / "schemas"
        shutil.copytree(SCHEMAS, source)
        (source / "age.json").write_text('{"type": "integer"}')
        (source / "pet.json").write_text(
            '{"type": "object", "properties": {"age": {"$ref": "age.json"}, "owner": {"$ref": "user.json"}}}'
        )

        report = PipelineGenerator(GeneratorConfig(deep_types=True)).run(source, tmp_path / "out")

        code = (tmp_path / "out" / "Pet.swift").read_text(encoding="utf-8")
        assert "  var age: Int?\n" in code
        assert "  var owner: User?\n" in code
        assert any(Path(s.path).name == "age.json" for s in report.skipped)


if __name__ == "__main__":
    pytest.main([__file__])
