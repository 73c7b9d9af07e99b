import json
import logging
from datetime import date
from pathlib import Path

import pytest

from json_schema_to_swift.pipeline.analyzer import (
    Header,
    ModelBuilder,
    ModelDef,
    PropertyDef,
    SkippedSchema,
    build_header,
)
from json_schema_to_swift.pipeline.config import GeneratorConfig, HeaderConfig

SCHEMAS = Path(__file__).parent / "test_data" / "schemas"


def load(name):
    with open(SCHEMAS / name) as f:
        return json.load(f)


class TestModelBuilder:
    """Model building from whole schemas"""

    def test_user_end_to_end(self):
        model = ModelBuilder(GeneratorConfig()).build("user", load("user.json"))

        assert model == ModelDef(
            model_name="User",
            properties=(
                PropertyDef(key="name", type_name="String", required=True),
                PropertyDef(key="age", type_name="Int", required=False),
            ),
            extends=(),
            has_super_class=False,
            is_struct=False,
            header=None,
        )

    def test_namespace_prefix(self):
        model = ModelBuilder(GeneratorConfig(namespace="My")).build("user", load("user.json"))
        assert model.model_name == "MyUser"

    def test_only_first_letter_is_capitalized(self):
        model = ModelBuilder(GeneratorConfig()).build("user_profile", load("user.json"))
        assert model.model_name == "User_profile"

    def test_struct_flag(self):
        model = ModelBuilder(GeneratorConfig(use_struct=True)).build("user", load("user.json"))
        assert model.is_struct

    def test_model_is_immutable(self):
        model = ModelBuilder(GeneratorConfig()).build("user", load("user.json"))
        with pytest.raises(AttributeError):
            model.model_name = "Other"


class TestSkips:
    """Schemas that do not describe a model are skipped, never raised"""

    def test_root_string_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            result = ModelBuilder(GeneratorConfig()).build("not_a_model", load("not_a_model.json"))

        assert isinstance(result, SkippedSchema)
        assert result.reason == "is not of type object"
        assert "SKIPPED" in caplog.text

    @pytest.mark.parametrize(
        "schema",
        [
            {"type": "object"},
            {"type": "object", "properties": None},
            {"type": "object", "properties": ["a", "b"]},
        ],
    )
    def test_missing_properties(self, schema):
        result = ModelBuilder(GeneratorConfig()).build("thing", schema)
        assert isinstance(result, SkippedSchema)
        assert result.reason == "missing properties"

    @pytest.mark.parametrize("schema", [None, [], "object", {"properties": {}}])
    def test_not_an_object_schema(self, schema):
        assert isinstance(ModelBuilder(GeneratorConfig()).build("thing", schema), SkippedSchema)

    def test_skip_label_uses_source_path(self):
        result = ModelBuilder(GeneratorConfig()).build("not_a_model", {"type": "string"}, "/tmp/not_a_model.json")
        assert result.path == "/tmp/not_a_model.json"


class TestExtends:
    """Superclass handling"""

    def test_extends_disabled_by_default(self):
        model = ModelBuilder(GeneratorConfig()).build("person", load("person.json"))
        assert model.extends == ()
        assert not model.has_super_class

    def test_extends_enabled(self):
        model = ModelBuilder(GeneratorConfig(enable_extends=True)).build("person", load("person.json"))
        assert model.extends == ("Base",)
        assert model.has_super_class

    def test_inherits_replace_super_class(self):
        config = GeneratorConfig(enable_extends=True, inherits=("A", "B"))
        model = ModelBuilder(config).build("person", load("person.json"))
        assert model.extends == ("A", "B")
        assert model.has_super_class

    def test_struct_with_inherits(self, caplog):
        config = GeneratorConfig(enable_extends=True, use_struct=True, inherits=("A", "B"))
        with caplog.at_level(logging.WARNING):
            model = ModelBuilder(config).build("person", load("person.json"))
        assert model.extends == ("Base",)
        assert "inheritance ignored with struct" in caplog.text

    def test_protocols_without_super_class(self):
        config = GeneratorConfig(protocols=("P1", "P2"))
        model = ModelBuilder(config).build("user", load("user.json"))
        assert model.extends == ("P1", "P2")
        assert not model.has_super_class

    def test_protocols_dropped_with_super_class(self):
        config = GeneratorConfig(enable_extends=True, protocols=("P1",))
        model = ModelBuilder(config).build("person", load("person.json"))
        assert model.extends == ("Base",)

    def test_unresolvable_extends_is_ignored(self, caplog):
        schema = {"type": "object", "extends": {"type": "null"}, "properties": {}}
        with caplog.at_level(logging.WARNING):
            model = ModelBuilder(GeneratorConfig(enable_extends=True)).build("thing", schema)
        assert model.extends == ()
        assert not model.has_super_class
        assert "extends ignored" in caplog.text


class TestPersonProperties:
    """Mixed property kinds"""

    def test_person_properties(self):
        model = ModelBuilder(GeneratorConfig(namespace="My")).build("person", load("person.json"))
        props = {p.key: p for p in model.properties}

        assert list(props) == [
            "name",
            "height",
            "active",
            "address",
            "previousAddresses",
            "nicknames",
            "extra",
            "middleName",
        ]
        assert props["height"].type_name == "Double"
        assert props["active"].type_name == "Bool"
        assert props["address"] == PropertyDef(key="address", type_name="MyAddress", is_reference=True, required=True)
        assert props["previousAddresses"].is_array and props["previousAddresses"].is_reference
        assert props["nicknames"] == PropertyDef(key="nicknames", type_name="String", is_array=True)
        assert props["extra"] == PropertyDef(key="extra", type_name="AnyObject", is_array=True)
        assert props["middleName"].type_name == "Any"
        assert props["middleName"].unresolved_reason is not None


class TestHeader:
    """Header metadata"""

    def test_placeholders(self):
        header = build_header(HeaderConfig(), date(2016, 3, 9))
        assert header == Header(project_name="<PROJECT>", author="<AUTHOR>", now="09/03/16", copyright="2016 <COMPANY>")

    def test_values(self):
        header = build_header(HeaderConfig(project="Proj", author="Me", company="Co"), date(2024, 12, 31))
        assert header == Header(project_name="Proj", author="Me", now="31/12/24", copyright="2024 Co")

    def test_header_only_when_enabled(self):
        builder = ModelBuilder(GeneratorConfig(header=HeaderConfig(author="Me")))
        assert builder.build("user", load("user.json")).header is None

        builder = ModelBuilder(GeneratorConfig(has_header=True, header=HeaderConfig(author="Me")))
        header = builder.build("user", load("user.json"), today=date(2020, 1, 2)).header
        assert header.author == "Me"
        assert header.now == "02/01/20"


if __name__ == "__main__":
    pytest.main([__file__])
