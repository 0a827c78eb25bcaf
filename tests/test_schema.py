# tests/test_schema.py

import json

import pytest
import yaml

from bigint_logical.enums import PhysicalKind
from bigint_logical.errors import InvalidConfiguration
from bigint_logical.schema import PhysicalSchema, find_schema_files, load_schema_document


class TestPhysicalSchema:
    def test_bare_type_name(self):
        assert PhysicalSchema.of("bytes") == PhysicalSchema(PhysicalKind.bytes)

    def test_fixed_node(self):
        schema = PhysicalSchema.of({"type": "fixed", "name": "Amount", "size": 3})

        assert schema.kind is PhysicalKind.fixed
        assert schema.fixed_size == 3
        assert schema.name == "Amount"
        assert str(schema) == "fixed(3)"

    def test_nested_type_is_unwrapped(self):
        schema = PhysicalSchema.of({"type": {"type": "fixed", "name": "Inner", "size": 2}, "logicalType": "bigint"})
        assert schema == PhysicalSchema(PhysicalKind.fixed, fixed_size=2, name="Inner")

    def test_union(self):
        assert PhysicalSchema.of(["null", "bytes"]).kind is PhysicalKind.union

    def test_descriptor_passes_through(self):
        schema = PhysicalSchema(PhysicalKind.string)
        assert PhysicalSchema.of(schema) is schema

    @pytest.mark.parametrize("size", [None, "3", True, 2.5])
    def test_fixed_needs_integer_size(self, size):
        node = {"type": "fixed", "name": "Bad"}
        if size is not None:
            node["size"] = size
        with pytest.raises(InvalidConfiguration, match="integer size"):
            PhysicalSchema.of(node)

    def test_unknown_type_name(self):
        with pytest.raises(InvalidConfiguration, match="Unknown schema type"):
            PhysicalSchema.of({"type": "com.example.Money"})

    @pytest.mark.parametrize("node", [5, None, {"name": "no-type"}])
    def test_not_a_schema(self, node):
        with pytest.raises(InvalidConfiguration, match="Not a schema node"):
            PhysicalSchema.of(node)

    def test_is_frozen(self):
        schema = PhysicalSchema(PhysicalKind.bytes)
        with pytest.raises(AttributeError):
            schema.kind = PhysicalKind.string


class TestLoading:
    def test_load_json_and_yaml(self, temp_dir):
        doc = {"type": "bytes", "logicalType": "bigint", "precision": 20}
        (temp_dir / "a.avsc").write_text(json.dumps(doc))
        (temp_dir / "b.yaml").write_text(yaml.dump(doc))

        assert load_schema_document(temp_dir / "a.avsc") == doc
        assert load_schema_document(temp_dir / "b.yaml") == doc

    def test_find_schema_files_filters_suffixes(self, temp_dir):
        (temp_dir / "nested").mkdir()
        for name in ("a.avsc", "b.json", "c.yaml", "nested/d.yml", "notes.txt", "e.py"):
            (temp_dir / name).write_text("{}")

        found = [p.relative_to(temp_dir).as_posix() for p in find_schema_files(temp_dir)]
        assert found == ["a.avsc", "b.json", "c.yaml", "nested/d.yml"]

    def test_find_schema_files_single_file(self, temp_dir):
        path = temp_dir / "only.avsc"
        path.write_text("{}")

        assert find_schema_files(path) == [path]
