"""Unit tests for model loading."""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from writergen.model import (
    DescriptionLoadError,
    ListType,
    ModelError,
    Name,
    TypeKind,
    build_model,
    fetch_description,
    load_model,
    read_description,
    resolve_type,
)


class TestBuildModel:
    """Tests for build_model."""

    def test_types_and_members(self, vm_model) -> None:
        vm = vm_model.get_type(Name.parse("VirtualMachine"))
        disk = vm_model.get_type(Name.parse("Disk"))

        assert vm.kind == TypeKind.STRUCT
        assert [str(m.name) for m in vm.attributes()] == ["disks", "id", "name", "status"]
        assert [str(m.name) for m in vm.links()] == ["host"]

        disks = next(m for m in vm.members() if m.name == Name.of("disks"))
        assert isinstance(disks.type, ListType)
        assert disks.type.element_type is disk

    def test_enum_values(self, vm_model) -> None:
        status = vm_model.get_type(Name.parse("VmStatus"))
        assert status.kind == TypeKind.ENUM
        assert status.values == (Name.of("up"), Name.of("down"))

    def test_services(self, vm_model) -> None:
        assert [str(s.name) for s in vm_model.services()] == ["vms"]

    def test_cyclic_references(self) -> None:
        model = build_model(
            {
                "types": [
                    {"name": "Vm", "links": [{"name": "host", "type": "Host"}]},
                    {"name": "Host", "links": [{"name": "vms", "type": "Vm[]"}]},
                ]
            }
        )
        host = model.get_type(Name.of("host"))
        vm = model.get_type(Name.of("vm"))
        assert next(vm.links()).type is host
        assert next(host.links()).type.element_type is vm

    @pytest.mark.parametrize(
        "description",
        [
            [],
            {"types": {}},
            {"types": [{"kind": "struct"}]},
            {"types": [{"name": "Vm", "kind": "union"}]},
            {"types": [{"name": "Vm"}, {"name": "vm"}]},
            {"types": [{"name": "String"}]},
            {"types": [{"name": "Vm", "attributes": [{"name": "a", "type": "Missing"}]}]},
            {"types": [{"name": "Vm", "attributes": [{"name": "a"}]}]},
            {"types": [{"name": "_"}]},
            {"types": [{"name": "Vm", "attributes": [{"name": "-", "type": "String"}]}]},
            {"types": [{"name": "Vm", "links": [{"name": " _ ", "type": "String"}]}]},
            {"services": [{"name": "--"}]},
            {
                "types": [
                    {
                        "name": "Vm",
                        "attributes": [{"name": "a", "type": "String"}],
                        "links": [{"name": "a", "type": "String"}],
                    }
                ]
            },
        ],
    )
    def test_invalid_descriptions(self, description) -> None:
        with pytest.raises(ModelError):
            build_model(description)


class TestResolveType:
    def test_primitives(self, vm_model) -> None:
        assert resolve_type(vm_model, "Boolean") is vm_model.boolean_type
        assert resolve_type(vm_model, " decimal ") is vm_model.decimal_type

    def test_nested_lists(self, vm_model) -> None:
        resolved = resolve_type(vm_model, "Date[][]")
        assert resolved.element_type.element_type is vm_model.date_type


class TestLoadModel:
    """Tests for reading and fetching model descriptions."""

    URL = "https://example.com/model.json"

    def test_load_model_from_file(self, model_file) -> None:
        model = load_model(model_path=model_file)
        assert model.get_type(Name.parse("VirtualMachine")) is not None

    def test_read_description(self, model_file, vm_description) -> None:
        assert read_description(model_file) == vm_description

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            read_description(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DescriptionLoadError, match="Invalid JSON"):
            read_description(path)

    def test_load_error_is_model_error(self) -> None:
        assert issubclass(DescriptionLoadError, ModelError)

    def test_requires_exactly_one_source(self, model_file) -> None:
        with pytest.raises(DescriptionLoadError):
            load_model()
        with pytest.raises(DescriptionLoadError):
            load_model(model_path=model_file, url=self.URL)

    def test_non_http_url(self) -> None:
        with pytest.raises(DescriptionLoadError):
            fetch_description("ftp://example.com/model.json")

    def test_fetch_description(self, vm_description) -> None:
        response = MagicMock()
        response.json.return_value = vm_description
        with patch("writergen.model.loader.requests.get", return_value=response) as get:
            description = fetch_description(self.URL, timeout=5)

        get.assert_called_once_with(self.URL, timeout=5)
        assert description == vm_description

    def test_load_model_from_url(self, vm_description) -> None:
        response = MagicMock()
        response.json.return_value = vm_description
        with patch("writergen.model.loader.requests.get", return_value=response):
            model = load_model(url=self.URL)
        assert model.get_type(Name.parse("Disk")) is not None

    def test_fetch_timeout(self) -> None:
        with patch(
            "writergen.model.loader.requests.get",
            side_effect=requests.exceptions.Timeout(),
        ):
            with pytest.raises(DescriptionLoadError, match="Timeout"):
                fetch_description(self.URL)

    def test_fetch_http_error(self) -> None:
        response = MagicMock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("404")
        with patch("writergen.model.loader.requests.get", return_value=response):
            with pytest.raises(DescriptionLoadError):
                fetch_description(self.URL)

    def test_fetch_invalid_json(self) -> None:
        response = MagicMock()
        response.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
        with patch("writergen.model.loader.requests.get", return_value=response):
            with pytest.raises(DescriptionLoadError):
                fetch_description(self.URL)
