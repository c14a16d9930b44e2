"""Shared pytest fixtures for writergen tests."""

import json

import pytest
from hypothesis import settings

from writergen.codegen.core.config import GeneratorConfig
from writergen.codegen.languages.ruby import RubyWritersGenerator, create_ruby_deriver
from writergen.model import SchemaNames, build_model

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


VM_DESCRIPTION = {
    "types": [
        {
            "name": "VirtualMachine",
            "kind": "struct",
            "attributes": [
                {"name": "id", "type": "String"},
                {"name": "name", "type": "String"},
                {"name": "disks", "type": "Disk[]"},
                {"name": "status", "type": "VmStatus"},
            ],
            "links": [{"name": "host", "type": "Host"}],
        },
        {
            "name": "Disk",
            "kind": "struct",
            "attributes": [
                {"name": "id", "type": "String"},
                {"name": "size", "type": "Integer"},
            ],
        },
        {
            "name": "Host",
            "kind": "struct",
            "attributes": [{"name": "name", "type": "String"}],
        },
        {"name": "VmStatus", "kind": "enum", "values": ["up", "down"]},
    ],
    "services": [{"name": "Vms"}],
}


@pytest.fixture
def vm_description() -> dict:
    """Provide a small VirtualMachine/Disk/Host model description."""
    return json.loads(json.dumps(VM_DESCRIPTION))


@pytest.fixture
def vm_model(vm_description):
    """Provide the model built from the sample description."""
    return build_model(vm_description)


@pytest.fixture
def config() -> GeneratorConfig:
    """Provide a configuration without header comments."""
    return GeneratorConfig(add_comments=False)


@pytest.fixture
def generator(config) -> RubyWritersGenerator:
    return RubyWritersGenerator(config)


@pytest.fixture
def deriver(config):
    return create_ruby_deriver(config)


@pytest.fixture
def schema_names() -> SchemaNames:
    return SchemaNames()


@pytest.fixture
def model_file(tmp_path, vm_description):
    """Write the sample description to a JSON file."""
    path = tmp_path / "model.json"
    path.write_text(json.dumps(vm_description), encoding="utf-8")
    return path
