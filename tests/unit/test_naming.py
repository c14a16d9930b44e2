"""Unit tests for name derivation."""

import pytest

from writergen.codegen.core.config import GeneratorConfig, ModuleConfig
from writergen.codegen.core.naming import NameDeriver, NamingCase, NamingError, QualifiedName
from writergen.codegen.languages.ruby import RUBY_RESERVED_WORDS, create_ruby_deriver
from writergen.model import EnumType, Name, Service, StructType


class TestModuleConfig:
    def test_path_from_name(self) -> None:
        module = ModuleConfig.from_name("Ovirt::SDK::V4")
        assert module.module_path == "ovirt/sdk/v4"
        assert module.segments == ["Ovirt", "SDK", "V4"]


class TestBuildName:
    """Tests for NameDeriver.build_name."""

    def test_suffix_and_directory(self, deriver) -> None:
        name = deriver.build_name(
            Name.parse("VirtualMachine"), Name.parse("Writer"), Name.parse("Writers")
        )
        assert name == QualifiedName(
            class_name="VirtualMachineWriter",
            module_name="Ovirt::SDK::V4",
            file_name="ovirt/sdk/v4/writers/virtual_machine_writer",
        )
        assert str(name) == "Ovirt::SDK::V4::VirtualMachineWriter"

    def test_without_suffix_or_directory(self, deriver) -> None:
        name = deriver.build_name(Name.parse("Disk"))
        assert name.class_name == "Disk"
        assert name.file_name == "ovirt/sdk/v4/disk"

    def test_empty_base_name(self, deriver) -> None:
        with pytest.raises(NamingError):
            deriver.build_name(Name())

    def test_naming_error_is_value_error(self) -> None:
        assert issubclass(NamingError, ValueError)

    def test_custom_module(self) -> None:
        deriver = create_ruby_deriver(GeneratorConfig(module_name="My::Sdk"))
        name = deriver.writer_name(StructType(Name.parse("Disk")))
        assert name.module_name == "My::Sdk"
        assert name.file_name == "my/sdk/writers/disk_writer"


class TestStyles:
    """Tests for the naming styles."""

    def test_class_style(self, deriver) -> None:
        assert deriver.class_style_name(Name.parse("storage_domain")) == "StorageDomain"

    def test_member_style(self, deriver) -> None:
        assert deriver.member_style_name(Name.parse("StorageDomain")) == "storage_domain"

    def test_constant_style(self, deriver) -> None:
        assert deriver.constant_style_name(Name.parse("StorageDomain")) == "STORAGE_DOMAIN"

    def test_file_style(self, deriver) -> None:
        assert deriver.file_style_name(Name.parse("StorageDomain")) == "storage_domain"

    @pytest.mark.parametrize(
        "case,expected",
        [
            (NamingCase.PASCAL_CASE, "VmPool"),
            (NamingCase.SNAKE_CASE, "vm_pool"),
            (NamingCase.SCREAMING_SNAKE, "VM_POOL"),
        ],
    )
    def test_style(self, deriver, case: NamingCase, expected: str) -> None:
        assert deriver.style(Name.of("vm", "pool"), case) == expected

    @pytest.mark.parametrize("word", ["class", "end", "def", "if", "nil", "self"])
    def test_reserved_member_names(self, deriver, word: str) -> None:
        assert deriver.member_style_name(Name.of(word)) == f"{word}_"
        assert deriver.is_renamed(Name.of(word))

    def test_reserved_words_only_affect_member_style(self, deriver) -> None:
        name = Name.of("class")
        assert deriver.class_style_name(name) == "Class"
        assert deriver.file_style_name(name) == "class"

    def test_extra_reserved_words(self) -> None:
        deriver = create_ruby_deriver(GeneratorConfig(extra_reserved_words=("object",)))
        assert deriver.member_style_name(Name.of("object")) == "object_"
        assert deriver.member_style_name(Name.of("end")) == "end_"

    def test_ruby_reserved_words(self) -> None:
        assert {"begin", "ensure", "unless", "yield"} <= RUBY_RESERVED_WORDS

    def test_reserved_word_with_underscore_form(self) -> None:
        with pytest.raises(NamingError, match="foo"):
            NameDeriver(ModuleConfig.from_name("A"), {"foo", "foo_"})

    def test_extra_reserved_word_clashing_with_renamed_form(self) -> None:
        with pytest.raises(NamingError, match="end"):
            create_ruby_deriver(GeneratorConfig(extra_reserved_words=("end_",)))

    def test_no_reserved_words(self) -> None:
        deriver = NameDeriver(ModuleConfig.from_name("Sdk"))
        assert deriver.member_style_name(Name.of("class")) == "class"
        assert not deriver.is_renamed(Name.of("class"))


class TestNameFamily:
    """Tests for the names of the generated artifacts."""

    def test_writer_names(self, deriver) -> None:
        vm = StructType(Name.parse("VirtualMachine"))
        assert deriver.writer_name(vm).class_name == "VirtualMachineWriter"
        assert deriver.base_writer_name() == QualifiedName(
            "Writer", "Ovirt::SDK::V4", "ovirt/sdk/v4/writers/writer"
        )

    def test_reader_names(self, deriver) -> None:
        vm = StructType(Name.parse("VirtualMachine"))
        assert deriver.reader_name(vm).file_name == (
            "ovirt/sdk/v4/readers/virtual_machine_reader"
        )
        assert deriver.base_reader_name().class_name == "Reader"

    def test_type_names(self, deriver) -> None:
        status = EnumType(Name.parse("VmStatus"))
        assert deriver.type_name(status).class_name == "VmStatus"
        assert deriver.type_name(status).file_name == "ovirt/sdk/v4/types/vm_status"
        assert deriver.base_type_name().file_name == "ovirt/sdk/v4/types/type"

    def test_service_names(self, deriver) -> None:
        service = Service(Name.parse("Vms"))
        assert deriver.service_name(service).class_name == "VmsService"
        assert deriver.service_name(service).file_name == (
            "ovirt/sdk/v4/services/vms_service"
        )
        assert deriver.base_service_name().class_name == "Service"
