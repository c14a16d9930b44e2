"""
Ruby writers generator implementation.

Generates, for every struct type of the model, a Ruby class that takes
instances of the type and writes the corresponding XML document, plus one
aggregate file with forward declarations of all the writers and the
statements that load them.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from ....logging_config import get_logger
from ....model import (
    Model,
    PrimitiveKind,
    SchemaNames,
    StructMember,
    StructType,
    Type,
    TypeKind,
    Words,
    get_words,
)
from ...core.buffer import CodeBuffer, Document
from ...core.classifier import kind_of, partition_members, struct_types
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratorError
from ...core.naming import NameDeriver
from ...core.templates import TemplateEngine
from .naming import create_ruby_deriver

logger = get_logger(__name__)


# Writer methods used for primitives represented as inner elements
ELEMENT_WRITE_METHODS: Dict[PrimitiveKind, str] = {
    PrimitiveKind.STRING: "write_string",
    PrimitiveKind.BOOLEAN: "write_boolean",
    PrimitiveKind.INTEGER: "write_integer",
    PrimitiveKind.DECIMAL: "write_decimal",
    PrimitiveKind.DATE: "write_date",
}

# Conversions of primitives represented as attributes to text
ATTRIBUTE_CONVERSIONS: Dict[PrimitiveKind, str] = {
    PrimitiveKind.STRING: "{0}",
    PrimitiveKind.BOOLEAN: "{0}.to_s",
    PrimitiveKind.INTEGER: "{0}.to_s",
    PrimitiveKind.DECIMAL: "{0}.to_s",
    PrimitiveKind.DATE: "{0}.xmlschema",
}

WRITERS_FILE_BANNER = (
    "These forward declarations are required in order to avoid circular dependencies."
)


class WriterEmitter:
    """Generates the writer class of one struct type."""

    def __init__(
        self,
        deriver: NameDeriver,
        schema_names: SchemaNames,
        words: Optional[Words] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        self.deriver = deriver
        self.schema_names = schema_names
        self.words = words or get_words()
        self.config = config or GeneratorConfig()

    def emit(self, struct: StructType) -> Document:
        """Generate the document containing the writer of a struct type."""
        writer_name = self.deriver.writer_name(struct)
        base_name = self.deriver.base_writer_name()

        buffer = CodeBuffer(
            writer_name.file_name,
            indent=self.config.indent,
            line_ending=self.config.line_ending,
            class_name=writer_name.class_name,
        )
        if self.config.add_comments:
            buffer.comment("")
            buffer.comment("This file is generated, don't edit it manually.")
            buffer.comment("")
            buffer.add_line()

        with buffer.module(writer_name.module_name):
            buffer.add_line()
            with buffer.block(
                f"class {writer_name.class_name} < {base_name.class_name} # :nodoc:"
            ):
                buffer.add_line()
                self._emit_methods(buffer, struct)
            buffer.add_line()

        logger.debug("Generated writer %s", writer_name)
        return buffer.build()

    def _emit_methods(self, buffer: CodeBuffer, struct: StructType) -> None:
        singular = self.schema_names.schema_tag_name(struct.name)
        plural = self.schema_names.schema_tag_name(self.words.plural(struct.name))

        with buffer.block("def self.write_one(object, writer, singular = nil)"):
            buffer.add_line("singular ||= '{0}'", singular)
            buffer.add_line("writer.write_start(singular)")
            self._emit_members(buffer, struct)
            buffer.add_line("writer.write_end")
        buffer.add_line()

        with buffer.block("def self.write_many(list, writer, singular = nil, plural = nil)"):
            buffer.add_line("singular ||= '{0}'", singular)
            buffer.add_line("plural ||= '{0}'", plural)
            buffer.add_line("writer.write_start(plural)")
            with buffer.block("list.each do |item|"):
                buffer.add_line("write_one(item, writer, singular)")
            buffer.add_line("writer.write_end")
        buffer.add_line()

    def _emit_members(self, buffer: CodeBuffer, struct: StructType) -> None:
        # Attributes must be written before any inner element
        attribute_members, element_members = partition_members(struct, self.schema_names)
        for member in attribute_members:
            self._emit_member_as_attribute(buffer, struct, member)
        for member in element_members:
            self._emit_member_as_element(buffer, struct, member)

    def _emit_member_as_attribute(
        self, buffer: CodeBuffer, struct: StructType, member: StructMember
    ) -> None:
        tag = self.schema_names.schema_tag_name(member.name)
        value = f"object.{self.deriver.member_style_name(member.name)}"
        kind = kind_of(member.type)

        if kind == TypeKind.PRIMITIVE:
            text = ATTRIBUTE_CONVERSIONS[member.type.primitive].format(value)
        elif kind == TypeKind.ENUM:
            text = f"{value}.to_s"
        else:
            raise GeneratorError(
                f"Member '{member.name}' of type '{struct.name}' is a {kind.value} "
                f"and can't be represented as an XML attribute"
            )
        buffer.add_line("writer.write_attribute('{0}', {1}) unless {2}.nil?", tag, text, value)

    def _emit_member_as_element(
        self, buffer: CodeBuffer, struct: StructType, member: StructMember
    ) -> None:
        tag = self.schema_names.schema_tag_name(member.name)
        value = f"object.{self.deriver.member_style_name(member.name)}"
        kind = kind_of(member.type)

        if kind in (TypeKind.PRIMITIVE, TypeKind.ENUM):
            self._emit_value_as_element(buffer, member.type, tag, value)
        elif kind == TypeKind.STRUCT:
            nested_name = self.deriver.writer_name(member.type)
            buffer.add_line(
                "{0}.write_one({1}, writer, '{2}') unless {1}.nil?",
                nested_name.class_name,
                value,
                tag,
            )
        elif kind == TypeKind.LIST:
            self._emit_list_as_element(buffer, struct, member, value)
        else:
            raise GeneratorError(
                f"Member '{member.name}' of type '{struct.name}' has unsupported kind {kind}"
            )

    def _emit_value_as_element(
        self, buffer: CodeBuffer, type_: Type, tag: str, value: str
    ) -> None:
        """Write a primitive or enum value as an element with the given tag."""
        if kind_of(type_) == TypeKind.ENUM:
            buffer.add_line("writer.write_string('{0}', {1}.to_s) unless {1}.nil?", tag, value)
        else:
            method = ELEMENT_WRITE_METHODS[type_.primitive]
            buffer.add_line("writer.{0}('{1}', {2}) unless {2}.nil?", method, tag, value)

    def _emit_list_as_element(
        self, buffer: CodeBuffer, struct: StructType, member: StructMember, value: str
    ) -> None:
        element_type = member.type.element_type
        element_kind = kind_of(element_type)
        plural_tag = self.schema_names.schema_tag_name(member.name)
        singular_tag = self.schema_names.schema_tag_name(self.words.singular(member.name))
        guard = f"{value}.nil? || {value}.empty?"

        if element_kind in (TypeKind.PRIMITIVE, TypeKind.ENUM):
            with buffer.block(f"unless {guard}"):
                buffer.add_line("writer.write_start('{0}')", plural_tag)
                with buffer.block(f"{value}.each do |item|"):
                    self._emit_value_as_element(buffer, element_type, singular_tag, "item")
                buffer.add_line("writer.write_end")
        elif element_kind == TypeKind.STRUCT:
            element_name = self.deriver.writer_name(element_type)
            buffer.add_line(
                "{0}.write_many({1}, writer, '{2}', '{3}') unless {4}",
                element_name.class_name,
                value,
                singular_tag,
                plural_tag,
                guard,
            )
        else:
            raise GeneratorError(
                f"Member '{member.name}' of type '{struct.name}' is a list of "
                f"{element_kind.value} elements, which isn't supported"
            )


class ForwardDeclarationEmitter:
    """Generates the file that declares and loads all the writers."""

    def __init__(
        self,
        deriver: NameDeriver,
        template_engine: TemplateEngine,
        config: Optional[GeneratorConfig] = None,
    ):
        self.deriver = deriver
        self.template_engine = template_engine
        self.config = config or GeneratorConfig()

    def file_name(self) -> str:
        return f"{self.deriver.module_path}/writers"

    def emit(self, structs: List[StructType]) -> Document:
        """
        Generate the aggregate writers document.

        Stubs and load statements follow the same order: the base writer
        first, then the writers of the structs sorted by type name.
        """
        base_name = self.deriver.base_writer_name()
        writer_names = [self.deriver.writer_name(struct) for struct in sorted(structs)]
        segments = self.deriver.module.module_name.split("::")
        indent = self.config.indent

        context = {
            "banner": WRITERS_FILE_BANNER,
            "module_segments": segments,
            "indent": indent,
            "body_indent": indent * len(segments),
            "base_class": base_name.class_name,
            "class_names": [name.class_name for name in writer_names],
            "load_files": [base_name.file_name] + [name.file_name for name in writer_names],
            "extension": ".rb",
        }
        text = self.template_engine.render_template("writers.rb", context)

        return Document(
            file_name=self.file_name(),
            lines=tuple(line.rstrip() for line in text.splitlines()),
            line_ending=self.config.line_ending,
        )


class RubyWritersGenerator(CodeGenerator):
    """Code generator for Ruby XML writers."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Ruby writers generator with configuration."""
        super().__init__(config)

        self.deriver = create_ruby_deriver(self.config)
        self.schema_names = SchemaNames(self.config.attribute_names)
        self.words = get_words()

        self.writer_emitter = WriterEmitter(
            self.deriver, self.schema_names, self.words, self.config
        )
        self.declarations_emitter = ForwardDeclarationEmitter(
            self.deriver, self.template_engine, self.config
        )

    @property
    def language_name(self) -> str:
        return "ruby"

    @property
    def file_extension(self) -> str:
        return ".rb"

    def generate(self, model: Model) -> List[Document]:
        """
        Generate one document per struct type, followed by the aggregate file.

        The aggregate file only needs the derived names of the writers, so
        it is produced after all the per-type documents.
        """
        structs = struct_types(model)
        documents = [self.generate_single_type(struct) for struct in structs]
        documents.append(self.declarations_emitter.emit(structs))
        logger.info(
            "Generated %d writers for module %s", len(structs), self.deriver.module_name
        )
        return documents

    def generate_single_type(self, struct: StructType) -> Document:
        return self.writer_emitter.emit(struct)

    def write_documents(
        self, documents: List[Document], out_dir: Union[str, Path]
    ) -> List[Path]:
        """Write the documents in order, stopping at the first failure."""
        written = []
        for document in documents:
            try:
                written.append(document.write(out_dir))
            except OSError as e:
                if document.class_name:
                    message = f'Error writing class "{document.class_name}"'
                else:
                    message = f'Error writing writers file "{document.path}"'
                raise GeneratorError(message) from e
        logger.info("Wrote %d files to %s", len(written), out_dir)
        return written

    def validate_model(self, model: Model) -> List[str]:
        """Validate the model for writers generation."""
        warnings = super().validate_model(model)

        for struct in struct_types(model):
            members = struct.members()
            if not members:
                warnings.append(
                    f"Type '{struct.name}' has no members, its writer only writes the tag"
                )
            for member in members:
                if self.deriver.is_renamed(member.name):
                    warnings.append(
                        f"Member '{struct.name}.{member.name}' is accessed as "
                        f"'{self.deriver.member_style_name(member.name)}' "
                        f"to avoid a reserved word"
                    )

        return warnings
