"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger
from ...model import Model
from .config import GeneratorConfig, load_config
from .templates import TemplateEngine, get_default_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config()
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'ruby')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.rb')."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = get_default_template_engine()
        return self._template_engine

    @abstractmethod
    def generate(self, model: Model) -> List[Any]:
        """
        Generate the documents for a model.

        Args:
            model: Model to generate code for

        Returns:
            Generated documents, in the order they should be written
        """
        pass

    @abstractmethod
    def write_documents(
        self, documents: List[Any], out_dir: Union[str, Path]
    ) -> List[Path]:
        """
        Write generated documents below the output directory.

        Raises:
            GeneratorError: If a document can't be written
        """
        pass

    def write(self, model: Model, out_dir: Union[str, Path]) -> List[Path]:
        """
        Generate the documents for a model and write them to disk.

        Args:
            model: Model to generate code for
            out_dir: Root directory of the generated files

        Returns:
            Paths of the written files
        """
        return self.write_documents(self.generate(model), out_dir)

    def validate_model(self, model: Model) -> List[str]:
        """
        Validate the model for generation.

        Language generators should override this to add specific checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        return []


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        documents: List[Any] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            documents: Generated documents
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.documents = documents or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    model: Model,
    out_dir: Optional[Union[str, Path]] = None,
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    When ``out_dir`` is given the documents are also written to disk; the
    first failure aborts the run and leaves already written files in place.

    Args:
        generator: Code generator instance
        model: Model to generate code for
        out_dir: Optional output directory

    Returns:
        GenerationResult with documents, warnings, and metadata
    """
    try:
        warnings = generator.validate_model(model)
        for warning in warnings:
            logger.warning(warning)

        documents = generator.generate(model)
        written: List[Path] = []
        if out_dir is not None:
            written = generator.write_documents(documents, out_dir)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "module_name": generator.config.module_name,
            "document_count": len(documents),
            "written_paths": [str(path) for path in written],
        }
        logger.info(
            "Generated %d %s documents", len(documents), generator.language_name
        )
        return GenerationResult(documents, warnings, metadata)

    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
