"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..logging_config import get_logger
from .naming import NamingError
from .schema import ModelDescriptor, OperationDescriptor
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self):
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        self._template_engine = create_template_engine(template_dir)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def register_models(self, models: Sequence[ModelDescriptor]) -> None:
        """
        Declare the models of a run before any of them is processed, so
        references between them resolve. The default does nothing.
        """
        pass

    @abstractmethod
    def process_model(self, model: ModelDescriptor) -> Any:
        """
        Compute names, types, tags and imports for one model.

        Args:
            model: Model to process

        Returns:
            Language specific model result record
        """
        pass

    @abstractmethod
    def process_operations(self, group: str, operations: Sequence[OperationDescriptor]) -> Any:
        """
        Compute names, types and imports for one API group.

        Args:
            group: Name of the API group (tag)
            operations: Operations in the group

        Returns:
            Language specific operations result record
        """
        pass

    def validate_models(self, models: Sequence[ModelDescriptor]) -> List[str]:
        """
        Validate models for basic structural issues.

        Language generators should override this to add language-specific validation.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        for model in models:
            if not model.fields and model.enum is None and model.composition is None:
                warnings.append(f"Model '{model.name}' has no fields")
        return warnings

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        models: Optional[List[Any]] = None,
        operations: Optional[List[Any]] = None,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            models: Per-model result records
            operations: Per-API-group result records
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.models = models or []
        self.operations = operations or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    models: Sequence[ModelDescriptor],
    operations: Optional[Mapping[str, Sequence[OperationDescriptor]]] = None,
) -> GenerationResult:
    """
    Process every model and API group with error handling.

    Every model is registered with the generator first, so models of the
    run may reference each other in any order.

    Naming and generator errors do not propagate: they produce a failed
    result carrying the exception, and no partial records.

    Args:
        generator: Code generator instance
        models: Models of the run
        operations: Operations grouped by API name

    Returns:
        GenerationResult with records, warnings, and metadata
    """
    operations = operations or {}
    try:
        generator.register_models(models)
        warnings = generator.validate_models(models)

        model_results = [generator.process_model(model) for model in models]
        operation_results = [
            generator.process_operations(group, group_operations)
            for group, group_operations in operations.items()
        ]
    except (NamingError, GeneratorError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "model_count": len(models),
        "api_count": len(operations),
    }
    return GenerationResult(model_results, operation_results, warnings, metadata)
