"""
Batch generation of artifacts from a descriptor document.

A descriptor document lists API resources with their already-parsed
operations and properties:

    {"classes": [{"name": "User Account",
                  "description": "...",
                  "imports": ["import {User} from \\"./user\\";"],
                  "properties": [{"property_name": "id", "value": "string"}],
                  "functions": [{"function_name": "getUser", ...}]}]}
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from .class_model import ClassModel, RenderResult
from .config import GeneratorConfig
from .descriptors import FunctionDescriptor, PropertyDescriptor
from .references import FolderManager
from .templates import TemplateEngine, create_template_engine
from ..logging_config import get_logger

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        results: Optional[List[RenderResult]] = None,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        paths: Optional[List[Path]] = None,
    ):
        self.results = results or []
        # Output file of each result, same order as results
        self.paths = paths or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def _member(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"member must be an object, got {type(data).__name__}")
    return data


def build_class_model(
    entry: Dict[str, Any],
    template_engine: Optional[TemplateEngine] = None,
    config: Optional[GeneratorConfig] = None,
) -> ClassModel:
    """
    Build a fresh ClassModel from one descriptor document entry.

    Raises:
        GeneratorError: If the entry is not a mapping or lacks a name
    """
    if not isinstance(entry, dict):
        raise GeneratorError(f"Class entry must be an object, got {type(entry).__name__}")
    if "name" not in entry:
        raise GeneratorError("Class entry is missing 'name'")

    model = ClassModel(entry["name"], template_engine=template_engine, config=config)
    model.add_description(entry.get("description"))

    for import_line in entry.get("imports") or []:
        model.add_imports(import_line)

    try:
        for prop in entry.get("properties") or []:
            model.add_property(PropertyDescriptor.from_dict(_member(prop)))
        for fun in entry.get("functions") or []:
            model.add_function(FunctionDescriptor.from_dict(_member(fun)))
    except TypeError as e:
        raise GeneratorError(f"Invalid member in class {entry['name']!r}: {e}") from e

    return model


def validate_document(document: Dict[str, Any]) -> List[str]:
    """
    Check a descriptor document for suspicious content.

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    for entry in document.get("classes") or []:
        if not isinstance(entry, dict):
            continue
        name = entry.get("name", "<unnamed>")
        properties = entry.get("properties") or []
        functions = entry.get("functions") or []

        if not properties and not functions:
            warnings.append(f"Class '{name}' has no members - will generate empty interface")

        for kind, members, keys in (
            ("property", properties, ("property_name", "propertyName")),
            ("function", functions, ("function_name", "functionName")),
        ):
            seen = set()
            for member in members:
                if not isinstance(member, dict):
                    continue
                member_name = next((member[k] for k in keys if k in member), None)
                if member_name in seen:
                    warnings.append(
                        f"Duplicate {kind} '{member_name}' in class '{name}' - last one wins"
                    )
                seen.add(member_name)

    return warnings


def _check_file_names(results: List[RenderResult]):
    """Fail if two artifacts would be written to the same file name."""
    seen: Dict[str, str] = {}
    for result in results:
        if result.file_name in seen:
            raise GeneratorError(
                f"Classes '{seen[result.file_name]}' and '{result.type_name}' "
                f"both map to file '{result.file_name}'"
            )
        seen[result.file_name] = result.type_name


def generate_code(
    document: Dict[str, Any],
    config: Optional[GeneratorConfig] = None,
    template_engine: Optional[TemplateEngine] = None,
) -> GenerationResult:
    """
    Render every class of a descriptor document with error handling.

    Args:
        document: Descriptor document
        config: Generator configuration
        template_engine: Engine to render with; built from ``config`` if omitted

    Returns:
        GenerationResult with rendered artifacts, warnings and metadata
    """
    config = config or GeneratorConfig()

    try:
        if not isinstance(document, dict) or not isinstance(
            document.get("classes"), list
        ):
            raise GeneratorError("Descriptor document must contain a 'classes' list")

        if template_engine is None:
            template_dir = Path(config.template_dir) if config.template_dir else None
            template_engine = create_template_engine(template_dir, config.indent_size)

        warnings = validate_document(document)

        folder = FolderManager(config)
        results = []
        paths = []
        interface_count = 0
        for entry in document["classes"]:
            model = build_class_model(entry, template_engine, config)
            if model.is_interface:
                interface_count += 1
            results.append(model.render())
            paths.append(
                Path(folder.get_artifact_folder(model.is_interface))
                / f"{model.file_name}{config.file_extension}"
            )

        _check_file_names(results)

        metadata = {
            "artifact_count": len(results),
            "interface_count": interface_count,
            "class_count": len(results) - interface_count,
        }
        logger.info("Generated %d artifacts", len(results))

        return GenerationResult(results, warnings, metadata, paths)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
