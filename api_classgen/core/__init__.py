"""
Core class-model components.

Provides the class model, its input descriptors and the supporting
naming, sorting, template and configuration utilities.
"""

from .class_model import ClassModel, FunctionEntry, PropertyEntry, RenderResult
from .descriptors import FunctionDescriptor, PropertyDescriptor
from .unique_list import UniqueList
from .sorting import sort_by, sort_values
from .naming import (
    NameSanitizer,
    NamingCase,
    camel_to_kebab_case,
    convert_class_name,
    split_by_line_break,
)
from .references import (
    OBJECT_REFERENCES,
    FolderManager,
    ObjectReference,
    resolve_references,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine
from .generator import GenerationResult, GeneratorError, generate_code

__all__ = [
    # Class model
    "ClassModel",
    "FunctionEntry",
    "PropertyEntry",
    "RenderResult",
    "FunctionDescriptor",
    "PropertyDescriptor",
    # Collections and ordering
    "UniqueList",
    "sort_by",
    "sort_values",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "camel_to_kebab_case",
    "convert_class_name",
    "split_by_line_break",
    # Reference registry
    "OBJECT_REFERENCES",
    "FolderManager",
    "ObjectReference",
    "resolve_references",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Batch generation
    "GenerationResult",
    "GeneratorError",
    "generate_code",
]
