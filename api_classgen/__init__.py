"""
API class generator.

Builds TypeScript classes and interfaces from normalized API operation
and schema descriptors.
"""

from .core import (
    ClassModel,
    ConfigError,
    FolderManager,
    FunctionDescriptor,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    OBJECT_REFERENCES,
    PropertyDescriptor,
    RenderResult,
    TemplateEngine,
    TemplateError,
    generate_code,
    load_config,
    resolve_references,
)

__version__ = "0.1.0"

__all__ = [
    "ClassModel",
    "ConfigError",
    "FolderManager",
    "FunctionDescriptor",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "OBJECT_REFERENCES",
    "PropertyDescriptor",
    "RenderResult",
    "TemplateEngine",
    "TemplateError",
    "generate_code",
    "load_config",
    "resolve_references",
]
