"""
Registry of well-known artifacts the generated classes depend on.

Producers look entries up here to know which import lines to hand to a
ClassModel. The table is fixed at import time.
"""

import posixpath
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .config import GeneratorConfig


class FolderManager:
    """Resolves the output folders of the generated code."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def _folder(self, name: str) -> str:
        return posixpath.join(self.config.output_dir, name)

    def get_function_folder(self) -> str:
        return self._folder(self.config.function_folder)

    def get_interface_folder(self) -> str:
        return self._folder(self.config.interface_folder)

    def get_class_folder(self) -> str:
        return self._folder(self.config.class_folder)

    def get_artifact_folder(self, is_interface: bool) -> str:
        """Folder for a rendered artifact of the given shape."""
        if is_interface:
            return self.get_interface_folder()
        return self.get_class_folder()


@dataclass(frozen=True)
class ObjectReference:
    """A generated or library artifact addressable by name."""

    file_name: str
    ref_key: str
    class_name: str
    folder_path: str

    def import_statement(self, from_folder: str) -> str:
        """
        TypeScript import line for this reference.

        Args:
            from_folder: Folder of the file that contains the import
        """
        target = posixpath.join(self.folder_path, self.file_name)
        relative = posixpath.relpath(target, from_folder)
        if not relative.startswith("."):
            relative = f"./{relative}"
        return f'import {{{self.class_name}}} from "{relative}";'


def http_function_ref(folder: FolderManager) -> ObjectReference:
    return ObjectReference(
        file_name="http",
        ref_key="HTTP_FUNCTION_REF",
        class_name="http",
        folder_path=folder.get_function_folder(),
    )


def http_request_interceptor_interface_ref(folder: FolderManager) -> ObjectReference:
    return ObjectReference(
        file_name="i-$-open-api",
        ref_key="HTTP_REQUEST_INTERCEPTOR_INTERFACE_REF",
        class_name="RequestInterceptor",
        folder_path=folder.get_interface_folder(),
    )


def http_error_handler_interface_ref(folder: FolderManager) -> ObjectReference:
    return ObjectReference(
        file_name="i-$-open-api",
        ref_key="HTTP_ERROR_HANDLER_INTERFACE_REF",
        class_name="ErrorHandler",
        folder_path=folder.get_interface_folder(),
    )


def open_api_function_ref(folder: FolderManager) -> ObjectReference:
    return ObjectReference(
        file_name="open-api",
        ref_key="OPEN_API_FUNCTION_REF",
        class_name="openApi",
        folder_path=folder.get_function_folder(),
    )


def query_parameter_function_ref(folder: FolderManager) -> ObjectReference:
    return ObjectReference(
        file_name="get-query-params",
        ref_key="QUERY_PARAMETER_FUNCTION_REF",
        class_name="getQueryParameters",
        folder_path=folder.get_function_folder(),
    )


OBJECT_REFERENCES: Tuple[Callable[[FolderManager], ObjectReference], ...] = (
    http_function_ref,
    http_request_interceptor_interface_ref,
    http_error_handler_interface_ref,
    open_api_function_ref,
    query_parameter_function_ref,
)


def resolve_references(folder: FolderManager) -> Dict[str, ObjectReference]:
    """Resolve every registered reference, keyed by ref_key."""
    references = (constructor(folder) for constructor in OBJECT_REFERENCES)
    return {reference.ref_key: reference for reference in references}
