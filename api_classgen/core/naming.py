"""
Naming utilities for generated artifacts.

Handles name sanitization and case conversion for type names,
file names and member names of the generated TypeScript code.
"""

import re
from typing import Dict, List, Optional, Set
from enum import Enum


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_account
    CAMEL_CASE = "camel"  # userAccount
    PASCAL_CASE = "pascal"  # UserAccount
    KEBAB_CASE = "kebab"  # user-account
    SCREAMING_SNAKE = "screaming_snake"  # USER_ACCOUNT


# TypeScript reserved words (lower case)
TYPESCRIPT_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "new",
    "null",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "implements",
    "interface",
    "let",
    "package",
    "private",
    "protected",
    "public",
    "static",
    "yield",
}

# Global TypeScript types a generated class must not shadow (lower case)
TYPESCRIPT_BUILTIN_TYPES = {
    "array",
    "boolean",
    "date",
    "error",
    "function",
    "map",
    "number",
    "object",
    "promise",
    "record",
    "set",
    "string",
    "symbol",
}

DEFAULT_TYPE_NAME = "Model"
TYPE_NAME_CONFLICT_SUFFIX = "Model"


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
        empty_name: str = "field",
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
            empty_name: Replacement for names with no usable characters
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self.empty_name = empty_name
        self._name_cache: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.SNAKE_CASE,
        suffix_on_conflict: str = "_",
        unique: bool = False,
    ) -> str:
        """
        Sanitize a name for safe use in generated code.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            suffix_on_conflict: Suffix to add for conflicts
            unique: Also disambiguate against names returned earlier

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}_{target_case.value}_{suffix_on_conflict}"
        if not unique and cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        converted = self._convert_case(cleaned, target_case)

        # Identifiers cannot start with a digit
        if converted[:1].isdigit():
            converted = f"_{converted}"

        final_name = self._resolve_conflicts(converted, suffix_on_conflict, unique)

        if unique:
            self._used_names.add(final_name)
        else:
            self._name_cache[cache_key] = final_name

        return final_name

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        # Remove non-alphanumeric chars except underscore and hyphen
        cleaned = re.sub(r"[^a-zA-Z0-9_-]", "_", str(name))

        cleaned = cleaned.strip("_-")

        if not cleaned:
            cleaned = self.empty_name

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        elif target_case == NamingCase.KEBAB_CASE:
            return self._to_kebab_case(name)
        elif target_case == NamingCase.SCREAMING_SNAKE:
            return self._to_snake_case(name).upper()
        else:
            return name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        name = name.replace("-", "_")

        # HTTPServer -> HTTP_Server, userName -> user_Name
        name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)

        name = name.lower()
        name = re.sub(r"_+", "_", name)

        return name.strip("_")

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        parts = [part for part in self._to_snake_case(name).split("_") if part]

        if not parts:
            return name

        return parts[0] + "".join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        snake = self._to_snake_case(name)
        return "".join(part.capitalize() for part in snake.split("_") if part)

    def _to_kebab_case(self, name: str) -> str:
        """Convert to kebab-case."""
        return self._to_snake_case(name).replace("_", "-")

    def _resolve_conflicts(self, name: str, suffix: str, unique: bool) -> str:
        """Resolve naming conflicts with reserved words and names already handed out."""
        if name.lower() in self.reserved_words or name.lower() in self.builtin_types:
            name = f"{name}{suffix}"

        if not unique:
            return name

        original_name = name
        counter = 1
        while name in self._used_names:
            if suffix == "_":
                name = f"{original_name}{suffix}{counter}"
            else:
                name = f"{original_name}{counter}"
            counter += 1

        return name

    def reset_used_names(self):
        """Reset the tracking of used names."""
        self._used_names.clear()

    def add_used_name(self, name: str):
        """Manually add a name to the used names set."""
        self._used_names.add(name)


def create_typescript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for TypeScript type names."""
    return NameSanitizer(
        TYPESCRIPT_RESERVED_WORDS,
        TYPESCRIPT_BUILTIN_TYPES,
        empty_name=DEFAULT_TYPE_NAME,
    )


_type_name_sanitizer = create_typescript_sanitizer()
_file_name_sanitizer = NameSanitizer(empty_name=DEFAULT_TYPE_NAME)


def convert_class_name(original_name: str) -> str:
    """Convert an arbitrary source name into a PascalCase type name."""
    return _type_name_sanitizer.sanitize_name(
        original_name, NamingCase.PASCAL_CASE, TYPE_NAME_CONFLICT_SUFFIX
    )


def camel_to_kebab_case(name: str) -> str:
    """UserAccount -> user-account"""
    return _file_name_sanitizer.sanitize_name(name, NamingCase.KEBAB_CASE).lstrip("_")


def split_by_line_break(text: Optional[str]) -> List[str]:
    """Split free text into lines; empty or missing text gives no lines."""
    if not text:
        return []
    return re.split(r"\r?\n", text)
