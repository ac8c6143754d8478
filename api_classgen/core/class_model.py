"""
In-memory model of one generated class or interface.

A producer creates one ClassModel per API resource, registers the
operations and schema fields it discovers, then calls ``render`` once.
Rendering sorts members by name, so the output does not depend on the
order in which they were registered.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .config import GeneratorConfig
from .descriptors import FunctionDescriptor, PropertyDescriptor
from .naming import camel_to_kebab_case, convert_class_name, split_by_line_break
from .sorting import sort_by, sort_values
from .templates import TemplateEngine, get_default_template_engine
from .unique_list import UniqueList
from ..logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class FunctionEntry:
    """Template view-model of one operation."""

    function_name: str
    http_method: str
    original_path: str

    has_description: bool
    description: List[str]

    has_url_parameters: bool
    url_parameters: List[str]

    has_parameter: bool
    parameter_class_name: Optional[str]

    has_query_parameters: bool
    query_parameters: List[str]

    has_request_body: bool
    is_request_body_json: bool
    request_body_class: Optional[str]

    force_interceptor: bool

    has_response: bool
    is_json_response: bool
    response_class: Optional[str]

    @classmethod
    def from_descriptor(cls, fun: FunctionDescriptor) -> "FunctionEntry":
        url_parameters = list(fun.url_parameters or [])
        query_parameters = list(fun.query_parameters or [])
        has_request_body = bool(fun.request_body_class)
        has_response = bool(fun.response_class)

        return cls(
            function_name=fun.function_name,
            http_method=fun.http_method,
            original_path=fun.original_path,
            has_description=bool(fun.description),
            description=split_by_line_break(fun.description),
            has_url_parameters=len(url_parameters) > 0,
            url_parameters=url_parameters,
            has_parameter=bool(fun.parameter_class_name),
            parameter_class_name=fun.parameter_class_name,
            has_query_parameters=len(query_parameters) > 0,
            query_parameters=query_parameters,
            has_request_body=has_request_body,
            is_request_body_json=has_request_body and bool(fun.is_request_body_json),
            request_body_class=fun.request_body_class,
            force_interceptor=bool(fun.force_interceptor),
            has_response=has_response,
            is_json_response=has_response and bool(fun.is_json_response),
            response_class=fun.response_class,
        )


@dataclass
class PropertyEntry:
    """Template view-model of one schema field."""

    property_name: str
    value: str
    required: bool
    is_array: bool
    has_description: bool
    description: List[str]

    @classmethod
    def from_descriptor(cls, prop: PropertyDescriptor) -> "PropertyEntry":
        return cls(
            property_name=prop.property_name,
            value=prop.value,
            required=bool(prop.required),
            is_array=bool(prop.is_array),
            has_description=bool(prop.description),
            description=split_by_line_break(prop.description),
        )


@dataclass
class _RegisteredFunction:
    data: FunctionEntry
    imports: List[str] = field(default_factory=list)


@dataclass
class _RegisteredProperty:
    data: PropertyEntry
    import_name: Optional[str] = None


@dataclass(frozen=True)
class RenderResult:
    """Finished artifact: its identifiers and its source text."""

    type_name: str
    file_name: str
    text: str


class ClassModel:
    """Accumulates the members of one artifact and renders it."""

    def __init__(
        self,
        original_name: str,
        template_engine: Optional[TemplateEngine] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        """
        Args:
            original_name: Resource name as found in the API specification
            template_engine: Engine used by ``render``; the packaged templates by default
            config: Supplies the template names
        """
        self._type_name = convert_class_name(original_name)
        self._file_name = camel_to_kebab_case(self._type_name)
        self._template_engine = template_engine
        self.config = config or GeneratorConfig()

        self.description: List[str] = []
        self.imports: UniqueList[str] = UniqueList()
        self.functions: Dict[str, _RegisteredFunction] = {}
        self.properties: Dict[str, _RegisteredProperty] = {}

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def is_interface(self) -> bool:
        """An artifact without operations is rendered as an interface."""
        return len(self.functions) == 0

    @property
    def template_engine(self) -> TemplateEngine:
        if self._template_engine is None:
            self._template_engine = get_default_template_engine()
        return self._template_engine

    def add_description(self, text: Optional[str]):
        self.description.extend(split_by_line_break(text))

    def add_imports(self, *imports: str):
        self.imports.push(*imports)

    def add_function(self, fun: FunctionDescriptor):
        """Register an operation, replacing one registered under the same name."""
        if fun.function_name in self.functions:
            logger.debug(
                "Replacing function %s in %s", fun.function_name, self._type_name
            )
        self.functions[fun.function_name] = _RegisteredFunction(
            data=FunctionEntry.from_descriptor(fun),
            imports=list(fun.imports or []),
        )

    def add_property(self, prop: PropertyDescriptor):
        """Register a schema field, replacing one registered under the same name."""
        if prop.property_name in self.properties:
            logger.debug(
                "Replacing property %s in %s", prop.property_name, self._type_name
            )
        self.properties[prop.property_name] = _RegisteredProperty(
            data=PropertyEntry.from_descriptor(prop),
            import_name=prop.import_name,
        )

    def render(self) -> RenderResult:
        """
        Render the artifact.

        Members are rendered in name order, their imports are merged into
        the artifact's import set, and the class template is rendered last.
        Template errors propagate to the caller.
        """
        engine = self.template_engine

        rendered_functions = []
        for _, fun in sort_by(self.functions.items(), 0):
            rendered_functions.append(
                (
                    fun.imports,
                    engine.render_template(
                        self.config.function_template, asdict(fun.data)
                    ),
                )
            )

        rendered_properties = []
        for _, prop in sort_by(self.properties.items(), 0):
            rendered_properties.append(
                (
                    prop.import_name,
                    engine.render_template(
                        self.config.property_template, asdict(prop.data)
                    ),
                )
            )

        for imports, _ in rendered_functions:
            self.imports.push(*(import_name for import_name in imports if import_name))
        for import_name, _ in rendered_properties:
            if import_name:
                self.imports.push(import_name)

        view_data: Dict[str, Any] = {
            "type_name": self._type_name,
            "is_interface": self.is_interface,
            "has_imports": len(self.imports) > 0,
            "imports": sort_values(self.imports.get()),
            "has_description": len(self.description) > 0,
            "description": list(self.description),
            "has_functions": len(rendered_functions) > 0,
            "functions": [split_by_line_break(text) for _, text in rendered_functions],
            "has_properties": len(rendered_properties) > 0,
            "properties": [
                split_by_line_break(text) for _, text in rendered_properties
            ],
        }

        text = engine.render_template(self.config.class_template, view_data)
        logger.info(
            "Rendered %s %s (%d functions, %d properties)",
            "interface" if view_data["is_interface"] else "class",
            self._type_name,
            len(rendered_functions),
            len(rendered_properties),
        )

        return RenderResult(
            type_name=self._type_name, file_name=self._file_name, text=text
        )
