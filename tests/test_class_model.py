"""Tests for ClassModel registration and rendering."""

import pytest

from api_classgen.core.class_model import ClassModel, FunctionEntry, PropertyEntry
from api_classgen.core.config import GeneratorConfig
from api_classgen.core.descriptors import FunctionDescriptor, PropertyDescriptor
from api_classgen.core.templates import TemplateEngine, TemplateError

FUNCTION_TEMPLATE = GeneratorConfig().function_template
PROPERTY_TEMPLATE = GeneratorConfig().property_template


def get_user() -> FunctionDescriptor:
    return FunctionDescriptor(
        function_name="getUser",
        http_method="GET",
        original_path="/users/{id}",
        url_parameters=["id"],
        query_parameters=[],
        response_class="User",
        is_json_response=True,
        imports=['import {User} from "../interface/user";'],
    )


def simple_function(name: str, imports=None) -> FunctionDescriptor:
    return FunctionDescriptor(name, "GET", f"/{name}", imports=imports or [])


class TestIdentity:
    def test_names_are_derived_at_construction(self, engine):
        model = ClassModel("User Account", template_engine=engine)

        assert model.type_name == "UserAccount"
        assert model.file_name == "user-account"

    def test_names_are_read_only(self, engine):
        model = ClassModel("User Account", template_engine=engine)

        with pytest.raises(AttributeError):
            model.type_name = "Other"
        with pytest.raises(AttributeError):
            model.file_name = "other"

    def test_render_returns_identifiers_and_text(self, engine):
        result = ClassModel("User Account", template_engine=engine).render()

        assert result.type_name == "UserAccount"
        assert result.file_name == "user-account"
        assert result.text == "class:UserAccount"


class TestFunctionEntry:
    def test_presence_flags_follow_payloads(self):
        entry = FunctionEntry.from_descriptor(get_user())

        assert entry.has_url_parameters is True
        assert entry.url_parameters == ["id"]
        assert entry.has_query_parameters is False
        assert entry.has_parameter is False
        assert entry.has_request_body is False
        assert entry.has_response is True
        assert entry.is_json_response is True
        assert entry.has_description is False
        assert entry.description == []

    def test_json_flags_require_a_payload(self):
        entry = FunctionEntry.from_descriptor(
            FunctionDescriptor(
                "ping",
                "POST",
                "/ping",
                is_request_body_json=True,
                is_json_response=True,
            )
        )

        assert entry.is_request_body_json is False
        assert entry.is_json_response is False

    def test_empty_strings_count_as_absent(self):
        entry = FunctionEntry.from_descriptor(
            FunctionDescriptor(
                "ping",
                "GET",
                "/ping",
                description="",
                parameter_class_name="",
                request_body_class="",
                response_class="",
            )
        )

        assert entry.has_description is False
        assert entry.has_parameter is False
        assert entry.has_request_body is False
        assert entry.has_response is False

    def test_description_is_split_into_lines(self):
        entry = FunctionEntry.from_descriptor(
            FunctionDescriptor("ping", "GET", "/ping", description="first\r\nsecond")
        )

        assert entry.has_description is True
        assert entry.description == ["first", "second"]


class TestPropertyEntry:
    def test_fields_are_copied(self):
        entry = PropertyEntry.from_descriptor(
            PropertyDescriptor("tags", "string", is_array=True, description="Tags")
        )

        assert entry.property_name == "tags"
        assert entry.value == "string"
        assert entry.required is False
        assert entry.is_array is True
        assert entry.has_description is True
        assert entry.description == ["Tags"]


class TestRender:
    def test_functions_are_rendered_in_name_order(self, engine):
        model = ClassModel("Service", template_engine=engine)
        model.add_function(simple_function("zeta"))
        model.add_function(simple_function("alpha"))

        model.render()

        names = [c["function_name"] for c in engine.contexts(FUNCTION_TEMPLATE)]
        assert names == ["alpha", "zeta"]
        assert engine.class_context["functions"] == [
            ["function:alpha", "end"],
            ["function:zeta", "end"],
        ]

    def test_properties_are_rendered_in_name_order(self, engine):
        model = ClassModel("Service", template_engine=engine)
        model.add_property(PropertyDescriptor("b", "number"))
        model.add_property(PropertyDescriptor("a", "string"))

        model.render()

        assert engine.class_context["properties"] == [
            ["property:a=string"],
            ["property:b=number"],
        ]

    def test_imports_are_sorted_and_deduplicated(self, engine):
        model = ClassModel("Service", template_engine=engine)
        for name in ["b", "a", "b", "c"]:
            model.add_imports(name)

        model.render()

        assert engine.class_context["imports"] == ["a", "b", "c"]
        assert engine.class_context["has_imports"] is True

    def test_member_imports_are_merged_at_render_time(self, engine):
        model = ClassModel("Service", template_engine=engine)
        model.add_imports("b")
        model.add_function(simple_function("list", imports=["a", "b"]))
        model.add_property(PropertyDescriptor("owner", "Owner", import_name="c"))
        model.add_property(PropertyDescriptor("id", "string"))

        assert model.imports.get() == ["b"]

        model.render()

        assert model.imports.get() == ["b", "a", "c"]
        assert engine.class_context["imports"] == ["a", "b", "c"]

    def test_overwrite_keeps_the_last_property(self, engine):
        model = ClassModel("Service", template_engine=engine)
        model.add_property(PropertyDescriptor("id", "string"))
        model.add_property(PropertyDescriptor("id", "number"))

        model.render()

        assert engine.class_context["properties"] == [["property:id=number"]]
        assert len(engine.contexts(PROPERTY_TEMPLATE)) == 1

    def test_overwrite_keeps_the_last_function(self, engine):
        model = ClassModel("Service", template_engine=engine)
        model.add_function(simple_function("list", imports=["first"]))
        model.add_function(
            FunctionDescriptor("list", "POST", "/list", imports=["second"])
        )

        model.render()

        contexts = engine.contexts(FUNCTION_TEMPLATE)
        assert [c["http_method"] for c in contexts] == ["POST"]
        assert engine.class_context["imports"] == ["second"]

    def test_interface_flag_follows_function_count(self, engine):
        model = ClassModel("Service", template_engine=engine)
        model.add_property(PropertyDescriptor("id", "string"))

        model.render()
        assert engine.class_context["is_interface"] is True
        assert engine.class_context["has_functions"] is False

        model.add_function(simple_function("list"))
        model.render()
        assert engine.class_context["is_interface"] is False
        assert engine.class_context["has_functions"] is True

    def test_empty_model_renders_as_interface(self, engine):
        ClassModel("Empty", template_engine=engine).render()

        context = engine.class_context
        assert context["is_interface"] is True
        assert context["has_imports"] is False
        assert context["imports"] == []
        assert context["has_properties"] is False
        assert context["properties"] == []
        assert context["has_functions"] is False
        assert context["functions"] == []

    def test_description_channel_empty(self, engine):
        ClassModel("Service", template_engine=engine).render()

        assert engine.class_context["has_description"] is False
        assert engine.class_context["description"] == []

    def test_description_channel_populated(self, engine):
        model = ClassModel("Service", template_engine=engine)
        model.add_description("Users of the platform.\nRead only.")

        model.render()

        assert engine.class_context["has_description"] is True
        assert engine.class_context["description"] == [
            "Users of the platform.",
            "Read only.",
        ]

    def test_template_errors_propagate(self):
        engine = TemplateEngine()
        engine.add_template(PROPERTY_TEMPLATE, "{{ missing_field }}")
        model = ClassModel("Service", template_engine=engine)
        model.add_property(PropertyDescriptor("id", "string"))

        with pytest.raises(TemplateError):
            model.render()

    def test_custom_template_names(self, engine):
        config = GeneratorConfig(class_template="custom-class.j2")
        model = ClassModel("Service", template_engine=engine, config=config)

        model.render()

        assert engine.calls[-1][0] == "custom-class.j2"


class TestPackagedTemplates:
    def test_end_to_end_user_account(self):
        model = ClassModel("User Account")
        model.add_property(
            PropertyDescriptor("id", "string", required=True, is_array=False)
        )
        model.add_function(get_user())

        result = model.render()
        lines = result.text.splitlines()

        assert result.type_name == "UserAccount"
        assert result.file_name == "user-account"
        assert lines[0] == 'import {User} from "../interface/user";'
        assert "export class UserAccount {" in lines
        assert "    id: string;" in lines
        assert (
            "    public getUser(id: string, interceptor?: RequestInterceptor): "
            "Promise<User> {" in lines
        )
        assert "            path: `/users/${id}`," in lines
        assert "            jsonResponse: true," in lines
        assert lines[-1] == "}"

    def test_interface_output(self):
        model = ClassModel("user")
        model.add_property(PropertyDescriptor("tags", "string", is_array=True))
        model.add_property(PropertyDescriptor("name", "string", required=True))

        result = model.render()

        assert result.text == (
            "export interface User {\n" "    name: string;\n" "    tags?: string[];\n" "}"
        )

    def test_empty_interface_output(self):
        assert ClassModel("Empty").render().text == "export interface Empty {\n}"

    def test_description_output(self):
        model = ClassModel("user")
        model.add_description("A registered user")
        model.add_property(
            PropertyDescriptor("name", "string", required=True, description="Full name")
        )

        lines = model.render().text.splitlines()

        assert lines[:4] == ["/**", " * A registered user", " */", "export interface User {"]
        assert lines[4:7] == ["    /**", "     * Full name", "     */"]

    def test_query_parameters_and_body(self):
        model = ClassModel("search")
        model.add_function(
            FunctionDescriptor(
                "search",
                "post",
                "/search",
                query_parameters=["page", "size"],
                parameter_class_name="SearchParameters",
                request_body_class="SearchRequest",
                is_request_body_json=True,
                force_interceptor=True,
            )
        )

        lines = model.render().text.splitlines()

        assert (
            "    public search(parameters: SearchParameters, body: SearchRequest, "
            "interceptor?: RequestInterceptor): Promise<void> {" in lines
        )
        assert '            method: "POST",' in lines
        assert (
            '            path: `/search` + getQueryParameters(parameters, ["page", "size"]),'
            in lines
        )
        assert "            body: JSON.stringify(body)," in lines
        assert "            interceptor: interceptor || this.interceptor," in lines

    def test_registration_order_does_not_change_output(self):
        def build(order):
            model = ClassModel("Service")
            members = {
                "alpha": lambda: model.add_function(simple_function("alpha", ["x"])),
                "zeta": lambda: model.add_function(simple_function("zeta", ["a"])),
                "id": lambda: model.add_property(
                    PropertyDescriptor("id", "string", import_name="m")
                ),
                "name": lambda: model.add_property(PropertyDescriptor("name", "string")),
                "import": lambda: model.add_imports("b"),
            }
            for key in order:
                members[key]()
            return model.render().text

        first = build(["alpha", "zeta", "id", "name", "import"])
        second = build(["import", "name", "zeta", "id", "alpha"])

        assert first == second


def test_missing_function_imports_are_skipped(engine):
    model = ClassModel("Service", template_engine=engine)
    model.add_function(simple_function("list", imports=["x", None, ""]))
    model.add_property(PropertyDescriptor("id", "string", import_name=None))

    model.render()

    assert engine.class_context["imports"] == ["x"]
