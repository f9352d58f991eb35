"""
Derives MCP tool descriptors and their input schemas from entity definitions.
"""

from typing import Any, Dict, List, Literal, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, create_model

from .models import (
    EntityDefinition, FieldDefinition, GeneratedTool, HandlerType, ParameterKind, ParameterSchema,
)


def field_to_parameter(field: FieldDefinition, required: Optional[bool] = None) -> ParameterSchema:
    """Map a semantic field type onto an input parameter kind."""
    if field.type in ("number", "decimal"):
        kind = ParameterKind.NUMERIC
    elif field.type == "boolean":
        kind = ParameterKind.BOOLEAN
    elif field.type == "enum" and field.enum_values:
        kind = ParameterKind.ENUM
    else:
        # string, date, datetime, guid and enums without values
        kind = ParameterKind.TEXT

    return ParameterSchema(
        kind=kind,
        required=field.required if required is None else required,
        description=field.description or None,
        enum_values=list(field.enum_values) if kind == ParameterKind.ENUM else None,
    )


def _text(description: str, required: bool = False) -> ParameterSchema:
    return ParameterSchema(kind=ParameterKind.TEXT, required=required, description=description)


def build_list_schema() -> Dict[str, ParameterSchema]:
    return {
        "filter": _text("OData $filter expression to filter results"),
        "select": _text("Comma-separated list of fields to include in the response"),
        "expand": _text("Comma-separated list of navigation properties to expand"),
        "top": ParameterSchema(kind=ParameterKind.INTEGER, description="Maximum number of records to return"),
        "skip": ParameterSchema(kind=ParameterKind.INTEGER, description="Number of records to skip"),
        "orderBy": _text("OData $orderby expression to sort results"),
    }


def build_get_schema() -> Dict[str, ParameterSchema]:
    return {
        "id": _text("The unique identifier (GUID) of the record", required=True),
        "expand": _text("Comma-separated list of navigation properties to expand"),
    }


def build_create_schema(entity: EntityDefinition) -> Dict[str, ParameterSchema]:
    return {f.name: field_to_parameter(f) for f in entity.fields if not f.read_only}


def build_update_schema(entity: EntityDefinition) -> Dict[str, ParameterSchema]:
    schema = {"id": _text("The unique identifier (GUID) of the record to update", required=True)}
    for f in entity.fields:
        if not f.read_only and f.name != "id":
            schema[f.name] = field_to_parameter(f, required=False)
    return schema


def build_delete_schema() -> Dict[str, ParameterSchema]:
    return {"id": _text("The unique identifier (GUID) of the record to delete", required=True)}


def build_count_schema() -> Dict[str, ParameterSchema]:
    return {"filter": _text("OData $filter expression to filter records before counting")}


def build_action_schema() -> Dict[str, ParameterSchema]:
    return {"id": _text("The unique identifier (GUID) of the record to perform the action on", required=True)}


def _sentence(text: str) -> str:
    return text.rstrip().rstrip(".")


def generate_tools_for_entity(entity: EntityDefinition) -> List[GeneratedTool]:
    """List, get and count always; create/update/delete and bound actions unless read-only."""
    summary = _sentence(entity.description)
    specs = [
        (f"bc_list_{entity.plural_name}",
         f"List {entity.plural_name} from Business Central. {summary}. "
         f"Supports OData filtering, sorting, pagination, and field selection.",
         build_list_schema(), HandlerType.LIST, None),
        (f"bc_get_{entity.name}",
         f"Get a single {entity.name} by ID from Business Central. {summary}.",
         build_get_schema(), HandlerType.GET, None),
        (f"bc_count_{entity.plural_name}",
         f"Count the number of {entity.plural_name} in Business Central. "
         f"Supports OData filtering to count a subset of records.",
         build_count_schema(), HandlerType.COUNT, None),
    ]

    if not entity.is_read_only:
        specs.extend([
            (f"bc_create_{entity.name}",
             f"Create a new {entity.name} in Business Central. {summary}.",
             build_create_schema(entity), HandlerType.CREATE, None),
            (f"bc_update_{entity.name}",
             f"Update an existing {entity.name} in Business Central by ID. Only specified fields will be updated.",
             build_update_schema(entity), HandlerType.UPDATE, None),
            (f"bc_delete_{entity.name}",
             f"Delete a {entity.name} from Business Central by ID.",
             build_delete_schema(), HandlerType.DELETE, None),
        ])
        for action in entity.bound_actions:
            specs.append((
                f"bc_{action.name}_{entity.name}",
                f"{_sentence(action.description)} for a {entity.name} in Business Central.",
                build_action_schema(), HandlerType.ACTION, action.nav_path,
            ))

    tools = []
    for name, description, schema, handler, nav_path in specs:
        if entity.parent_entity:
            schema = {
                "parentId": _text(f"The unique identifier (GUID) of the parent {entity.parent_entity}", required=True),
                **schema,
            }
        tools.append(GeneratedTool(
            name=name,
            description=description,
            input_schema=schema,
            handler=handler,
            entity_name=entity.name,
            action_nav_path=nav_path,
        ))
    return tools


PYTHON_TYPES = {
    ParameterKind.TEXT: str,
    ParameterKind.NUMERIC: Union[int, float],
    ParameterKind.INTEGER: int,
    ParameterKind.BOOLEAN: bool,
}


def parameter_type(param: ParameterSchema) -> Any:
    if param.kind == ParameterKind.ENUM:
        return Literal[tuple(param.enum_values)]
    return PYTHON_TYPES[param.kind]


def build_input_model(tool: GeneratedTool) -> Type[BaseModel]:
    """Concrete pydantic model enforcing a tool's input schema."""
    fields: Dict[str, Any] = {}
    for name, param in tool.input_schema.items():
        py_type = parameter_type(param)
        if param.required:
            fields[name] = (py_type, Field(..., description=param.description))
        else:
            fields[name] = (Optional[py_type], Field(None, description=param.description))
    return create_model(
        f"{tool.name}_input",
        __config__=ConfigDict(extra="forbid"),
        **fields,
    )


def validate_arguments(tool: GeneratedTool, arguments: Dict[str, Any],
                       model: Optional[Type[BaseModel]] = None) -> Dict[str, Any]:
    """Validate raw arguments and return only the ones supplied.

    Raises pydantic.ValidationError on missing required inputs, wrong types,
    values outside an enum or unknown inputs.
    """
    model = model or build_input_model(tool)
    return model.model_validate(arguments).model_dump(exclude_none=True)
