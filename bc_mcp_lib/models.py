"""
Data models for entity schemas, generated tools and OAuth tokens.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


FieldType = Literal["string", "number", "boolean", "date", "datetime", "guid", "decimal", "enum"]


class FieldDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType
    read_only: bool = False
    required: bool = False
    description: str = ""
    enum_values: Optional[List[str]] = None
    max_length: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def _id_is_read_only(cls, data: Any) -> Any:
        # Server-assigned keys can never be written
        if isinstance(data, dict) and data.get("name") == "id":
            data = {**data, "read_only": True}
        return data

    @model_validator(mode="after")
    def _enum_has_values(self) -> "FieldDefinition":
        if self.type == "enum" and self.enum_values is not None and len(self.enum_values) == 0:
            raise ValueError(f"Enum field '{self.name}' must declare at least one value")
        return self


class NavigationProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    target_entity: str  # resolved lazily, may not be registered yet
    is_collection: bool = False
    description: str = ""


class BoundAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    http_method: Literal["POST"] = "POST"
    nav_path: str
    has_request_body: bool = False


class EntityDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    plural_name: str
    api_path: str
    description: str = ""
    fields: List[FieldDefinition] = []
    navigation_properties: List[NavigationProperty] = []
    bound_actions: List[BoundAction] = []
    is_read_only: bool = False
    parent_entity: Optional[str] = None
    parent_navigation_property: Optional[str] = None

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        return next((f for f in self.fields if f.name == name), None)

    def get_writable_fields(self) -> List[FieldDefinition]:
        return [f for f in self.fields if not f.read_only]


class HandlerType(str, Enum):
    """The closed set of operations a generated tool can dispatch to."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    COUNT = "count"
    ACTION = "action"


class ParameterKind(str, Enum):
    TEXT = "text"
    NUMERIC = "numeric"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ENUM = "enum"


class ParameterSchema(BaseModel):
    """Abstract description of a single tool input."""
    model_config = ConfigDict(frozen=True)

    kind: ParameterKind
    required: bool = False
    description: Optional[str] = None
    enum_values: Optional[List[str]] = None


class GeneratedTool(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    input_schema: Dict[str, ParameterSchema]
    handler: HandlerType
    entity_name: str
    action_nav_path: Optional[str] = None


class TokenData(BaseModel):
    """OAuth token set; expires_at is an absolute epoch timestamp in milliseconds."""
    model_config = ConfigDict(populate_by_name=True)

    access_token: str = Field(alias="accessToken")
    refresh_token: str = Field(default="", alias="refreshToken")
    expires_at: int = Field(alias="expiresAt")

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class ToolResponse(BaseModel):
    """Text payload returned to the MCP host, flagged when it carries an error."""
    text: str
    is_error: bool = False
