"""
Pydantic models for representing the bridge object model.

These models define the structure handed to the binding generator: classes,
their data properties, and their methods with argument lists.
"""

from enum import Enum
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PropertyKind(str, Enum):
    """Closed set of property kinds understood by the generator"""

    string = "string"
    number = "number"
    boolean = "boolean"
    function = "function"
    object = "object"


class ArgumentType(str, Enum):
    """Closed set of argument type tags; everything non-primitive is a UnionType"""

    string = "string"
    number = "number"
    boolean = "boolean"
    union = "UnionType"


class Argument(BaseModel):
    """A single declared parameter of a method"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Parameter name, empty when the binding is a destructuring pattern", default="")
    type: ArgumentType = Field(description="Primitive type tag or UnionType", default=ArgumentType.union)
    required: bool = Field(description="False only when the parameter is marked optional with `?`", default=True)


class Property(BaseModel):
    """A data property of a class"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Property name as written in the interface")
    kind: PropertyKind = Field(description="Kind of the property value")


class Method(Property):
    """A method, or a property typed as a function"""

    kind: PropertyKind = Field(description="Always `function` for methods", default=PropertyKind.function)
    arguments: Tuple[Argument, ...] = Field(description="Arguments in declared order", default_factory=tuple)

    @field_validator("kind")
    @classmethod
    def kind_must_be_function(cls, value: PropertyKind) -> PropertyKind:
        if value is not PropertyKind.function:
            raise ValueError(f"method kind must be 'function', got '{value.value}'")
        return value


class ClassObject(BaseModel):
    """One bridge-exposed object type, built from an interface declaration"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(description="Interface name")
    base_type: Optional[str] = Field(
        description="Name of the single parent interface, if it is a plain identifier",
        default=None,
        alias="baseType",
    )
    properties: Tuple[Property, ...] = Field(default_factory=tuple)
    methods: Tuple[Method, ...] = Field(default_factory=tuple)


class Blob(BaseModel):
    """One source unit read from disk"""
    model_config = ConfigDict(frozen=True)

    source_file: str = Field(description="Path to the source file")
    filename: str = Field(description="File name without the .d.ts / .ts suffix")
    raw: str = Field(description="Source text", repr=False)


class BlobStructure(BaseModel):
    """Analysis result of one source unit"""

    source_file: str = Field(description="Path to the source file")
    filename: str = Field(description="File name without the .d.ts / .ts suffix")
    objects: List[ClassObject] = Field(description="Classes in source order", default_factory=list)


class AnalysisFailure(BaseModel):
    """A source unit that could not be analyzed"""

    source_file: str
    error: str
    node_type: Optional[str] = Field(description="Syntax kind of the unsupported member name, if any", default=None)


class AnalysisOutput(BaseModel):
    """Container for the entire analysis output"""

    units: List[BlobStructure] = Field(default_factory=list)
    failures: List[AnalysisFailure] = Field(default_factory=list)
