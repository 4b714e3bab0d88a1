"""
Mapping of TypeScript type annotations onto the bridge kind tags.

Both mappings are total: a type node is first classified into one of a fixed
set of shapes, and every shape that is not a recognized primitive or function
falls back to `object` (for properties) or `UnionType` (for arguments).
"""

from enum import Enum
from typing import Optional

import tree_sitter

from bridge_idl.static_analysis.model.model import ArgumentType, PropertyKind


class TypeShape(Enum):
    string_keyword = "string_keyword"
    number_keyword = "number_keyword"
    boolean_keyword = "boolean_keyword"
    function_type = "function_type"
    other = "other"


_KEYWORD_SHAPES = {
    "string": TypeShape.string_keyword,
    "number": TypeShape.number_keyword,
    "boolean": TypeShape.boolean_keyword,
}

_PROPERTY_KINDS = {
    TypeShape.string_keyword: PropertyKind.string,
    TypeShape.number_keyword: PropertyKind.number,
    TypeShape.boolean_keyword: PropertyKind.boolean,
    TypeShape.function_type: PropertyKind.function,
    TypeShape.other: PropertyKind.object,
}

_ARGUMENT_TYPES = {
    TypeShape.string_keyword: ArgumentType.string,
    TypeShape.number_keyword: ArgumentType.number,
    TypeShape.boolean_keyword: ArgumentType.boolean,
    TypeShape.function_type: ArgumentType.union,
    TypeShape.other: ArgumentType.union,
}


def annotation_type(annotation: Optional[tree_sitter.Node]) -> Optional[tree_sitter.Node]:
    """Return the type node inside a `type_annotation`, skipping the colon and comments."""
    if annotation is None:
        return None
    for child in annotation.named_children:
        if child.type != "comment":
            return child
    return None


def classify_type_node(type_node: tree_sitter.Node) -> TypeShape:
    """Classify a type node into one of the recognized shapes."""
    if type_node.type == "predefined_type":
        return _KEYWORD_SHAPES.get(str(type_node.text, encoding="utf-8"), TypeShape.other)
    if type_node.type == "function_type":
        return TypeShape.function_type
    return TypeShape.other


def get_property_kind(type_node: tree_sitter.Node) -> PropertyKind:
    return _PROPERTY_KINDS[classify_type_node(type_node)]


def get_argument_type(type_node: Optional[tree_sitter.Node]) -> ArgumentType:
    # untyped parameters carry no annotation at all
    if type_node is None:
        return ArgumentType.union
    return _ARGUMENT_TYPES[classify_type_node(type_node)]
