"""
TypeScript interface parser implementation.

This module parses TypeScript declaration sources with the tree-sitter library and
turns every interface declaration into a ClassObject: property signatures become
properties, method signatures and function-typed properties become methods.
"""

import logging
from typing import Iterable, List, Optional

import tree_sitter
from tree_sitter import Language, Parser
import tree_sitter_typescript as tstypescript

from bridge_idl.static_analysis.model.model import (
    Argument,
    ClassObject,
    Method,
    Property,
    PropertyKind,
)
from bridge_idl.static_analysis.parsers.base_parser import BaseParser
from bridge_idl.static_analysis.parsers.errors import UnsupportedMemberNameError
from bridge_idl.static_analysis.parsers.literals import decode_string_literal, normalize_numeric_literal
from bridge_idl.static_analysis.parsers.type_mapping import annotation_type, get_argument_type, get_property_kind

logger = logging.getLogger(__name__)

# Marker interfaces that host objects extend; they are never emitted themselves.
RESERVED_INTERFACE_NAMES = ("HostObject", "HostClass")

# `export interface X` and `declare interface X` wrap the interface declaration.
WRAPPER_NODE_TYPES = ("export_statement", "ambient_declaration")

PARAMETER_NODE_TYPES = ("required_parameter", "optional_parameter")


class TypeScriptParser(BaseParser):
    """
    Parser for TypeScript interface declarations using the tree-sitter library.

    A parser instance holds its own tree-sitter parser and no other state, so
    analyzing the same source twice yields equal results. Use one instance per
    thread when analyzing units concurrently.
    """

    def __init__(self, verbose: bool = False):
        """Initialize the TypeScript parser with tree-sitter language grammar."""
        self.verbose = verbose
        try:
            self.typescript_language = Language(tstypescript.language_typescript())
            self.tree_sitter_parser = Parser()
            self.tree_sitter_parser.language = self.typescript_language
            if self.verbose:
                logger.debug("Tree-sitter TypeScript parser initialized successfully")
        except Exception as e:
            raise RuntimeError(f"Failed to initialize tree-sitter parser for TypeScript: {e}")

    def parse(self, file_content: str) -> tree_sitter.Tree:
        """Parse source code with tree-sitter and return the AST."""
        try:
            tree = self.tree_sitter_parser.parse(file_content.encode('utf-8'))
        except Exception as e:
            raise RuntimeError(f"Tree-sitter parsing failed: {e}")
        if tree.root_node.has_error:
            logger.warning("Source contains syntax errors, analyzing the recovered tree")
        return tree

    def analyze_statements(self, statements: Iterable[tree_sitter.Node]) -> List[ClassObject]:
        objects = []
        for statement in statements:
            class_object = self._walk_statement(statement)
            if class_object is not None:
                objects.append(class_object)
        return objects

    def _get_node_text(self, node: tree_sitter.Node) -> str:
        """Extract text content of a node."""
        return str(node.text, encoding='utf-8')

    def _unwrap_declaration(self, statement: tree_sitter.Node) -> tree_sitter.Node:
        node = statement
        while node.type in WRAPPER_NODE_TYPES:
            inner = node.child_by_field_name('declaration')
            if inner is None:
                inner = next((c for c in node.named_children if c.type not in ('comment', 'decorator')), None)
            if inner is None:
                return node
            node = inner
        return node

    def _walk_statement(self, statement: tree_sitter.Node) -> Optional[ClassObject]:
        """Classify one top-level statement; only interface declarations yield a ClassObject."""
        declaration = self._unwrap_declaration(statement)
        if declaration.type != 'interface_declaration':
            return None

        interface_name = self._get_node_text(declaration.child_by_field_name('name'))
        if interface_name in RESERVED_INTERFACE_NAMES:
            return None

        properties: List[Property] = []
        methods: List[Method] = []
        body = declaration.child_by_field_name('body')
        if body is not None:
            for member in body.named_children:
                self._walk_member(member, properties, methods)

        return ClassObject(
            name=interface_name,
            base_type=self._get_heritage_type(declaration),
            properties=properties,
            methods=methods,
        )

    def _get_heritage_type(self, declaration: tree_sitter.Node) -> Optional[str]:
        """Return the first extended type if it is a plain identifier."""
        heritage = next((c for c in declaration.children if c.type == 'extends_type_clause'), None)
        if heritage is None:
            return None
        types = heritage.children_by_field_name('type')
        if not types:
            types = [c for c in heritage.named_children if c.type != 'comment']
        if types and types[0].type == 'type_identifier':
            return self._get_node_text(types[0])
        return None

    def _walk_member(self, member: tree_sitter.Node, properties: List[Property], methods: List[Method]):
        if member.type == 'property_signature':
            name = self._get_prop_name(member.child_by_field_name('name'))
            type_node = annotation_type(member.child_by_field_name('type'))
            if type_node is None:
                if self.verbose:
                    logger.debug(f"Skipping untyped property '{name}'")
                return
            kind = get_property_kind(type_node)
            if kind is PropertyKind.function:
                methods.append(Method(name=name, arguments=self._get_arguments(type_node)))
            else:
                properties.append(Property(name=name, kind=kind))

        elif member.type == 'method_signature':
            name_node = member.child_by_field_name('name')
            name = self._get_prop_name(name_node)
            if self._is_accessor(member, name_node):
                if self.verbose:
                    logger.debug(f"Skipping accessor '{name}'")
                return
            methods.append(Method(name=name, arguments=self._get_arguments(member)))

        elif member.type != 'comment' and self.verbose:
            logger.debug(f"Skipping member of kind {member.type}")

    def _is_accessor(self, member: tree_sitter.Node, name_node: tree_sitter.Node) -> bool:
        """Check whether a method signature is a `get` / `set` accessor."""
        for child in member.children:
            if child == name_node:
                return False
            if not child.is_named and child.type in ('get', 'set'):
                return True
        return False

    def _get_prop_name(self, name_node: tree_sitter.Node) -> str:
        if name_node.type == 'property_identifier':
            return self._get_node_text(name_node)
        elif name_node.type == 'string':
            return decode_string_literal(name_node)
        elif name_node.type == 'number':
            return normalize_numeric_literal(self._get_node_text(name_node))
        raise UnsupportedMemberNameError(name_node.type, name_node)

    def _get_arguments(self, signature: tree_sitter.Node) -> List[Argument]:
        """Extract arguments from a function type or method signature, in declared order."""
        parameters = signature.child_by_field_name('parameters')
        if parameters is None:
            return []
        return [
            self._parameter_to_argument(parameter)
            for parameter in parameters.named_children
            if parameter.type in PARAMETER_NODE_TYPES
        ]

    def _parameter_to_argument(self, parameter: tree_sitter.Node) -> Argument:
        return Argument(
            name=self._get_parameter_name(parameter.child_by_field_name('pattern')),
            type=get_argument_type(annotation_type(parameter.child_by_field_name('type'))),
            required=parameter.type != 'optional_parameter',
        )

    def _get_parameter_name(self, pattern: Optional[tree_sitter.Node]) -> str:
        if pattern is None:
            return ''
        if pattern.type == 'rest_pattern':
            pattern = next((c for c in pattern.named_children if c.type != 'comment'), None)
            if pattern is None:
                return ''
        if pattern.type in ('identifier', 'this'):
            return self._get_node_text(pattern)
        return ''
