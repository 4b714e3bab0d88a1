"""
Abstract base class for interface-language parsers.

This module defines the common interface that all parser implementations must follow,
so the batch analyzer can run any of them over a source unit.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

import tree_sitter

from bridge_idl.static_analysis.model.model import ClassObject


class BaseParser(ABC):
    """
    Abstract base class for interface-language parsers.

    Defines the interface that all parser implementations must follow.
    """

    @abstractmethod
    def parse(self, file_content: str) -> tree_sitter.Tree:
        """
        Parse source text into a syntax tree.

        Args:
            file_content: Content of the source unit

        Returns:
            The tree-sitter syntax tree of the unit
        """
        pass

    @abstractmethod
    def analyze_statements(self, statements: Iterable[tree_sitter.Node]) -> List[ClassObject]:
        """
        Turn the top-level statements of one source unit into class objects.

        Args:
            statements: Top-level statement nodes in source order

        Returns:
            List of ClassObject, one per qualifying interface, in source order

        Raises:
            AnalyzerError: if the unit contains a member that cannot be analyzed
        """
        pass

    def extract_classes(self, file_content: str) -> List[ClassObject]:
        """
        Parse a source unit and extract its class objects.

        Args:
            file_content: Content of the source unit

        Returns:
            List of ClassObject in source order
        """
        tree = self.parse(file_content)
        return self.analyze_statements(tree.root_node.children)
