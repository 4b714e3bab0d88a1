"""
Exceptions raised while analyzing interface declarations.
"""

from typing import Optional

import tree_sitter


class AnalyzerError(Exception):
    """Base class for errors that make a whole source unit unanalyzable."""

    def __init__(self, message: str, node: Optional[tree_sitter.Node] = None):
        self.message = message
        self.node = node
        super().__init__(message)

    @property
    def line(self) -> Optional[int]:
        """1-based line of the offending node, if known."""
        if self.node is None:
            return None
        return self.node.start_point[0] + 1


class UnsupportedMemberNameError(AnalyzerError):
    """Raised when a member name is not an identifier, string or number literal.

    The generator needs a stable textual name for every member, so a computed
    name such as ``[Symbol.iterator]`` cannot be analyzed.
    """

    def __init__(self, node_type: str, node: Optional[tree_sitter.Node] = None):
        self.node_type = node_type
        super().__init__(f"prop name: {node_type} is not supported", node)
