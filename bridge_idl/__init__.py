"""
bridge-idl: TypeScript interface front end for host-object bridge code generation.

This package reads interface declarations with tree-sitter and produces the
class object model consumed by the binding generator.
"""

from .__version__ import __version__, __author__, __email__, __description__

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__description__",
]
