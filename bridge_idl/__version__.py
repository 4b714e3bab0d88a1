__version__ = "0.1.0"
__author__ = "bridge-idl developers"
__email__ = "bridge-idl@users.noreply.github.com"
__description__ = "TypeScript interface front end for host-object bridge code generation"
