"""cellabi - ABI type descriptors for cell-based smart contracts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("cellabi")
except PackageNotFoundError:
    __version__ = "(local)"
