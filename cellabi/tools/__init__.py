"""Tooling built on the ABI type descriptors."""

from .analysis import TypeInfo as TypeInfo
from .analysis import describe as describe
from .analysis import iter_types as iter_types
from .analysis import min_abi_version as min_abi_version
from .analysis import unsupported_types as unsupported_types
from .parser import parse_param as parse_param
from .parser import parse_signature as parse_signature
