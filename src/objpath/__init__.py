"""
objpath: read values out of nested objects with dotted/bracketed paths.

This package uses a src-layout. Import the package as `objpath`.
"""

from importlib.metadata import version

__version__ = version("objpath")

from .config import OBJPATH_CONFIG, ObjPathConfig
from .errors import (
    InvalidObjectPathError,
    ObjPathConfigError,
    ObjPathError,
    PathErrorKind,
)
from .api import (
    clear_caches,
    get_value,
    get_value_as,
    get_value_or_none,
    try_get_value,
    try_get_value_as,
)
from .cache import MemberLookupCache, get_member_cache
from .coerce import coerce
from .documents import JsonKind, JsonNode, materialize
from .results import Failed, Resolved
from .runtime import configure_logging, get_logger
from .shapes import ShapeKind, classify
from .tokenizer import tokenize
from .views import AttrDict, to_attr_dict

__all__ = [
    "__version__",
    "OBJPATH_CONFIG",
    "AttrDict",
    "Failed",
    "InvalidObjectPathError",
    "JsonKind",
    "JsonNode",
    "MemberLookupCache",
    "ObjPathConfig",
    "ObjPathConfigError",
    "ObjPathError",
    "PathErrorKind",
    "Resolved",
    "ShapeKind",
    "classify",
    "clear_caches",
    "coerce",
    "configure_logging",
    "get_logger",
    "get_member_cache",
    "get_value",
    "get_value_as",
    "get_value_or_none",
    "materialize",
    "to_attr_dict",
    "tokenize",
    "try_get_value",
    "try_get_value_as",
]
