# src/msbt_kit/parsers/__init__.py

"""MSBT ("MsgStdBn") message table decoder.

Example:
    >>> from msbt_kit.parsers import MsbtParser
    >>>
    >>> document = MsbtParser().parse_file("common.msbt")
    >>> print(document.get("greeting"))
"""

from .base import BinaryParser
from .config import ParserConfig, load_parser_config
from .cursor import Cursor
from .errors import (
    AttributeCountMismatchError,
    BadMagicError,
    MsbtError,
    OutOfBoundsError,
    UninitializedByteOrderError,
    UnknownByteOrderError,
    UnknownSectionTagError,
)
from .header import parse_header
from .models import (
    ByteOrder,
    Label,
    MsbtDocument,
    MsbtHeader,
    ParseWarning,
    SectionInfo,
)
from .msbt_parser import MsbtParser, parse_msbt

__all__ = [
    # Parser
    "BinaryParser",
    "MsbtParser",
    "parse_msbt",
    "parse_header",
    "Cursor",
    # Config
    "ParserConfig",
    "load_parser_config",
    # Types
    "ByteOrder",
    "Label",
    "MsbtDocument",
    "MsbtHeader",
    "ParseWarning",
    "SectionInfo",
    # Errors
    "MsbtError",
    "BadMagicError",
    "UnknownByteOrderError",
    "UninitializedByteOrderError",
    "OutOfBoundsError",
    "UnknownSectionTagError",
    "AttributeCountMismatchError",
]
