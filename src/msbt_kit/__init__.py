# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    ByteOrder,
    Label,
    MsbtDocument,
    MsbtError,
    MsbtParser,
    ParserConfig,
    load_parser_config,
    parse_msbt,
)

__all__ = [
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ByteOrder",
    "Label",
    "MsbtDocument",
    "MsbtError",
    "MsbtParser",
    "ParserConfig",
    "load_parser_config",
    "parse_msbt",
]
