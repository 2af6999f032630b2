"""Pipeline result carriers and file entrypoints."""

from jackpy.pipeline.entrypoints import (
    AnalyzeFileResult,
    analyze_file,
    analyze_path,
    collect_sources,
    load_source,
    write_output,
)
from jackpy.pipeline.result import JackParseResult

__all__ = [
    "AnalyzeFileResult",
    "JackParseResult",
    "analyze_file",
    "analyze_path",
    "collect_sources",
    "load_source",
    "write_output",
]
