"""Filesystem entrypoints: load `.jack` sources, parse them, write tree files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from jackpy.parser import ParseMode, ParserOptions, parse_result
from jackpy.pipeline.result import JackParseResult

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".jack"
TREE_SUFFIX = ".xml"
TOKENS_SUFFIX = "T.xml"


@dataclass(frozen=True, slots=True)
class AnalyzeFileResult:
    """Result of analyzing one source file."""

    source_path: Path
    parse: JackParseResult
    written: tuple[Path, ...]

    @property
    def ok(self) -> bool:
        return self.parse.ok


def load_source(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_output(path: str | Path, text: str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", target)
    return target


def collect_sources(path: str | Path) -> list[Path]:
    """A single `.jack` file, or every `.jack` file directly inside a directory."""
    root = Path(path)
    if root.is_dir():
        return sorted(p for p in root.glob(f"*{SOURCE_SUFFIX}") if p.is_file())
    if root.is_file():
        return [root]
    raise FileNotFoundError(f"No such file or directory: {root}")


def analyze_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    output_dir: str | Path | None = None,
    write_tokens: bool = False,
) -> AnalyzeFileResult:
    """Parse one file; write `<stem>.xml` (and `<stem>T.xml`) only when it parses."""
    source_path = Path(path)
    text = load_source(source_path)
    parsed = parse_result(text, options=options, mode=mode)

    for diagnostic in parsed.diagnostics:
        if diagnostic.severity == "warning":
            logger.warning("%s: %s %s", source_path, diagnostic.code, diagnostic.message)

    if not parsed.ok:
        return AnalyzeFileResult(source_path=source_path, parse=parsed, written=())

    target_dir = Path(output_dir) if output_dir is not None else source_path.parent
    written = [write_output(target_dir / f"{source_path.stem}{TREE_SUFFIX}", parsed.unwrap())]
    if write_tokens:
        written.append(write_output(target_dir / f"{source_path.stem}{TOKENS_SUFFIX}", parsed.tokens_xml()))
    return AnalyzeFileResult(source_path=source_path, parse=parsed, written=tuple(written))


def analyze_path(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    output_dir: str | Path | None = None,
    write_tokens: bool = False,
) -> list[AnalyzeFileResult]:
    return [
        analyze_file(source, options, mode=mode, output_dir=output_dir, write_tokens=write_tokens)
        for source in collect_sources(path)
    ]
