"""Directory batch driver: one JSON outline per input PDF."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ..config import get_settings
from ..outline import Profile, extract_outline, get_profile
from ..utils.logging import configure_logging
from .pdf_text import ExtractionError, extract_pdf_text

LOGGER = configure_logging().getChild("batch")

Extractor = Callable[[Path], str]


@dataclass(slots=True)
class FileOutcome:
    """Result of processing a single input document."""

    source: Path
    ok: bool
    output: Optional[Path] = None
    title: Optional[str] = None
    heading_count: int = 0
    reason: Optional[str] = None


@dataclass(slots=True)
class BatchReport:
    """Aggregate tally for a batch run."""

    outcomes: List[FileOutcome] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


def output_path_for(pdf_path: Path, output_dir: Path) -> Path:
    return output_dir / f"{pdf_path.stem}.json"


def find_pdfs(input_dir: Path) -> List[Path]:
    """Return ``*.pdf`` files (any case) directly inside *input_dir*, sorted."""

    return sorted(
        path
        for path in input_dir.iterdir()
        if path.is_file() and path.suffix.lower() == ".pdf"
    )


def process_file(
    pdf_path: Path,
    output_dir: Path,
    *,
    profile: Profile,
    extractor: Extractor = extract_pdf_text,
) -> FileOutcome:
    """Extract, outline and persist one document; failures are returned, not raised."""

    LOGGER.info("[batch] Processing: %s", pdf_path.name)
    try:
        text = extractor(pdf_path)
    except ExtractionError as exc:
        LOGGER.error("[batch] Error processing %s: %s", pdf_path.name, exc)
        return FileOutcome(source=pdf_path, ok=False, reason=exc.reason)

    structure = extract_outline(pdf_path.name, text, profile)
    target = output_path_for(pdf_path, output_dir)
    try:
        target.write_text(structure.to_json(indent=2), encoding="utf-8")
    except OSError as exc:
        LOGGER.error("[batch] Could not write %s: %s", target, exc)
        return FileOutcome(
            source=pdf_path,
            ok=False,
            title=structure.title,
            heading_count=len(structure.outline),
            reason="write_failed",
        )

    LOGGER.info(
        "[batch] Processed %s -> %s (title=%r, headings=%d)",
        pdf_path.name,
        target.name,
        structure.title,
        len(structure.outline),
    )
    return FileOutcome(
        source=pdf_path,
        ok=True,
        output=target,
        title=structure.title,
        heading_count=len(structure.outline),
    )


def process_directory(
    input_dir: Path,
    output_dir: Path,
    *,
    profile: Profile | str = "batch",
    extractor: Extractor = extract_pdf_text,
) -> BatchReport:
    """Process every PDF in *input_dir*, isolating per-file failures."""

    active = get_profile(profile)
    output_dir.mkdir(parents=True, exist_ok=True)
    report = BatchReport()
    claimed: Dict[Path, Path] = {}
    for pdf_path in find_pdfs(input_dir):
        # "A.pdf" and "A.PDF" share "A.json"; the first input keeps it.
        target = output_path_for(pdf_path, output_dir)
        if target in claimed:
            LOGGER.error(
                "[batch] Skipping %s: %s is already written for %s",
                pdf_path.name,
                target.name,
                claimed[target].name,
            )
            report.outcomes.append(
                FileOutcome(source=pdf_path, ok=False, reason="output_collision")
            )
            continue
        claimed[target] = pdf_path
        report.outcomes.append(
            process_file(pdf_path, output_dir, profile=active, extractor=extractor)
        )
    return report


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Extract heading outlines from every PDF in a directory."
    )
    parser.add_argument("--input-dir", type=Path, default=settings.input_dir)
    parser.add_argument("--output-dir", type=Path, default=settings.output_dir)
    parser.add_argument(
        "--profile",
        choices=["batch", "interactive"],
        default=settings.outline_profile,
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    input_dir: Path = args.input_dir
    output_dir: Path = args.output_dir

    LOGGER.info("[batch] Input directory: %s", input_dir)
    LOGGER.info("[batch] Output directory: %s", output_dir)
    if not input_dir.is_dir():
        LOGGER.error("[batch] Input directory does not exist: %s", input_dir)
        return 1

    report = process_directory(input_dir, output_dir, profile=args.profile)
    if not report.outcomes:
        LOGGER.info("[batch] No PDF files found in input directory")
        return 0

    LOGGER.info(
        "[batch] Processing complete: %d succeeded, %d failed",
        report.processed,
        report.failed,
    )
    return report.exit_code


__all__ = [
    "BatchReport",
    "FileOutcome",
    "find_pdfs",
    "main",
    "output_path_for",
    "process_directory",
    "process_file",
]


if __name__ == "__main__":  # pragma: no cover - manual tool
    raise SystemExit(main())
