"""Turning scan results into a printable / serializable report."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import json

from audio_loader import SampleBuffer
from frame_scanner import ScanResult


@dataclass
class NoteCount:
    name: str
    count: int


@dataclass
class AnalysisReport:
    source: str
    sample_rate: float
    duration_seconds: float
    frames_scanned: int
    frames_accepted: int
    top_notes: list[NoteCount] = field(default_factory=list)


def build_report(source: str, buffer: SampleBuffer, scan: ScanResult, top_k: int = 10) -> AnalysisReport:
    return AnalysisReport(
        source=source,
        sample_rate=buffer.sample_rate,
        duration_seconds=buffer.duration_seconds,
        frames_scanned=scan.frames_scanned,
        frames_accepted=scan.frames_accepted,
        top_notes=[NoteCount(name=name, count=count) for name, count in scan.histogram.top_names(top_k)],
    )


def _format_rate(sample_rate: float) -> str:
    return f"{sample_rate:.0f}" if float(sample_rate).is_integer() else f"{sample_rate:.2f}"


def format_text(report: AnalysisReport) -> str:
    lines = [
        f"File: {report.source}",
        f"Sample rate: {_format_rate(report.sample_rate)} Hz",
        f"Duration: {report.duration_seconds:.2f} seconds",
        "",
    ]
    if not report.top_notes:
        lines.append("No notes detected.")
        return "\n".join(lines)

    lines.append("Most common notes detected:")
    for note in report.top_notes:
        lines.append(f"{note.name}: {note.count} occurrences")
    return "\n".join(lines)


def format_json(report: AnalysisReport) -> str:
    return json.dumps(asdict(report), ensure_ascii=False, indent=2)
