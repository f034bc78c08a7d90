"""CLI entry point: report the most frequent notes in an audio file."""

from __future__ import annotations

import argparse
from dataclasses import fields
import logging
from pathlib import Path

from audio_loader import load_audio
from frame_scanner import AnalysisConfig, FrameScanner, load_config
from report import build_report, format_json, format_text

logger = logging.getLogger(__name__)


def _to_config(args: argparse.Namespace) -> AnalysisConfig:
    cfg = load_config(args.config) if args.config else AnalysisConfig()
    # Flags left at None fall back to the config file / defaults.
    for f in fields(AnalysisConfig):
        value = getattr(args, f.name, None)
        if value is not None:
            setattr(cfg, f.name, value)
    cfg.validate()
    return cfg


def analyze_file(path: Path, cfg: AnalysisConfig, as_json: bool = False) -> str:
    buffer = load_audio(path)
    logger.info("Processing %s (%.2f s @ %g Hz)", path, buffer.duration_seconds, buffer.sample_rate)
    scan = FrameScanner(cfg).scan(buffer)
    report = build_report(str(path), buffer, scan, top_k=cfg.top_k)
    return format_json(report) if as_json else format_text(report)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the most frequent notes in a monophonic recording")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Analyze one audio file")
    p_analyze.add_argument("audio", type=Path, help="Audio file (wav, flac, ogg, ...)")
    p_analyze.add_argument("--config", type=Path, default=None, help="JSON analysis config")
    p_analyze.add_argument("--frame-length", type=int, default=None, help="FFT frame size in samples (default 4096)")
    p_analyze.add_argument("--overlap", type=int, default=None, help="Frames per hop; hop = frame/overlap (default 2)")
    p_analyze.add_argument("--min-frequency", type=float, default=None, help="Ignore peaks below this Hz (default 20)")
    p_analyze.add_argument("--min-magnitude", type=float, default=None, help="Ignore frames with weaker peaks (default 0.01)")
    p_analyze.add_argument("--reference-frequency", type=float, default=None, help="Tuning reference in Hz (default 440)")
    p_analyze.add_argument("--reference-pitch", type=int, default=None, help="Pitch number of the reference (default 69)")
    p_analyze.add_argument("--top-k", type=int, default=None, help="How many notes to show (default 10)")
    p_analyze.add_argument("--workers", type=int, default=None, help="Threads used for scanning (default 1)")
    p_analyze.add_argument("--json", action="store_true", help="Print the report as JSON")
    p_analyze.add_argument("--out", type=Path, default=None, help="Write the report to this file")

    return parser


def run_analyze(args: argparse.Namespace) -> int:
    try:
        cfg = _to_config(args)
        output = analyze_file(args.audio, cfg, as_json=args.json)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(output + "\n", encoding="utf-8")
        print(f"Report written -> {args.out}")
    else:
        print(output)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "analyze":
        return run_analyze(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
