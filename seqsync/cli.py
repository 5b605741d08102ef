#!/usr/bin/env python3
"""
Command-line driver for seqsync.

Usage:
    seqsync reconcile --spec 1,8,9,10 --state 0,0,8,0 [--table] [--trace] [--json]
    seqsync check --spec 1,8,9,10 --state 0,8,0,0
    seqsync batch cases.txt

Batch files hold one "spec|state" pair per line; blank lines and lines
starting with "#" are skipped.

Exit codes: 0 converged / matching, 1 failed / mismatching, 2 bad input.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from pydantic import ValidationError

from seqsync.domain.schemas.sequence_pair import SequencePair
from seqsync.domain.services.reconciler import ReconcileResult, reconcile, sequences_match
from seqsync.domain.services.trace import LoggingTraceSink, TraceRecorder
from seqsync.domain.utils.sequence_text import format_sequence, parse_sequence, render_table
from seqsync.observability.logging import configure_logging
from seqsync.observability.metrics import get_metrics_collector
from seqsync.settings import Settings, get_settings


def _load_pair(spec_text: str, state_text: str, settings: Settings) -> SequencePair:
    spec = parse_sequence(spec_text)
    state = parse_sequence(state_text)
    if settings.validate_inputs:
        return SequencePair(spec=spec, state=state)
    return SequencePair.model_construct(spec=spec, state=state)


def _run_one(
    pair: SequencePair,
    settings: Settings,
    recorder: Optional[TraceRecorder] = None,
) -> Tuple[List[int], ReconcileResult]:
    sinks = []
    if recorder is not None:
        sinks.append(recorder)
    if settings.trace_logging:
        sinks.append(LoggingTraceSink())

    def trace(event):
        for sink in sinks:
            sink(event)

    state = list(pair.state)
    result = reconcile(pair.spec, state, trace=trace if sinks else None)
    get_metrics_collector().record(result)
    return state, result


def _print_result(
    spec: Sequence[int],
    before: Sequence[int],
    after: Sequence[int],
    result: ReconcileResult,
    settings: Settings,
    show_table: bool,
) -> None:
    print(f"{result.status.value}: {format_sequence(before)} -> {format_sequence(after)}")
    if result.edits:
        print("edits: " + ", ".join(result.summary["edits"]))
    if result.stale_removed:
        print("stale removed: " + format_sequence(result.stale_removed))
    if not result.converged:
        print(f"reason: {result.reason}")
    if show_table:
        print(render_table(spec, after, width=settings.table_width))


def cmd_reconcile(args: argparse.Namespace, settings: Settings) -> int:
    try:
        pair = _load_pair(args.spec, args.state, settings)
    except (ValueError, ValidationError) as e:
        print(f"invalid input: {e}", file=sys.stderr)
        return 2

    recorder = TraceRecorder() if args.trace else None
    state, result = _run_one(pair, settings, recorder)

    if args.json:
        payload = {**result.summary, "spec": pair.spec, "state": state}
        if recorder is not None:
            payload["trace"] = [{"kind": e.kind.value, **e.data} for e in recorder.events]
        print(json.dumps(payload))
    else:
        _print_result(pair.spec, pair.state, state, result, settings, args.table)
        if recorder is not None:
            for event in recorder.events:
                fields = " ".join(f"{k}={v}" for k, v in event.data.items())
                print(f"  {event.kind.value} {fields}")

    return 0 if result.converged else 1


def cmd_check(args: argparse.Namespace, settings: Settings) -> int:
    try:
        pair = _load_pair(args.spec, args.state, settings)
    except (ValueError, ValidationError) as e:
        print(f"invalid input: {e}", file=sys.stderr)
        return 2

    if sequences_match(pair.spec, pair.state):
        print("match")
        return 0
    print("mismatch")
    return 1


def _read_cases(path: Path) -> List[Tuple[int, str]]:
    cases = []
    for lineno, line in enumerate(path.read_text().splitlines(), start=1):
        line = line.strip()
        if line and not line.startswith("#"):
            cases.append((lineno, line))
    return cases


def _split_case(line: str) -> Tuple[str, str]:
    spec_text, sep, state_text = line.partition("|")
    if not sep:
        raise ValueError(f"expected 'spec|state', got {line!r}")
    return spec_text, state_text


def cmd_batch(args: argparse.Namespace, settings: Settings) -> int:
    try:
        cases = _read_cases(Path(args.file))
    except OSError as e:
        print(f"invalid input: {e}", file=sys.stderr)
        return 2

    collector = get_metrics_collector()
    rejected = 0
    for lineno, line in cases:
        try:
            pair = _load_pair(*_split_case(line), settings)
        except (ValueError, ValidationError) as e:
            print(f"line {lineno}: invalid input: {e}", file=sys.stderr)
            collector.record_rejected()
            rejected += 1
            continue
        state, result = _run_one(pair, settings)
        print(f"line {lineno}: ", end="")
        _print_result(pair.spec, pair.state, state, result, settings, args.table)

    metrics = collector.get_metrics()
    print(
        f"{metrics.calls} case(s): {metrics.converged} converged, {metrics.failed} failed, "
        f"{metrics.edits_applied} edit(s), {metrics.success_rate:.0%} success"
    )
    if rejected:
        return 2
    return 0 if metrics.failed == 0 else 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="seqsync", description="Reconcile a state sequence with its specification.")
    sub = ap.add_subparsers(dest="command", required=True)

    rec = sub.add_parser("reconcile", help="Reconcile one spec/state pair.")
    rec.add_argument("--spec", required=True, help="Comma-separated specification identifiers.")
    rec.add_argument("--state", required=True, help="Comma-separated state values (0 = placeholder).")
    rec.add_argument("--table", action="store_true", help="Print a side-by-side table of the result.")
    rec.add_argument("--trace", action="store_true", help="Print trace events.")
    rec.add_argument("--json", action="store_true", help="Emit the result as JSON.")
    rec.set_defaults(func=cmd_reconcile)

    chk = sub.add_parser("check", help="Report whether a pair already matches.")
    chk.add_argument("--spec", required=True)
    chk.add_argument("--state", required=True)
    chk.set_defaults(func=cmd_check)

    bat = sub.add_parser("batch", help="Reconcile every 'spec|state' line of a file.")
    bat.add_argument("file")
    bat.add_argument("--table", action="store_true")
    bat.set_defaults(func=cmd_batch)

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(log_format=settings.log_format, log_level=settings.log_level)
    return args.func(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
