"""Thin CLI entry point: serves the panel or runs it once against a simulated sequence."""

import argparse
import logging
import random
import sys

from silencecut.host import MemoryHost
from silencecut.panel import Panel
from silencecut.rpc import Channel
from silencecut.web import create_app, demo_sequence


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="silencecut",
        description="SilenceCut: find silent stretches in a sequence and ripple-delete them.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output")
    sub = parser.add_subparsers(dest="command")

    def add_sequence_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--duration", type=float, default=120.0, help="Simulated sequence length (seconds)")
        p.add_argument("--fps", type=float, default=30.0, help="Simulated sequence frame rate")
        p.add_argument("--audio-tracks", type=int, default=1, help="Audio tracks holding clips")
        p.add_argument("--seed", type=int, default=None, help="Seed for repeatable detection")

    serve = sub.add_parser("serve", help="Launch the web panel")
    serve.add_argument("--port", type=int, default=8321, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")
    add_sequence_args(serve)

    demo = sub.add_parser("demo", help="Analyze and cut a simulated sequence once")
    demo.add_argument("--threshold", type=float, default=None, help="Silence threshold in dB")
    demo.add_argument("--min-duration", type=float, default=None, help="Minimum silence duration (ms)")
    demo.add_argument("--padding", type=float, default=None, help="Padding kept at each edge (ms)")
    add_sequence_args(demo)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    _setup_logging(args.verbose)

    sequence = demo_sequence(args.duration, args.fps, args.audio_tracks)
    host = MemoryHost(sequence)
    rng = random.Random(args.seed) if args.seed is not None else None

    if args.command == "serve":
        app = create_app(host, rng=rng)
        print(f"SilenceCut panel: http://{args.host}:{args.port}")
        app.run(host=args.host, port=args.port, debug=False)
        return

    panel = Panel(Channel(host, rng=rng))
    panel.set_controls({
        name: value
        for name, value in (
            ("threshold", args.threshold),
            ("minDuration", args.min_duration),
            ("padding", args.padding),
        )
        if value is not None
    })

    original = sequence.duration
    panel.analyze()
    print(panel.status)
    state = panel.state()
    if state["results"] is None:
        sys.exit(1)
    print(f"  {state['results']['silence_count']}")
    print(f"  {state['results']['total_duration']}")

    panel.cut()
    print(panel.status)
    if panel.status.startswith("Error"):
        sys.exit(1)
    print(f"  Duration: {original:.1f}s -> {sequence.duration:.1f}s")
