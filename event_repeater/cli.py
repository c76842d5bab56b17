#!/usr/bin/env python3
"""
event-repeater CLI
Runs the mod against a JSON player snapshot
"""
import json
import os
import sys

from .host import Host, ScriptedEvent, load_packs_from_dir
from .mod import entry

# Snapshot key for the manual repeater list; the host snapshot does not own it.
MANUAL_KEY = "manual_repeater"


def _boot(state_path, packs_dir=None, workdir=None):
    host = Host(packs=load_packs_from_dir(packs_dir) if packs_dir else [], working_dir=workdir)
    mod = entry(host)
    if os.path.exists(state_path):
        with open(state_path, "r", encoding="utf-8") as f:
            data = json.load(f) or {}
        host.restore(data)
        mod.state.manual.entries[:] = [int(x) for x in data.get(MANUAL_KEY, [])]
    host.fire("launched")
    return host, mod


def _save(host, mod, state_path):
    data = host.snapshot()
    data[MANUAL_KEY] = list(mod.state.manual.entries)
    with open(state_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def run_command(state_path, line, packs_dir=None, workdir=None):
    """Run one console command against the snapshot and write it back."""
    try:
        host, mod = _boot(state_path, packs_dir, workdir)
        if not host.run_command(line):
            return False
        _save(host, mod, state_path)
    except Exception as e:
        print(f"[event-repeater] ERROR: {e}")
        return False
    return True


def new_day(state_path, packs_dir=None, workdir=None, manual_files=()):
    """Start a day: every repeatable ID is removed from the snapshot."""
    try:
        host, mod = _boot(state_path, packs_dir, workdir)
        for name in manual_files:
            host.run_command(f"repeater-load {name}")
        host.fire("day_started")
        _save(host, mod, state_path)
    except Exception as e:
        print(f"[event-repeater] ERROR: {e}")
        return False
    return True


def play_event(state_path, script, event_id="cli", packs_dir=None, workdir=None):
    """Start an event with the given script lines and print what the game would run."""
    try:
        host, mod = _boot(state_path, packs_dir, workdir)
        event = ScriptedEvent(event_id=event_id, commands=list(script))
        host.start_event(event)
        host.tick()
        for line in event.commands:
            print(line)
        host.end_event()
        _save(host, mod, state_path)
    except Exception as e:
        print(f"[event-repeater] ERROR: {e}")
        return False
    return True


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        description="event-repeater: make seen events, mail and responses repeatable",
        epilog="Example: event-repeater --state player.json run inject event 1324329",
    )
    parser.add_argument("--state", default="player.json", help="Player snapshot JSON (default: player.json)")
    parser.add_argument("--packs", default=None, help="Directory of content packs to scan")
    parser.add_argument("--workdir", default=None, help="Working directory for ManualRepeaterFiles (default: cwd)")

    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Run one console command")
    run_parser.add_argument("name", help="Command name, e.g. show-events")
    run_parser.add_argument("args", nargs="*", help="Command arguments")

    day_parser = subparsers.add_parser("new-day", help="Fire the start-of-day pass")
    day_parser.add_argument(
        "--manual", action="append", default=[], help="Manual repeater file to load first (repeatable)"
    )

    event_parser = subparsers.add_parser("event", help="Start an event and apply its forget commands")
    event_parser.add_argument("--id", default="cli", help="Event id label")
    event_parser.add_argument("script", nargs="+", help="Event script instructions, one per argument")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "run":
        line = " ".join([args.name] + list(args.args))
        success = run_command(args.state, line, packs_dir=args.packs, workdir=args.workdir)
    elif args.command == "new-day":
        success = new_day(args.state, packs_dir=args.packs, workdir=args.workdir, manual_files=args.manual)
    elif args.command == "event":
        success = play_event(args.state, args.script, event_id=args.id, packs_dir=args.packs, workdir=args.workdir)
    else:
        parser.print_help()
        return
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
