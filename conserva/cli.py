"""Command line entry point: client subcommands or a server instance."""

from __future__ import annotations

import argparse
import re
import sys

from conserva import controller as ctl

_TIME = re.compile(r"\s*\+?(\d+)(?::\s*\+?(\d+))?")


def parse_time(text: str) -> int | None:
    """Parse "seconds" or "minutes:seconds" into seconds; None if invalid."""
    match = _TIME.match(text)
    if match is None:
        return None
    first, second = match.groups()
    if second is None:
        return int(first)
    return int(first) * 60 + int(second)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conserva",
        description="A command line first pomodoro timer",
        epilog="Run with no arguments to start a server instance.",
    )
    parser.add_argument(
        "-a",
        "--auto-reload",
        action="store_true",
        help="Automatically reload pomodoro timer when finished",
    )
    sub = parser.add_subparsers(dest="command")

    start = sub.add_parser("start", description="Start pomodoro iteration")
    start.add_argument("-n", "--name", help="Pomodoro name")
    start.add_argument(
        "-w", "--work-time", help="Work time; can be specified as seconds or minutes:seconds"
    )
    start.add_argument(
        "-r", "--relax-time", help="Relax time; can be specified as seconds or minutes:seconds"
    )

    sub.add_parser("stop", description="Pause current pomodoro")
    sub.add_parser(
        "report", description="Print (and show in notification) current pomodoro information"
    )

    config = sub.add_parser("config", description="Configure an existing instance")
    config.add_argument(
        "-a",
        "--auto-reload",
        dest="config_auto_reload",
        action="store_true",
        help="Automatically reload pomodoro timer when finished",
    )
    return parser


def _parse_optional_time(value: str | None) -> tuple[bool, int | None]:
    if value is None:
        return True, None
    seconds = parse_time(value)
    return seconds is not None, seconds


def _run_server(auto_reload: bool) -> int:
    with ctl.Controller(auto_reload) as controller:
        try:
            while not controller.should_quit():
                controller.manage_server()
        except KeyboardInterrupt:
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "start":
            times = []
            for value in (args.work_time, args.relax_time):
                ok, seconds = _parse_optional_time(value)
                if not ok:
                    print(f"Invalid time input: {value}", file=sys.stderr)
                    parser.print_help(sys.stderr)
                    return 1
                times.append(seconds)
            ctl.send_start_message(args.name, times[0], times[1])
        elif args.command == "stop":
            ctl.send_stop_message()
        elif args.command == "config":
            ctl.send_config_message(args.auto_reload or args.config_auto_reload)
        elif args.command == "report":
            response = ctl.send_report_message()
            if response is not None:
                print(response)
        else:
            return _run_server(args.auto_reload)
    except OSError as err:
        print(err, file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())