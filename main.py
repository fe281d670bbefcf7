"""
Notifier demo runner
Publish weather readings through an in-process WeatherStation and print the
delivery report of each publish call.
Usage:
    python main.py
    python main.py --reading Sunny:24 --reading Rainy:17
    python main.py --fail tv --timeout 0.5
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from Notifier.Demo.weather_station import DISPLAYS, WeatherStation
from Notifier.Events.dispatcher import Dispatcher
from Notifier.Utility.config import load_settings


def parse_reading(value: str) -> Tuple[str, Optional[float]]:
    condition, _, temperature = value.partition(":")
    condition = condition.strip()
    if not condition:
        raise argparse.ArgumentTypeError(f"invalid reading: {value!r}")
    if not temperature:
        return condition, None
    try:
        return condition, float(temperature)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid temperature in reading: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Notifier weather station demo",
        epilog="""
            Examples:
            python main.py                               # Publish Sunny then Rainy
            python main.py --reading Sunny:24            # Publish a single reading
            python main.py --fail tv                     # Make the TV display fail
            python main.py --timeout 0.5                 # Per-observer deadline in seconds
        """
    )
    parser.add_argument(
        '--reading',
        action='append',
        type=parse_reading,
        help='Weather reading as CONDITION[:TEMPERATURE]; repeatable (default: Sunny, Rainy)'
    )
    parser.add_argument(
        '--fail',
        action='append',
        default=[],
        choices=sorted(DISPLAYS),
        help='Display that should fail on every update; repeatable'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Per-observer timeout in seconds (default: NOTIFIER_OBSERVER_TIMEOUT or none)'
    )
    parser.add_argument(
        '--env-file',
        default='.env',
        help='Environment file to load before reading settings (default: .env)'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the demo and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be greater than 0")
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = load_settings(args.env_file)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    readings = args.reading or [("Sunny", None), ("Rainy", None)]

    station = WeatherStation(Dispatcher.from_settings(settings))
    for name, display in DISPLAYS.items():
        station.attach(display(fail=name in args.fail))

    any_failed = False
    for condition, temperature in readings:
        report = station.set_weather(condition, temperature, timeout=args.timeout)
        any_failed = any_failed or not report.ok
        print(json.dumps({"reading": condition, **report.as_dict()}))

    return 1 if any_failed else 0


if __name__ == '__main__':
    sys.exit(main())
