import argparse
from typing import List, Optional

from .config import get_settings
from .exceptions import DomainError
from .logging import configure_logging
from .parser import read_call_volumes
from .rules import count_alerts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count trailing-window call volume alerts")
    # Kept as a string so an unparsable value falls back to the default instead of exiting
    parser.add_argument("window_length", nargs="?", help="trailing number of minutes to average")
    parser.add_argument("--threshold", type=int, default=None)
    parser.add_argument("--samples-file", default=None, help="text file of per-minute call counts")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    logger = configure_logging(settings)

    window_length = settings.window_length
    threshold = settings.threshold if args.threshold is None else args.threshold

    # Print the default so an override is visible
    print(f"window_length={window_length}")

    if args.window_length is not None:
        try:
            window_length = int(args.window_length)
        except ValueError:
            logger.debug("Ignoring non-integer window length %r", args.window_length)
        else:
            print(f"command line argument passed in window_length={window_length}")

    try:
        samples = read_call_volumes(args.samples_file) if args.samples_file else list(settings.samples)
        alerts = count_alerts(window_length, threshold, samples)
    except DomainError as e:
        print(f"ERR:\n count_alerts():\n {e}")
        return

    print(f"Number of Alerts: {alerts}")


if __name__ == "__main__":
    main()
