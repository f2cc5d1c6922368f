"""Command that prepares and runs DynamoDB Local until interrupted."""

from __future__ import annotations

import argparse
import signal
import sys
import threading
import time

from .environment import EnvironmentError_, prepare_environment
from .launcher import start, stop_dynamodb
from .platforms import UnsupportedPlatformError


def _wait_for_termination() -> None:
    received = threading.Event()

    def _handler(signum, frame):
        received.set()

    watched = (signal.SIGINT, signal.SIGTERM)
    previous = {sig: signal.signal(sig, _handler) for sig in watched}
    try:
        while not received.wait(0.5):
            pass
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def main(argv: list[str] | None = None) -> int:
    """Run DynamoDB Local in memory until SIGINT or SIGTERM arrives."""
    parser = argparse.ArgumentParser(
        prog="nakudynamo",
        description="Download and run DynamoDB Local in memory.",
    )
    parser.parse_args(argv)

    print("Starting nakudynamo...")
    try:
        env = prepare_environment()
    except (EnvironmentError_, UnsupportedPlatformError, OSError) as exc:
        print(f"Failed to prepare environment: {exc}", file=sys.stderr)
        return 1

    try:
        process = start(env)
    except OSError as exc:
        print(f"Failed to start DynamoDB Local: {exc}", file=sys.stderr)
        return 1
    print("DynamoDB Local server started")

    _wait_for_termination()
    print("\n Termination signal received, stopping DynamoDB Local...")
    try:
        stop_dynamodb(process)
    except OSError as exc:
        print(f"Error stopping DynamoDB Local: {exc}", file=sys.stderr)

    print("Done!")
    time.sleep(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())