#!/usr/bin/env python3
"""
Console Gate - sinkgate Demo Application

Run modes:
  python main.py                 # Deliver a handful of events to stdout
  python main.py --level DEBUG   # Lower the gate threshold
  python main.py --strict        # Let appender failures propagate
"""

import argparse
import logging
import sys

from sinkgate import (
    AbstractAppender,
    AppenderLoggingError,
    DispatchGate,
    FilterResult,
    Level,
    LogEvent,
    RegexFilter,
    StreamAppender,
)
from sinkgate.core.logging import configure_status_logger


class EchoAppender(AbstractAppender):
    """Appender that logs about itself through its own gate while appending."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.gate: DispatchGate | None = None
        self.seen = 0

    def append(self, event: LogEvent) -> None:
        self.seen += 1
        if self.gate is not None:
            self.gate.deliver(LogEvent(level=Level.DEBUG, message="echo appended"))


class FlakyAppender(AbstractAppender):
    """Appender that fails every other event."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._count = 0

    def append(self, event: LogEvent) -> None:
        self._count += 1
        if self._count % 2 == 0:
            raise ConnectionError("remote sink unavailable")


def main() -> int:
    parser = argparse.ArgumentParser(description="sinkgate console demo")
    parser.add_argument("--level", default="INFO", help="gate threshold level name")
    parser.add_argument("--strict", action="store_true", help="propagate appender failures")
    args = parser.parse_args()

    configure_status_logger(logging.INFO)
    threshold = Level.value_of(args.level)

    console = StreamAppender(name="console", stream=sys.stdout)
    console.start()
    console_gate = DispatchGate(
        console,
        level=threshold,
        filter=RegexFilter("heartbeat.*", on_match=FilterResult.DENY, on_mismatch=FilterResult.NEUTRAL),
    )

    echo = EchoAppender(name="echo")
    echo.start()
    echo.gate = DispatchGate(echo)

    flaky = FlakyAppender(name="flaky", ignore_failures=not args.strict)
    flaky.start()
    flaky_gate = DispatchGate(flaky)

    events = [
        LogEvent(level=Level.INFO, logger_name="demo", message="service started"),
        LogEvent(level=Level.DEBUG, logger_name="demo", message="cache warmed"),
        LogEvent(level=Level.INFO, logger_name="demo", message="heartbeat 1"),
        LogEvent(level=Level.ERROR, logger_name="demo", message="payment declined",
                 context={"order": 1234}),
    ]

    for event in events:
        print(f"{event.message!r}: console={console_gate.deliver(event).value}", file=sys.stderr)
        echo.gate.deliver(event)
        try:
            print(f"  flaky={flaky_gate.deliver(event).value}", file=sys.stderr)
        except AppenderLoggingError as e:
            print(f"  flaky raised: {e}", file=sys.stderr)
            return 1

    print(f"echo appender saw {echo.seen} events", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
