#!/usr/bin/env python3
"""
Example usage of ff-log-facade showing the call shapes, exception logging
and the legacy Logger.add convention.
"""

import logging

from ff_log_facade import InteropError, NullBackend, create
from ff_log_facade.config import configure_logging


class OrderService:
    def __init__(self):
        self.log = create(self)

    def place(self, order_id: int) -> None:
        self.log.info(f"Placing order {order_id}")
        self.log.debug(lambda: f"Order state: {self._dump(order_id)}")

    def _dump(self, order_id: int) -> dict:
        return {"order_id": order_id, "items": list(range(3))}


def main():
    print("=" * 60)
    print("FF-LOG-FACADE USAGE EXAMPLES")
    print("=" * 60)

    configure_logging(level="DEBUG", format="console", colors=False)

    # Example 1: Named loggers
    print("\n1. Logger named by string and by class:")
    log = create("app.main")
    log.info("Application started")
    OrderService().place(42)
    print(f"  OrderService logger name: {create(OrderService).name}")

    # Example 2: Deferred messages
    print("\n2. Deferred messages are only built when enabled:")
    log.trace(lambda: "never built, trace is below DEBUG")
    log.debug(producer=lambda: "built because debug is enabled")

    # Example 3: Exceptions
    print("\n3. Exception logging:")
    try:
        int("not a number")
    except ValueError as ex:
        log.warn("Parsing failed", ex)
        log.error(ex)

    try:
        raise ConnectionError("remote end closed")
    except ConnectionError as ex:
        log.error("Call into client library failed", InteropError(ex))

    # Example 4: Legacy Logger.add
    print("\n4. Logger.add compatibility:")
    log.add(logging.WARNING, "Disk almost full", "monitor")
    log.level = logging.ERROR
    log << "Appended at the compatibility level"

    # Example 5: Null backend
    print("\n5. Null backend (no output):")
    silent = create("app.silent", backend=NullBackend())
    silent.error("This message goes nowhere")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
