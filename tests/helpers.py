import time
from typing import Callable


def wait_for(
        condition: Callable[[], bool],
        timeout: float = 5.0,
        interval: float = 0.02,
        message: str = "Condition not met before timeout",
):
    """
    Poll condition() until it returns True or `timeout` seconds pass.

    Raises AssertionError with `message` on timeout.
    """
    deadline = time.monotonic() + timeout

    while time.monotonic() < deadline:
        if condition():
            return
        time.sleep(interval)

    raise AssertionError(message)
