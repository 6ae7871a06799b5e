import time
from typing import Callable

from .config import MAX_RETRIES, RETRY_BASE_DELAY
from .console import log


def check_max_retries(max_retries: int):
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")


def retry_call(
    action: Callable[[], object],
    max_retries: int = MAX_RETRIES,
    base_delay: float = RETRY_BASE_DELAY,
    sleep: Callable[[float], None] = time.sleep,
    label: str = "",
) -> bool:
    """
    Run action up to max_retries times and report whether any attempt succeeded.

    A failed attempt k is logged and followed by a pause of base_delay * k
    seconds, except after the final attempt. The exception itself is not
    re-raised.
    """
    check_max_retries(max_retries)

    prefix = f"{label}: " if label else ""
    for attempt in range(1, max_retries + 1):
        try:
            action()
            return True
        except Exception as e:
            log(f"⚠️ {prefix}Attempt {attempt}/{max_retries} failed: {e}")
            if attempt == max_retries:
                return False
            delay = base_delay * attempt
            log(f"🔁 {prefix}Retrying in {delay:.1f}s")
            sleep(delay)
    return False
