import time
import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Politique de nouvelle tentative pour les appels distants

    max_attempts=1 signifie aucune nouvelle tentative. Le délai double
    à chaque échec : backoff_seconds, 2 * backoff_seconds, ...
    """

    max_attempts: int = 1
    backoff_seconds: float = 0.0
    sleep: Callable[[float], None] = time.sleep

    def delay_for(self, attempt: int) -> float:
        return self.backoff_seconds * (2 ** (attempt - 1))

    def call(self, func: Callable[..., T], *args, **kwargs) -> T:
        attempts = max(1, self.max_attempts)
        attempt = 1

        while True:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                if attempt >= attempts:
                    raise

                delay = self.delay_for(attempt)
                logger.warning(
                    f"{getattr(func, '__name__', 'call')} failed "
                    f"(attempt {attempt}/{attempts}): {e}; retrying in {delay:.1f}s"
                )
                if delay > 0:
                    self.sleep(delay)
                attempt += 1


NO_RETRY = RetryPolicy()
