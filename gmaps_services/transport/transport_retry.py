"""
Retry policy and per-call retry state machine.

A RetryStateMachine drives one logical request through the states

    IDLE -> ATTEMPTING -> SUCCESS
                       -> RETRY_WAIT -> ATTEMPTING ...
                       -> EXHAUSTED   (retryable error, no attempts left)
                       -> FAILED      (non-retryable error)

The loop itself is a tenacity Retrying configured from the RetryPolicy;
the machine records the state, attempt count and the delays it slept so
backoff behaviour can be checked without touching the network.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, Iterable, List, TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..config.logger_module import log_error, log_warning
from .transport_errors import MapsApiError, MapsTransportError

T = TypeVar("T")

DEFAULT_RETRY_STATUSES: FrozenSet[str] = frozenset({"UNKNOWN_ERROR", "OVER_QUERY_LIMIT"})
RETRYABLE_STATUS_CHOICES: FrozenSet[str] = frozenset(
    {"UNKNOWN_ERROR", "OVER_QUERY_LIMIT", "INVALID_REQUEST"}
)


def _status_name(status) -> str:
    return str(getattr(status, "value", status))


@dataclass(frozen=True)
class RetryPolicy:
    """
    Immutable retry settings for a client.

    Attributes:
        max_retries: Retries after the first attempt (0 disables retrying)
        initial_delay: Seconds to wait before the first retry
        backoff_factor: Multiplier applied to the delay after every retry
        retry_statuses: API statuses worth retrying
    """

    max_retries: int = 0
    initial_delay: float = 1.0
    backoff_factor: float = 2.0
    retry_statuses: Iterable[str] = DEFAULT_RETRY_STATUSES

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.initial_delay < 0:
            raise ValueError(f"initial_delay must be >= 0, got {self.initial_delay}")
        if self.backoff_factor < 1:
            raise ValueError(f"backoff_factor must be >= 1, got {self.backoff_factor}")

        statuses = frozenset(_status_name(s) for s in self.retry_statuses)
        unknown = statuses - RETRYABLE_STATUS_CHOICES
        if unknown:
            raise ValueError(
                f"Unsupported retry statuses: {', '.join(sorted(unknown))}. "
                f"Choose from {', '.join(sorted(RETRYABLE_STATUS_CHOICES))}"
            )
        object.__setattr__(self, "retry_statuses", statuses)

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delays(self) -> List[float]:
        """Backoff schedule in seconds, one entry per retry."""
        return [
            self.initial_delay * self.backoff_factor ** retry
            for retry in range(self.max_retries)
        ]

    def is_retryable_status(self, status) -> bool:
        return _status_name(status) in self.retry_statuses

    def is_retryable(self, error: BaseException) -> bool:
        """API errors with a whitelisted status and all transport errors are retryable."""
        if isinstance(error, MapsApiError):
            return self.is_retryable_status(error.status)
        return isinstance(error, MapsTransportError)


class RetryState(Enum):
    IDLE = "idle"
    ATTEMPTING = "attempting"
    RETRY_WAIT = "retry_wait"
    SUCCESS = "success"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


TERMINAL_STATES = frozenset({RetryState.SUCCESS, RetryState.EXHAUSTED, RetryState.FAILED})


class RetryStateMachine:
    """
    Runs one operation under a RetryPolicy.

    Instances are single-use: the attempt counter and delay history belong
    to exactly one call.
    """

    def __init__(self,
                 policy: RetryPolicy,
                 sleep: Callable[[float], None] = time.sleep,
                 description: str = "request"):
        """
        Args:
            policy: Retry settings to apply
            sleep: Called with the delay in seconds before each retry
            description: Label used in log messages
        """
        self.policy = policy
        self.description = description
        self._sleep = sleep

        self.state = RetryState.IDLE
        self.transitions: List[RetryState] = [RetryState.IDLE]
        self.attempts = 0
        self.delays: List[float] = []

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def _transition(self, state: RetryState) -> None:
        self.state = state
        self.transitions.append(state)

    def _before_attempt(self, retry_state: RetryCallState) -> None:
        self.attempts = retry_state.attempt_number
        self._transition(RetryState.ATTEMPTING)

    def _before_sleep(self, retry_state: RetryCallState) -> None:
        delay = retry_state.next_action.sleep
        error = retry_state.outcome.exception()
        self.delays.append(delay)
        self._transition(RetryState.RETRY_WAIT)

        log_warning(
            f"{self.description} failed ({error}); "
            f"retry {retry_state.attempt_number}/{self.policy.max_retries} in {delay:.2f}s"
        )

    def run(self, operation: Callable[[], T]) -> T:
        """
        Execute the operation, retrying per the policy.

        Args:
            operation: Zero-argument callable performing one attempt

        Returns:
            The operation's result from the first successful attempt

        Raises:
            RuntimeError: If the machine was already used
            Exception: The last error raised by the operation
        """
        if self.state is not RetryState.IDLE:
            raise RuntimeError("RetryStateMachine instances are single-use")

        retrying = Retrying(
            stop=stop_after_attempt(self.policy.max_attempts),
            wait=wait_exponential(
                multiplier=self.policy.initial_delay,
                exp_base=self.policy.backoff_factor,
                min=0,
            ),
            retry=retry_if_exception(self.policy.is_retryable),
            sleep=self._sleep,
            before=self._before_attempt,
            before_sleep=self._before_sleep,
            reraise=True,
        )

        try:
            result = retrying(operation)
        except Exception as error:
            if self.policy.is_retryable(error):
                self._transition(RetryState.EXHAUSTED)
                log_error(
                    f"{self.description} failed after {self.attempts} attempt(s): {error}"
                )
            else:
                self._transition(RetryState.FAILED)
                log_error(f"{self.description} failed: {error}")
            raise

        self._transition(RetryState.SUCCESS)
        return result
