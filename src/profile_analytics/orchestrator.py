"""Request lifecycle for profile acquisition.

:class:`ProfileAcquirer` owns the single :class:`RequestState` the
presentation layer reads. ``acquire`` is the only way to change it; every
error is converted into a message on the state.
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .errors import AcquisitionError
from .github_client import GitHubClient
from .models import CommitActivityPoint, Profile, Repository
from .synthetic import derive_seed, generate_activity, generate_dataset

logger = logging.getLogger(__name__)

EMPTY_USERNAME_MESSAGE = "Please enter a username"
FALLBACK_MESSAGE = "Failed to fetch data"


class Phase(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class Mode(Enum):
    SYNTHETIC = "synthetic"
    REMOTE = "remote"


@dataclass(frozen=True)
class RequestState:
    phase: Phase = Phase.IDLE
    profile: Optional[Profile] = None
    repositories: Tuple[Repository, ...] = field(default_factory=tuple)
    activity: Tuple[CommitActivityPoint, ...] = field(default_factory=tuple)
    error: Optional[str] = None

    @property
    def loading(self) -> bool:
        return self.phase is Phase.LOADING

    @classmethod
    def failed(cls, message: str) -> "RequestState":
        return cls(phase=Phase.ERROR, error=message)

    @classmethod
    def succeeded(cls, profile: Profile, repositories: List[Repository],
                  activity: List[CommitActivityPoint]) -> "RequestState":
        return cls(phase=Phase.SUCCESS, profile=profile,
                   repositories=tuple(repositories), activity=tuple(activity))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProfileAcquirer:
    """Chooses between live and synthetic data and tracks the outcome.

    Only one acquisition runs at a time: ``acquire`` while LOADING is a no-op
    that returns the current state. ``cancel`` abandons the in-flight request;
    whatever it returns later is dropped.
    """

    def __init__(self, client: Optional[GitHubClient] = None, delay: float = 0.0,
                 clock: Callable[[], datetime] = _utcnow,
                 sleep: Callable[[float], None] = time.sleep):
        self.client = client or GitHubClient()
        self.delay = delay
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._generation = 0
        self._state = RequestState()

    @classmethod
    def from_settings(cls, settings) -> "ProfileAcquirer":
        client = GitHubClient(relay_url=settings.relay_url, api_url=settings.api_url,
                              timeout=settings.request_timeout)
        return cls(client=client, delay=settings.synthetic_delay)

    @property
    def state(self) -> RequestState:
        return self._state

    def acquire(self, username: str, mode: Mode = Mode.SYNTHETIC) -> RequestState:
        """Load data for ``username`` and return the resulting state snapshot.

        The return value is always the acquirer's current state. A call that
        was rejected because another request is in flight, or whose request
        was cancelled before it finished, gets the state of that other
        request, not a result of its own.
        """
        username = (username or "").strip()
        with self._lock:
            if self._state.loading:
                logger.info("Ignoring request for %r: another request is in flight", username)
                return self._state
            if not username:
                self._state = RequestState.failed(EMPTY_USERNAME_MESSAGE)
                return self._state
            self._generation += 1
            generation = self._generation
            self._state = RequestState(phase=Phase.LOADING)

        logger.info("Acquiring %s data for %s", mode.value, username)
        result = None
        message = None
        try:
            result = self._load(username, mode)
        except AcquisitionError as exc:
            logger.warning("Acquisition for %s failed (%s): %s", username, exc.code, exc.message)
            message = exc.message
        except Exception:
            logger.exception("Unexpected failure while acquiring %s", username)
            message = FALLBACK_MESSAGE
        finally:
            with self._lock:
                if generation != self._generation:
                    logger.info("Dropping stale result for %s", username)
                elif message is not None:
                    self._state = RequestState.failed(message)
                elif result is not None:
                    self._state = RequestState.succeeded(*result)
                else:
                    self._state = RequestState()
        return self._state

    def _load(self, username: str, mode: Mode):
        now = self._clock()
        if mode is Mode.SYNTHETIC:
            dataset = generate_dataset(username, now=now)
            if self.delay > 0:
                self._sleep(self.delay)
            return dataset.profile, dataset.repositories, dataset.activity

        profile = self.client.fetch_profile(username)
        repos = self.client.fetch_repositories(username)
        # the live API has no cheap daily commit endpoint
        activity = generate_activity(derive_seed(username), now.date())
        return profile, repos, activity

    def cancel(self) -> bool:
        """Abandon the in-flight request, if any. Returns True if one was cancelled."""
        with self._lock:
            if not self._state.loading:
                return False
            self._generation += 1
            self._state = RequestState()
        logger.info("Cancelled in-flight request")
        return True

    def reset(self) -> None:
        with self._lock:
            self._generation += 1
            self._state = RequestState()
