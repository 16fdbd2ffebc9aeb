"""Loading/error/data state for one outstanding provider request."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from manhwa.provider.exceptions import ProviderError

log = logging.getLogger(__name__)

T = TypeVar("T")


class FetchStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    DATA = "data"


@dataclass(frozen=True)
class FetchState(Generic[T]):
    key: Optional[str]
    status: FetchStatus = FetchStatus.LOADING
    data: Optional[T] = None
    error: Optional[str] = None
    generation: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status is FetchStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status is FetchStatus.ERROR

    @property
    def has_data(self) -> bool:
        return self.status is FetchStatus.DATA

    @property
    def settled(self) -> bool:
        return self.status is not FetchStatus.LOADING


class FetchHook(Generic[T]):
    """Keeps a FetchState current for a changing request key.

    Every key change starts a new generation. A request only commits its
    result while its generation is still the current one, so a superseded
    request can never overwrite the state of a newer key. Superseded tasks
    are also cancelled unless ``abort_superseded`` is False; correctness does
    not depend on the cancellation landing.
    """

    def __init__(
        self,
        fetch: Callable[[str], Awaitable[T]],
        on_change: Optional[Callable[[FetchState[T]], None]] = None,
        abort_superseded: bool = True,
    ) -> None:
        self._fetch = fetch
        self._listeners: list[Callable[[FetchState[T]], None]] = []
        if on_change is not None:
            self._listeners.append(on_change)
        self._abort_superseded = abort_superseded
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._closed = False
        self.state: FetchState[T] = FetchState(key=None)

    @property
    def key(self) -> Optional[str]:
        return self.state.key

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Callable[[FetchState[T]], None]) -> None:
        self._listeners.append(listener)

    def set_key(self, key: str) -> None:
        """Start loading ``key`` unless it is already the current key."""
        if self._closed:
            raise RuntimeError("FetchHook is closed")
        if key == self.state.key and self._generation > 0:
            return
        self._start(key)

    def reload(self) -> None:
        """Issue the current key again as a new generation."""
        if self._closed or self.state.key is None:
            return
        self._start(self.state.key)

    def close(self) -> None:
        """Discard any outstanding result; the hook accepts no further keys."""
        self._closed = True
        self._supersede()

    async def wait(self) -> FetchState[T]:
        """Wait for the outstanding request, if any, and return the state."""
        task = self._task
        if task is not None and not task.done():
            await asyncio.wait({task})
        return self.state

    def _start(self, key: str) -> None:
        self._supersede()
        generation = self._generation
        self._commit(FetchState(key=key, generation=generation), generation)
        self._task = asyncio.get_running_loop().create_task(
            self._run(key, generation), name=f"fetch:{key}#{generation}"
        )
        self._task.add_done_callback(self._task_done)

    @staticmethod
    def _task_done(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log.exception("Fetch task %s failed", task.get_name(), exc_info=exc)

    def _supersede(self) -> None:
        self._generation += 1
        task = self._task
        self._task = None
        if task is not None and not task.done() and self._abort_superseded:
            task.cancel()

    async def _run(self, key: str, generation: int) -> None:
        try:
            data = await self._fetch(key)
        except asyncio.CancelledError:
            log.debug("Fetch cancelled: %s (generation %d)", key, generation)
            return
        except ProviderError as e:
            self._settle(
                FetchState(
                    key=key,
                    status=FetchStatus.ERROR,
                    error=e.message,
                    generation=generation,
                ),
                generation,
            )
            return
        except Exception as e:
            log.exception("Unexpected error fetching %s", key)
            self._settle(
                FetchState(
                    key=key,
                    status=FetchStatus.ERROR,
                    error=str(e) or type(e).__name__,
                    generation=generation,
                ),
                generation,
            )
            return

        self._settle(
            FetchState(
                key=key, status=FetchStatus.DATA, data=data, generation=generation
            ),
            generation,
        )

    def _settle(self, state: FetchState[T], generation: int) -> None:
        if generation != self._generation:
            log.debug(
                "Discarding stale %s for %s (generation %d, current %d)",
                state.status.value,
                state.key,
                generation,
                self._generation,
            )
            return
        if self.state.settled and self.state.generation == generation:
            return
        if state.is_error:
            log.error("Fetch failed for %s: %s", state.key, state.error)
        self._commit(state, generation)

    def _commit(self, state: FetchState[T], generation: int) -> None:
        if generation != self._generation:
            return
        self.state = state
        for listener in list(self._listeners):
            listener(state)
