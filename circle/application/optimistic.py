"""Optimistic mutation coordinator.

Every toggle-style control (plan activation, plan permissions, expert
activation, featured slots) follows the same protocol:

1. show the new value immediately
2. ask the authoritative side to apply it
3. keep the value on success, restore the last confirmed value on failure

Usage:
    coordinator = OptimisticMutationCoordinator({field: False}, timeout=10)
    await coordinator.apply(field, True, client.set_toggle)
"""

import asyncio
import contextlib
from datetime import datetime, timezone
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Generic,
    Hashable,
    List,
    Mapping,
    Optional,
    TypeVar,
)
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from circle.domain.error import DomainError, TransientError

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Mutation = Callable[[K, V], Awaitable[Any]]
Listener = Callable[[K, V], None]


class ToggleNotice(BaseModel):
    """Dismissible notice recorded when a toggle is rolled back."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    field: str
    message: str
    error_type: str
    restored_value: Any = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class OptimisticMutationCoordinator(Generic[K, V]):
    """Observable field state with optimistic apply and rollback.

    The observable value changes before the first suspension point of
    ``apply``. If the authoritative call fails, times out or raises a
    transport error, the value is restored to the last confirmed one and
    the failure is re-raised after a notice is recorded.

    Toggles on the same field run one at a time when ``serialize_per_field``
    is set. A failed toggle only restores the value when no newer toggle of
    the same field has been applied since; the newer one settles it.

    Cancelling ``apply`` rolls back like any other failure. Per-field locks
    and counters are dropped once no toggle of that field is in flight.
    """

    def __init__(
        self,
        initial: Optional[Mapping[K, V]] = None,
        timeout: Optional[float] = None,
        serialize_per_field: bool = True,
    ) -> None:
        """Initialize coordinator.

        Args:
            initial: Confirmed values loaded from the authoritative side
            timeout: Seconds to wait for an authoritative call, None for no limit
            serialize_per_field: Run toggles of the same field one at a time
        """
        self._state: Dict[K, V] = dict(initial or {})
        self._confirmed: Dict[K, V] = dict(self._state)
        self._generation: Dict[K, int] = {}
        self._pending: Dict[K, int] = {}
        self._locks: Dict[K, asyncio.Lock] = {}
        self._listeners: List[Listener] = []
        self.timeout = timeout
        self.serialize_per_field = serialize_per_field
        self.notices: List[ToggleNotice] = []

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Current observable value of a field."""
        return self._state.get(key, default)

    def is_pending(self, key: K) -> bool:
        """Whether a toggle of the field is waiting for the authoritative side."""
        return key in self._pending

    def snapshot(self) -> Dict[K, V]:
        """Copy of every observable value."""
        return dict(self._state)

    def load(self, key: K, value: V) -> None:
        """Record a value read from the authoritative side as confirmed."""
        self._confirmed[key] = value
        self._set(key, value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback for observable changes.

        Returns:
            Function removing the listener
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dismiss(self, notice_id: str) -> None:
        """Drop a notice once the user has seen it."""
        self.notices = [n for n in self.notices if n.id != notice_id]

    def _set(self, key: K, value: V) -> None:
        self._state[key] = value
        for listener in list(self._listeners):
            listener(key, value)

    def _lock(self, key: K):
        if not self.serialize_per_field:
            return contextlib.nullcontext()
        return self._locks.setdefault(key, asyncio.Lock())

    async def apply(self, key: K, value: V, mutation: Mutation) -> None:
        """Optimistically set a field, then confirm it with the authoritative side.

        Args:
            key: Field being changed
            value: New value
            mutation: Coroutine function performing the authoritative change

        Raises:
            DomainError: The authoritative rejection, after rollback
            TransientError: On timeout or transport failure, after rollback
        """
        self._confirmed.setdefault(key, self._state.get(key))
        generation = self._generation.get(key, 0) + 1
        self._generation[key] = generation
        self._pending[key] = self._pending.get(key, 0) + 1
        self._set(key, value)

        with logfire.span("optimistic.apply", field=str(key), value=value):
            try:
                async with self._lock(key):
                    await self._call(key, value, mutation)
            except DomainError as e:
                self._rollback(key, generation, e)
                raise
            except asyncio.CancelledError:
                self._rollback(
                    key, generation, TransientError(f"Update of {key} was cancelled")
                )
                raise
            except Exception as e:
                error = TransientError(f"Could not update {key}: {e}")
                self._rollback(key, generation, error)
                raise error from e
            else:
                self._confirmed[key] = value
                logfire.info(
                    "Optimistic toggle confirmed", field=str(key), value=value
                )
            finally:
                self._release(key)

    def _release(self, key: K) -> None:
        # Per-field bookkeeping only lives while a toggle of that field is in flight
        self._pending[key] -= 1
        if not self._pending[key]:
            del self._pending[key]
            self._generation.pop(key, None)
            self._locks.pop(key, None)

    async def _call(self, key: K, value: V, mutation: Mutation) -> None:
        try:
            await asyncio.wait_for(mutation(key, value), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise TransientError(
                f"Timed out after {self.timeout}s updating {key}"
            ) from e

    def _rollback(self, key: K, generation: int, error: Exception) -> None:
        restored = self._confirmed.get(key)
        superseded = self._generation.get(key) != generation
        if not superseded:
            self._set(key, restored)
        self.notices.append(
            ToggleNotice(
                field=str(key),
                message=str(error),
                error_type=type(error).__name__,
                restored_value=restored,
            )
        )
        logfire.warn(
            "Optimistic toggle rolled back",
            field=str(key),
            restored=restored,
            superseded=superseded,
            error=str(error),
        )
