# -*- coding: utf-8 -*-
"""
Live streams

A small publish/subscribe layer: every entity collection publishes through a
Subject, derived rollups are mapped or combined streams, and SharedStream
multicasts one derivation to many observers with a keep-alive before teardown.
All callbacks run on the caller's thread; there is a single writer per subject.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import (
    Any,
    AsyncIterator,
    Callable,
    Dict,
    Generic,
    List,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

from .config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

_MISSING: Any = object()


class Cancellable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_sec: float, callback: Callable[[], None]) -> Cancellable: ...


class _FiredTimer:
    def cancel(self) -> None:
        return None


class AsyncioScheduler:
    """Timers on the running event loop; fires at once when no loop is running."""

    def call_later(self, delay_sec: float, callback: Callable[[], None]) -> Cancellable:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, firing %.3fs timer immediately", delay_sec)
            callback()
            return _FiredTimer()
        return loop.call_later(delay_sec, callback)


default_scheduler = AsyncioScheduler()


class Subscription:
    def __init__(self, on_cancel: Callable[[], None]) -> None:
        self._on_cancel = on_cancel
        self.closed = False

    def cancel(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._on_cancel()


class Observable(Generic[T]):
    """Something that pushes values to subscribed callbacks."""

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        raise NotImplementedError

    def map(self, fn: Callable[[T], U]) -> "Observable[U]":
        return MappedStream(self, fn)

    async def first(self) -> T:
        """Wait for the next (or replayed) value, then unsubscribe."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()

        def on_value(value: T) -> None:
            if not future.done():
                future.set_result(value)

        subscription = self.subscribe(on_value)
        try:
            return await future
        finally:
            subscription.cancel()

    async def iterate(self) -> AsyncIterator[T]:
        """
        Yield values as they arrive.

        Closing the generator (e.g. through contextlib.aclosing) cancels the
        subscription, which lets shared upstreams tear down.
        """
        queue: asyncio.Queue = asyncio.Queue()
        subscription = self.subscribe(queue.put_nowait)
        try:
            while True:
                yield await queue.get()
        finally:
            subscription.cancel()


class Subject(Observable[T]):
    """Holds the latest value and replays it to each new subscriber."""

    def __init__(self, initial: Any = _MISSING) -> None:
        self._value = initial
        self._observers: Dict[int, Callable[[T], None]] = {}
        self._next_token = 0

    @property
    def has_value(self) -> bool:
        return self._value is not _MISSING

    @property
    def value(self) -> T:
        if self._value is _MISSING:
            raise LookupError("subject has no value yet")
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._observers)

    def emit(self, value: T) -> None:
        self._value = value
        for token, callback in list(self._observers.items()):
            # A callback may cancel a later observer mid-loop.
            if token in self._observers:
                callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        token = self._next_token
        self._next_token += 1
        self._observers[token] = callback
        if self._value is not _MISSING:
            callback(self._value)
        return Subscription(lambda: self._observers.pop(token, None))


class EventStream(Observable[T]):
    """Fan-out of transient events; nothing is retained or replayed."""

    def __init__(self) -> None:
        self._observers: Dict[int, Callable[[T], None]] = {}
        self._next_token = 0

    @property
    def subscriber_count(self) -> int:
        return len(self._observers)

    def emit(self, value: T) -> None:
        for token, callback in list(self._observers.items()):
            if token in self._observers:
                callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        token = self._next_token
        self._next_token += 1
        self._observers[token] = callback
        return Subscription(lambda: self._observers.pop(token, None))


class MappedStream(Observable[U]):
    def __init__(self, source: Observable[T], fn: Callable[[T], U]) -> None:
        self._source = source
        self._fn = fn

    def subscribe(self, callback: Callable[[U], None]) -> Subscription:
        return self._source.subscribe(lambda value: callback(self._fn(value)))


class CombinedStream(Observable[U]):
    """Emits combiner(*latest) only once every source has produced a value."""

    def __init__(self, sources: Sequence[Observable[Any]], combiner: Callable[..., U]) -> None:
        if not sources:
            raise ValueError("combine_latest needs at least one source")
        self._sources = list(sources)
        self._combiner = combiner

    def subscribe(self, callback: Callable[[U], None]) -> Subscription:
        latest: List[Any] = [_MISSING] * len(self._sources)
        subscriptions: List[Subscription] = []

        def on_value(index: int, value: Any) -> None:
            latest[index] = value
            if any(item is _MISSING for item in latest):
                return
            callback(self._combiner(*latest))

        for index, source in enumerate(self._sources):
            subscriptions.append(source.subscribe(functools.partial(on_value, index)))

        def cancel_all() -> None:
            for subscription in subscriptions:
                subscription.cancel()

        return Subscription(cancel_all)


def combine_latest(sources: Sequence[Observable[Any]], combiner: Callable[..., U]) -> Observable[U]:
    return CombinedStream(sources, combiner)


def constant(value: T) -> Observable[T]:
    return Subject(value)


class SharedStream(Observable[T]):
    """
    Reference-counted multicast of an upstream stream.

    The upstream is connected on the first subscription. When the last
    subscriber leaves, teardown waits ``keep_alive_sec`` and is cancelled by
    a resubscription inside that window. Once torn down, the next subscriber
    reconnects and recomputes from the upstream's current state.
    """

    def __init__(
        self,
        upstream: Observable[T],
        *,
        keep_alive_sec: Optional[float] = None,
        scheduler: Optional[Scheduler] = None,
        name: str = "stream",
        on_teardown: Optional[Callable[["SharedStream[T]"], None]] = None,
    ) -> None:
        self._upstream = upstream
        self._keep_alive_sec = (
            settings.stream_keep_alive_sec if keep_alive_sec is None else keep_alive_sec
        )
        self._scheduler: Scheduler = scheduler or default_scheduler
        self.name = name
        self._on_teardown = on_teardown
        self._subject: Optional[Subject[T]] = None
        self._upstream_subscription: Optional[Subscription] = None
        self._teardown_handle: Optional[Cancellable] = None
        self._refs = 0

    @property
    def is_connected(self) -> bool:
        return self._subject is not None

    @property
    def subscriber_count(self) -> int:
        return self._refs

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        self._refs += 1
        if self._teardown_handle is not None:
            self._teardown_handle.cancel()
            self._teardown_handle = None
        subject = self._subject if self._subject is not None else self._connect()
        inner = subject.subscribe(callback)
        return Subscription(functools.partial(self._release, inner))

    def _connect(self) -> Subject[T]:
        logger.info("Connecting shared stream %s", self.name)
        subject: Subject[T] = Subject()
        self._subject = subject
        self._upstream_subscription = self._upstream.subscribe(subject.emit)
        return subject

    def _release(self, inner: Subscription) -> None:
        inner.cancel()
        self._refs -= 1
        if self._refs > 0:
            return
        if self._keep_alive_sec <= 0:
            self._teardown()
            return
        self._teardown_handle = self._scheduler.call_later(self._keep_alive_sec, self._teardown)

    def _teardown(self) -> None:
        self._teardown_handle = None
        if self._refs > 0 or self._subject is None:
            return
        logger.info("Tearing down shared stream %s", self.name)
        if self._upstream_subscription is not None:
            self._upstream_subscription.cancel()
        self._upstream_subscription = None
        self._subject = None
        if self._on_teardown is not None:
            self._on_teardown(self)
