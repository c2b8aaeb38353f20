from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class EventBus:
    '''In-process publish/subscribe with synchronous fan-out.

    Listeners run in subscription order on the publisher's call stack; an
    exception from a listener propagates to the publisher.
    '''

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Listener]] = defaultdict(list)

    def subscribe(self, topic: str, listener: Listener) -> None:
        self._listeners[topic].append(listener)

    def unsubscribe(self, topic: str, listener: Listener) -> None:
        listeners = self._listeners.get(topic)
        if not listeners:
            return
        self._listeners[topic] = [fn for fn in listeners if fn != listener]

    def publish(self, topic: str, *args: Any) -> bool:
        '''Deliver to every listener of ``topic``; False when nobody listens.'''
        listeners = list(self._listeners.get(topic, ()))
        if not listeners:
            return False
        for listener in listeners:
            listener(*args)
        return True

    def listeners(self, topic: str) -> list[Listener]:
        return list(self._listeners.get(topic, ()))

    def clear(self) -> None:
        self._listeners.clear()
