import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

# Root spans slower than this are logged at WARNING
SLOW_SPAN_MS = 250.0

_active_span: ContextVar[Optional['Span']] = ContextVar('active_span', default=None)


@dataclass
class Span:
    '''Timing for one unit of unlock work, plus what it granted.'''

    name: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    parent: Optional['Span'] = None
    granted: List[str] = field(default_factory=list)
    started: float = field(default_factory=time.perf_counter)
    elapsed_ms: Optional[float] = None

    @property
    def root(self) -> 'Span':
        span = self
        while span.parent is not None:
            span = span.parent
        return span

    def close(self) -> None:
        self.elapsed_ms = (time.perf_counter() - self.started) * 1000
        details = ', '.join(f'{k}={v}' for k, v in self.metadata.items())
        if self.granted:
            details = ', '.join(filter(None, [details, f'granted={self.granted}']))

        if self.parent is not None:
            logger.debug(
                f'{self.parent.name} > {self.name}: {self.elapsed_ms:.2f}ms [{details}]'
            )
        elif self.elapsed_ms > SLOW_SPAN_MS:
            logger.warning(f'{self.name} slow: {self.elapsed_ms:.2f}ms [{details}]')
        else:
            logger.info(f'{self.name}: {self.elapsed_ms:.2f}ms [{details}]')


@contextmanager
def trace_span(name: str, metadata: Optional[Dict[str, Any]] = None) -> Iterator[Span]:
    '''Time the enclosed block; nested spans attach to the enclosing one.

    Example:
        with trace_span('cards.select', {'event_type': event.type}):
            ...
    '''
    span = Span(name=name, metadata=dict(metadata or {}), parent=_active_span.get())
    token = _active_span.set(span)
    try:
        yield span
    finally:
        _active_span.reset(token)
        span.close()


def current_span() -> Optional[Span]:
    return _active_span.get()


def add_span_metadata(key: str, value: Any) -> None:
    span = _active_span.get()
    if span is not None:
        span.metadata[key] = value


def note_grant(unlockable_id: str) -> None:
    '''Record a grant on the active span and on its root.'''
    span = _active_span.get()
    if span is None:
        return
    span.granted.append(unlockable_id)
    if span.root is not span:
        span.root.granted.append(unlockable_id)
