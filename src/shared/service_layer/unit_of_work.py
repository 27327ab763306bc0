from __future__ import annotations

"""Abstract Unit of Work pattern for coordinating repositories and event collection."""

import abc
from typing import Iterable, Iterator

from shared.domain.commands import Event


class AbstractUnitOfWork(abc.ABC):
    """Abstract Unit of Work; collects events raised by aggregates it has seen."""

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args):
        self.rollback()

    def commit(self):
        self._commit()

    def collect_new_events(self) -> Iterator[Event]:
        for aggregate in self._seen_aggregates():
            while aggregate.events:
                yield aggregate.events.pop(0)

    @abc.abstractmethod
    def _seen_aggregates(self) -> Iterable:
        raise NotImplementedError

    @abc.abstractmethod
    def _commit(self):
        raise NotImplementedError

    @abc.abstractmethod
    def rollback(self):
        raise NotImplementedError
