from dataclasses import dataclass

import pytest

from shared.application.message_bus import MessageBus
from shared.application.uow import DjangoUnitOfWork
from shared.domain.base import DomainEvent


@dataclass(kw_only=True)
class SomethingHappened(DomainEvent):
    value: int


def test_bus_calls_every_handler_once_and_survives_failures():
    bus = MessageBus()
    seen = []

    def failing(event):
        raise RuntimeError("boom")

    def recording(event):
        seen.append(event.value)

    bus.register_event_handler(SomethingHappened, failing)
    bus.register_event_handler(SomethingHappened, recording)
    bus.register_event_handler(SomethingHappened, recording)

    bus.publish_events([SomethingHappened(value=1), SomethingHappened(value=2)])

    assert seen == [1, 2]


@pytest.mark.django_db(transaction=True)
def test_events_published_only_after_commit(monkeypatch):
    published = []
    monkeypatch.setattr(DjangoUnitOfWork, "_publish_events", lambda self, events: published.extend(events))

    with DjangoUnitOfWork() as uow:
        uow.record(SomethingHappened(value=7))
        assert published == []

    assert [event.value for event in published] == [7]


@pytest.mark.django_db(transaction=True)
def test_events_discarded_on_rollback(monkeypatch):
    published = []
    monkeypatch.setattr(DjangoUnitOfWork, "_publish_events", lambda self, events: published.extend(events))

    with pytest.raises(ValueError):
        with DjangoUnitOfWork() as uow:
            uow.record(SomethingHappened(value=7))
            raise ValueError("abort")

    assert published == []


def test_event_to_dict():
    event = SomethingHappened(value=3)

    data = event.to_dict()

    assert data["event_type"] == "SomethingHappened"
    assert data["event_id"] == str(event.event_id)
