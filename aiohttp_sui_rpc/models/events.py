from typing import Any, Dict, Optional

from pydantic import Field

from .base import BigInt, Page, SuiModel


class EventId(SuiModel):
    tx_digest: str
    event_seq: BigInt


class SuiEvent(SuiModel):
    id: EventId
    package_id: str
    transaction_module: str
    sender: str
    event_type: str = Field(alias='type')
    parsed_json: Optional[Dict[str, Any]] = None
    bcs: Optional[str] = None
    timestamp_ms: Optional[BigInt] = None


PaginatedEvents = Page[SuiEvent, EventId]


class EventFilter:
    """
    Event selector used by ``sui_queryEvents`` and ``sui_subscribeEvent``.

    Filters are built with the classmethods and can be combined:

    >>> f = EventFilter.and_(EventFilter.package('0x2'),
    ...                      EventFilter.sender('0xa11ce'))
    >>> f.to_json()
    {'And': [{'Package': '0x2'}, {'Sender': '0xa11ce'}]}
    """

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, EventFilter):
            return NotImplemented

        return self.to_json() == other.to_json()

    def __repr__(self):
        return 'EventFilter({!r})'.format(self.to_json())

    @classmethod
    def sender(cls, address):
        return cls('Sender', address)

    @classmethod
    def transaction(cls, digest):
        return cls('Transaction', digest)

    @classmethod
    def package(cls, package_id):
        return cls('Package', package_id)

    @classmethod
    def move_module(cls, package_id, module):
        return cls('MoveModule', {'package': package_id, 'module': module})

    @classmethod
    def move_event_type(cls, struct_tag):
        return cls('MoveEventType', struct_tag)

    @classmethod
    def time_range(cls, start_time, end_time):
        return cls('TimeRange', {
            'startTime': str(start_time),
            'endTime': str(end_time),
        })

    @classmethod
    def all(cls, *filters):
        return cls('All', list(filters))

    @classmethod
    def any(cls, *filters):
        return cls('Any', list(filters))

    @classmethod
    def and_(cls, left, right):
        return cls('And', [left, right])

    @classmethod
    def or_(cls, left, right):
        return cls('Or', [left, right])

    @classmethod
    def from_json(cls, data):
        if type(data) is not dict or len(data) != 1:
            raise ValueError('event filter must be a single-key object')

        kind, value = next(iter(data.items()))

        if kind in ('All', 'Any', 'And', 'Or'):
            value = [cls.from_json(i) for i in value]

        return cls(kind, value)

    def to_json(self):
        if isinstance(self.value, list):
            return {self.kind: [i.to_json() for i in self.value]}

        return {self.kind: self.value}


# queries and subscriptions select events the same way
EventQuery = EventFilter
