"""Event service. Plain storage pass-through."""

from campus_library.models.event import Event
from campus_library.services.base import CrudService


class EventService(CrudService[Event]):
    model = Event
    resource = "event"


event_service = EventService()
