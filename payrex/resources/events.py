"""Events API."""
from dataclasses import dataclass
from typing import Optional

from payrex.models.events import Event
from payrex.resources.base import Resource
from payrex.types.ids import EventId
from payrex.types.pagination import ListParams, PaginatedList


@dataclass
class Events(Resource):
    base_path: str = "/events"

    async def retrieve(self, id: EventId) -> Event:
        return await self.http.get(self._path(id), Event)

    async def list(self, params: Optional[ListParams] = None) -> PaginatedList[Event]:
        return await self.http.get_with_params(
            self.base_path, params or ListParams(), PaginatedList[Event]
        )
