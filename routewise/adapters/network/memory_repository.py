"""In-memory network repository.

Holds locations and links in plain lists. Useful for tests and for
embedding the engine where the caller already has the records loaded.

Example:
    repo = InMemoryNetworkRepository.from_records(
        ["Dubai", "Abu Dhabi"],
        [("Dubai", "Abu Dhabi", 140.0, "CAR")],
    )
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ...domain.errors import InvalidLocationError
from ...domain.models import Link, LinkView, Location, NewLink


@dataclass
class InMemoryNetworkRepository:
    """Network repository over in-process lists.

    Implements NetworkRepositoryPort. Reads return copies, so a snapshot
    handed to one request is unaffected by later ``add_link`` calls.
    """

    locations: List[Location] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)

    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_records(
        cls,
        names: Iterable[str],
        links: Iterable[Tuple[str, str, float, str]] = (),
    ) -> InMemoryNetworkRepository:
        """Build a repository from location names and named link tuples.

        Locations get ids 1..n in the given order; links are added through
        ``add_link`` so they are validated the same way.
        """
        repo = cls(locations=[Location(id=i, name=n) for i, n in enumerate(names, 1)])
        for from_name, to_name, distance_km, mode in links:
            repo.add_link(NewLink(from_name, to_name, distance_km, mode))
        return repo

    def list_locations(self) -> List[Location]:
        with self._lock:
            return list(self.locations)

    def list_links(self) -> List[Link]:
        with self._lock:
            return list(self.links)

    def list_link_views(self) -> List[LinkView]:
        names = {location.id: location.name for location in self.list_locations()}
        return [
            LinkView(
                link=link,
                from_name=names.get(link.from_id, str(link.from_id)),
                to_name=names.get(link.to_id, str(link.to_id)),
            )
            for link in reversed(self.list_links())
        ]

    def get_location_by_name(self, name: str) -> Optional[Location]:
        with self._lock:
            return next((loc for loc in self.locations if loc.name == name), None)

    def add_link(self, request: NewLink) -> Link:
        with self._lock:
            origin = self.get_location_by_name(request.from_name)
            if origin is None:
                raise InvalidLocationError(
                    f"Invalid location name: {request.from_name}",
                    location_name=request.from_name,
                )
            destination = self.get_location_by_name(request.to_name)
            if destination is None:
                raise InvalidLocationError(
                    f"Invalid location name: {request.to_name}",
                    location_name=request.to_name,
                )

            link = Link(
                id=max((l.id for l in self.links), default=0) + 1,
                from_id=origin.id,
                to_id=destination.id,
                distance_km=request.distance_km,
                mode=request.mode.value,
            )
            self.links.append(link)

        self._logger.debug("Link added", extra={"link_id": link.id})
        return link
