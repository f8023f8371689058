"""CSV network repository adapter.

This adapter is the data-store collaborator backed by two CSV files:
- ``locations.csv`` with columns ``location_id,name``
- ``links.csv`` with columns
  ``link_id,from_location_id,to_location_id,distance_km,mode``

Files are re-read on every call so each request sees a fresh snapshot,
including links appended by ``add_link``.
"""

from __future__ import annotations

import csv
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ...config import NetworkConfig, get_config
from ...domain.errors import GraphError, InvalidLocationError
from ...domain.models import Link, LinkView, Location, NewLink

LOCATION_FIELDS = ["location_id", "name"]
LINK_FIELDS = ["link_id", "from_location_id", "to_location_id", "distance_km", "mode"]


@dataclass
class CSVNetworkRepository:
    """Network repository that reads and appends CSV files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Network configuration (paths, file names)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_locations(self) -> List[Location]:
        """Load all locations from the locations CSV.

        Returns:
            Locations in file order.

        Raises:
            GraphError: If the file cannot be read or parsed.
        """
        path = self.config.locations_path
        locations: List[Location] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    location_id = (row.get("location_id") or "").strip()
                    name = (row.get("name") or "").strip()

                    if not location_id or not name:
                        self._logger.warning(
                            "Skipping incomplete location row",
                            extra={"row": reader.line_num},
                        )
                        continue

                    locations.append(Location(id=int(location_id), name=name))
        except (OSError, ValueError) as e:
            raise GraphError(
                f"Failed to load locations: {e}",
                file_path=str(path),
                cause=e,
            )

        self._logger.debug("Locations loaded", extra={"count": len(locations)})
        return locations

    def list_links(self) -> List[Link]:
        """Load all links from the links CSV.

        A missing links file means the network has no links yet.

        Returns:
            Links in file order.

        Raises:
            GraphError: If the file cannot be read or a row is malformed.
        """
        path = self.config.links_path
        if not path.exists():
            return []

        links: List[Link] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    values = {key: (row.get(key) or "").strip() for key in LINK_FIELDS}

                    if not all(values[key] for key in LINK_FIELDS[:4]):
                        self._logger.warning(
                            "Skipping incomplete link row",
                            extra={"row": reader.line_num},
                        )
                        continue

                    links.append(
                        Link(
                            id=int(values["link_id"]),
                            from_id=int(values["from_location_id"]),
                            to_id=int(values["to_location_id"]),
                            distance_km=float(values["distance_km"]),
                            mode=values["mode"].upper() or "CAR",
                        )
                    )
        except (OSError, ValueError) as e:
            raise GraphError(
                f"Failed to load links: {e}",
                file_path=str(path),
                cause=e,
            )

        self._logger.debug("Links loaded", extra={"count": len(links)})
        return links

    def list_link_views(self) -> List[LinkView]:
        """List links with endpoint names, newest first.

        Links pointing at unknown locations are listed with their raw id.
        """
        names: Dict[int, str] = {loc.id: loc.name for loc in self.list_locations()}
        views = [
            LinkView(
                link=link,
                from_name=names.get(link.from_id, str(link.from_id)),
                to_name=names.get(link.to_id, str(link.to_id)),
            )
            for link in self.list_links()
        ]
        views.reverse()
        return views

    def get_location_by_name(self, name: str) -> Optional[Location]:
        """Get a location by exact name.

        Args:
            name: The location name to look up.

        Returns:
            The location, or None if not found.
        """
        for location in self.list_locations():
            if location.name == name:
                return location
        return None

    def add_link(self, request: NewLink) -> Link:
        """Append a new link to the links CSV.

        Args:
            request: Validated link request.

        Returns:
            The stored link.

        Raises:
            InvalidLocationError: If either endpoint name is unknown.
            GraphError: If the file cannot be written.
        """
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

            existing = self.list_links()
            link = Link(
                id=max((l.id for l in existing), default=0) + 1,
                from_id=origin.id,
                to_id=destination.id,
                distance_km=request.distance_km,
                mode=request.mode.value,
            )
            self._append_link(self.config.links_path, link)

        self._logger.info(
            "Link added",
            extra={
                "link_id": link.id,
                "from": request.from_name,
                "to": request.to_name,
                "mode": link.mode,
                "time_minutes": link.time_minutes,
            },
        )
        return link

    def _append_link(self, path: Path, link: Link) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            write_header = not path.exists() or path.stat().st_size == 0
            needs_newline = not write_header and not _ends_with_newline(path)
            with path.open("a", newline="", encoding="utf-8") as f:
                # a hand-edited file may lack the final line break
                if needs_newline:
                    f.write("\n")
                writer = csv.writer(f)
                if write_header:
                    writer.writerow(LINK_FIELDS)
                writer.writerow(
                    [link.id, link.from_id, link.to_id, link.distance_km, link.mode]
                )
        except OSError as e:
            raise GraphError(
                f"Failed to persist link: {e}",
                file_path=str(path),
                cause=e,
            )


def _ends_with_newline(path: Path) -> bool:
    with path.open("rb") as f:
        f.seek(-1, 2)
        return f.read(1) in (b"\n", b"\r")
