"""Terminal front-end for the route engine.

Asks which action to run (find, compare, add a link, list), then calls
the RouteFinderService from the default container and prints results.
"""

from __future__ import annotations

import sys

from routewise.container import get_container
from routewise.domain.errors import RouteWiseError
from routewise.domain.models import NewLink
from routewise.monitoring import configure_logging
from routewise.services import COMPARISON_LABELS, RouteFinderService


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def main() -> None:
    configure_logging()
    finder: RouteFinderService = get_container().resolve(RouteFinderService)

    print("=== RouteWise ===")
    print("1) Find shortest route")
    print("2) Compare fastest / cheapest / eco-friendliest")
    print("3) Add a link")
    print("4) List locations and links")
    choice = _ask("Choice (1-4): ").lower()

    try:
        if choice in {"1", "find", "f"}:
            route, error = finder.find_best_by_distance_safe(
                _ask("From: "), _ask("To: ")
            )
            print(error if error else finder.format_result(route))
        elif choice in {"2", "compare", "c"}:
            routes = finder.compare_by_alternative_criteria(_ask("From: "), _ask("To: "))
            if not routes:
                print("No route available.")
            for route in routes:
                print(f"\n[{COMPARISON_LABELS[route.criterion]}]")
                print(finder.format_result(route))
        elif choice in {"3", "add", "a"}:
            link = finder.add_link(
                NewLink(
                    from_name=_ask("From: "),
                    to_name=_ask("To: "),
                    distance_km=float(_ask("Distance (km): ")),
                    mode=_ask("Mode (CAR/BUS/METRO/WALK): "),
                )
            )
            print(f"Link {link.id} added ({link.time_minutes:.0f} min by {link.mode}).")
        elif choice in {"4", "list", "l"}:
            print(", ".join(location.name for location in finder.list_locations()))
            for view in finder.list_links():
                print(
                    f"  {view.from_name} - {view.to_name}: "
                    f"{view.link.distance_km:g} km, {view.link.mode}"
                )
        else:
            print("Unknown choice.")
            sys.exit(1)
    except RouteWiseError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
