#!/usr/bin/env python3
import argparse
import logging
import sys

from bsdlink_routing.api_client import APIClient
from bsdlink_routing.config import Config
from bsdlink_routing.errors import RoutingError
from bsdlink_routing.itinerary_expander import StraightLineProvider
from bsdlink_routing.itinerary_finder import ItineraryFinder
from bsdlink_routing.network import default_network, load_network
from bsdlink_routing.proximity import find_nearby_stops
from bsdlink_routing.step import StepMode
from bsdlink_routing.trip_session import TripSession


def setup_logging(debug=False):
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def show_nearby_stops(network, lat, lon, radius):
    """List the stops within walking range of a point."""
    stops = find_nearby_stops(network, (lat, lon), radius)
    if not stops:
        print(f"❌ No stops within {radius:.0f}m of ({lat}, {lon})")
        return
    print(f"✅ {len(stops)} stops within {radius:.0f}m:")
    for stop in stops:
        print(f"  🚏 {stop.stop_id} {stop.name} ({stop.lat:.5f}, {stop.lon:.5f})")


def show_itineraries(network, start, end):
    """Rank the single-route journeys between two points."""
    itineraries = ItineraryFinder(network).find_itineraries(start, end)
    if not itineraries:
        print("❌ No routes found. Try different start/end points.")
        return
    print(f"✅ Found {len(itineraries)} itineraries:")
    for i, itinerary in enumerate(itineraries):
        print(f"  {i+1}. {itinerary.route.name}: {itinerary.board_stop.name} → {itinerary.alight_stop.name}"
              f" ({itinerary.stop_count} stops, {itinerary.formatted_total_time})")


def show_steps(network, start, end, choice, provider):
    """Expand one itinerary into turn-by-turn steps."""
    with TripSession(network=network, path_provider=provider) as session:
        plan = session.plan(start, end)
        if plan.is_empty:
            print("❌ No routes found. Try different start/end points.")
            return
        if not 1 <= choice <= plan.itinerary_count:
            print(f"❌ Choice must be between 1 and {plan.itinerary_count}")
            return

        itinerary = plan.itineraries[choice - 1]
        expansion = session.expand(itinerary)
        print(f"🚌 {itinerary.route.name} ({itinerary.formatted_total_time})")
        icons = {StepMode.WALK: "🚶", StepMode.RIDE: "🚌", StepMode.ARRIVE: "🏁"}
        for step in expansion.steps:
            line = f"  {step.formatted_time} {icons[step.mode]} {step.label}"
            if step.formatted_duration:
                line += f" ({step.formatted_duration})"
            if step.departure:
                line += f", next bus {step.departure}"
            print(line)
            if step.stop_names:
                print(f"      via {', '.join(step.stop_names)}")
        if itinerary.departures:
            print(f"\n⏰ Departures: {' '.join(itinerary.departures)}")


def search_places(query):
    """Search named places in the service area."""
    places = APIClient().search_places(query)
    if not places:
        print(f"❌ No places found for: {query}")
        return
    print(f"✅ {len(places)} places found:")
    for place in places:
        print(f"  📍 {place.name} ({place.lat:.5f}, {place.lon:.5f})")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="BSD Link Routing CLI - Test and demo tool for itinerary planning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stops near Intermoda station
  ./main_cli.py stops -6.3199 106.6437

  # Rank itineraries from Intermoda to The Breeze
  ./main_cli.py plan -6.3199 106.6437 -6.3014 106.6532

  # Steps for the second itinerary, without calling OSRM
  ./main_cli.py --offline steps -6.3199 106.6437 -6.3014 106.6532 --choice 2
        """
    )

    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--offline', action='store_true', help='Use straight-line paths instead of OSRM')
    parser.add_argument('--network', type=str, help='Network JSON file (default: packaged BSD Link network)')

    subparsers = parser.add_subparsers(dest='command', help='Sub-command help')

    stops_parser = subparsers.add_parser('stops', help='List stops near a point')
    stops_parser.add_argument('lat', type=float)
    stops_parser.add_argument('lon', type=float)
    stops_parser.add_argument('--radius', type=float, default=Config.NEARBY_RADIUS_M, help='Search radius in meters')

    for name, help_text in (('plan', 'Rank itineraries between two points'),
                            ('steps', 'Expand an itinerary into timed steps')):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('start_lat', type=float)
        sub.add_argument('start_lon', type=float)
        sub.add_argument('end_lat', type=float)
        sub.add_argument('end_lon', type=float)
        if name == 'steps':
            sub.add_argument('--choice', type=int, default=1, help='Itinerary number from the plan listing')

    geocode_parser = subparsers.add_parser('geocode', help='Search a place in the service area')
    geocode_parser.add_argument('query', type=str, help='Place name')

    args = parser.parse_args(argv)
    setup_logging(args.debug or Config.DEBUG)

    if args.command is None:
        parser.print_help()
        return 0
    if args.command == 'geocode':
        search_places(args.query)
        return 0

    try:
        network = load_network(args.network) if args.network else default_network()
    except (OSError, ValueError, RoutingError) as e:
        print(f"❌ Could not load network: {e}")
        return 1

    if args.command == 'stops':
        show_nearby_stops(network, args.lat, args.lon, args.radius)
    else:
        start = (args.start_lat, args.start_lon)
        end = (args.end_lat, args.end_lon)
        if args.command == 'plan':
            show_itineraries(network, start, end)
        else:
            provider = StraightLineProvider() if args.offline else APIClient()
            show_steps(network, start, end, args.choice, provider)
    return 0


if __name__ == "__main__":
    sys.exit(main())
