import pytest

from bsdlink_routing.itinerary_finder import ItineraryFinder
from bsdlink_routing.network import default_network
from bsdlink_routing.schedule import TimetableScheduleProvider, generate_departures

INTERMODA = (-6.319902912486388, 106.64371452384238)
THE_BREEZE = (-6.301369321397565, 106.65315717850528)


def test_ride_time_three_minutes_per_stop(line_network):
    # Charlie is index 2 and Foxtrot index 5 on the 7-stop EAST route
    finder = ItineraryFinder(line_network)
    start = line_network.stop("C").coordinate
    end = line_network.stop("F").coordinate

    itineraries = finder.find_itineraries(start, end)

    assert len(itineraries) == 1
    itinerary = itineraries[0]
    assert itinerary.route.route_id == "EAST"
    assert (itinerary.board_index, itinerary.alight_index) == (2, 5)
    assert itinerary.stop_count == 3
    assert itinerary.ride_time == 9 * 60
    assert itinerary.walk_to_board == 0
    assert itinerary.walk_from_alight == 0
    assert itinerary.total_time == 9 * 60
    assert itinerary.formatted_total_time == "9m"


def test_found_iff_board_index_not_after_alight(line_network):
    finder = ItineraryFinder(line_network)
    for route in line_network.routes:
        for a in route.stops:
            for b in route.stops:
                found = [
                    i for i in finder.find_itineraries(a.coordinate, b.coordinate)
                    if i.route.route_id == route.route_id
                ]
                expected = route.first_index(a.stop_id) <= route.first_index(b.stop_id)
                assert bool(found) == expected, (route.route_id, a.stop_id, b.stop_id)


def test_loop_route_matches_first_occurrence(line_network):
    # Charlie appears at 0 and 2 on LOOP; the first one is used
    finder = ItineraryFinder(line_network)
    start = line_network.stop("C").coordinate
    end = line_network.stop("E").coordinate
    loop = [i for i in finder.find_itineraries(start, end) if i.route.route_id == "LOOP"]
    assert len(loop) == 1
    assert loop[0].board_index == 0
    assert loop[0].alight_index == 3
    assert loop[0].ride_time == 9 * 60


def test_degenerate_rides_kept_in_route_order(line_network):
    finder = ItineraryFinder(line_network)
    charlie = line_network.stop("C").coordinate

    itineraries = finder.find_itineraries(charlie, charlie)

    assert [i.route.route_id for i in itineraries] == ["EAST", "WEST", "LOOP"]
    assert all(i.stop_count == 0 and i.total_time == 0 for i in itineraries)


def test_nothing_nearby_returns_empty(line_network):
    finder = ItineraryFinder(line_network)
    assert finder.find_itineraries((45.0, 45.0), (46.0, 46.0)) == []


def test_wrong_direction_only_returns_empty():
    from bsdlink_routing.network import NetworkModel
    from bsdlink_routing.stop import Stop
    network = NetworkModel(
        [Stop("A", "Alpha", 0.0, 0.0), Stop("B", "Bravo", 0.0, 0.01)],
        [("R", "Bravo - Alpha", ["B", "A"], "")],
    )
    assert ItineraryFinder(network).find_itineraries((0.0, 0.0), (0.0, 0.01)) == []


def test_sorted_by_total_time_bsd_network():
    finder = ItineraryFinder(default_network())
    itineraries = finder.find_itineraries(INTERMODA, THE_BREEZE)

    assert itineraries
    totals = [i.total_time for i in itineraries]
    assert totals == sorted(totals)
    for itinerary in itineraries:
        assert itinerary.ride_time == itinerary.stop_count * 3 * 60
        assert itinerary.total_time == pytest.approx(
            itinerary.walk_to_board + itinerary.ride_time + itinerary.walk_from_alight)


def test_same_input_same_result():
    finder = ItineraryFinder(default_network())
    assert finder.find_itineraries(INTERMODA, THE_BREEZE) == finder.find_itineraries(INTERMODA, THE_BREEZE)


def test_departures_from_fixed_table_by_default(line_network):
    finder = ItineraryFinder(line_network)
    itinerary = finder.find_itineraries((0.0, 0.0), (0.0, 0.06))[0]
    assert list(itinerary.departures) == generate_departures()


def test_departures_from_injected_provider(line_network):
    provider = TimetableScheduleProvider({"EAST": ["08:15", "07:45"]})
    finder = ItineraryFinder(line_network, schedule_provider=provider)
    itinerary = finder.find_itineraries((0.0, 0.0), (0.0, 0.06))[0]
    assert itinerary.departures == ("07:45", "08:15")


def test_custom_constants(line_network):
    finder = ItineraryFinder(line_network, minutes_per_stop=2, walk_speed=40)
    # start ~111m west of Alpha
    itinerary = finder.find_itineraries((0.0, -0.001), (0.0, 0.01))[0]
    assert itinerary.ride_time == 2 * 60
    assert itinerary.walk_to_board == pytest.approx(111.195 / 40 * 60, rel=1e-3)
