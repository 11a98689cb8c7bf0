import json

import main_cli


def test_stops_command(capsys):
    assert main_cli.main(["stops", "-6.3199", "106.6437"]) == 0
    out = capsys.readouterr().out
    assert "BS01 Intermoda" in out


def test_plan_command_lists_itineraries(capsys):
    assert main_cli.main(["plan", "-6.3199", "106.6437", "-6.3014", "106.6532"]) == 0
    out = capsys.readouterr().out
    assert "Intermoda - Sektor 1.3" in out


def test_steps_command_offline(capsys):
    assert main_cli.main(["--offline", "steps", "-6.3199", "106.6437", "-6.3014", "106.6532"]) == 0
    out = capsys.readouterr().out
    assert "Start Point" in out
    assert "Destination" in out
    assert "Departures: 14:17" in out


def test_plan_with_no_routes(capsys):
    assert main_cli.main(["plan", "0", "0", "1", "1"]) == 0
    assert "No routes found" in capsys.readouterr().out


def test_custom_network_file(tmp_path, capsys):
    path = tmp_path / "network.json"
    path.write_text(json.dumps({
        "stops": [{"id": "S1", "name": "One", "lat": 0.0, "lon": 0.0}],
        "routes": [{"id": "R1", "name": "Only", "stops": ["S1", "S404"]}],
    }))
    assert main_cli.main(["--network", str(path), "stops", "0", "0"]) == 1
    assert "Could not load network" in capsys.readouterr().out
