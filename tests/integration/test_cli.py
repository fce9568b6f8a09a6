"""Integration tests for the cross-check CLI."""

import json
import logging
import random

import pytest

from geosweep.cli.crosscheck import generate_segments, main, run_cross_check


@pytest.fixture
def root_level():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestGenerateSegments:
    def test_count_bounds_and_non_degenerate(self):
        segments = generate_segments(50, -3, 3, 10, 12, random.Random(7))
        assert len(segments) == 50
        for segment in segments:
            assert not segment.is_degenerate()
            for point in (segment.upper, segment.lower):
                assert -3 <= point.x <= 3
                assert 10 <= point.y <= 12

    def test_seed_is_reproducible(self):
        assert generate_segments(5, 0, 10, 0, 10, random.Random(3)) == generate_segments(
            5, 0, 10, 0, 10, random.Random(3)
        )

    def test_single_point_bounds_rejected(self):
        with pytest.raises(ValueError):
            generate_segments(1, 2, 2, 5, 5, random.Random(0))


class TestRunCrossCheck:
    def test_no_mismatches(self):
        assert run_cross_check(iterations=25, count=6, bounds=(0, 5, 0, 5), epsilon=1e-9, seed=11) == 0


class TestMain:
    def test_emit_prints_segments(self, capsys):
        main(["--emit", "-n", "4", "--seed", "1"])
        objects = json.loads(capsys.readouterr().out)
        assert len(objects) == 4
        assert all(obj["type"] == "LINE" for obj in objects)

    def test_cross_check_passes(self):
        main(["--iterations", "10", "-n", "5", "--seed", "2"])

    def test_invalid_bounds_exit_with_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--minx", "5", "--maxx", "1"])
        assert exc_info.value.code == 2

    def test_invalid_number(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["-n", "0"])
        assert exc_info.value.code == 2

    def test_input_file(self, tmp_path, capsys):
        path = tmp_path / "segments.json"
        path.write_text(json.dumps([
            {"type": "LINE", "start": [0, 0], "end": [10, 10]},
            {"type": "POLYLINE", "points": [[0, 10], [10, 0]]},
        ]))
        main(["--input", str(path)])
        results = json.loads(capsys.readouterr().out)
        assert len(results) == 1
        assert results[0]["type"] == "point"
        assert results[0]["point"] == [5.0, 5.0]

    def test_invalid_input_file(self, tmp_path):
        path = tmp_path / "segments.json"
        path.write_text(json.dumps([{"type": "CIRCLE"}]))
        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(path)])
        assert exc_info.value.code == 1

    def test_missing_input_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--input", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1


class TestLogLevel:
    def test_level_comes_from_settings(self, monkeypatch, root_level):
        monkeypatch.setenv("GEOSWEEP_LOG_LEVEL", "warning")
        main(["--emit", "-n", "1", "--seed", "0"])
        assert root_level.level == logging.WARNING

    def test_debug_setting_enables_debug_logging(self, monkeypatch, root_level):
        monkeypatch.setenv("GEOSWEEP_DEBUG", "true")
        main(["--emit", "-n", "1", "--seed", "0"])
        assert root_level.level == logging.DEBUG

    def test_verbose_overrides_settings(self, monkeypatch, root_level):
        monkeypatch.setenv("GEOSWEEP_LOG_LEVEL", "ERROR")
        main(["--emit", "-n", "1", "--seed", "0", "--verbose"])
        assert root_level.level == logging.DEBUG
