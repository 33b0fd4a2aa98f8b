"""
Tests for move rendering and the command-line entry point.
"""

from pathlib import Path

import pytest

from slidepath.app import cli
from slidepath.core.maps import load_map
from slidepath.core.render import direction_name, path_to_moves, render_path

from conftest import bfs_moves


class TestRender:
    def test_small_example(self) -> None:
        path = [(0, 0), (1, 0), (1, 2), (2, 2)]
        assert render_path(path) == [
            "Path found:",
            "1. Start at (1, 1)",
            "2. Move to Down (1, 2)",
            "3. Move to Right (3, 2)",
            "4. Move to Down (3, 3)",
            "5. Done!",
        ]

    def test_single_cell(self) -> None:
        assert render_path([(0, 1)]) == ["Path found:", "1. Start at (2, 1)", "2. Done!"]

    def test_empty(self) -> None:
        assert render_path([]) == ["No path found."]

    @pytest.mark.parametrize(
        "prev, cur, name",
        [((3, 3), (0, 3), "Up"), ((0, 3), (7, 3), "Down"), ((2, 5), (2, 0), "Left"), ((2, 0), (2, 9), "Right")],
    )
    def test_direction_name(self, prev, cur, name) -> None:
        assert direction_name(prev, cur) == name

    def test_diagonal_rejected(self) -> None:
        with pytest.raises(ValueError):
            direction_name((0, 0), (1, 1))

    def test_path_to_moves(self) -> None:
        assert path_to_moves([(0, 0), (1, 0), (1, 2)]) == ["Down", "Right"]
        assert path_to_moves([(0, 0)]) == []


class TestCli:
    def test_solves_puzzle(self, tmp_path: Path, capsys) -> None:
        p = tmp_path / "p.txt"
        p.write_text("S.0\n...\n0.F\n")
        assert cli.main([str(p)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[:6] == [
            "Path found:",
            "1. Start at (1, 1)",
            "2. Move to Down (1, 2)",
            "3. Move to Right (3, 2)",
            "4. Move to Down (3, 3)",
            "5. Done!",
        ]
        assert out[6].startswith("Time taken: ")
        assert out[6].endswith(" ms")

    def test_no_path(self, tmp_path: Path, capsys) -> None:
        p = tmp_path / "p.txt"
        p.write_text("00000\n0S0F0\n00000\n")
        assert cli.main([str(p), "--algo", "dijkstra"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "No path found."

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        assert cli.main([str(tmp_path / "nope.txt")]) == 1
        assert capsys.readouterr().out.startswith("Error reading file:")

    def test_bad_puzzle(self, tmp_path: Path, capsys) -> None:
        p = tmp_path / "p.txt"
        p.write_text("....\n")
        assert cli.main([str(p)]) == 1
        assert "no 'S' cell" in capsys.readouterr().out

    def test_default_puzzle(self, capsys) -> None:
        assert cli.main(["--heuristic", "axes"]) == 0
        out = capsys.readouterr().out
        assert "Time taken:" in out

    def test_solve_matches_algorithms(self, small_grid) -> None:
        assert len(cli.solve(small_grid, "astar", "axes")) == len(cli.solve(small_grid, "dijkstra"))

    @pytest.mark.parametrize("content", ['{"rows": [', "[1, 2]", '{"rows": ["S.", null]}'])
    def test_malformed_json_puzzle(self, tmp_path: Path, capsys, content: str) -> None:
        p = tmp_path / "p.json"
        p.write_text(content)
        assert cli.main([str(p)]) == 1
        assert capsys.readouterr().out.startswith("Error reading file:")

    def test_undecodable_puzzle(self, tmp_path: Path, capsys) -> None:
        p = tmp_path / "p.txt"
        p.write_bytes(b"S\xff.\n..F\n")
        assert cli.main([str(p)]) == 1
        assert capsys.readouterr().out.startswith("Error reading file:")

    def test_default_engine_is_minimal(self, maps_dir) -> None:
        grid = load_map(maps_dir / "puzzle_1.txt")
        assert len(cli.solve(grid)) - 1 == bfs_moves(grid)
