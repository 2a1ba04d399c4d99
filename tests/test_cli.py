import io

import pytest

from graphwalk.cli import main, parse_cases
from graphwalk.traversal import bfs, dfs


def test_parse_directed_case():
    graphs = parse_cases("1\n3 2\n0 1\n1 2\n")
    assert len(graphs) == 1
    graph = graphs[0]
    assert len(graph) == 3
    assert graph.neighbors(0) == (1,)
    assert graph.neighbors(1) == (2,)
    assert graph.neighbors(2) == ()


def test_parse_undirected_adds_both_directions():
    graph = parse_cases("1 3 2 0 1 1 2", undirected=True)[0]
    assert graph.neighbors(1) == (0, 2)
    assert graph.neighbors(2) == (1,)


def test_parse_several_cases():
    graphs = parse_cases("2\n2 1\n0 1\n4 0\n")
    assert [len(g) for g in graphs] == [2, 4]


def test_parse_zero_cases():
    assert parse_cases("0") == []


@pytest.mark.parametrize("text", ["", "1", "1 3", "1 3 2 0 1", "1 3 1 0"])
def test_parse_truncated_input(text):
    with pytest.raises(ValueError):
        parse_cases(text)


def test_parse_rejects_non_integer():
    with pytest.raises(ValueError, match="integer"):
        parse_cases("1 2 x")


def test_parse_rejects_vertex_out_of_range():
    with pytest.raises(ValueError):
        parse_cases("1 2 1 0 5")


def test_main_bfs_from_stdin(monkeypatch, capsys):
    text = "1\n5 4\n0 1\n0 2\n0 3\n2 4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(["bfs"]) == 0
    out = capsys.readouterr().out
    assert out == "0 1 2 3 4 \n"
    assert [int(t) for t in out.split()] == bfs(parse_cases(text)[0])


def test_main_dfs_reports_components(tmp_path, capsys):
    text = "1\n4 1\n0 1\n"
    path = tmp_path / "cases.txt"
    path.write_text(text, encoding="utf-8")
    assert main(["dfs", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    expected = dfs(parse_cases(text, undirected=True)[0])
    assert lines[0] == f"No. of disconnected graph : {expected.components}"
    assert [int(t) for t in lines[1].split()] == expected.order


def test_main_prints_one_line_per_bfs_case(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 0\n2 1\n0 1\n2 0\n"))
    assert main(["bfs"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 3


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 3 2 0"))
    assert main(["bfs"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "graphwalk: error" in captured.err


def test_main_missing_file(tmp_path, capsys):
    assert main(["dfs", str(tmp_path / "absent.txt")]) == 1
    assert "graphwalk: error" in capsys.readouterr().err


def test_main_rejects_unknown_command():
    with pytest.raises(SystemExit) as info:
        main(["walk"])
    assert info.value.code == 2