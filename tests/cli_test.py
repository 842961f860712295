import io

import pytest

from cmpheap import cli


def run(monkeypatch, capsys, argv, stdin=""):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    cli.main(argv)
    return capsys.readouterr().out.splitlines()


def test_sort_text_lines(monkeypatch, capsys):
    assert run(monkeypatch, capsys, ["sort"], "pear\napple\n\nfig\n") == ["apple", "fig", "pear"]


def test_sort_numeric_reverse(monkeypatch, capsys):
    out = run(monkeypatch, capsys, ["sort", "--numeric", "--reverse"], "2\n10\n1.5\n")
    assert out == ["10", "2", "1.5"]


def test_sort_from_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "items.txt"
    path.write_text("3\n1\n2\n", encoding="utf-8")
    assert run(monkeypatch, capsys, ["sort", "--numeric", "--path", str(path)]) == ["1", "2", "3"]


def test_top_k_smallest_and_largest(monkeypatch, capsys):
    data = "\n".join(str(x) for x in [7, 3, 9, 1, 5, 8, 2]) + "\n"
    assert run(monkeypatch, capsys, ["top", "--k", "3", "--numeric"], data) == ["1", "2", "3"]
    assert run(monkeypatch, capsys, ["top", "--k", "2", "--numeric", "--reverse"], data) == ["9", "8"]


def test_top_k_larger_than_input(monkeypatch, capsys):
    assert run(monkeypatch, capsys, ["top", "--k", "10", "--numeric"], "2\n1\n") == ["1", "2"]


class LineFeed:
    """Iterable-only stdin that counts how many lines were pulled."""

    def __init__(self, lines):
        self.lines = lines
        self.pulled = 0

    def __iter__(self):
        for line in self.lines:
            self.pulled += 1
            yield line


def test_top_streams_input_lines(monkeypatch, capsys):
    feed = LineFeed([f"{x}\n" for x in [7, 3, 9, 1, 5, 8, 2]])
    monkeypatch.setattr("sys.stdin", feed)
    cli.main(["top", "--k", "2", "--numeric"])
    assert capsys.readouterr().out.splitlines() == ["1", "2"]
    assert feed.pulled == 7


def test_top_rejects_non_positive_k(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, capsys, ["top", "--k", "0"], "1\n")
    assert exc.value.code == 2


def test_non_numeric_input_is_an_error(monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, capsys, ["sort", "--numeric"], "1\nabc\n")
    assert exc.value.code == 2
    assert "non-numeric input" in capsys.readouterr().err


def test_missing_file_is_an_error(tmp_path, monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run(monkeypatch, capsys, ["sort", "--path", str(tmp_path / "missing.txt")])
    assert exc.value.code == 2


def test_bench_writes_report(tmp_path, monkeypatch, capsys):
    path = tmp_path / "bench.csv"
    out = run(monkeypatch, capsys, ["bench", "--path", str(path), "--base", "2", "--rounds", "1"])
    assert out == [f"Benchmark completed. Results saved to {path}"]
    assert path.read_text(encoding="utf-8").startswith("Input Size,Operation")
