import pytest

from distributor.business_objects import SchemaError
from distributor.cli import main
from distributor.utils.read_records import parse_records, read_containers_txt, read_items_txt
from distributor.utils.write_results import format_assignments, write_assignments


class TestReadRecords:
    def test_comments_and_blank_lines(self):
        lines = [
            "# filename size\n",
            "tom.dat 1024\n",
            "\n",
            "   # indented comment\n",
            "  jerry.dat \t 16553  \n",
        ]
        assert parse_records(lines) == [("tom.dat", 1024), ("jerry.dat", 16553)]

    @pytest.mark.parametrize("line", ["tom.dat", "tom.dat -5", "tom.dat 12 extra", "tom.dat 1.5"])
    def test_malformed(self, line):
        with pytest.raises(SchemaError, match="files.txt:2"):
            parse_records(["# header", line], source="files.txt")

    def test_read_files(self, tmp_path):
        files = tmp_path / "files.txt"
        files.write_text("# name size\ntom.dat 1024\njerry.dat 0\n", encoding="utf-8")
        items = read_items_txt(str(files))
        assert [(it.id, it.size) for it in items] == [("tom.dat", 1024), ("jerry.dat", 0)]

    def test_read_nodes(self, tmp_path):
        nodes = tmp_path / "nodes.txt"
        nodes.write_text("node1 4096\n", encoding="utf-8")
        assert [(c.id, c.capacity) for c in read_containers_txt(str(nodes))] == [("node1", 4096)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaError, match="failed to read"):
            read_items_txt(str(tmp_path / "nope.txt"))


class TestWriteResults:
    def test_format(self):
        lines = format_assignments({"a": "Y", "c": None, "b": "Y"}, unassigned_label="NULL")
        assert lines == ["a Y", "c NULL", "b Y"]

    def test_write_file(self, tmp_path):
        out = tmp_path / "result.txt"
        write_assignments({"a": "Y", "c": None}, out=str(out))
        assert out.read_text(encoding="utf-8") == "a Y\nc unassigned\n"

    def test_write_stdout(self, capsys):
        write_assignments({"a": "Y"})
        assert capsys.readouterr().out == "a Y\n"


def _inputs(tmp_path, nodes="X 25\nY 35\n"):
    files = tmp_path / "files.txt"
    files.write_text("# filename size\na 10\nb 20\nc 30\n", encoding="utf-8")
    node_file = tmp_path / "nodes.txt"
    node_file.write_text(nodes, encoding="utf-8")
    return str(files), str(node_file)


class TestCli:
    def test_console_output(self, tmp_path, capsys):
        files, nodes = _inputs(tmp_path)
        assert main(["-f", files, "-n", nodes]) == 0
        assert capsys.readouterr().out == "a Y\nc unassigned\nb Y\n"

    def test_output_file_and_label(self, tmp_path, capsys):
        files, nodes = _inputs(tmp_path)
        out = tmp_path / "result.txt"
        assert main(["-f", files, "-n", nodes, "-o", str(out), "--null-label", "NULL"]) == 0
        assert out.read_text(encoding="utf-8") == "a Y\nc NULL\nb Y\n"
        assert capsys.readouterr().out == ""

    def test_report_dir(self, tmp_path):
        files, nodes = _inputs(tmp_path)
        reports = tmp_path / "reports"
        assert main(["-f", files, "-n", nodes, "-r", str(reports), "-o", str(tmp_path / "r.txt")]) == 0
        assert (reports / "attempt_log.csv").exists()
        assert (reports / "summary.csv").exists()

    def test_no_nodes(self, tmp_path, capsys):
        files, nodes = _inputs(tmp_path, nodes="# nothing here\n")
        assert main(["-f", files, "-n", nodes]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "no containers" in captured.err

    def test_bad_record(self, tmp_path, capsys):
        files, nodes = _inputs(tmp_path, nodes="X twenty\n")
        assert main(["-f", files, "-n", nodes]) == 1
        assert "nodes.txt:1" in capsys.readouterr().err

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-h"])
        assert exc.value.code == 0
        assert "--files" in capsys.readouterr().out

    def test_missing_required(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["-f", "files.txt"])
        assert exc.value.code == 2
