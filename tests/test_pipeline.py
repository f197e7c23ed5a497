import pytest

from ossim.pipeline import main, sort_uniq


def test_sort_uniq_sorts_and_removes_duplicates(tmp_path):
    source = tmp_path / "in.txt"
    dest = tmp_path / "out.txt"
    source.write_bytes(b"b\na\nb\nc\na\n")
    count = sort_uniq(source, dest)
    assert dest.read_bytes() == b"a\nb\nc\n"
    assert count == 3


def test_output_is_sorted_and_unique(tmp_path):
    source = tmp_path / "in.txt"
    dest = tmp_path / "out.txt"
    words = ["pear", "apple", "Zebra", "pear", "fig", "apple", "", "fig"]
    source.write_text("\n".join(words) + "\n")
    sort_uniq(source, dest)
    lines = dest.read_text().split("\n")[:-1]
    assert lines == sorted(lines)
    assert len(lines) == len(set(lines))
    assert set(lines) == set(words)


def test_missing_final_newline_is_added(tmp_path):
    source = tmp_path / "in.txt"
    dest = tmp_path / "out.txt"
    source.write_bytes(b"y\nx")
    sort_uniq(source, dest)
    assert dest.read_bytes() == b"x\ny\n"


def test_empty_source_gives_empty_destination(tmp_path):
    source = tmp_path / "in.txt"
    dest = tmp_path / "out.txt"
    source.write_bytes(b"")
    assert sort_uniq(source, dest) == 0
    assert dest.read_bytes() == b""


def test_destination_is_truncated(tmp_path):
    source = tmp_path / "in.txt"
    dest = tmp_path / "out.txt"
    source.write_bytes(b"q\n")
    dest.write_bytes(b"old contents that are longer\n")
    sort_uniq(source, dest)
    assert dest.read_bytes() == b"q\n"


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        sort_uniq(tmp_path / "absent.txt", tmp_path / "out.txt")


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 0
    assert "You can not enter more or less than 3 arguments." in capsys.readouterr().out


def test_main_missing_source(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]) == 1
    assert "Unable to open source file!!!" in capsys.readouterr().out


def test_main_bad_destination(tmp_path, capsys):
    source = tmp_path / "in.txt"
    source.write_bytes(b"a\n")
    assert main([str(source), str(tmp_path / "no-dir" / "out.txt")]) == 1
    assert "Unable to open destination file!!!" in capsys.readouterr().out


def test_main_success(tmp_path):
    source = tmp_path / "in.txt"
    dest = tmp_path / "out.txt"
    source.write_bytes(b"2\n1\n2\n")
    assert main([str(source), str(dest)]) == 0
    assert dest.read_bytes() == b"1\n2\n"