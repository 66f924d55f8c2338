import pytest

from cpuutil.reader import (
    CpuStatReadError,
    CpuStatReader,
    count_cpu_lines,
    parse_cpustats,
)

SAMPLE = (
    "cpu  10132153 290696 3084719 46828483 16683 0 25195 0 175628 0\n"
    "cpu0 1393280 32966 572056 13343292 6130 0 17875 0 23933 0\n"
    "cpu1 1335000 28612 432556 13367013 2634 0 2434 0 21920 0\n"
    "intr 1462898 0 0\n"
    "ctxt 115315\n"
    "btime 769041601\n"
)


def test_count_cpu_lines_stops_at_first_other_line():
    assert count_cpu_lines(SAMPLE.splitlines(keepends=True)) == 3


def test_count_cpu_lines_does_not_count_later_cpu_lines():
    lines = ["cpu 1 2\n", "intr 0\n", "cpu0 1 2\n"]
    assert count_cpu_lines(lines) == 1


def test_count_cpu_lines_empty():
    assert count_cpu_lines([]) == 0


def test_parse_cpustats_reads_requested_lines():
    stats = parse_cpustats(SAMPLE.splitlines(), 3)
    assert [stat.name for stat in stats] == ["cpu", "cpu0", "cpu1"]
    assert stats[1].user == 1393280
    assert stats[2].guest == 21920


def test_parse_cpustats_too_few_lines():
    with pytest.raises(CpuStatReadError):
        parse_cpustats(["cpu 1 2 3 4\n"], 2)


def test_parse_cpustats_malformed_line():
    with pytest.raises(CpuStatReadError):
        parse_cpustats(["cpu 1 x 3\n"], 1)


def test_reader_reads_file(tmp_path):
    path = tmp_path / "stat"
    path.write_text(SAMPLE)
    reader = CpuStatReader(path)
    stats = reader.read()
    assert reader.cpu_count == 3
    assert [stat.name for stat in stats] == ["cpu", "cpu0", "cpu1"]
    assert stats[0].idle == 46828483


def test_reader_keeps_first_cpu_count(tmp_path):
    path = tmp_path / "stat"
    path.write_text(SAMPLE)
    reader = CpuStatReader(path)
    first = reader.read()
    path.write_text(
        "cpu 1 1 1 1\ncpu0 1 1 1 1\ncpu1 1 1 1 1\ncpu2 1 1 1 1\nintr 0\n"
    )
    second = reader.read()
    assert len(second) == len(first)
    assert [stat.name for stat in second] == ["cpu", "cpu0", "cpu1"]


def test_reader_missing_file(tmp_path):
    reader = CpuStatReader(tmp_path / "absent")
    with pytest.raises(CpuStatReadError):
        reader.read()


def test_reader_file_without_cpu_lines(tmp_path):
    path = tmp_path / "stat"
    path.write_text("intr 0\nctxt 1\n")
    with pytest.raises(CpuStatReadError):
        CpuStatReader(path).read()


def test_reader_file_shrinks(tmp_path):
    path = tmp_path / "stat"
    path.write_text(SAMPLE)
    reader = CpuStatReader(path)
    reader.read()
    path.write_text("cpu 1 2 3 4\n")
    with pytest.raises(CpuStatReadError):
        reader.read()