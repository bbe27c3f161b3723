import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

import circsum


def test_profile_records_sections(capsys):
    with circsum.profile("solve") as p:
        with p.section("sum"):
            result = circsum.sum_matching_circular("1122")

    assert result == 3
    assert p.elapsed_ms is not None and p.elapsed_ms >= 0
    assert [name for name, _ in p.events] == ["sum"]

    p.print_report()
    out = capsys.readouterr().out
    assert "circsum Profiler Report" in out
    assert "solve:" in out
    assert any(line.startswith("sum ") for line in out.splitlines())


def test_section_is_recorded_when_block_raises():
    with pytest.raises(circsum.RangeError):
        with circsum.profile() as p:
            with p.section("bad"):
                circsum.sum_matching_circular("12", 1, 0)
    assert [name for name, _ in p.events] == ["bad"]
    assert p.elapsed_ms is not None


def test_report_before_use(capsys):
    circsum.profile().print_report()
    assert "has not finished" in capsys.readouterr().out


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
