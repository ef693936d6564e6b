import pytest

from biobits_engine import InvalidStopPolicyError, analyze, codon_table_markdown
from biobits_engine.analysis import codon_table_dict


def test_analyze_values():
    report = analyze("atg gcc\ntaa")
    assert report.cleaned == "ATGGCCTAA"
    assert report.length == 9
    assert report.rna == "AUGGCCUAA"
    assert report.protein == "MA*"
    assert report.reverse_complement == "TTAGGCCAT"
    assert report.gc_content == 44.44
    assert report.can_translate
    assert not report.has_noise


def test_analyze_noise_and_short_input():
    report = analyze("AT N")
    assert report.has_noise
    assert not report.can_translate
    assert report.protein == ""

    empty = analyze("")
    assert empty.length == 0
    assert empty.gc_content == 0
    assert not empty.has_noise


def test_analyze_frame_and_trim():
    report = analyze("CATGGCCTGAAGT", frame=1, stop_policy="trim")
    assert report.protein == "MA"
    assert report.frame == 1
    assert report.stop_policy == "trim"


@pytest.mark.parametrize("raw, frame, expected", [
    ("ATGG", 0, True),
    ("ATGG", 1, True),
    ("ATGG", 2, False),
    ("ATGGC", 2, True),
    ("AT", 1, False),
])
def test_can_translate_follows_frame(raw, frame, expected):
    report = analyze(raw, frame=frame)
    assert report.can_translate is expected
    assert (report.protein != "") is expected


def test_analyze_bad_policy():
    with pytest.raises(InvalidStopPolicyError):
        analyze("ATG", stop_policy="nope")


def test_report_serialisation():
    report = analyze("GGCC xx")
    d = report.to_dict()
    assert d["gc_content"] == 100
    assert d["has_noise"] is True

    md = report.to_markdown()
    assert md.splitlines()[0] == "| Field | Value |"
    assert "| GC% | 100.00 |" in md
    assert "Heads-up" in md


def test_codon_table_markdown():
    lines = codon_table_markdown().splitlines()
    assert len(lines) == 2 + 16
    assert lines[0] == "| 1st | 2nd U | 2nd C | 2nd A | 2nd G | 3rd |"
    assert lines[2] == "| U | UUU F | UCU S | UAU Y | UGU C | U |"
    assert any("AUG M" in line for line in lines)


def test_codon_table_dict():
    table = codon_table_dict()
    assert len(table) == 64
    assert table["AUG"] == {"aa": "M", "name": "Methionine"}
    assert table["UGA"] == {"aa": "*", "name": "Stop"}
