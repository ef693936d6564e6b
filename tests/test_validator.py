import pytest

from biobits_engine import Question, QuestionValidator, make_questions, validate_questions
from biobits_engine.validator import ValidationLevel


@pytest.mark.parametrize("mode", ["codon2aa", "aa2codon"])
def test_generated_questions_are_valid(mode):
    report = validate_questions(make_questions(mode, 30, seed=5))
    assert report.is_valid
    assert report.checked == 30
    assert report.error_count == 0
    assert report.warning_count == 0


def test_empty_list_is_valid():
    report = QuestionValidator().validate_questions([])
    assert report.is_valid
    assert report.checked == 0


def test_wrong_number_of_choices():
    q = Question("What AA does AUG code?", ("M", "L", "I"), "M",
                 {"codon": "AUG", "type": "codon2aa"})
    report = validate_questions([q])
    assert not report.is_valid
    assert report.error_count == 1
    assert "보기가 3개" in report.get_errors()[0].message


def test_duplicate_choices_and_missing_answer():
    q = Question("What AA does AUG code?", ("L", "L", "I", "V"), "M",
                 {"codon": "AUG", "type": "codon2aa"})
    report = validate_questions([q])
    messages = [e.message for e in report.get_errors()]
    assert any("중복" in m for m in messages)
    assert any("0번 등장" in m for m in messages)


def test_codon2aa_wrong_answer_key():
    q = Question("What AA does AUG code?", ("M", "L", "I", "V"), "L",
                 {"codon": "AUG", "type": "codon2aa"})
    report = validate_questions([q])
    assert not report.is_valid
    details = [e.details for e in report.get_errors()]
    assert {"index": 0, "codon": "AUG", "expected": "M"} in details
    assert {"index": 0, "choices": ["M"]} in details


def test_aa2codon_distractor_that_is_also_correct():
    q = Question("Which codon codes for L?", ("CUU", "CUG", "AUG", "GGG"), "CUU",
                 {"aa": "L", "type": "aa2codon"})
    report = validate_questions([q])
    assert report.error_count == 1
    assert report.get_errors()[0].details["choices"] == ["CUG"]


def test_aa2codon_answer_not_encoding_aa():
    q = Question("Which codon codes for W?", ("UGA", "AUG", "GGG", "CCC"), "UGA",
                 {"aa": "W", "type": "aa2codon"})
    report = validate_questions([q])
    assert not report.is_valid


def test_stop_answer_is_a_warning():
    q = Question("What AA does UAA code?", ("*", "L", "I", "V"), "*",
                 {"codon": "UAA", "type": "codon2aa"})
    report = validate_questions([q])
    assert report.is_valid
    assert report.warning_count == 1
    assert report.get_warnings()[0].level is ValidationLevel.WARNING


def test_unknown_type_skips_answer_check():
    q = Question("?", ("a", "b", "c", "d"), "a", {})
    report = validate_questions([q])
    assert report.is_valid
    assert report.warning_count == 1


def test_report_dict_and_str():
    q = Question("What AA does AUG code?", ("M", "L", "I"), "M",
                 {"codon": "AUG", "type": "codon2aa"})
    report = validate_questions([q])
    d = report.to_dict()
    assert d["is_valid"] is False
    assert d["error_count"] == 1
    assert d["issues"][0]["level"] == "ERROR"
    assert d["issues"][0]["index"] == 0
    assert d["failed_questions"] == [0]
    assert "검증 보고서" in str(report)
    assert "문제 1: 보기가 3개" in str(report)
