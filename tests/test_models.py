import pytest

from biobits_engine import Question, make_codon_to_aa


def test_question_meta_is_read_only():
    meta = {"codon": "AUG", "type": "codon2aa"}
    q = Question("What AA does AUG code?", ["M", "L", "I", "V"], "M", meta)

    with pytest.raises(TypeError):
        q.meta["codon"] = "UAA"

    # 원본 dict를 바꿔도 문제는 그대로
    meta["codon"] = "UAA"
    assert q.meta["codon"] == "AUG"
    assert q.choices == ("M", "L", "I", "V")


def test_question_is_hashable():
    qs = make_codon_to_aa(5, seed=42)
    again = make_codon_to_aa(5, seed=42)
    assert set(qs) == set(again)
    assert hash(qs[0]) == hash(again[0])


def test_question_dict_round_trip():
    q = make_codon_to_aa(1, seed=3)[0]
    data = q.to_dict()
    assert isinstance(data["meta"], dict)
    assert Question.from_dict(data) == q
    assert Question.from_dict(data).mode == "codon2aa"


@pytest.mark.parametrize("data", [
    {"choices": 5},
    {"choices": ["M"], "meta": ["codon"]},
])
def test_question_from_bad_dict(data):
    with pytest.raises(ValueError):
        Question.from_dict(data)
