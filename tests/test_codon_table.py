import pytest

from biobits_engine import (
    AA_TO_CODONS,
    AMINO_ACIDS_NO_STOP,
    CODON_TABLE,
    CODONS_NO_STOP,
    STOP_SYMBOL,
)
from biobits_engine.codon_table import STOP_CODONS, codons_for, lookup


def test_table_is_complete():
    assert len(CODON_TABLE) == 64
    assert all(len(c) == 3 and set(c) <= set("ACGU") for c in CODON_TABLE)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CODON_TABLE["AUG"] = "X"
    with pytest.raises(TypeError):
        AA_TO_CODONS["M"] = ("AAA",)


def test_stop_codons():
    assert set(STOP_CODONS) == {"UAA", "UAG", "UGA"}
    assert len(CODONS_NO_STOP) == 61
    assert STOP_SYMBOL not in AMINO_ACIDS_NO_STOP


def test_non_stop_order_follows_table():
    assert CODONS_NO_STOP[:4] == ("UUU", "UUC", "UUA", "UUG")
    assert CODONS_NO_STOP[-1] == "GGG"


def test_reverse_index():
    assert AMINO_ACIDS_NO_STOP == tuple("ACDEFGHIKLMNPQRSTVWY")
    assert AA_TO_CODONS["M"] == ("AUG",)
    assert AA_TO_CODONS["L"] == ("UUA", "UUG", "CUU", "CUC", "CUA", "CUG")
    assert sum(len(cs) for cs in AA_TO_CODONS.values()) == 61
    for aa, codons in AA_TO_CODONS.items():
        assert all(CODON_TABLE[c] == aa for c in codons)


def test_lookup_helpers():
    assert lookup("UGG") == "W"
    assert lookup("XYZ") == "?"
    assert codons_for("W") == ("UGG",)
    assert codons_for("*") == ()
