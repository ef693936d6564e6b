import pytest

from biobits_engine import QuizGenerator


SAMPLE_INPUTS = [
    "",
    "ACGT",
    "acgtACGTxyz123",
    "  atg gcc\ntaa ",
    "NNNNACGTNNNN",
    "GATTACA" * 7,
    "\x00\xff binary \x7f junk TTT",
    "ççàéACGT",
    "UUUU",
]


@pytest.fixture(params=SAMPLE_INPUTS)
def raw_sequence(request) -> str:
    return request.param


@pytest.fixture
def seeded_generator() -> QuizGenerator:
    return QuizGenerator(seed=42)
