"""
generator.py - 코돈 퀴즈 문제 생성기
QuizGenerator 클래스 (Mulberry32 시드 난수 + Fisher-Yates 셔플)
"""

import logging
import random
from typing import Callable, List, MutableSequence, Optional, TypeVar, Union

from .codon_table import (
    AA_TO_CODONS, AMINO_ACIDS_NO_STOP, CODON_TABLE, CODONS_NO_STOP
)
from .exceptions import InvalidCountError, InvalidModeError
from .models import Question, QuizMode

logger = logging.getLogger(__name__)

T = TypeVar('T')

_MASK32 = 0xFFFFFFFF
_GOLDEN = 0x6D2B79F5

NUM_CHOICES = 4


def _imul(a: int, b: int) -> int:
    """32비트 정수 곱 (하위 32비트만)"""
    return (a * b) & _MASK32


class Mulberry32:
    """
    Mulberry32 의사 난수 생성기
    같은 시드 -> 같은 난수열 -> 같은 문제 세트
    """

    def __init__(self, seed: int):
        self.seed = seed & _MASK32
        self._state = self.seed

    def __call__(self) -> float:
        """[0, 1) 구간의 실수 하나"""
        self._state = (self._state + _GOLDEN) & _MASK32
        t = self._state
        r = _imul(t ^ (t >> 15), 1 | t)
        r ^= (r + _imul(r ^ (r >> 7), 61 | r)) & _MASK32
        return ((r ^ (r >> 14)) & _MASK32) / 4294967296

    def randbelow(self, n: int) -> int:
        """0 이상 n 미만의 정수"""
        return int(self() * n)


def shuffle(items: MutableSequence[T], rng: Callable[[], float]) -> MutableSequence[T]:
    """제자리 Fisher-Yates 셔플 (같은 리스트를 반환)"""
    for i in range(len(items) - 1, 0, -1):
        j = int(rng() * (i + 1))
        items[i], items[j] = items[j], items[i]
    return items


def _check_count(count: int) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError(f"Question count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidCountError(f"Question count must be >= 0, got {count}")
    return count


class QuizGenerator:
    """
    퀴즈 생성기

    하나의 인스턴스는 하나의 난수열을 가진다. 같은 시드로 만든 생성기는
    같은 순서로 호출하면 같은 문제들을 만든다.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            # 시드가 없으면 플랫폼 난수에서 뽑음 (재현하려면 self.seed 사용)
            seed = random.getrandbits(32)
        self.rng = Mulberry32(seed)

    @property
    def seed(self) -> int:
        return self.rng.seed

    def make_codon_to_aa(self, count: int) -> List[Question]:
        """
        "코돈 -> 아미노산" 문제 count개 생성

        1. 종결 코돈을 뺀 61개 중 하나를 뽑음
        2. 정답 아미노산을 표에서 찾음
        3. 나머지 19개 아미노산을 섞어 앞의 3개를 오답으로
        4. 보기 4개를 다시 섞음
        """
        _check_count(count)
        rng = self.rng
        questions = []

        for _ in range(count):
            codon = CODONS_NO_STOP[rng.randbelow(len(CODONS_NO_STOP))]
            answer = CODON_TABLE[codon]

            pool = [aa for aa in AMINO_ACIDS_NO_STOP if aa != answer]
            shuffle(pool, rng)
            wrongs = pool[:NUM_CHOICES - 1]

            choices = shuffle([answer] + wrongs, rng)
            questions.append(Question(
                prompt=f"What AA does {codon} code?",
                choices=tuple(choices),
                correct=answer,
                meta={'codon': codon, 'type': QuizMode.CODON_TO_AA.value},
            ))

        logger.debug("codon2aa: %d questions (seed=%d)", count, self.seed)
        return questions

    def make_aa_to_codon(self, count: int) -> List[Question]:
        """
        "아미노산 -> 코돈" 문제 count개 생성

        동의 코돈이 여러 개인 아미노산은 그중 하나를 무작위로 정답으로 삼는다.
        오답은 다른 아미노산을 암호화하는 코돈에서 3개.
        """
        _check_count(count)
        rng = self.rng
        questions = []

        for _ in range(count):
            aa = AMINO_ACIDS_NO_STOP[rng.randbelow(len(AMINO_ACIDS_NO_STOP))]
            synonymous = AA_TO_CODONS[aa]
            correct = synonymous[rng.randbelow(len(synonymous))]

            others = [c for c in CODONS_NO_STOP if CODON_TABLE[c] != aa]
            shuffle(others, rng)
            wrongs = others[:NUM_CHOICES - 1]

            choices = shuffle([correct] + wrongs, rng)
            questions.append(Question(
                prompt=f"Which codon codes for {aa}?",
                choices=tuple(choices),
                correct=correct,
                meta={'aa': aa, 'type': QuizMode.AA_TO_CODON.value},
            ))

        logger.debug("aa2codon: %d questions (seed=%d)", count, self.seed)
        return questions

    def make_questions(self, mode: Union[QuizMode, str], count: int) -> List[Question]:
        """모드에 따라 두 생성기 중 하나로 분기"""
        if resolve_mode(mode) is QuizMode.CODON_TO_AA:
            return self.make_codon_to_aa(count)
        return self.make_aa_to_codon(count)


def resolve_mode(mode: Union[QuizMode, str]) -> QuizMode:
    if isinstance(mode, QuizMode):
        return mode
    try:
        return QuizMode(mode)
    except ValueError:
        raise InvalidModeError(
            f"Quiz mode must be 'codon2aa' or 'aa2codon', got {mode!r}"
        ) from None


# 호출마다 새 생성기 (호출 간 공유 상태 없음)
def make_codon_to_aa(count: int, seed: Optional[int] = None) -> List[Question]:
    return QuizGenerator(seed).make_codon_to_aa(count)


def make_aa_to_codon(count: int, seed: Optional[int] = None) -> List[Question]:
    return QuizGenerator(seed).make_aa_to_codon(count)


def make_questions(
    mode: Union[QuizMode, str],
    count: int,
    seed: Optional[int] = None
) -> List[Question]:
    return QuizGenerator(seed).make_questions(mode, count)
