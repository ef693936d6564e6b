"""
sequence.py - DNA/RNA 서열 변환
정제, 역상보, 전사, 번역, GC 함량

모든 함수는 순수 함수: 입력을 바꾸지 않고 새 문자열(또는 수)을 반환한다.
"""

import math
import re
from typing import Union

from .codon_table import CODON_SIZE, STOP_SYMBOL, lookup
from .exceptions import InvalidFrameError, InvalidStopPolicyError
from .models import StopPolicy

_NOT_DNA = re.compile(r'[^ACGT]')
_NOT_RNA = re.compile(r'[^ACGU]')

# 염기쌍 A <-> T, C <-> G
_COMPLEMENT = str.maketrans('ACGT', 'TGCA')

VALID_FRAMES = (0, 1, 2)


class SequenceTransforms:
    """서열 변환 엔진"""

    @staticmethod
    def clean(raw: str) -> str:
        """
        임의의 문자열을 DNA 서열로 정제
        - 대문자로 변환
        - A/C/G/T 이외의 문자 (공백, 숫자, N 등) 제거
        """
        return _NOT_DNA.sub('', raw.upper())

    @staticmethod
    def reverse_complement(raw: str) -> str:
        """역상보 서열 (정제 후 뒤에서부터 읽으며 상보 염기로 치환)"""
        x = SequenceTransforms.clean(raw)
        return x[::-1].translate(_COMPLEMENT)

    @staticmethod
    def transcribe(raw: str) -> str:
        """전사: DNA -> RNA (T -> U)"""
        return SequenceTransforms.clean(raw).replace('T', 'U')

    @staticmethod
    def translate(
        rna: str,
        frame: int = 0,
        stop_policy: Union[StopPolicy, str] = StopPolicy.KEEP
    ) -> str:
        """
        번역: RNA -> 아미노산 서열

        Args:
            rna: RNA 서열 (A/C/G/U 이외 문자는 제거됨)
            frame: 읽기 틀 (0, 1, 2 - 앞에서 건너뛸 염기 수)
            stop_policy: 'keep'이면 '*'를 남기고 계속 번역,
                         'trim'이면 첫 '*' 앞에서 자름

        Returns:
            아미노산 서열. 표에 없는 코돈은 '?', 남는 1~2 염기는 버림

        Raises:
            InvalidFrameError: frame이 0, 1, 2가 아님
            InvalidStopPolicyError: 알 수 없는 stop_policy
        """
        policy = _resolve_stop_policy(stop_policy)
        if not isinstance(frame, int) or isinstance(frame, bool) or frame not in VALID_FRAMES:
            raise InvalidFrameError(f"Reading frame must be 0, 1 or 2, got {frame!r}")

        r = _NOT_RNA.sub('', rna)

        amino_acids = []
        for i in range(frame, len(r) - CODON_SIZE + 1, CODON_SIZE):
            aa = lookup(r[i:i + CODON_SIZE])
            if aa == STOP_SYMBOL and policy is StopPolicy.TRIM:
                break
            amino_acids.append(aa)

        return ''.join(amino_acids)

    @staticmethod
    def gc_content(raw: str) -> float:
        """
        GC 함량 (%) = 100 * (G + C) / N, 소수점 둘째 자리

        곱셈 -> 반올림 -> 나눗셈 순서를 지킨다 (경계값에서 부동소수점 오차 방지).
        """
        x = SequenceTransforms.clean(raw)
        n = len(x)

        # 0으로 나누기 방지
        if not n:
            return 0.0

        gc = x.count('G') + x.count('C')
        # 0 이상에서 0.5는 올림
        return math.floor((10000 * gc) / n + 0.5) / 100


def _resolve_stop_policy(stop_policy: Union[StopPolicy, str]) -> StopPolicy:
    if isinstance(stop_policy, StopPolicy):
        return stop_policy
    try:
        return StopPolicy(stop_policy)
    except ValueError:
        raise InvalidStopPolicyError(
            f"Stop policy must be 'keep' or 'trim', got {stop_policy!r}"
        ) from None


# 함수형 호출 인터페이스
clean = SequenceTransforms.clean
reverse_complement = SequenceTransforms.reverse_complement
transcribe = SequenceTransforms.transcribe
translate = SequenceTransforms.translate
gc_content = SequenceTransforms.gc_content
