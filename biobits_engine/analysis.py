"""
analysis.py - 서열 분석 요약
입력 한 번으로 정제/전사/번역/역상보/GC 함량을 모두 계산하고 표로 정리
"""

import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, Union

from .codon_table import AMINO_ACID_NAMES, CODON_TABLE, RNA_BASES
from .models import StopPolicy
from .sequence import SequenceTransforms

_WHITESPACE = re.compile(r'\s+')


@dataclass(frozen=True)
class SequenceReport:
    """서열 하나에 대한 분석 결과"""
    raw: str
    cleaned: str
    length: int
    gc_content: float
    rna: str
    protein: str
    reverse_complement: str
    has_noise: bool       # A/C/G/T 이외 문자가 섞여 있었는지 (공백 제외)
    can_translate: bool   # 읽기 틀 이후 코돈 하나 이상
    frame: int = 0
    stop_policy: str = StopPolicy.KEEP.value

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_markdown(self) -> str:
        """마크다운 표 형식으로 변환"""
        rows = [
            ("Length", str(self.length)),
            ("GC%", f"{self.gc_content:.2f}"),
            ("DNA", self.cleaned or "-"),
            ("Reverse complement", self.reverse_complement or "-"),
            ("RNA", self.rna or "-"),
            (f"Protein (frame {self.frame}, {self.stop_policy})", self.protein or "-"),
        ]
        lines = ["| Field | Value |", "|---|---|"]
        lines.extend(f"| {k} | {v} |" for k, v in rows)
        if self.has_noise:
            lines.append("")
            lines.append("Heads-up: input contains characters outside A/C/G/T.")
        return "\n".join(lines)


def analyze(
    raw: str,
    frame: int = 0,
    stop_policy: Union[StopPolicy, str] = StopPolicy.KEEP
) -> SequenceReport:
    """
    서열 분석

    Args:
        raw: 사용자가 붙여넣은 원본 문자열
        frame: 번역 읽기 틀
        stop_policy: 종결 코돈 처리 방식

    Returns:
        SequenceReport 객체
    """
    cleaned = SequenceTransforms.clean(raw)
    rna = SequenceTransforms.transcribe(raw)
    protein = SequenceTransforms.translate(rna, frame, stop_policy)
    policy = stop_policy.value if isinstance(stop_policy, StopPolicy) else stop_policy

    return SequenceReport(
        raw=raw,
        cleaned=cleaned,
        length=len(cleaned),
        gc_content=SequenceTransforms.gc_content(raw),
        rna=rna,
        protein=protein,
        reverse_complement=SequenceTransforms.reverse_complement(raw),
        has_noise=len(cleaned) != len(_WHITESPACE.sub('', raw)),
        can_translate=max(0, len(rna) - frame) >= 3,
        frame=frame,
        stop_policy=policy,
    )


def codon_table_markdown() -> str:
    """
    표준 유전 암호표를 마크다운으로
    행: 첫째 염기 x 셋째 염기 (16행), 열: 둘째 염기
    """
    headers = ["1st", *[f"2nd {b}" for b in RNA_BASES], "3rd"]
    header_line = "| " + " | ".join(headers) + " |"
    separator = "|" + "|".join(["---"] * len(headers)) + "|"

    data_lines = []
    for first in RNA_BASES:
        for third in RNA_BASES:
            cells = [first]
            for second in RNA_BASES:
                codon = first + second + third
                cells.append(f"{codon} {CODON_TABLE[codon]}")
            cells.append(third)
            data_lines.append("| " + " | ".join(cells) + " |")

    return "\n".join([header_line, separator] + data_lines)


def codon_table_dict() -> Dict[str, Dict[str, str]]:
    """JSON 응답용: 코돈 -> {아미노산, 이름}"""
    return {
        codon: {'aa': aa, 'name': AMINO_ACID_NAMES[aa]}
        for codon, aa in CODON_TABLE.items()
    }
