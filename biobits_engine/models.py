"""
models.py - 핵심 데이터 모델 정의
Question, QuizMode, StopPolicy
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple


class QuizMode(Enum):
    """퀴즈 출제 방향"""
    CODON_TO_AA = "codon2aa"    # 코돈 -> 아미노산
    AA_TO_CODON = "aa2codon"    # 아미노산 -> 코돈


class StopPolicy(Enum):
    """번역 시 종결 코돈 처리 방식"""
    KEEP = "keep"    # '*' 유지, 계속 번역
    TRIM = "trim"    # 첫 '*' 앞에서 자름


@dataclass(frozen=True)
class Question:
    """
    객관식 문제 한 개
    - prompt: 질문 문자열 (예: "What AA does AUG code?")
    - choices: 보기 4개 (섞인 순서)
    - correct: 정답 (choices 중 하나)
    - meta: 출제 정보 (사용한 코돈 또는 아미노산, 문제 유형), 읽기 전용
    """
    prompt: str
    choices: Tuple[str, ...]
    correct: str
    meta: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # 넘겨받은 dict를 복사해 읽기 전용으로 보관
        object.__setattr__(self, 'choices', tuple(self.choices))
        object.__setattr__(self, 'meta', MappingProxyType(dict(self.meta)))

    def __hash__(self):
        return hash((self.prompt, self.choices, self.correct,
                     tuple(sorted(self.meta.items()))))

    @property
    def mode(self) -> str:
        return self.meta.get('type', '')

    def is_correct(self, choice: str) -> bool:
        """선택한 보기가 정답인지"""
        return choice == self.correct

    def to_dict(self) -> Dict[str, Any]:
        return {
            'prompt': self.prompt,
            'choices': list(self.choices),
            'correct': self.correct,
            'meta': dict(self.meta),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Question':
        """API 요청 등에서 받은 딕셔너리로부터 복원"""
        choices = data.get('choices') or []
        meta = data.get('meta') or {}
        if not isinstance(choices, (list, tuple)):
            raise ValueError(f"choices must be a list, got {choices!r}")
        if not isinstance(meta, dict):
            raise ValueError(f"meta must be an object, got {meta!r}")
        return cls(
            prompt=str(data.get('prompt', '')),
            choices=tuple(str(c) for c in choices),
            correct=str(data.get('correct', '')),
            meta=meta,
        )

    def __repr__(self):
        return f"Question({self.prompt!r}, choices={list(self.choices)}, correct={self.correct!r})"
