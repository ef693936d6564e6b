"""
session.py - 퀴즈 풀이 세션
문제를 순서대로 풀며 점수와 문제당 소요 시간을 기록 (메모리 내에서만)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .exceptions import SessionFinishedError
from .models import Question


@dataclass
class AnswerRecord:
    """답안 하나"""
    question: Question
    choice: str
    elapsed_ms: int
    correct: bool


@dataclass
class QuizSession:
    """
    퀴즈 세션
    - questions: 출제된 문제 목록
    - records: 지금까지 제출한 답안
    """
    questions: Sequence[Question]
    records: List[AnswerRecord] = field(default_factory=list)

    @property
    def index(self) -> int:
        return len(self.records)

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_finished(self) -> bool:
        return self.index >= self.total

    @property
    def current(self) -> Optional[Question]:
        """현재 풀어야 할 문제 (끝났으면 None)"""
        if self.is_finished:
            return None
        return self.questions[self.index]

    @property
    def score(self) -> int:
        return sum(1 for r in self.records if r.correct)

    @property
    def avg_ms(self) -> int:
        """문제당 평균 소요 시간 (ms, 정수 반올림)"""
        if not self.records:
            return 0
        total = sum(r.elapsed_ms for r in self.records)
        return int(total / len(self.records) + 0.5)

    def answer(self, choice: str, elapsed_ms: int = 0) -> bool:
        """
        현재 문제에 답 제출 후 다음 문제로

        Returns:
            정답 여부

        Raises:
            SessionFinishedError: 모든 문제를 이미 풀었음
            ValueError: 현재 문제의 보기에 없는 답
        """
        question = self.current
        if question is None:
            raise SessionFinishedError(
                f"Quiz already finished ({self.total} questions answered)"
            )
        if choice not in question.choices:
            raise ValueError(f"{choice!r} is not one of {list(question.choices)}")
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must be >= 0, got {elapsed_ms}")

        ok = question.is_correct(choice)
        self.records.append(AnswerRecord(
            question=question,
            choice=choice,
            elapsed_ms=int(elapsed_ms),
            correct=ok,
        ))
        return ok

    def summary(self) -> str:
        """기록용 한 줄 요약 (예: "7/10 • 1.23 s avg")"""
        return f"{self.score}/{self.total} • {self.avg_ms / 1000:.2f} s avg"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'total': self.total,
            'answered': self.index,
            'finished': self.is_finished,
            'avg_ms': self.avg_ms,
            'summary': self.summary(),
            'answers': [
                {
                    'prompt': r.question.prompt,
                    'choice': r.choice,
                    'correct_answer': r.question.correct,
                    'correct': r.correct,
                    'elapsed_ms': r.elapsed_ms,
                }
                for r in self.records
            ],
        }
