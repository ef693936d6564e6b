"""
validator.py - 문제 검증 모듈
생성된 퀴즈 문제의 정합성 검증 (보기 수, 중복, 정답 위치, 유전 암호 일치)
"""

from typing import Dict, Iterable, List
from dataclasses import dataclass, field
from enum import Enum

from .codon_table import CODON_TABLE, STOP_SYMBOL
from .generator import NUM_CHOICES
from .models import Question, QuizMode


class ValidationLevel(Enum):
    """문제점 심각도"""
    ERROR = "ERROR"      # 문제 자체가 성립하지 않음
    WARNING = "WARNING"  # 풀 수는 있지만 출제 규칙에서 벗어남


@dataclass
class QuestionIssue:
    """문제 하나에서 발견된 문제점"""
    index: int
    level: ValidationLevel
    message: str
    details: Dict = field(default_factory=dict)

    def __str__(self):
        return f"[{self.level.value}] 문제 {self.index + 1}: {self.message}"


@dataclass
class ValidationReport:
    """퀴즈 한 벌의 검증 보고서"""
    issues: List[QuestionIssue] = field(default_factory=list)
    checked: int = 0

    def _at(self, level: ValidationLevel) -> List[QuestionIssue]:
        return [i for i in self.issues if i.level is level]

    def get_errors(self) -> List[QuestionIssue]:
        return self._at(ValidationLevel.ERROR)

    def get_warnings(self) -> List[QuestionIssue]:
        return self._at(ValidationLevel.WARNING)

    @property
    def error_count(self) -> int:
        return len(self.get_errors())

    @property
    def warning_count(self) -> int:
        return len(self.get_warnings())

    @property
    def is_valid(self) -> bool:
        return self.error_count == 0

    @property
    def failed_questions(self) -> List[int]:
        """오류가 있는 문제 번호 (0부터)"""
        return sorted({i.index for i in self.get_errors()})

    def to_dict(self) -> Dict:
        return {
            'is_valid': self.is_valid,
            'checked': self.checked,
            'error_count': self.error_count,
            'warning_count': self.warning_count,
            'failed_questions': self.failed_questions,
            'issues': [
                {
                    'index': i.index,
                    'level': i.level.value,
                    'message': i.message,
                    'details': i.details
                }
                for i in self.issues
            ]
        }

    def __str__(self):
        status = "✓ 통과" if self.is_valid else "✗ 실패"
        lines = [f"=== 검증 보고서: {status} ({self.checked}문제, "
                 f"오류 {self.error_count}, 경고 {self.warning_count}) ==="]
        lines.extend(f"  {i}" for i in self.issues)
        return "\n".join(lines)


class QuestionValidator:
    """
    퀴즈 문제 검증 클래스

    검증 항목:
    1. 보기가 정확히 4개이고 서로 다름
    2. 정답이 보기에 정확히 한 번 등장
    3. 정답이 유전 암호표와 일치 (코돈 -> 아미노산, 아미노산 -> 코돈)
    4. 오답이 실제로 틀린 답인지
    """

    def validate_questions(self, questions: Iterable[Question]) -> ValidationReport:
        """
        전체 문제 목록 검증

        Args:
            questions: 검증할 문제 목록

        Returns:
            ValidationReport 객체
        """
        report = ValidationReport()

        for idx, question in enumerate(questions):
            report.checked += 1
            report.issues.extend(self._check_choices(idx, question))
            report.issues.extend(self._check_answer(idx, question))

        return report

    @staticmethod
    def _error(idx: int, message: str, **details) -> QuestionIssue:
        return QuestionIssue(idx, ValidationLevel.ERROR, message, details)

    @staticmethod
    def _warning(idx: int, message: str, **details) -> QuestionIssue:
        return QuestionIssue(idx, ValidationLevel.WARNING, message, details)

    def _check_choices(self, idx: int, q: Question) -> List[QuestionIssue]:
        """보기 구성 검증"""
        issues = []
        choices = list(q.choices)

        if len(choices) != NUM_CHOICES:
            issues.append(self._error(
                idx, f"보기가 {len(choices)}개 (기대: {NUM_CHOICES}개)", choices=choices))

        if len(set(choices)) != len(choices):
            issues.append(self._error(idx, "중복된 보기가 있음", choices=choices))

        hits = choices.count(q.correct)
        if hits != 1:
            issues.append(self._error(
                idx, f"정답 {q.correct!r}이 보기에 {hits}번 등장", correct=q.correct))

        return issues

    def _check_answer(self, idx: int, q: Question) -> List[QuestionIssue]:
        """정답/오답이 유전 암호표와 맞는지 검증"""
        issues = []
        mode = q.mode

        if mode == QuizMode.CODON_TO_AA.value:
            codon = q.meta.get('codon')
            expected = CODON_TABLE.get(codon)
            if expected != q.correct:
                issues.append(self._error(
                    idx, f"{codon}의 아미노산은 {expected}이지만 정답이 {q.correct}",
                    codon=codon, expected=expected))
            also_right = [c for c in q.choices if c != q.correct and c == expected]
            if q.correct == STOP_SYMBOL:
                issues.append(self._warning(idx, "정답이 종결 코돈", codon=codon))

        elif mode == QuizMode.AA_TO_CODON.value:
            aa = q.meta.get('aa')
            if CODON_TABLE.get(q.correct) != aa:
                issues.append(self._error(
                    idx, f"정답 코돈 {q.correct}은 {aa}를 암호화하지 않음",
                    aa=aa, correct=q.correct))
            also_right = [c for c in q.choices
                          if c != q.correct and CODON_TABLE.get(c) == aa]

        else:
            issues.append(self._warning(
                idx, f"알 수 없는 문제 유형 {mode!r}, 정답 검증 생략", type=mode))
            return issues

        if also_right:
            issues.append(self._error(idx, f"오답 보기 {also_right}도 정답임", choices=also_right))

        return issues


def validate_questions(questions: Iterable[Question]) -> ValidationReport:
    """편의 함수"""
    return QuestionValidator().validate_questions(questions)
