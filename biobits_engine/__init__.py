"""
BioBits Engine - DNA 서열 도구 + 유전 암호 퀴즈 생성기

서열 정제/전사/번역/역상보/GC 함량 계산과
시드 기반으로 재현 가능한 객관식 코돈 퀴즈를 만드는 엔진
"""

from .models import (
    Question,
    QuizMode,
    StopPolicy
)

from .exceptions import (
    BioBitsError,
    InvalidFrameError,
    InvalidStopPolicyError,
    InvalidModeError,
    InvalidCountError,
    SessionFinishedError
)

from .codon_table import (
    CODON_TABLE,
    AA_TO_CODONS,
    CODONS_NO_STOP,
    AMINO_ACIDS_NO_STOP,
    STOP_SYMBOL
)

from .sequence import (
    SequenceTransforms,
    clean,
    reverse_complement,
    transcribe,
    translate,
    gc_content
)

from .generator import (
    Mulberry32,
    QuizGenerator,
    shuffle,
    make_codon_to_aa,
    make_aa_to_codon,
    make_questions
)

from .validator import (
    QuestionValidator,
    ValidationReport,
    validate_questions
)

from .analysis import (
    SequenceReport,
    analyze,
    codon_table_markdown
)

from .session import QuizSession


__version__ = "1.0.0"
__all__ = [
    # Models
    "Question",
    "QuizMode",
    "StopPolicy",

    # Exceptions
    "BioBitsError",
    "InvalidFrameError",
    "InvalidStopPolicyError",
    "InvalidModeError",
    "InvalidCountError",
    "SessionFinishedError",

    # Codon table
    "CODON_TABLE",
    "AA_TO_CODONS",
    "CODONS_NO_STOP",
    "AMINO_ACIDS_NO_STOP",
    "STOP_SYMBOL",

    # Sequence
    "SequenceTransforms",
    "clean",
    "reverse_complement",
    "transcribe",
    "translate",
    "gc_content",

    # Generator
    "Mulberry32",
    "QuizGenerator",
    "shuffle",
    "make_codon_to_aa",
    "make_aa_to_codon",
    "make_questions",

    # Validator
    "QuestionValidator",
    "ValidationReport",
    "validate_questions",

    # Analysis
    "SequenceReport",
    "analyze",
    "codon_table_markdown",

    # Session
    "QuizSession",
]
