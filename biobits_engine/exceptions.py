"""
exceptions.py - 호출 규약 위반 시 발생하는 예외
"""


class BioBitsError(Exception):
    """엔진 예외의 기본 클래스"""


class InvalidFrameError(BioBitsError, ValueError):
    """읽기 틀(reading frame)이 0, 1, 2가 아님"""


class InvalidStopPolicyError(BioBitsError, ValueError):
    """알 수 없는 종결 코돈 처리 방식"""


class InvalidModeError(BioBitsError, ValueError):
    """알 수 없는 퀴즈 모드"""


class InvalidCountError(BioBitsError, ValueError):
    """문제 수가 0 이상의 정수가 아님"""


class SessionFinishedError(BioBitsError):
    """이미 끝난 퀴즈 세션에 답을 제출함"""
