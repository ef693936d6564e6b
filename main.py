"""
BioBits Engine - DNA 서열 도구 + 유전 암호 퀴즈
메인 실행 파일

사용법:
    python main.py tools ATGGCCTAA                 # 서열 분석
    python main.py tools ATGGCC --frame 1 --stop-policy trim
    python main.py quiz                            # 코돈 -> 아미노산 10문제
    python main.py quiz --mode aa2codon --seed 42  # 재현 가능한 문제
    python main.py quiz --interactive              # 콘솔에서 직접 풀기
    python main.py table                           # 유전 암호표
"""

import argparse
import json
import os
import time
from datetime import datetime
from typing import Optional

from biobits_engine import (
    QuizGenerator, QuizMode, QuizSession, QuestionValidator,
    analyze, codon_table_markdown
)
from biobits_engine.visualizer import SequenceVisualizer


class BioBitsEngine:
    """
    BioBits Engine 메인 클래스
    서열 분석, 퀴즈 생성 및 관리
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Args:
            seed: 랜덤 시드 (재현성용)
        """
        self.generator = QuizGenerator(seed=seed)
        self.visualizer = SequenceVisualizer()
        self.validator = QuestionValidator()

    def analyze_sequence(self, sequence: str, frame: int = 0,
                         stop_policy: str = 'keep') -> dict:
        """서열 분석 결과 딕셔너리"""
        report = analyze(sequence, frame=frame, stop_policy=stop_policy)
        return {
            'success': True,
            'timestamp': datetime.now().isoformat(),
            'report': report.to_dict(),
            'markdown': report.to_markdown(),
        }

    def generate_quiz(
        self,
        mode: QuizMode = QuizMode.CODON_TO_AA,
        count: int = 10
    ) -> dict:
        """
        새로운 퀴즈 생성

        Args:
            mode: 출제 방향
            count: 문제 수

        Returns:
            퀴즈 데이터 딕셔너리
        """
        print(f"\n{'='*50}")
        print("🧬 BioBits - 퀴즈 생성 중...")
        print(f"{'='*50}")
        print(f"모드: {mode.value}")
        print(f"문제 수: {count}")
        print(f"시드: {self.generator.seed}")
        print()

        questions = self.generator.make_questions(mode, count)
        print(f"✓ 문제 생성 완료 ({len(questions)}개)")

        # 검증
        report = self.validator.validate_questions(questions)
        print(f"✓ 검증 완료: {'통과' if report.is_valid else '실패'}")

        if not report.is_valid:
            print("\n⚠️ 검증 오류:")
            for error in report.get_errors():
                print(f"  - {error}")
            return {
                'success': False,
                'error': '문제 검증 실패',
                'validation': report.to_dict()
            }

        return {
            'success': True,
            'timestamp': datetime.now().isoformat(),
            'config': {
                'mode': mode.value,
                'count': count,
                'seed': self.generator.seed
            },
            'questions': questions,
            'validation': report.to_dict()
        }

    def display_quiz(self, result: dict, show_answers: bool = False):
        """퀴즈를 콘솔에 표시"""
        if not result.get('success'):
            print(f"❌ 오류: {result.get('error')}")
            return

        print("\n" + "="*60)
        print("📋 생성된 문제")
        print("="*60)

        for i, q in enumerate(result['questions'], 1):
            print(f"\n{i}. {q.prompt}")
            for label, choice in zip("ABCD", q.choices):
                mark = "  ✓" if show_answers and choice == q.correct else ""
                print(f"   ({label}) {choice}{mark}")

    def run_interactive(self, result: dict) -> Optional[QuizSession]:
        """콘솔에서 문제를 하나씩 풀기 (보기 번호 1~4 또는 보기 문자열 입력)"""
        if not result.get('success'):
            print(f"❌ 오류: {result.get('error')}")
            return None

        session = QuizSession(result['questions'])
        while not session.is_finished:
            q = session.current
            print(f"\nQuestion {session.index + 1} / {session.total}")
            print(q.prompt)
            for n, choice in enumerate(q.choices, 1):
                print(f"  {n}) {choice}")

            t0 = time.perf_counter()
            raw = input("> ").strip().upper()
            elapsed_ms = int((time.perf_counter() - t0) * 1000)

            choice = q.choices[int(raw) - 1] if raw in {"1", "2", "3", "4"} else raw
            if choice not in q.choices:
                print("보기 중에서 골라주세요.")
                continue

            if session.answer(choice, elapsed_ms):
                print("✓ 정답")
            else:
                print(f"✗ 오답 (정답: {q.correct})")

        print("\n【결과】")
        print(f"  Score: {session.score} / {session.total}")
        print(f"  Avg time/question: {session.avg_ms / 1000:.2f} s")
        return session

    def save_quiz(self, result: dict, output_dir: str = "output",
                  session: Optional[QuizSession] = None):
        """퀴즈를 파일로 저장"""
        if not result.get('success'):
            print("❌ 저장할 문제가 없습니다.")
            return

        # 출력 디렉토리 생성
        os.makedirs(output_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        base_name = f"quiz_{timestamp}"

        json_data = dict(result)
        json_data['questions'] = [q.to_dict() for q in result['questions']]
        if session is not None:
            json_data['session'] = session.to_dict()

        json_path = os.path.join(output_dir, f"{base_name}.json")
        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(json_data, f, ensure_ascii=False, indent=2)
        print(f"✓ JSON 저장: {json_path}")

        # 결과 이미지 저장
        if session is not None and session.records:
            img_path = os.path.join(output_dir, f"{base_name}_result.png")
            self.visualizer.create_quiz_image(session, save_path=img_path)
            print(f"✓ 결과 이미지 저장: {img_path}")


def parse_args(argv=None):
    """명령줄 인자 파싱"""
    parser = argparse.ArgumentParser(
        description="BioBits Engine - DNA 서열 도구 + 유전 암호 퀴즈"
    )
    sub = parser.add_subparsers(dest='command', required=True)

    # --- tools ---
    p_tools = sub.add_parser('tools', help="서열 분석")
    p_tools.add_argument('sequence', type=str, help="DNA 서열 (A/C/G/T 외 문자는 제거됨)")
    p_tools.add_argument(
        '--frame', '-f',
        type=int,
        default=0,
        choices=[0, 1, 2],
        help="번역 읽기 틀 (기본: 0)"
    )
    p_tools.add_argument(
        '--stop-policy',
        type=str,
        default='keep',
        choices=['keep', 'trim'],
        help="종결 코돈 처리 (기본: keep)"
    )
    p_tools.add_argument(
        '--image',
        type=str,
        default=None,
        help="조성 그래프를 저장할 PNG 경로"
    )
    p_tools.add_argument(
        '--json',
        action='store_true',
        help="JSON으로 출력"
    )

    # --- quiz ---
    p_quiz = sub.add_parser('quiz', help="퀴즈 생성")
    p_quiz.add_argument(
        '--mode', '-m',
        type=str,
        default='codon2aa',
        choices=[m.value for m in QuizMode],
        help="출제 방향 (기본: codon2aa)"
    )
    p_quiz.add_argument(
        '--count', '-n',
        type=int,
        default=10,
        help="문제 수 (기본: 10)"
    )
    p_quiz.add_argument(
        '--seed', '-s',
        type=int,
        default=None,
        help="랜덤 시드 (재현성용)"
    )
    p_quiz.add_argument(
        '--answers',
        action='store_true',
        help="정답 표시"
    )
    p_quiz.add_argument(
        '--interactive', '-i',
        action='store_true',
        help="콘솔에서 직접 풀기"
    )
    p_quiz.add_argument(
        '--output', '-o',
        type=str,
        default='output',
        help="출력 디렉토리 (기본: output)"
    )
    p_quiz.add_argument(
        '--save',
        action='store_true',
        help="퀴즈를 파일로 저장"
    )

    # --- table ---
    sub.add_parser('table', help="표준 유전 암호표 출력")

    args = parser.parse_args(argv)
    if args.command == 'quiz' and args.count < 0:
        parser.error("--count must be >= 0")
    return args


def main(argv=None):
    """메인 함수"""
    args = parse_args(argv)

    if args.command == 'table':
        print(codon_table_markdown())
        return

    if args.command == 'tools':
        engine = BioBitsEngine()
        result = engine.analyze_sequence(args.sequence, args.frame, args.stop_policy)
        if args.json:
            print(json.dumps(result['report'], ensure_ascii=False, indent=2))
        else:
            print(result['markdown'])
        if args.image:
            engine.visualizer.create_composition_image(args.sequence, save_path=args.image)
            print(f"✓ 이미지 저장: {args.image}")
        return

    # 엔진 초기화
    engine = BioBitsEngine(seed=args.seed)

    # 퀴즈 생성
    result = engine.generate_quiz(mode=QuizMode(args.mode), count=args.count)

    session = None
    if args.interactive:
        session = engine.run_interactive(result)
    else:
        engine.display_quiz(result, show_answers=args.answers)

    # 저장
    if args.save:
        engine.save_quiz(result, args.output, session)


if __name__ == "__main__":
    main()
