"""
BioBits Engine - 사용 예시
서열 도구와 퀴즈 생성 시나리오
"""

from biobits_engine import (
    QuizGenerator, QuizSession,
    analyze, clean, reverse_complement, transcribe, translate, gc_content,
    make_questions, validate_questions
)


def example_1_sequence_tools():
    """
    예시 1: 붙여넣은 서열 다루기
    - 공백, 소문자, 숫자가 섞인 입력도 그대로 처리
    """
    print("\n" + "="*60)
    print("예시 1: 서열 도구")
    print("="*60)

    raw = "atg gcc tTA a 123"
    dna = clean(raw)
    rna = transcribe(dna)

    print(f"  원본        : {raw!r}")
    print(f"  정제        : {dna}")
    print(f"  역상보      : {reverse_complement(dna)}")
    print(f"  전사        : {rna}")
    print(f"  번역 (keep) : {translate(rna)}")
    print(f"  번역 (trim) : {translate(rna, stop_policy='trim')}")
    print(f"  GC%         : {gc_content(dna):.2f}")


def example_2_reading_frames():
    """
    예시 2: 세 가지 읽기 틀
    """
    print("\n" + "="*60)
    print("예시 2: 읽기 틀")
    print("="*60)

    rna = transcribe("CATGGCCTGAAGT")
    for frame in (0, 1, 2):
        print(f"  frame {frame}: {translate(rna, frame=frame)}")

    print()
    print(analyze("CATGGCCTGAAGT", frame=1, stop_policy='trim').to_markdown())


def example_3_seeded_quiz():
    """
    예시 3: 시드로 재현 가능한 퀴즈
    - 같은 시드 -> 같은 문제
    """
    print("\n" + "="*60)
    print("예시 3: 시드 기반 퀴즈")
    print("="*60)

    first = make_questions("codon2aa", 5, seed=42)
    second = make_questions("codon2aa", 5, seed=42)
    print(f"  같은 시드 동일 여부: {first == second}")

    for q in first:
        print(f"  {q.prompt}  {list(q.choices)}  -> {q.correct}")

    report = validate_questions(first)
    print()
    print(report)


def example_4_session():
    """
    예시 4: 퀴즈 세션 채점
    - 항상 첫 번째 보기를 고르는 응답자
    """
    print("\n" + "="*60)
    print("예시 4: 퀴즈 세션")
    print("="*60)

    gen = QuizGenerator(seed=7)
    session = QuizSession(gen.make_aa_to_codon(4))
    while not session.is_finished:
        session.answer(session.current.choices[0], elapsed_ms=1500)

    print(f"  {session.summary()}")


if __name__ == "__main__":
    example_1_sequence_tools()
    example_2_reading_frames()
    example_3_seeded_quiz()
    example_4_session()
