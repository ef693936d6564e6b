"""
BioBits Engine - Flask REST API
웹/모바일 앱용 API 엔드포인트

실행: flask --app api run --debug
또는: python api.py
"""

import logging
import math

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from biobits_engine import (
    Question, QuizMode, QuizSession, SequenceTransforms,
    QuizGenerator, QuestionValidator,
    analyze, codon_table_markdown
)
from biobits_engine.analysis import codon_table_dict
from biobits_engine.config import get_settings
from biobits_engine.visualizer import SequenceVisualizer

logger = logging.getLogger("biobits.api")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# 도구 이름 -> (입력 변환, 출력 함수)
# translate는 원본 DNA가 아니라 전사된 RNA를 입력으로 기록한다
TOOL_OPS = {
    'clean': (None, SequenceTransforms.clean),
    'revcomp': (None, SequenceTransforms.reverse_complement),
    'transcribe': (None, SequenceTransforms.transcribe),
    'translate': (SequenceTransforms.transcribe, SequenceTransforms.translate),
    'gc': (None, SequenceTransforms.gc_content),
}


def _parse_count(value, default: int, maximum: int) -> int:
    """문제 수 검증 (0 이상 maximum 이하의 정수만 허용)"""
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"count must be an integer, got {value!r}")
    if value < 0 or value > maximum:
        raise ValueError(f"count must be between 0 and {maximum}, got {value}")
    return value


def _parse_seed(value):
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"seed must be an integer, got {value!r}")
    return value


def _parse_frame(value) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"frame must be 0, 1 or 2, got {value!r}")
    return value


def _json_body() -> dict:
    """요청 본문 (JSON 객체만 허용, 없으면 빈 딕셔너리)"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    return data


def _parse_elapsed(value) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)) \
            or not math.isfinite(value):
        raise ValueError(f"elapsed_ms must be a number, got {value!r}")
    return int(value)


def _sequence_from(data: dict) -> str:
    seq = data.get('sequence', '')
    if not isinstance(seq, str):
        raise ValueError("sequence must be a string")
    return seq


def create_app() -> Flask:
    settings = get_settings()
    _configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config['SETTINGS'] = settings
    CORS(app, origins=list(settings.cors_origins) or "*")  # CORS 활성화

    visualizer = SequenceVisualizer()
    validator = QuestionValidator()

    # -------------------------
    # 공통 오류 처리
    # -------------------------
    @app.errorhandler(ValueError)
    def _handle_value_error(exc):
        return jsonify({'success': False, 'error': str(exc)}), 400

    @app.errorhandler(Exception)
    def _handle_unknown(exc):
        # 404, 405 등은 그대로 JSON으로
        if isinstance(exc, HTTPException):
            return jsonify({'success': False, 'error': exc.description}), exc.code
        logger.exception("Unhandled exception")
        msg = str(exc) if settings.debug else "Internal server error"
        return jsonify({'success': False, 'error': msg}), 500

    @app.route('/')
    def index():
        """API 정보"""
        return jsonify({
            'name': settings.app_name,
            'version': '1.0.0',
            'description': 'DNA sequence tools and genetic-code quiz API',
            'endpoints': {
                '/tools': 'POST - 서열 분석 (전체 요약)',
                '/tools/<op>': 'POST - 단일 변환 (clean/revcomp/transcribe/translate/gc)',
                '/modes': 'GET - 사용 가능한 퀴즈 모드 목록',
                '/codon-table': 'GET - 표준 유전 암호표',
                '/quiz': 'POST - 퀴즈 문제 생성',
                '/quiz/score': 'POST - 답안 채점'
            }
        })

    @app.route('/modes', methods=['GET'])
    def get_modes():
        """사용 가능한 퀴즈 모드 목록"""
        modes = [
            {'id': QuizMode.CODON_TO_AA.value, 'name': 'Codon -> amino acid'},
            {'id': QuizMode.AA_TO_CODON.value, 'name': 'Amino acid -> codon'},
        ]
        return jsonify({'modes': modes})

    @app.route('/codon-table', methods=['GET'])
    def get_codon_table():
        return jsonify({
            'table': codon_table_dict(),
            'markdown': codon_table_markdown()
        })

    @app.route('/tools', methods=['POST'])
    def run_tools():
        """
        서열 분석

        Request Body:
        {
            "sequence": "ATGGCC...",   // 붙여넣은 DNA
            "frame": 0,                // 읽기 틀 (선택)
            "stop_policy": "keep",     // keep/trim (선택)
            "image": false             // 조성 그래프 포함 여부 (선택)
        }
        """
        data = _json_body()
        seq = _sequence_from(data)
        frame = _parse_frame(data.get('frame'))
        stop_policy = data.get('stop_policy', 'keep')

        report = analyze(seq, frame=frame, stop_policy=stop_policy)
        body = {'success': True, 'report': report.to_dict()}

        if data.get('image'):
            img = visualizer.create_composition_image(seq)
            body['image'] = f"data:image/png;base64,{img}"

        return jsonify(body)

    @app.route('/tools/<op>', methods=['POST'])
    def run_tool(op: str):
        """
        단일 변환 - 기록용 {type, input, output} 반환

        Request Body:
        {
            "sequence": "ATGGCC...",
            "frame": 0,             // translate 전용 (선택)
            "stop_policy": "keep"   // translate 전용 (선택)
        }
        """
        if op not in TOOL_OPS:
            return jsonify({
                'success': False,
                'error': f"Unknown tool {op!r}",
                'tools': sorted(TOOL_OPS)
            }), 404

        data = _json_body()
        seq = _sequence_from(data)
        prepare, fn = TOOL_OPS[op]

        source = prepare(seq) if prepare else seq
        if op == 'translate':
            output = fn(source, _parse_frame(data.get('frame')),
                        data.get('stop_policy', 'keep'))
        else:
            output = fn(source)

        logger.debug("tool %s: %d chars in", op, len(seq))
        return jsonify({
            'success': True,
            'type': op,
            'input': source,
            'output': output
        })

    @app.route('/quiz', methods=['POST'])
    def generate_quiz():
        """
        퀴즈 문제 생성

        Request Body:
        {
            "mode": "codon2aa",   // codon2aa / aa2codon
            "count": 10,          // 문제 수 (선택)
            "seed": null          // 랜덤 시드 (선택)
        }
        """
        data = _json_body()
        mode = data.get('mode', QuizMode.CODON_TO_AA.value)
        count = _parse_count(data.get('count'), settings.default_questions,
                             settings.max_questions)
        seed = _parse_seed(data.get('seed'))

        # 생성기 초기화 (시드 포함)
        gen = QuizGenerator(seed=seed)
        questions = gen.make_questions(mode, count)

        # 검증
        validation = validator.validate_questions(questions)
        if not validation.is_valid:
            logger.error("generated quiz failed validation: %s", validation.to_dict())
            return jsonify({
                'success': False,
                'error': '문제 검증 실패',
                'validation_errors': [
                    {'index': e.index, 'message': e.message, 'details': e.details}
                    for e in validation.get_errors()
                ]
            }), 500

        return jsonify({
            'success': True,
            'config': {
                'mode': mode,
                'count': count,
                'seed': gen.seed
            },
            'questions': [q.to_dict() for q in questions],
            'validation': validation.to_dict()
        })

    @app.route('/quiz/score', methods=['POST'])
    def score_quiz():
        """
        답안 채점

        Request Body:
        {
            "questions": [...],                             // /quiz 응답의 questions
            "answers": [{"choice": "M", "elapsed_ms": 1200}, ...]
        }
        """
        data = _json_body()
        raw_questions = data.get('questions') or []
        answers = data.get('answers') or []
        if not isinstance(raw_questions, list) or not isinstance(answers, list):
            raise ValueError("questions and answers must be arrays")
        for q in raw_questions:
            if not isinstance(q, dict):
                raise ValueError(f"question must be an object, got {q!r}")
        questions = [Question.from_dict(q) for q in raw_questions]
        if len(answers) > len(questions):
            raise ValueError("more answers than questions")

        session = QuizSession(questions)
        for a in answers:
            if not isinstance(a, dict):
                raise ValueError(f"answer must be an object, got {a!r}")
            session.answer(str(a.get('choice', '')), _parse_elapsed(a.get('elapsed_ms')))

        return jsonify({'success': True, 'result': session.to_dict()})

    return app


app = create_app()


if __name__ == '__main__':
    print("=" * 50)
    print("BioBits Engine API Server")
    print("=" * 50)
    print("Server starting at http://localhost:5000")
    print()
    app.run(debug=get_settings().debug, host='0.0.0.0', port=5000)
