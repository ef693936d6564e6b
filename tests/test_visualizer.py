import base64

import numpy as np
import pytest

from biobits_engine import Question, QuizSession
from biobits_engine.visualizer import SequenceVisualizer, VisualizationConfig, gc_profile

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_gc_profile():
    np.testing.assert_allclose(gc_profile("GGAA", 2), [100.0, 50.0, 0.0])
    np.testing.assert_allclose(gc_profile("GCAT", 10), [50.0])
    assert gc_profile("", 5).size == 0
    assert gc_profile("xyz", 5).size == 0


@pytest.mark.parametrize("raw", ["", "ACGT", "GATTACA" * 20])
def test_composition_image(raw, tmp_path):
    vis = SequenceVisualizer(VisualizationConfig(dpi=40, gc_window=5))
    path = tmp_path / "comp.png"
    img = vis.create_composition_image(raw, title="test", save_path=str(path))
    assert base64.b64decode(img).startswith(PNG_MAGIC)
    assert path.read_bytes().startswith(PNG_MAGIC)


def test_quiz_image():
    q = Question("What AA does AUG code?", ("M", "L", "I", "V"), "M",
                 {"codon": "AUG", "type": "codon2aa"})
    session = QuizSession([q, q])
    session.answer("M", 800)
    session.answer("L", 2400)
    img = SequenceVisualizer(VisualizationConfig(dpi=40)).create_quiz_image(session)
    assert base64.b64decode(img).startswith(PNG_MAGIC)
