"""
visualizer.py - 서열 조성 / 퀴즈 결과 시각화
- 염기 조성 막대 + 슬라이딩 윈도우 GC% 곡선
- 문제별 소요 시간 막대 (정답/오답 색 구분)
"""

import io
import base64
from typing import Optional
from dataclasses import dataclass

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .sequence import SequenceTransforms
from .session import QuizSession


# ============================================================
# 설정값
# ============================================================
@dataclass
class VisualizationConfig:
    # 캔버스
    fig_width: float = 10.0
    fig_height: float = 4.0
    dpi: int = 150

    # GC 곡선 윈도우 (염기 수)
    gc_window: int = 20

    # 색상 팔레트 (A, C, G, T)
    base_colors: tuple = ('#4caf50', '#2196f3', '#ffb300', '#e53935')
    line_color: str = '#37474f'
    color_correct: str = '#81c784'
    color_wrong: str = '#e57373'

    line_width: float = 1.5
    font_size_label: int = 10


def gc_profile(raw: str, window: int) -> np.ndarray:
    """
    슬라이딩 윈도우 GC% (정제된 서열 기준)
    서열이 윈도우보다 짧으면 전체를 하나의 윈도우로 본다.
    """
    x = SequenceTransforms.clean(raw)
    if not x:
        return np.zeros(0)

    is_gc = np.fromiter((c in 'GC' for c in x), dtype=float, count=len(x))
    w = max(1, min(window, len(x)))
    return np.convolve(is_gc, np.ones(w), mode='valid') * (100.0 / w)


# ============================================================
# 시각화 엔진 메인
# ============================================================
class SequenceVisualizer:
    def __init__(self, config: Optional[VisualizationConfig] = None):
        self.config = config or VisualizationConfig()

    def create_composition_image(
        self,
        raw: str,
        title: str = "",
        save_path: Optional[str] = None
    ) -> str:
        """염기 조성 + GC 곡선 이미지 (Base64 PNG)"""
        cfg = self.config
        x = SequenceTransforms.clean(raw)

        fig, (ax_bar, ax_gc) = plt.subplots(
            1, 2, figsize=(cfg.fig_width, cfg.fig_height),
            gridspec_kw={'width_ratios': [1, 2]}
        )

        # 1. 염기 조성
        bases = ['A', 'C', 'G', 'T']
        counts = [x.count(b) for b in bases]
        ax_bar.bar(bases, counts, color=cfg.base_colors, edgecolor='black', lw=0.8)
        ax_bar.set_ylabel('count', fontsize=cfg.font_size_label)
        ax_bar.set_title(f"n = {len(x)}, GC = {SequenceTransforms.gc_content(x):.2f}%",
                         fontsize=cfg.font_size_label)

        # 2. 슬라이딩 윈도우 GC%
        profile = gc_profile(x, cfg.gc_window)
        if profile.size:
            ax_gc.plot(np.arange(profile.size), profile,
                       color=cfg.line_color, lw=cfg.line_width)
        ax_gc.axhline(50, color='gray', lw=0.8, ls='--')
        ax_gc.set_ylim(0, 100)
        ax_gc.set_xlabel('window start', fontsize=cfg.font_size_label)
        ax_gc.set_ylabel('GC %', fontsize=cfg.font_size_label)
        ax_gc.set_title(f"window = {min(cfg.gc_window, max(len(x), 1))}",
                        fontsize=cfg.font_size_label)

        if title:
            fig.suptitle(title)

        return self._render(fig, save_path)

    def create_quiz_image(
        self,
        session: QuizSession,
        title: str = "",
        save_path: Optional[str] = None
    ) -> str:
        """문제별 소요 시간 (초), 정답은 초록 / 오답은 빨강"""
        cfg = self.config
        fig, ax = plt.subplots(figsize=(cfg.fig_width, cfg.fig_height))

        records = session.records
        secs = np.array([r.elapsed_ms for r in records], dtype=float) / 1000.0
        colors = [cfg.color_correct if r.correct else cfg.color_wrong for r in records]
        ax.bar(np.arange(1, len(records) + 1), secs, color=colors, edgecolor='black', lw=0.8)

        if records:
            ax.axhline(session.avg_ms / 1000.0, color=cfg.line_color, lw=cfg.line_width, ls='--')
        ax.set_xlabel('question', fontsize=cfg.font_size_label)
        ax.set_ylabel('seconds', fontsize=cfg.font_size_label)
        ax.set_title(title or session.summary())

        return self._render(fig, save_path)

    def _render(self, fig, save_path: Optional[str]) -> str:
        cfg = self.config
        fig.tight_layout()

        # 파일 저장
        if save_path:
            fig.savefig(save_path, dpi=cfg.dpi, bbox_inches='tight', facecolor='white')

        # 이미지 반환
        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=cfg.dpi, bbox_inches='tight', facecolor='white')
        buf.seek(0)
        img_base64 = base64.b64encode(buf.read()).decode('utf-8')
        plt.close(fig)
        return img_base64
