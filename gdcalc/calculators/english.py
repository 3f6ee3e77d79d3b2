"""
广东高考英语 总分计算器
- 笔试卷面 120 分: 客观题按题数 × 单题分值, 主观题直接计分
- 笔试按 13/12 折算为 130 分
- 听说考试 20 分不折算, 直接加入总分
"""

from typing import Any, Dict, Mapping, Union

from ..config import BADGE_BANDS, FALLBACK_BADGE, Badge, CompositeScoreConfig
from ..data.english import english_config
from ..models import CompositeResult, EnglishScoreInput


def _as_counts(raw_counts: Union[Mapping[str, Any], EnglishScoreInput]) -> Dict[str, float]:
    if isinstance(raw_counts, EnglishScoreInput):
        return raw_counts.model_dump()
    return dict(raw_counts)


def compute_composite(
    raw_counts: Union[Mapping[str, Any], EnglishScoreInput],
    config: CompositeScoreConfig = english_config,
) -> CompositeResult:
    """
    英语总分计算

    Args:
        raw_counts: 题型 -> 输入值 (客观题为题数, 其余为得分), 缺失按 0 计
            例: {"reading": 12, "seven": 4, "cloze": 13, "grammar": 8,
                 "short_writing": 12, "long_writing": 20, "listening": 18}
        config: 题型分值配置

    Returns:
        CompositeResult (raw_written, converted_written, final, ...)

    Raises:
        ValueError: 含有配置中不存在的题型
    """
    values = _as_counts(raw_counts)
    unknown = set(values) - set(config.input_keys)
    if unknown:
        raise ValueError(f"未知题型: {', '.join(sorted(unknown))}")

    objective_scores = {
        key: values.get(key, 0) * question.points_per_question
        for key, question in config.objective.items()
    }
    subjective_scores = {key: values.get(key, 0) for key in config.subjective}
    listening = values.get(config.listening_key, 0)

    obj_score = sum(objective_scores.values())
    subj_score = sum(subjective_scores.values())

    raw_written = obj_score + subj_score
    converted_written = raw_written * config.multiplier
    final = converted_written + listening

    # 各部分对总分的贡献 (听说不折算)
    breakdown = {key: score * config.multiplier for key, score in objective_scores.items()}
    breakdown.update({key: score * config.multiplier for key, score in subjective_scores.items()})
    breakdown[config.listening_key] = listening

    return CompositeResult(
        obj_score=obj_score,
        subj_score=subj_score,
        raw_written=raw_written,
        converted_written=converted_written,
        final=final,
        breakdown=breakdown,
    )


def badge(final: float) -> Badge:
    """总分评语: 从高档往下, 首个 final >= 下限 的档位生效"""
    for band in BADGE_BANDS:
        if final >= band.threshold:
            return band
    return FALLBACK_BADGE
