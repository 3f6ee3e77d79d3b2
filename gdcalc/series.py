"""
图表数据: 原始分 0~100 逐分换算出各科赋分与位次
"""
import logging
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple
from dataclasses import dataclass, field
from types import MappingProxyType

import pandas as pd

from .config import RAW_SCORE_MAX, RAW_SCORE_MIN, SCALING_SUBJECTS
from .converter import interpolate
from .datasets import ScalingDataset, get_dataset
from .percentile import to_percentile

logger = logging.getLogger(__name__)

RANK_SUFFIX = "_rank"


@dataclass(frozen=True)
class SubjectPoint:
    scaled: float
    percentile: float


@dataclass(frozen=True)
class SeriesPoint:
    """某一原始分下各科的赋分与位次"""
    raw: int
    subjects: Dict[str, SubjectPoint] = field(default_factory=dict)

    def __post_init__(self):
        # 冻结为只读映射 (cached_series 的结果在调用方之间共享)
        object.__setattr__(self, "subjects", MappingProxyType(dict(self.subjects)))

    def as_row(self) -> Dict[str, float]:
        """展平为图表行: {"raw": 60, "化学": 69.0, "化学_rank": 18.5, ...}"""
        row = {"raw": self.raw}
        for subject, point in self.subjects.items():
            row[subject] = point.scaled
            row[f"{subject}{RANK_SUFFIX}"] = point.percentile
        return row


def _ordered_subjects(subjects: Iterable[str]) -> Tuple[str, ...]:
    wanted = set(subjects)
    known = [s for s in SCALING_SUBJECTS if s in wanted]
    extra = sorted(wanted.difference(SCALING_SUBJECTS))
    if extra:
        logger.debug("非固定科目也参与生成: %s", extra)
    return tuple(known + extra)


def generate_series(subjects: Iterable[str], dataset: ScalingDataset) -> List[SeriesPoint]:
    """
    生成 101 个点 (原始分 0~100), 每点包含所选各科的赋分与位次.
    未选科目时仍返回 101 个只有原始分的点.
    """
    ordered = _ordered_subjects(subjects)
    series = []
    for raw in range(RAW_SCORE_MIN, RAW_SCORE_MAX + 1):
        points = {}
        for subject in ordered:
            scaled = interpolate(subject, raw, dataset)
            points[subject] = SubjectPoint(scaled=scaled, percentile=to_percentile(scaled))
        series.append(SeriesPoint(raw=raw, subjects=points))
    return series


@lru_cache(maxsize=64)
def _cached_series(subjects: FrozenSet[str], dataset_key: str) -> Tuple[SeriesPoint, ...]:
    return tuple(generate_series(subjects, get_dataset(dataset_key)))


def cached_series(subjects: Iterable[str], dataset_key: str) -> Tuple[SeriesPoint, ...]:
    """按 (科目集合, 数据集名称) 缓存的 generate_series, 只适用于已注册的数据集"""
    return _cached_series(frozenset(subjects), dataset_key)


def find_point(series: Iterable[SeriesPoint], raw: Optional[int]) -> Optional[SeriesPoint]:
    """取某一原始分对应的点 (用于在曲线上标出考生位置)"""
    if raw is None:
        return None
    for point in series:
        if point.raw == raw:
            return point
    return None


def series_to_frame(series: Iterable[SeriesPoint]) -> pd.DataFrame:
    """转换为以原始分为索引的 DataFrame"""
    df = pd.DataFrame([point.as_row() for point in series])
    if df.empty:
        return df
    return df.set_index("raw")
