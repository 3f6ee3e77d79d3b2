"""
引擎全局常量定义: 科目、等级区间、英语题型配置、评语档位
"""
from typing import Dict, Optional, Tuple
from dataclasses import dataclass, field
from types import MappingProxyType


# ============================================================
# 科目
# ============================================================
class Subject:
    """选科赋分科目 (固定集合, 仅作为键使用)"""
    CHEMISTRY = "化学"
    BIOLOGY = "生物"
    POLITICS = "政治"
    GEOGRAPHY = "地理"


# 展示顺序
SCALING_SUBJECTS: Tuple[str, ...] = (
    Subject.CHEMISTRY,
    Subject.BIOLOGY,
    Subject.POLITICS,
    Subject.GEOGRAPHY,
)

RAW_SCORE_MIN = 0
RAW_SCORE_MAX = 100

SCALED_SCORE_MIN = 30.0
SCALED_SCORE_MAX = 100.0


# ============================================================
# 等级区间
# ============================================================
@dataclass(frozen=True)
class GradeZone:
    """赋分等级区间 [min_score, max_score) 及其对应的累计位次区间"""
    label: str
    min_score: float
    max_score: float
    percentile_low: float
    percentile_high: float
    description: str

    @property
    def width(self) -> float:
        return self.max_score - self.min_score

    @property
    def percentile_span(self) -> float:
        return self.percentile_high - self.percentile_low

    def contains(self, score: float) -> bool:
        # A 等包含满分 100
        if self.max_score >= SCALED_SCORE_MAX:
            return self.min_score <= score <= self.max_score
        return self.min_score <= score < self.max_score


# 从低到高, 首尾相接覆盖 [30, 100]
GRADE_ZONES: Tuple[GradeZone, ...] = (
    GradeZone("E", 30.0, 40.5, 0.0, 2.0, "最后 2%"),
    GradeZone("D", 40.5, 58.5, 2.0, 15.0, "后 13%"),
    GradeZone("C", 58.5, 70.5, 15.0, 50.0, "中 35%"),
    GradeZone("B", 70.5, 82.5, 50.0, 85.0, "次 35%"),
    GradeZone("A", 82.5, 100.0, 85.0, 100.0, "前 15%"),
)

# 图表纵轴刻度 (各等级下限 + 满分)
CHART_TICKS: Tuple[float, ...] = (30.0, 40.5, 58.5, 70.5, 82.5, 100.0)


# ============================================================
# 英语题型配置
# ============================================================
@dataclass(frozen=True)
class QuestionType:
    """
    题型定义

    客观题按题数计分 (points_per_question > 0, max_count 为题数上限);
    主观题与听说直接填写分数 (points_per_question 为 None, max_score 为满分).
    """
    label: str
    points_per_question: Optional[float] = None
    max_count: int = 0
    max_score: float = 0.0

    @property
    def is_objective(self) -> bool:
        return self.points_per_question is not None

    @property
    def full_marks(self) -> float:
        if self.is_objective:
            return self.max_count * self.points_per_question
        return self.max_score


@dataclass(frozen=True)
class CompositeScoreConfig:
    """英语总分折算配置 (笔试 × 13/12 + 听说)"""
    objective: Dict[str, QuestionType]
    subjective: Dict[str, QuestionType]
    listening_key: str = "listening"
    listening: QuestionType = QuestionType("听说考试", max_score=20.0)
    multiplier: float = field(default=13 / 12, init=False)

    def __post_init__(self):
        # 冻结为只读映射
        object.__setattr__(self, "objective", MappingProxyType(dict(self.objective)))
        object.__setattr__(self, "subjective", MappingProxyType(dict(self.subjective)))

    @property
    def input_keys(self) -> Tuple[str, ...]:
        return tuple(self.objective) + tuple(self.subjective) + (self.listening_key,)

    @property
    def raw_written_max(self) -> float:
        return (
            sum(q.full_marks for q in self.objective.values())
            + sum(q.full_marks for q in self.subjective.values())
        )

    @property
    def converted_written_max(self) -> float:
        return self.raw_written_max * self.multiplier

    @property
    def total_max(self) -> float:
        return self.converted_written_max + self.listening.full_marks


# ============================================================
# 总分评语档位
# ============================================================
@dataclass(frozen=True)
class Badge:
    """总分评语"""
    threshold: Optional[float]  # 下限 (含); 兜底档为 None
    text: str
    tone: str          # 展示层配色提示


# 从高到低, 首个满足 final >= threshold 的档位生效
BADGE_BANDS: Tuple[Badge, ...] = (
    Badge(138, "😮 你难道是.....xubot?", "purple"),
    Badge(130, "👑 Top Tier", "green"),
    Badge(120, "⭐ 非常优秀", "cyan"),
    Badge(100, "👍 平均水平", "blue"),
    Badge(90, "💪 还得练", "slate"),
)

FALLBACK_BADGE = Badge(None, " 🇨🇳 中国人不学洋语", "red")
