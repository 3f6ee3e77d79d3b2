"""
gdcalc: 广东高考成绩计算引擎

选科原始分 -> 等级赋分 -> 累计位次, 以及英语笔试折算总分.
所有函数均为纯函数, 数据集与题型配置作为参数显式传入.
"""
from .config import (
    Subject,
    SCALING_SUBJECTS,
    GradeZone,
    GRADE_ZONES,
    QuestionType,
    CompositeScoreConfig,
    Badge,
)
from .datasets import (
    ScalingDataset,
    SCALING_DATASETS,
    get_dataset,
    list_dataset_keys,
    default_dataset_key,
)
from .converter import (
    ScaledScore,
    resolve,
    interpolate,
    parse_raw_score,
    is_valid_raw_input,
    scale_raw_input,
    scaled_for_display,
)
from .percentile import to_percentile, grade_zone_for
from .series import (
    SeriesPoint,
    SubjectPoint,
    generate_series,
    cached_series,
    find_point,
    series_to_frame,
)
from .calculators import compute_composite, badge
from .data.english import english_config as DEFAULT_ENGLISH_CONFIG
from .models import EnglishScoreInput, CompositeResult
from .exceptions import GdCalcError, UnknownDatasetError, RawScoreOutOfRange

__version__ = "1.9.0"

__all__ = [
    # 配置
    "Subject",
    "SCALING_SUBJECTS",
    "GradeZone",
    "GRADE_ZONES",
    "QuestionType",
    "CompositeScoreConfig",
    "Badge",
    "DEFAULT_ENGLISH_CONFIG",
    # 数据集
    "ScalingDataset",
    "SCALING_DATASETS",
    "get_dataset",
    "list_dataset_keys",
    "default_dataset_key",
    # 赋分换算
    "ScaledScore",
    "resolve",
    "interpolate",
    "parse_raw_score",
    "is_valid_raw_input",
    "scale_raw_input",
    "scaled_for_display",
    # 位次
    "to_percentile",
    "grade_zone_for",
    # 图表
    "SeriesPoint",
    "SubjectPoint",
    "generate_series",
    "cached_series",
    "find_point",
    "series_to_frame",
    # 英语
    "compute_composite",
    "badge",
    "EnglishScoreInput",
    "CompositeResult",
    # 异常
    "GdCalcError",
    "UnknownDatasetError",
    "RawScoreOutOfRange",
]
