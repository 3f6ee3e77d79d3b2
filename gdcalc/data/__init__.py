"""
数据层: 赋分对照表与英语题型配置
"""
from .scaling import (
    guangzhou_2025_mock_1,
    shenzhen_2025_mock_1,
    scaling_datasets,
)
from .english import (
    objective_questions,
    subjective_questions,
    english_config,
    initial_values,
)

__all__ = [
    "guangzhou_2025_mock_1",
    "shenzhen_2025_mock_1",
    "scaling_datasets",
    "objective_questions",
    "subjective_questions",
    "english_config",
    "initial_values",
]
