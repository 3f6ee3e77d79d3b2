"""
界面会话状态
引擎本身无状态; 当前数据集、所选科目和输入框文本由调用方持有, 每次计算按值传入.
所有变更函数都返回新对象.
"""
from typing import Dict, FrozenSet, Mapping, Tuple
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from .config import SCALING_SUBJECTS
from .converter import is_valid_raw_input
from .data.english import initial_values
from .datasets import SCALING_DATASETS, default_dataset_key, get_dataset


class ViewMode:
    SCORE = "score"   # 横轴为原始分
    RANK = "rank"     # 横轴为累计位次

    ALL = (SCORE, RANK)


def _empty_scores() -> Mapping[str, str]:
    return MappingProxyType({subject: "" for subject in SCALING_SUBJECTS})


@dataclass(frozen=True)
class ScalerState:
    """选科赋分页面状态"""
    dataset_key: str
    view_mode: str = ViewMode.SCORE
    selected: FrozenSet[str] = frozenset()
    scores: Mapping[str, str] = field(default_factory=_empty_scores)

    @classmethod
    def initial(cls, datasets=SCALING_DATASETS) -> "ScalerState":
        return cls(dataset_key=default_dataset_key(datasets))

    @property
    def active_subjects(self) -> Tuple[str, ...]:
        """已选科目 (按固定展示顺序)"""
        return tuple(s for s in SCALING_SUBJECTS if s in self.selected)

    def dataset(self, datasets=SCALING_DATASETS):
        return get_dataset(self.dataset_key, datasets)


def select_dataset(state: ScalerState, key: str, datasets=SCALING_DATASETS) -> ScalerState:
    # 未注册的名称直接报错
    get_dataset(key, datasets)
    return replace(state, dataset_key=key)


def set_view_mode(state: ScalerState, mode: str) -> ScalerState:
    if mode not in ViewMode.ALL:
        raise ValueError(f"未知显示模式: {mode!r}")
    return replace(state, view_mode=mode)


def toggle_subject(state: ScalerState, subject: str) -> ScalerState:
    if subject in state.selected:
        return replace(state, selected=state.selected - {subject})
    return replace(state, selected=state.selected | {subject})


def set_raw_score(state: ScalerState, subject: str, text: str) -> ScalerState:
    """
    更新输入框文本; 不合法的输入 (非数字或超出 0~100) 被忽略, 返回原状态
    """
    if not is_valid_raw_input(text):
        return state
    scores = dict(state.scores)
    scores[subject] = text
    return replace(state, scores=MappingProxyType(scores))


# ============================================================
# 英语页面
# ============================================================
@dataclass(frozen=True)
class EnglishState:
    """英语计算器输入"""
    values: Mapping[str, float] = field(default_factory=lambda: MappingProxyType(dict(initial_values)))

    def update(self, key: str, value: float) -> "EnglishState":
        if key not in self.values:
            raise KeyError(key)
        values = dict(self.values)
        values[key] = value
        return EnglishState(values=MappingProxyType(values))

    def reset(self) -> "EnglishState":
        return EnglishState()

    def as_dict(self) -> Dict[str, float]:
        return dict(self.values)
