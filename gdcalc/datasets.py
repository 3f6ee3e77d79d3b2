"""
Data Layer: 赋分数据集注册表
数据集在导入时构建一次, 之后只读; 切换数据集即按名称重新查找.
"""
from typing import Dict, Iterable, List, Mapping, Optional, Tuple
from dataclasses import dataclass
from types import MappingProxyType

from .data.scaling import scaling_datasets
from .exceptions import UnknownDatasetError
from .settings import get_settings

# (原始分, 赋分)
ScorePair = Tuple[int, float]
ScoreTable = Tuple[ScorePair, ...]


@dataclass(frozen=True)
class ScalingDataset:
    """一套赋分对照表 (每科一张)"""
    key: str
    tables: Mapping[str, ScoreTable]

    def __post_init__(self):
        frozen = {
            subject: tuple((int(raw), float(scaled)) for raw, scaled in pairs)
            for subject, pairs in self.tables.items()
        }
        object.__setattr__(self, "tables", MappingProxyType(frozen))

    def __hash__(self) -> int:
        return hash((self.key, tuple(self.tables.items())))

    @property
    def subjects(self) -> Tuple[str, ...]:
        return tuple(self.tables)

    def table(self, subject: str) -> ScoreTable:
        """科目对照表, 没有该科目时返回空表"""
        return self.tables.get(subject, ())

    @classmethod
    def from_pairs(cls, key: str, tables: Mapping[str, Iterable[Iterable]]) -> "ScalingDataset":
        return cls(key=key, tables={s: tuple(tuple(p) for p in pairs) for s, pairs in tables.items()})


def _build_registry(raw: Mapping[str, Mapping]) -> Dict[str, ScalingDataset]:
    return {key: ScalingDataset.from_pairs(key, tables) for key, tables in raw.items()}


SCALING_DATASETS: Mapping[str, ScalingDataset] = MappingProxyType(_build_registry(scaling_datasets))


def list_dataset_keys(datasets: Mapping[str, ScalingDataset] = SCALING_DATASETS) -> List[str]:
    """数据集名称 (注册顺序)"""
    return list(datasets.keys())


def get_dataset(key: str, datasets: Mapping[str, ScalingDataset] = SCALING_DATASETS) -> ScalingDataset:
    """
    按名称查找数据集

    Raises:
        UnknownDatasetError: 名称未注册
    """
    try:
        return datasets[key]
    except KeyError:
        raise UnknownDatasetError(key, datasets.keys()) from None


def default_dataset_key(datasets: Mapping[str, ScalingDataset] = SCALING_DATASETS) -> Optional[str]:
    """
    默认数据集名称: GDCALC_DEFAULT_DATASET 已注册时取它, 否则取第一项
    """
    configured = get_settings().DEFAULT_DATASET
    if configured and configured in datasets:
        return configured
    keys = list_dataset_keys(datasets)
    return keys[0] if keys else None
