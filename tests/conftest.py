"""
共用 fixture
"""
import pytest

from gdcalc.datasets import ScalingDataset, get_dataset
from gdcalc.settings import get_settings


@pytest.fixture
def guangzhou():
    return get_dataset("2025 广州一模")


@pytest.fixture
def shenzhen():
    return get_dataset("2025 深圳一模")


@pytest.fixture
def tie_dataset():
    """两个节点与 15 等距"""
    return ScalingDataset.from_pairs("tie", {"化学": [(10, 50), (20, 90)]})


@pytest.fixture
def empty_dataset():
    return ScalingDataset.from_pairs("empty", {"化学": []})


@pytest.fixture(autouse=True)
def fresh_settings():
    """每个用例前后清空设置缓存, 使 monkeypatch 的环境变量生效"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
