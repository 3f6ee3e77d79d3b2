"""
引擎异常定义
"""


class GdCalcError(Exception):
    """gdcalc 基础异常"""


class UnknownDatasetError(GdCalcError, KeyError):
    """未注册的赋分数据集名称"""

    def __init__(self, key: str, available=()):
        self.key = key
        self.available = tuple(available)
        super().__init__(key)

    def __str__(self) -> str:
        return f"未知数据集: {self.key!r} (可选: {', '.join(self.available) or '无'})"


class RawScoreOutOfRange(GdCalcError, ValueError):
    """严格模式下原始分超出 [0, 100]"""

    def __init__(self, raw_score: int, low: int = 0, high: int = 100):
        self.raw_score = raw_score
        super().__init__(f"原始分 {raw_score} 超出范围 [{low}, {high}]")
