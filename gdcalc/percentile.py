"""
赋分 -> 累计位次 (百分比, 100 为最高)
五个等级区间内各自线性插值, 从 A 等往下判断, 第一个满足 score >= 下限的区间生效.
"""
from .config import GRADE_ZONES, GradeZone

# 从高到低
_ZONES_DESC = tuple(reversed(GRADE_ZONES))


def _interpolate_in_zone(zone: GradeZone, score: float) -> float:
    return zone.percentile_low + (score - zone.min_score) / zone.width * zone.percentile_span


def to_percentile(score: float) -> float:
    """
    赋分 -> 累计位次

    区间端点: 30 -> 0, 40.5 -> 2, 58.5 -> 15, 70.5 -> 50, 82.5 -> 85, 100 -> 100.
    不做截断, 输入应在 [30, 100] 内.
    """
    for zone in _ZONES_DESC[:-1]:
        if score >= zone.min_score:
            return _interpolate_in_zone(zone, score)
    return _interpolate_in_zone(_ZONES_DESC[-1], score)


def grade_zone_for(score: float) -> GradeZone:
    """赋分所在的等级区间 (低于 30 归 E, 高于 100 归 A)"""
    for zone in _ZONES_DESC:
        if score >= zone.min_score:
            return zone
    return GRADE_ZONES[0]
