"""
总分计算器
"""
from .english import compute_composite, badge

__all__ = [
    "compute_composite",
    "badge",
]
