"""
Logic Layer: 原始分 -> 赋分 换算
对照表只收录部分节点: 命中则直接返回, 越界按最高/最低节点截断, 其余取最近节点.
"""
import logging
import re
from typing import Optional
from dataclasses import dataclass

from .config import RAW_SCORE_MAX, RAW_SCORE_MIN, SCALED_SCORE_MIN
from .datasets import ScalingDataset
from .exceptions import RawScoreOutOfRange
from .settings import get_settings

logger = logging.getLogger(__name__)

# 对照表缺失或为空时的赋分 (赋分下限)
FALLBACK_SCALED_SCORE = SCALED_SCORE_MIN

# 输入无法解析时 scale_raw_input 的返回值
NO_INPUT_SENTINEL = 0.0

# 只认 ASCII 数字
_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")
_DIGITS_ONLY = re.compile(r"[0-9]+")

# 超长数字串不做逐位转换, 统一按 _OVERSIZED_RAW 处理 (越界截断或严格模式报错)
_MAX_DIGITS = 9
_OVERSIZED_RAW = 10 ** _MAX_DIGITS


def _digits_to_int(digits: str) -> int:
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        return _OVERSIZED_RAW
    return int(significant or "0")


class Note:
    """换算结果来源"""
    EXACT = "exact"
    CLAMP_HIGH = "clamp_high"
    CLAMP_LOW = "clamp_low"
    NEAREST = "nearest"
    EMPTY_TABLE = "empty_table"


@dataclass(frozen=True)
class ScaledScore:
    """赋分结果"""
    value: float
    note: str
    matched_raw: Optional[int] = None

    @property
    def fallback_used(self) -> bool:
        return self.note == Note.EMPTY_TABLE


def resolve(subject: str, raw_score: int, dataset: ScalingDataset) -> ScaledScore:
    """
    按对照表换算赋分, 并记录走的是哪条分支

    Args:
        subject: 科目名 (例: "化学")
        raw_score: 原始分 (整数)
        dataset: 赋分数据集

    Returns:
        ScaledScore(value, note, matched_raw)
    """
    table = dataset.table(subject)
    if not table:
        logger.debug("%s 在数据集 %s 中没有对照表, 使用兜底赋分 %s", subject, dataset.key, FALLBACK_SCALED_SCORE)
        return ScaledScore(FALLBACK_SCALED_SCORE, Note.EMPTY_TABLE)

    # 1. 精确命中 (重复节点取第一个)
    for raw, scaled in table:
        if raw == raw_score:
            return ScaledScore(scaled, Note.EXACT, raw)

    # 2. 越界截断
    max_raw, min_raw = -1, RAW_SCORE_MAX + 1
    max_scaled = min_scaled = FALLBACK_SCALED_SCORE
    for raw, scaled in table:
        if raw > max_raw:
            max_raw, max_scaled = raw, scaled
        if raw < min_raw:
            min_raw, min_scaled = raw, scaled

    if raw_score > max_raw:
        logger.debug("%s 原始分 %s 高于表内最高节点 %s", subject, raw_score, max_raw)
        return ScaledScore(max_scaled, Note.CLAMP_HIGH, max_raw)
    if raw_score < min_raw:
        logger.debug("%s 原始分 %s 低于表内最低节点 %s", subject, raw_score, min_raw)
        return ScaledScore(min_scaled, Note.CLAMP_LOW, min_raw)

    # 3. 最近节点: 只有差值严格更小时才替换, 等距时保留先出现的节点
    closest_raw, closest_scaled = table[0]
    min_diff = abs(raw_score - closest_raw)
    for raw, scaled in table:
        diff = abs(raw_score - raw)
        if diff < min_diff:
            min_diff = diff
            closest_raw, closest_scaled = raw, scaled

    return ScaledScore(closest_scaled, Note.NEAREST, closest_raw)


def interpolate(subject: str, raw_score: int, dataset: ScalingDataset) -> float:
    """原始分 -> 赋分"""
    return resolve(subject, raw_score, dataset).value


# ============================================================
# 文本输入边界
# ============================================================
def parse_raw_score(text: Optional[str]) -> Optional[int]:
    """
    解析输入框文本中的原始分

    取开头的整数部分 ("85" -> 85, " 7" -> 7, "60分" -> 60);
    空串或不以数字开头时返回 None; 超过 9 位有效数字的一律按 10**9 计.
    """
    if text is None:
        return None
    match = _LEADING_INT.match(str(text))
    if not match:
        return None
    sign, digits = match.groups()
    value = _digits_to_int(digits)
    return -value if sign == "-" else value


def is_valid_raw_input(text: str) -> bool:
    """输入框校验: 允许空串, 或 0~100 的纯数字"""
    if text == "":
        return True
    if not _DIGITS_ONLY.fullmatch(text):
        return False
    return RAW_SCORE_MIN <= _digits_to_int(text) <= RAW_SCORE_MAX


def check_raw_range(raw_score: int) -> int:
    if not RAW_SCORE_MIN <= raw_score <= RAW_SCORE_MAX:
        raise RawScoreOutOfRange(raw_score, RAW_SCORE_MIN, RAW_SCORE_MAX)
    return raw_score


def scale_raw_input(
    subject: str,
    text: Optional[str],
    dataset: ScalingDataset,
    strict: Optional[bool] = None,
) -> float:
    """
    输入框文本 -> 赋分

    无法解析时返回 NO_INPUT_SENTINEL (0), 与真实的 0 分无法区分,
    需要区分 "未输入" 时请用 scaled_for_display.

    Raises:
        RawScoreOutOfRange: 严格模式 (strict 或 GDCALC_STRICT_INPUT) 下原始分越界
    """
    raw_score = parse_raw_score(text)
    if raw_score is None:
        return NO_INPUT_SENTINEL

    if strict is None:
        strict = get_settings().STRICT_INPUT
    if strict:
        check_raw_range(raw_score)

    return interpolate(subject, raw_score, dataset)


def scaled_for_display(subject: str, text: Optional[str], dataset: ScalingDataset) -> Optional[float]:
    """未输入时返回 None (界面显示 "-"), 否则返回赋分"""
    raw_score = parse_raw_score(text)
    if raw_score is None:
        return None
    return interpolate(subject, raw_score, dataset)
