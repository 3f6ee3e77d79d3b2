"""
英语总分计算相关 Pydantic 模型
"""
from pydantic import BaseModel, Field
from typing import Dict, List

from .config import CompositeScoreConfig


class EnglishScoreInput(BaseModel):
    """英语各题型输入 (客观题为答对题数, 主观题与听说为得分)"""
    reading: int = Field(default=0, ge=0, description="阅读理解 答对题数")
    seven: int = Field(default=0, ge=0, description="七选五 答对题数")
    cloze: int = Field(default=0, ge=0, description="完形填空 答对题数")
    grammar: int = Field(default=0, ge=0, description="语法填空 答对题数")
    short_writing: float = Field(default=0, ge=0, description="应用文写作 得分")
    long_writing: float = Field(default=0, ge=0, description="读后续写 得分")
    listening: float = Field(default=0, ge=0, description="听说考试 得分")

    def over_limits(self, config: CompositeScoreConfig) -> List[str]:
        """超出题数或满分上限的字段"""
        values = self.model_dump()
        over = []
        for key, question in config.objective.items():
            if values.get(key, 0) > question.max_count:
                over.append(key)
        for key, question in config.subjective.items():
            if values.get(key, 0) > question.max_score:
                over.append(key)
        if values.get(config.listening_key, 0) > config.listening.max_score:
            over.append(config.listening_key)
        return over

    def check_limits(self, config: CompositeScoreConfig) -> "EnglishScoreInput":
        over = self.over_limits(config)
        if over:
            raise ValueError(f"超出上限: {', '.join(over)}")
        return self


class CompositeResult(BaseModel):
    """英语总分计算结果"""
    obj_score: float = Field(description="客观题得分")
    subj_score: float = Field(description="主观题得分")
    raw_written: float = Field(description="笔试卷面原始分")
    converted_written: float = Field(description="笔试折算分 (× 13/12)")
    final: float = Field(description="总分 (折算分 + 听说)")
    breakdown: Dict[str, float] = Field(default_factory=dict, description="各题型对总分的贡献")
