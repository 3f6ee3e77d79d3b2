# 广东高考英语 (新课标 I 卷) 题型分值
# 笔试卷面 120 分, 按 13/12 折算为 130 分, 另加听说考试 20 分, 满分 150.

from ..config import CompositeScoreConfig, QuestionType

# 客观题: 按答对题数计分
objective_questions = {
    "reading": QuestionType("阅读理解", points_per_question=2.5, max_count=15),
    "seven": QuestionType("七选五", points_per_question=2.5, max_count=5),
    "cloze": QuestionType("完形填空", points_per_question=1.0, max_count=15),
    "grammar": QuestionType("语法填空", points_per_question=1.5, max_count=10),
}

# 主观题: 直接填写得分
subjective_questions = {
    "short_writing": QuestionType("应用文写作", max_score=15.0),
    "long_writing": QuestionType("读后续写", max_score=25.0),
}

english_config = CompositeScoreConfig(
    objective=objective_questions,
    subjective=subjective_questions,
    listening_key="listening",
    listening=QuestionType("听说考试", max_score=20.0),
)

# 重置后的输入
initial_values = {key: 0 for key in english_config.input_keys}
