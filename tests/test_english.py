"""
英语总分计算测试
"""
import random

import pytest
from pydantic import ValidationError

from gdcalc.calculators import badge, compute_composite
from gdcalc.config import CompositeScoreConfig, QuestionType
from gdcalc.data.english import english_config, initial_values
from gdcalc.models import EnglishScoreInput


@pytest.fixture
def simple_config():
    return CompositeScoreConfig(
        objective={
            "reading": QuestionType("阅读理解", points_per_question=2, max_count=15),
            "seven": QuestionType("七选五", points_per_question=2, max_count=5),
            "cloze": QuestionType("完形填空", points_per_question=1.5, max_count=15),
            "grammar": QuestionType("语法填空", points_per_question=1, max_count=10),
        },
        subjective={
            "short_writing": QuestionType("应用文写作", max_score=15),
            "long_writing": QuestionType("读后续写", max_score=25),
        },
    )


SAMPLE_INPUT = {
    "reading": 5,
    "seven": 5,
    "cloze": 4,
    "grammar": 6,
    "short_writing": 8,
    "long_writing": 12,
    "listening": 20,
}


class TestComputeComposite:

    def test_worked_example(self, simple_config):
        result = compute_composite(SAMPLE_INPUT, simple_config)

        assert result.obj_score == 32
        assert result.subj_score == 20
        assert result.raw_written == 52
        assert result.converted_written == pytest.approx(56.333, abs=1e-3)
        assert result.final == pytest.approx(76.333, abs=1e-3)

    def test_multiplier_not_applied_to_listening(self, simple_config):
        without = compute_composite({**SAMPLE_INPUT, "listening": 0}, simple_config)
        with_listening = compute_composite(SAMPLE_INPUT, simple_config)

        assert with_listening.final - without.final == pytest.approx(20)
        assert with_listening.converted_written == without.converted_written

    def test_same_arithmetic_as_original(self, simple_config):
        result = compute_composite(SAMPLE_INPUT, simple_config)

        assert result.converted_written == 52 * (13 / 12)
        assert result.final == 52 * (13 / 12) + 20

    def test_missing_keys_count_as_zero(self):
        result = compute_composite({"reading": 10})

        assert result.raw_written == 25
        assert result.final == pytest.approx(25 * 13 / 12)

    def test_all_zero(self):
        result = compute_composite(initial_values)

        assert result.final == 0
        assert result.raw_written == 0

    def test_full_marks_default_paper(self):
        full = {key: q.max_count for key, q in english_config.objective.items()}
        full.update({key: q.max_score for key, q in english_config.subjective.items()})
        full["listening"] = 20

        result = compute_composite(full)

        assert result.raw_written == 120
        assert result.converted_written == pytest.approx(130)
        assert result.final == pytest.approx(150)

    def test_accepts_input_model(self):
        payload = EnglishScoreInput(**SAMPLE_INPUT)

        assert compute_composite(payload) == compute_composite(SAMPLE_INPUT)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="translation"):
            compute_composite({"translation": 3})

    def test_breakdown(self, simple_config):
        result = compute_composite(SAMPLE_INPUT, simple_config)

        assert result.breakdown["reading"] == pytest.approx(10 * 13 / 12)
        assert result.breakdown["long_writing"] == pytest.approx(12 * 13 / 12)
        assert result.breakdown["listening"] == 20
        assert sum(result.breakdown.values()) == pytest.approx(result.final)

    def test_idempotent(self):
        rng = random.Random(3)
        for _ in range(100):
            values = {key: rng.randint(0, 15) for key in english_config.input_keys}
            assert compute_composite(values) == compute_composite(values)


class TestConfig:

    def test_default_paper_maxima(self):
        assert english_config.raw_written_max == 120
        assert english_config.converted_written_max == pytest.approx(130)
        assert english_config.total_max == pytest.approx(150)

    def test_multiplier_is_13_over_12(self):
        assert english_config.multiplier == 13 / 12

    def test_config_is_read_only(self):
        with pytest.raises(TypeError):
            english_config.objective["reading"] = QuestionType("x", points_per_question=9)

    def test_multiplier_cannot_be_overridden(self):
        with pytest.raises(TypeError):
            CompositeScoreConfig(objective={}, subjective={}, multiplier=1.0)

        assert CompositeScoreConfig(objective={}, subjective={}).multiplier == 13 / 12

    def test_optional_fields_default_to_none(self):
        assert QuestionType("应用文写作", max_score=15).points_per_question is None
        assert badge(0).threshold is None


class TestEnglishScoreInput:

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            EnglishScoreInput(reading=-1)

    def test_within_limits(self):
        payload = EnglishScoreInput(**SAMPLE_INPUT)

        assert payload.over_limits(english_config) == []
        assert payload.check_limits(english_config) is payload

    def test_over_limits(self):
        payload = EnglishScoreInput(reading=16, long_writing=26, listening=21)

        assert payload.over_limits(english_config) == ["reading", "long_writing", "listening"]
        with pytest.raises(ValueError):
            payload.check_limits(english_config)


class TestBadge:

    @pytest.mark.parametrize(
        "final, tone",
        [
            (150, "purple"),
            (138, "purple"),
            (137.99, "green"),
            (130, "green"),
            (129.5, "cyan"),
            (120, "cyan"),
            (100, "blue"),
            (99.99, "slate"),
            (90, "slate"),
            (89.99, "red"),
            (0, "red"),
        ],
    )
    def test_bands(self, final, tone):
        assert badge(final).tone == tone

    def test_labels_are_distinct(self):
        labels = {badge(score).text for score in (140, 132, 125, 105, 95, 50)}

        assert len(labels) == 6

    def test_lower_bound_inclusive(self):
        assert badge(120).text == "⭐ 非常优秀"
        assert badge(119.999).text == "👍 平均水平"
