"""
图表数据生成测试
"""
import pytest

from gdcalc.config import SCALING_SUBJECTS
from gdcalc.converter import interpolate
from gdcalc.percentile import to_percentile
from gdcalc.series import (
    SeriesPoint,
    SubjectPoint,
    cached_series,
    find_point,
    generate_series,
    series_to_frame,
)


class TestGenerateSeries:

    @pytest.mark.parametrize("subjects", [(), ("化学",), ("化学", "政治"), SCALING_SUBJECTS])
    def test_always_101_points(self, guangzhou, subjects):
        series = generate_series(subjects, guangzhou)

        assert len(series) == 101
        assert [p.raw for p in series] == list(range(101))

    def test_no_subjects_points_are_raw_only(self, guangzhou):
        series = generate_series([], guangzhou)

        assert all(p.subjects == {} for p in series)
        assert series[42].as_row() == {"raw": 42}

    def test_values_match_engine(self, shenzhen):
        series = generate_series({"生物", "地理"}, shenzhen)
        for point in series:
            for subject in ("生物", "地理"):
                scaled = interpolate(subject, point.raw, shenzhen)
                assert point.subjects[subject].scaled == scaled
                assert point.subjects[subject].percentile == to_percentile(scaled)

    def test_subject_order_is_display_order(self, guangzhou):
        series = generate_series({"地理", "化学", "政治"}, guangzhou)

        assert list(series[0].subjects) == ["化学", "政治", "地理"]

    def test_unknown_subject_uses_fallback(self, guangzhou):
        series = generate_series({"物理"}, guangzhou)

        assert all(p.subjects["物理"].scaled == 30 for p in series)
        assert all(p.subjects["物理"].percentile == 0 for p in series)

    def test_flat_row(self, guangzhou):
        point = generate_series(["化学"], guangzhou)[60]

        assert point.as_row() == {"raw": 60, "化学": 69, "化学_rank": to_percentile(69)}

    def test_scaled_non_decreasing_for_shipped_tables(self, guangzhou, shenzhen):
        for dataset in (guangzhou, shenzhen):
            series = generate_series(SCALING_SUBJECTS, dataset)
            for subject in SCALING_SUBJECTS:
                values = [p.subjects[subject].scaled for p in series]
                assert all(a <= b for a, b in zip(values, values[1:]))

    def test_deterministic(self, guangzhou):
        assert generate_series(["生物"], guangzhou) == generate_series(["生物"], guangzhou)


class TestCachedSeries:

    def test_same_object_on_repeat(self):
        first = cached_series(["化学", "生物"], "2025 广州一模")
        second = cached_series(["生物", "化学"], "2025 广州一模")

        assert first is second

    def test_dataset_key_changes_result(self):
        gz = cached_series(["化学"], "2025 广州一模")
        sz = cached_series(["化学"], "2025 深圳一模")

        assert gz is not sz
        assert gz[60].subjects["化学"].scaled != sz[60].subjects["化学"].scaled

    def test_matches_uncached(self, guangzhou):
        assert list(cached_series(["政治"], guangzhou.key)) == generate_series(["政治"], guangzhou)

    def test_cached_points_are_read_only(self):
        series = cached_series(["化学"], "2025 广州一模")

        with pytest.raises(TypeError):
            series[60].subjects["化学"] = None
        with pytest.raises(TypeError):
            del series[60].subjects["化学"]

        again = cached_series(["化学"], "2025 广州一模")
        assert again[60].subjects["化学"].scaled == 69
        assert list(again[60].subjects) == ["化学"]

    def test_point_does_not_alias_caller_dict(self):
        subjects = {"化学": SubjectPoint(69, to_percentile(69))}
        point = SeriesPoint(60, subjects)
        subjects.clear()

        assert point.subjects["化学"].scaled == 69


class TestHelpers:

    def test_find_point(self, guangzhou):
        series = generate_series(["化学"], guangzhou)

        assert find_point(series, 75).raw == 75
        assert find_point(series, None) is None
        assert find_point(series, 101) is None

    def test_series_to_frame(self, guangzhou):
        df = series_to_frame(generate_series(["化学", "生物"], guangzhou))

        assert df.shape == (101, 4)
        assert list(df.columns) == ["化学", "化学_rank", "生物", "生物_rank"]
        assert df.loc[60, "化学"] == 69

    def test_series_to_frame_without_subjects(self, guangzhou):
        df = series_to_frame(generate_series([], guangzhou))

        assert len(df) == 101
        assert list(df.index) == list(range(101))
