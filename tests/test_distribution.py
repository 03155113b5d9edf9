"""
분포 및 백분위 모듈 테스트
"""

import pytest
from edu_stats.config import DEFAULT_CONFIG
from edu_stats.distribution import (
    round_to_precision,
    round_to_fixed,
    clamp,
    calculate_percentage,
    calculate_percentage_change,
    calculate_progress,
    calculate_percentile,
    calculate_z_score,
    normalize_array,
    interpolate
)


class TestRounding:
    """반올림, 범위 제한 테스트"""

    def test_round_half_up(self):
        """0.5는 올림"""
        assert round_to_precision(0.125, 2) == 0.13
        assert round_to_precision(2.5, 0) == 3.0
        assert round_to_precision(-2.5, 0) == -2.0

    def test_round_to_precision_default(self):
        """기본 자릿수는 2"""
        assert round_to_precision(3.14159) == 3.14

    def test_clamp(self):
        """범위 제한"""
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10


class TestPercentage:
    """백분율, 변화율 테스트"""

    def test_calculate_percentage(self):
        """백분율 계산"""
        assert calculate_percentage(1, 4) == 25.0
        assert calculate_percentage(1, 3) == 33.33
        assert calculate_percentage(2, 3, precision=0) == 67.0

    def test_calculate_percentage_decimal_tie(self):
        """저장된 10진 값 기준 반올림: 59.995는 59.99"""
        assert calculate_percentage(59.995, 100) == 59.99
        assert round_to_fixed(59.995, 2) == 59.99
        assert round_to_fixed(0.125, 2) == 0.13
        assert round_to_fixed(-2.5, 0) == -3.0

    def test_calculate_percentage_configured_precision(self, monkeypatch):
        """설정된 소수 자릿수 사용"""
        monkeypatch.setitem(DEFAULT_CONFIG['rounding'], 'percentage_precision', 1)

        assert calculate_percentage(1, 3) == 33.3
        assert calculate_percentage(1, 3, precision=3) == 33.333
        assert calculate_percentage_change(3, 4) == 33.3

    def test_calculate_percentage_zero_total(self):
        """전체가 0이면 0"""
        assert calculate_percentage(5, 0) == 0.0

    def test_calculate_percentage_change(self):
        """변화율 계산"""
        assert calculate_percentage_change(50, 75) == 50.0
        assert calculate_percentage_change(80, 60) == -25.0

    def test_calculate_percentage_change_from_zero(self):
        """이전 값이 0일 때 규칙"""
        assert calculate_percentage_change(0, 10) == 100.0
        assert calculate_percentage_change(0, 0) == 0.0
        assert calculate_percentage_change(0, -5) == 0.0

    def test_calculate_progress(self):
        """진도율"""
        assert calculate_progress(3, 12) == 25.0
        assert calculate_progress(0, 0) == 0.0


class TestPercentile:
    """백분위수 테스트"""

    def test_percentile_exact_rank(self):
        """순위가 정수이면 해당 값"""
        assert calculate_percentile([1, 2, 3, 4, 5], 50) == 3

    def test_percentile_interpolated(self):
        """순위가 정수가 아니면 선형 보간"""
        assert calculate_percentile([1, 2, 3, 4], 50) == 2.5
        assert calculate_percentile([10, 20, 30, 40], 25) == pytest.approx(17.5)

    def test_percentile_unsorted_input(self):
        """정렬되지 않은 입력"""
        assert calculate_percentile([5, 3, 1, 4, 2], 50) == 3

    def test_percentile_bounds(self):
        """0 백분위 = 최솟값, 100 백분위 = 최댓값"""
        data = [42, 7, 19, 88, 3.5]
        assert calculate_percentile(data, 0) == min(data)
        assert calculate_percentile(data, 100) == max(data)

    def test_percentile_empty(self):
        """빈 데이터는 0"""
        assert calculate_percentile([], 50) == 0.0

    def test_percentile_out_of_range(self):
        """0~100 범위 밖은 오류"""
        with pytest.raises(ValueError):
            calculate_percentile([1, 2, 3], 101)
        with pytest.raises(ValueError):
            calculate_percentile([1, 2, 3], -1)

    def test_percentile_out_of_range_empty(self):
        """빈 데이터도 범위 검사가 먼저"""
        with pytest.raises(ValueError):
            calculate_percentile([], 150)


class TestScaling:
    """Z-점수, 정규화, 보간 테스트"""

    def test_z_score(self):
        """Z-점수 계산"""
        assert calculate_z_score(90, 70, 10) == 2.0
        assert calculate_z_score(65, 70, 10) == -0.5

    def test_z_score_zero_std(self):
        """표준편차 0이면 0"""
        assert calculate_z_score(90, 70, 0) == 0.0

    def test_normalize_array(self):
        """최소-최대 정규화"""
        assert normalize_array([10, 20, 30]) == [0.0, 0.5, 1.0]

    def test_normalize_array_range(self):
        """결과는 [0, 1], 최댓값 → 1, 최솟값 → 0"""
        data = [15, -4, 33, 8, 0]
        result = normalize_array(data)

        assert all(0 <= v <= 1 for v in result)
        assert result[data.index(max(data))] == 1.0
        assert result[data.index(min(data))] == 0.0

    def test_normalize_array_zero_range(self):
        """범위가 0이면 모두 0"""
        assert normalize_array([5, 5, 5]) == [0.0, 0.0, 0.0]

    def test_normalize_array_empty(self):
        """빈 데이터"""
        assert normalize_array([]) == []

    def test_interpolate(self):
        """선형 보간"""
        assert interpolate(0, 10, 0.5) == 5
        assert interpolate(10, 20, 0.25) == 12.5

    def test_interpolate_clamps_factor(self):
        """보간 계수는 [0, 1]로 제한"""
        assert interpolate(0, 10, 1.5) == 10
        assert interpolate(0, 10, -0.5) == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
