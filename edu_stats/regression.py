"""
상관 및 회귀 모듈

두 계열 사이의 피어슨 상관계수, 단순 선형회귀(최소제곱법)와 결정계수, 두 점 사이의 거리를 계산합니다.
"""

import logging

import numpy as np
from scipy import stats
from typing import Iterable, Mapping, Sequence, Union

from edu_stats.config import get_config
from edu_stats.distribution import round_to_precision
from edu_stats.models import DataPoint, LinearRegressionResult
from edu_stats.statistics import to_sample

logger = logging.getLogger(__name__)

PointLike = Union[DataPoint, Mapping[str, float]]

DEGENERATE_REGRESSION = LinearRegressionResult(slope=0.0, intercept=0.0, r_squared=0.0, equation='y = 0')


def _as_point(point: PointLike) -> DataPoint:
    if isinstance(point, DataPoint):
        return point
    return DataPoint.from_mapping(point)


def _format_coefficient(value: float, precision: int) -> str:
    # 정수로 떨어지는 값은 소수점 없이 표기 (예: 2.0 → "2")
    rounded = round_to_precision(value, precision)
    if rounded.is_integer():
        return str(int(rounded))
    return repr(rounded)


def calculate_correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    피어슨 상관계수를 계산합니다.

    Args:
        x (Sequence[float]): 첫 번째 계열
        y (Sequence[float]): 두 번째 계열 (x와 길이가 같아야 함)

    Returns:
        float: 상관계수 (-1~1)

    Raises:
        ValueError: 두 계열의 길이가 다를 때

    Note:
        - 데이터가 2개 미만이거나 어느 한 계열의 분산이 0이면 NaN 대신 0.0을 반환합니다.

    Examples:
        >>> calculate_correlation([1, 2, 3], [2, 4, 6])
        1.0
    """
    x_values = to_sample(x)
    y_values = to_sample(y)

    if x_values.size != y_values.size:
        raise ValueError(
            f"두 계열의 길이가 같아야 합니다. (x: {x_values.size}개, y: {y_values.size}개)"
        )

    if x_values.size < 2 or np.ptp(x_values) == 0 or np.ptp(y_values) == 0:
        return 0.0

    return float(stats.pearsonr(x_values, y_values)[0])


def calculate_linear_regression(points: Iterable[PointLike]) -> LinearRegressionResult:
    """
    최소제곱법으로 단순 선형회귀 y = slope * x + intercept 를 적합합니다.

    Args:
        points (Iterable[DataPoint | Mapping]): (x, y) 점 목록. {'x': ..., 'y': ...} 매핑도 허용

    Returns:
        LinearRegressionResult: 기울기, 절편, 결정계수(R²), 회귀식 문자열

    Note:
        - 점이 2개 미만이거나 x 값이 모두 같으면 slope=0, intercept=0, R²=0, 'y = 0'을 반환합니다.
        - y 값이 모두 같으면 R²는 1.0입니다.
        - 회귀식은 기울기와 절편을 소수 4자리로 반올림하며, 절편이 음수여도
          'y = 2x + -0.5'처럼 '+' 기호를 유지합니다. (기존 리포트 문자열과 호환)

    Examples:
        >>> result = calculate_linear_regression([DataPoint(0, 1), DataPoint(1, 3), DataPoint(2, 5)])
        >>> result.equation
        'y = 2x + 1'
    """
    data = [_as_point(p) for p in points]
    if len(data) < 2:
        logger.debug("회귀 분석 점 개수 부족 (%d개): 기본 결과를 반환합니다.", len(data))
        return DEGENERATE_REGRESSION

    x = to_sample([p.x for p in data])
    y = to_sample([p.y for p in data])
    n = len(data)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        logger.debug("x 값의 분산이 0입니다: 기본 결과를 반환합니다.")
        return DEGENERATE_REGRESSION

    slope = float((n * sum_xy - sum_x * sum_y) / denominator)
    intercept = float((sum_y - slope * sum_x) / n)

    # 결정계수 R²
    mean_y = sum_y / n
    total_sum_squares = ((y - mean_y) ** 2).sum()
    residual_sum_squares = ((y - (slope * x + intercept)) ** 2).sum()

    if total_sum_squares == 0:
        r_squared = 1.0
    else:
        r_squared = float(1 - residual_sum_squares / total_sum_squares)

    precision = get_config('rounding.equation_precision', 4)
    equation = (
        f"y = {_format_coefficient(slope, precision)}x"
        f" + {_format_coefficient(intercept, precision)}"
    )

    return LinearRegressionResult(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        equation=equation
    )


def calculate_euclidean_distance(point1: PointLike, point2: PointLike) -> float:
    """두 점 사이의 유클리드 거리를 계산합니다."""
    p1 = _as_point(point1)
    p2 = _as_point(point2)
    return float(np.hypot(p2.x - p1.x, p2.y - p1.y))
