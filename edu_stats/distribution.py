"""
분포 및 백분위 모듈

백분율, 변화율, 백분위수, Z-점수, 정규화 등 분포 관련 계산과 반올림/보간 헬퍼를 제공합니다.
"""

from decimal import Decimal, ROUND_HALF_UP

import numpy as np
from typing import List, Optional, Sequence

from edu_stats.config import get_config
from edu_stats.statistics import to_sample


def round_to_precision(number: float, precision: int = 2) -> float:
    """
    지정한 소수 자릿수로 반올림합니다. (0.5는 항상 올림)

    파이썬 내장 round()의 은행가 반올림과 달리 대시보드 표기와 같은 방식을 사용합니다.

    Args:
        number (float): 반올림할 값
        precision (int): 소수 자릿수 (기본값: 2)

    Returns:
        float: 반올림된 값

    Examples:
        >>> round_to_precision(0.125, 2)
        0.13
        >>> round_to_precision(2.5, 0)
        3.0
    """
    factor = 10 ** precision
    return float(np.floor(number * factor + 0.5) / factor)


def round_to_fixed(number: float, precision: int = 2) -> float:
    """
    float의 정확한 10진 값을 기준으로 반올림합니다. (0.5는 0에서 먼 쪽으로)

    백분율 표기에 사용합니다. 59.995는 실제 저장값이 59.99499...이므로 59.99가 됩니다.

    Examples:
        >>> round_to_fixed(59.995, 2)
        59.99
        >>> round_to_fixed(-2.5, 0)
        -3.0
    """
    if not np.isfinite(number):
        return float(number)
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(float(number)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, min_value: float, max_value: float) -> float:
    """값을 [min_value, max_value] 범위로 제한합니다."""
    return min(max(value, min_value), max_value)


def calculate_percentage(value: float, total: float, precision: Optional[int] = None) -> float:
    """
    백분율을 계산합니다.

    Args:
        value (float): 부분 값
        total (float): 전체 값
        precision (Optional[int]): 소수 자릿수 (기본값: rounding.percentage_precision)

    Returns:
        float: (value / total) * 100 (total이 0이면 0.0)

    Examples:
        >>> calculate_percentage(1, 3)
        33.33
    """
    if total == 0:
        return 0.0
    if precision is None:
        precision = get_config('rounding.percentage_precision', 2)
    return round_to_fixed((value / total) * 100, precision)


def calculate_percentage_change(old_value: float, new_value: float, precision: Optional[int] = None) -> float:
    """
    변화율(%)을 계산합니다.

    Args:
        old_value (float): 이전 값
        new_value (float): 현재 값
        precision (Optional[int]): 소수 자릿수 (기본값: rounding.percentage_precision)

    Returns:
        float: ((new - old) / old) * 100

    Note:
        - 이전 값이 0이면 현재 값이 양수일 때 100, 그 외에는 0을 반환합니다.

    Examples:
        >>> calculate_percentage_change(50, 75)
        50.0
        >>> calculate_percentage_change(0, 10)
        100.0
    """
    if old_value == 0:
        return 100.0 if new_value > 0 else 0.0
    if precision is None:
        precision = get_config('rounding.percentage_precision', 2)
    return round_to_fixed(((new_value - old_value) / old_value) * 100, precision)


def calculate_progress(completed: float, total: float) -> float:
    """진도율(%)을 계산합니다. calculate_percentage와 같습니다."""
    return calculate_percentage(completed, total)


def calculate_percentile(numbers: Sequence[float], percentile: float) -> float:
    """
    보간 백분위수를 계산합니다.

    정렬된 데이터에서 (percentile / 100) * (n - 1) 위치의 값을 구하며,
    위치가 정수가 아니면 인접한 두 값을 선형 보간합니다.

    Args:
        numbers (Sequence[float]): 수치 데이터
        percentile (float): 백분위 (0~100)

    Returns:
        float: 백분위수 (빈 데이터는 0.0)

    Raises:
        ValueError: percentile이 0~100 범위를 벗어날 때

    Examples:
        >>> calculate_percentile([1, 2, 3, 4, 5], 50)
        3.0
        >>> calculate_percentile([1, 2, 3, 4], 50)
        2.5
    """
    if not 0 <= percentile <= 100:
        raise ValueError(f"백분위는 0~100 사이여야 합니다. (입력값: {percentile})")

    values = to_sample(numbers)
    if values.size == 0:
        return 0.0

    return float(np.percentile(values, percentile))


def calculate_z_score(value: float, mean: float, standard_deviation: float) -> float:
    """
    Z-점수를 계산합니다.

    Args:
        value (float): 대상 값
        mean (float): 평균
        standard_deviation (float): 표준편차

    Returns:
        float: (value - mean) / standard_deviation (표준편차가 0이면 0.0)
    """
    if standard_deviation == 0:
        return 0.0
    return (value - mean) / standard_deviation


def normalize_array(numbers: Sequence[float]) -> List[float]:
    """
    최소-최대 정규화로 값을 [0, 1] 범위로 변환합니다.

    Args:
        numbers (Sequence[float]): 수치 데이터

    Returns:
        List[float]: 정규화된 값 (범위가 0이면 모두 0.0)

    Examples:
        >>> normalize_array([10, 20, 30])
        [0.0, 0.5, 1.0]
    """
    values = to_sample(numbers)
    if values.size == 0:
        return []

    minimum = values.min()
    value_range = values.max() - minimum

    if value_range == 0:
        return [0.0] * int(values.size)

    return ((values - minimum) / value_range).tolist()


def interpolate(start: float, end: float, factor: float) -> float:
    """두 값 사이를 선형 보간합니다. factor는 [0, 1]로 제한됩니다."""
    return start + (end - start) * clamp(factor, 0, 1)
