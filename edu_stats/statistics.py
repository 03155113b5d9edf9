"""
기술통계 계산 모듈

성적, 참여도 등 수치 데이터의 기술통계량(평균, 중앙값, 최빈값, 분산, 표준편차 등)을 계산하는 기능을 제공합니다.
"""

import logging

import pandas as pd
import numpy as np
from typing import FrozenSet, Sequence

from edu_stats.models import DescriptiveStats

logger = logging.getLogger(__name__)


def to_sample(numbers: Sequence[float]) -> np.ndarray:
    """
    수치 시퀀스를 1차원 float 배열로 변환합니다.

    Args:
        numbers (Sequence[float]): 리스트, 튜플, pd.Series 등 수치 시퀀스

    Returns:
        np.ndarray: float64 1차원 배열 (원본은 변경되지 않음)
    """
    return np.asarray(numbers, dtype=float).ravel()


def calculate_mean(numbers: Sequence[float]) -> float:
    """
    평균을 계산합니다.

    Args:
        numbers (Sequence[float]): 수치 데이터

    Returns:
        float: 산술평균 (빈 데이터는 0.0)

    Examples:
        >>> calculate_mean([1, 2, 3, 4])
        2.5
    """
    values = to_sample(numbers)
    if values.size == 0:
        return 0.0
    return float(values.sum() / values.size)


def calculate_median(numbers: Sequence[float]) -> float:
    """
    중앙값을 계산합니다.

    데이터 개수가 짝수이면 가운데 두 값의 평균을 반환합니다.

    Args:
        numbers (Sequence[float]): 수치 데이터

    Returns:
        float: 중앙값 (빈 데이터는 0.0)

    Examples:
        >>> calculate_median([5, 1, 3])
        3.0
        >>> calculate_median([1, 2, 3, 4])
        2.5
    """
    values = to_sample(numbers)
    if values.size == 0:
        return 0.0
    return float(np.median(values))


def calculate_mode(numbers: Sequence[float]) -> FrozenSet[float]:
    """
    최빈값을 계산합니다.

    최대 빈도를 갖는 값이 여러 개이면 모두 반환합니다.

    Args:
        numbers (Sequence[float]): 수치 데이터

    Returns:
        FrozenSet[float]: 최빈값 집합 (빈 데이터는 빈 집합)

    Examples:
        >>> calculate_mode([1, 2, 2, 3, 3])
        frozenset({2.0, 3.0})
    """
    values = to_sample(numbers)
    if values.size == 0:
        return frozenset()

    counts = pd.Series(values).value_counts()
    top = counts[counts == counts.max()]
    return frozenset(float(v) for v in top.index)


def calculate_variance(numbers: Sequence[float], is_population: bool = False) -> float:
    """
    분산을 계산합니다.

    Args:
        numbers (Sequence[float]): 수치 데이터
        is_population (bool): True면 모분산(n으로 나눔), False면 표본분산(n-1로 나눔)

    Returns:
        float: 분산 (빈 데이터는 0.0)

    Raises:
        ValueError: 표본분산인데 데이터가 1개뿐일 때

    Examples:
        >>> calculate_variance([2, 4, 4, 4, 5, 5, 7, 9], is_population=True)
        4.0
    """
    values = to_sample(numbers)
    if values.size == 0:
        return 0.0

    if not is_population and values.size == 1:
        raise ValueError("표본분산은 데이터가 2개 이상이어야 합니다. (is_population=True로 모분산을 사용하세요)")

    ddof = 0 if is_population else 1
    return float(np.var(values, ddof=ddof))


def calculate_standard_deviation(numbers: Sequence[float], is_population: bool = False) -> float:
    """
    표준편차를 계산합니다. 분산의 제곱근이며 전제조건은 calculate_variance와 같습니다.

    Raises:
        ValueError: 표본표준편차인데 데이터가 1개뿐일 때
    """
    return float(np.sqrt(calculate_variance(numbers, is_population)))


def calculate_descriptive_stats(
    numbers: Sequence[float],
    is_population: bool = False
) -> DescriptiveStats:
    """
    기술통계량 전체를 한 번에 계산합니다.

    Args:
        numbers (Sequence[float]): 수치 데이터
        is_population (bool): 분산/표준편차를 모분산 기준으로 계산할지 여부 (기본값: 표본분산)

    Returns:
        DescriptiveStats: 평균, 중앙값, 최빈값, 최소/최대, 범위, 분산, 표준편차, 개수, 합계

    Note:
        - 빈 데이터는 모든 수치가 0, 최빈값은 빈 집합입니다.
        - 데이터가 1개이면 분산과 표준편차를 0으로 보고합니다.

    Examples:
        >>> stats = calculate_descriptive_stats([2, 4, 4, 4, 5, 5, 7, 9], is_population=True)
        >>> stats.mean, stats.standard_deviation
        (5.0, 2.0)
    """
    values = to_sample(numbers)
    if values.size == 0:
        return DescriptiveStats()

    if values.size == 1:
        logger.debug("단일 값 데이터: 분산과 표준편차를 0으로 보고합니다.")
        variance = 0.0
    else:
        variance = calculate_variance(values, is_population)

    minimum = float(values.min())
    maximum = float(values.max())

    return DescriptiveStats(
        mean=calculate_mean(values),
        median=calculate_median(values),
        mode=calculate_mode(values),
        min=minimum,
        max=maximum,
        range=maximum - minimum,
        variance=variance,
        standard_deviation=float(np.sqrt(variance)),
        count=int(values.size),
        sum=float(values.sum())
    )
