"""
성적 집계 모듈

원점수를 백분율과 등급(A~F)으로 변환하고, 합격률과 점수 구간별 분포를 계산합니다.
"""

import pandas as pd
import numpy as np
from typing import Dict, List, Optional, Sequence

from edu_stats.config import get_config
from edu_stats.distribution import calculate_percentage
from edu_stats.models import GradeStats
from edu_stats.statistics import calculate_descriptive_stats, to_sample


def _letter_cutoffs() -> Dict[str, float]:
    # 하한이 높은 등급부터
    cutoffs = get_config('grading.letter_cutoffs', {})
    return dict(sorted(cutoffs.items(), key=lambda item: item[1], reverse=True))


def get_letter_order() -> List[str]:
    """등급 순서를 반환합니다. 예: ['A', 'B', 'C', 'D', 'F']"""
    return list(_letter_cutoffs()) + [get_config('grading.fallback_letter', 'F')]


def _assign_letters(percentages: np.ndarray) -> pd.Series:
    """
    백분율 배열을 등급으로 구간화합니다. 각 구간은 하한을 포함합니다. ([60, 70) → 'D')
    """
    letters = get_letter_order()
    cutoffs = _letter_cutoffs()

    bins = [-np.inf] + sorted(cutoffs.values()) + [np.inf]
    labels = list(reversed(letters))

    return pd.Series(pd.cut(percentages, bins=bins, labels=labels, right=False))


def score_to_percentage(score: float, max_score: float) -> float:
    """
    원점수를 백분율로 변환합니다.

    Examples:
        >>> score_to_percentage(45, 50)
        90.0
    """
    return calculate_percentage(score, max_score)


def percentage_to_letter_grade(percentage: float) -> str:
    """
    백분율을 등급으로 변환합니다.

    Args:
        percentage (float): 백분율 점수

    Returns:
        str: 'A' (90 이상), 'B' (80 이상), 'C' (70 이상), 'D' (60 이상), 'F' (그 외)

    Examples:
        >>> percentage_to_letter_grade(90)
        'A'
        >>> percentage_to_letter_grade(59.99)
        'F'
    """
    for letter, cutoff in _letter_cutoffs().items():
        if percentage >= cutoff:
            return letter
    return get_config('grading.fallback_letter', 'F')


def calculate_grade_stats(
    scores: Sequence[float],
    max_score: Optional[float] = None,
    passing_score: Optional[float] = None
) -> GradeStats:
    """
    학급 성적 통계를 계산합니다.

    모든 원점수를 백분율로 변환한 뒤 평균, 중앙값, 최고/최저점, 합격률,
    점수 구간별 분포와 등급별 인원을 집계합니다.

    Args:
        scores (Sequence[float]): 원점수 목록
        max_score (Optional[float]): 만점 (기본값: grading.max_score = 100)
        passing_score (Optional[float]): 합격 기준 백분율 (기본값: grading.passing_score = 60, 이상이면 합격)

    Returns:
        GradeStats: 성적 통계

    Note:
        - 빈 데이터는 모든 수치가 0이며, 분포와 등급 딕셔너리는 모든 키를 0으로 포함합니다.
        - 구간: '90-100', '80-89', '70-79', '60-69', '0-59' (100% 초과는 '90-100'에 포함)

    Examples:
        >>> stats = calculate_grade_stats([95, 85, 72, 58], 100, 60)
        >>> stats.pass_rate
        75.0
        >>> stats.distribution
        {'90-100': 1, '80-89': 1, '70-79': 1, '60-69': 0, '0-59': 1}
    """
    if max_score is None:
        max_score = get_config('grading.max_score', 100)
    if passing_score is None:
        passing_score = get_config('grading.passing_score', 60)

    letters = get_letter_order()
    labels = get_config('grading.distribution_labels')
    values = to_sample(scores)

    if values.size == 0:
        return GradeStats(
            average=0.0,
            median=0.0,
            highest=0.0,
            lowest=0.0,
            pass_rate=0.0,
            distribution={label: 0 for label in labels},
            letter_grades={letter: 0 for letter in letters}
        )

    percentages = np.array([score_to_percentage(score, max_score) for score in values])
    stats = calculate_descriptive_stats(percentages)

    # 합격률
    pass_count = int((percentages >= passing_score).sum())
    pass_rate = calculate_percentage(pass_count, percentages.size)

    # 등급별 인원 (구간 분포와 같은 경계 사용)
    letter_counts = _assign_letters(percentages).astype(str).value_counts().reindex(letters, fill_value=0)
    letter_grades = {letter: int(letter_counts[letter]) for letter in letters}
    distribution = {label: letter_grades[letter] for label, letter in zip(labels, letters)}

    return GradeStats(
        average=stats.mean,
        median=stats.median,
        highest=stats.max,
        lowest=stats.min,
        pass_rate=pass_rate,
        distribution=distribution,
        letter_grades=letter_grades
    )


def calculate_letter_grade_table(scores: Sequence[float], max_score: Optional[float] = None) -> pd.DataFrame:
    """
    등급별 통계표를 계산합니다.

    Args:
        scores (Sequence[float]): 원점수 목록
        max_score (Optional[float]): 만점 (기본값: grading.max_score = 100)

    Returns:
        pd.DataFrame: 등급별 통계 (등급, 학생수, 비율(%), 평균(%), 표준편차)

    Note:
        - 학생이 없는 등급도 0으로 포함합니다.
        - 학생이 1명인 등급의 표준편차는 0입니다.

    Examples:
        >>> table = calculate_letter_grade_table([95, 92, 85, 58])
        >>> print(table)
          등급  학생수  비율(%)  평균(%)  표준편차
        0    A     2    50.0   93.50  2.12
        1    B     1    25.0   85.00  0.00
        ...
    """
    if max_score is None:
        max_score = get_config('grading.max_score', 100)

    values = to_sample(scores)
    percentages = pd.Series([score_to_percentage(score, max_score) for score in values], dtype=float)
    grades = _assign_letters(percentages.to_numpy()).astype(str)

    stat_list = []
    for letter in get_letter_order():
        subset = percentages[(grades == letter).to_numpy()]

        stat_dict = {
            '등급': letter,
            '학생수': len(subset),
            '비율(%)': calculate_percentage(len(subset), len(percentages)),
            '평균(%)': subset.mean(),
            '표준편차': subset.std()
        }
        stat_list.append(stat_dict)

    precision = get_config('rounding.table_precision', 2)
    return pd.DataFrame(stat_list).fillna(0).round(precision)
