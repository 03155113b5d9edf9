"""
데이터 로더 모듈

대시보드/리포트에서 넘겨받은 표 형식 데이터(DataFrame)를 통계 엔진 입력(수치 목록, DataPoint 목록)으로 변환합니다.
"""

import logging

import pandas as pd
import numpy as np
from typing import List, Optional

from edu_stats.models import DataPoint

logger = logging.getLogger(__name__)


def extract_scores(df: pd.DataFrame, score_col: str = 'Total_Score') -> List[float]:
    """
    점수 컬럼을 수치 목록으로 변환합니다.

    숫자로 변환할 수 없는 값(빈 칸, '결시' 등)은 제외합니다.

    Args:
        df (pd.DataFrame): 학생 데이터
        score_col (str): 점수 컬럼명 (기본값: 'Total_Score')

    Returns:
        List[float]: 점수 목록

    Raises:
        KeyError: 점수 컬럼이 없을 때

    Examples:
        >>> df = pd.DataFrame({'Total_Score': [95, '결시', '72']})
        >>> extract_scores(df)
        [95.0, 72.0]
    """
    scores = pd.to_numeric(df[score_col], errors='coerce')
    dropped = int(scores.isna().sum())

    if dropped:
        logger.warning("'%s' 컬럼에서 숫자가 아닌 값 %d개를 제외했습니다.", score_col, dropped)

    return scores.dropna().astype(float).tolist()


def extract_data_points(df: pd.DataFrame, x_col: str, y_col: str) -> List[DataPoint]:
    """
    두 컬럼을 (x, y) 점 목록으로 변환합니다.

    Args:
        df (pd.DataFrame): 데이터
        x_col (str): x 컬럼명 (예: 출석률)
        y_col (str): y 컬럼명 (예: 총점)

    Returns:
        List[DataPoint]: 두 값이 모두 숫자인 행만 포함한 점 목록

    Examples:
        >>> df = pd.DataFrame({'Attendance': [90, 80, None], 'Total_Score': [88, 75, 60]})
        >>> extract_data_points(df, 'Attendance', 'Total_Score')
        [DataPoint(x=90.0, y=88.0), DataPoint(x=80.0, y=75.0)]
    """
    pairs = pd.DataFrame({
        'x': pd.to_numeric(df[x_col], errors='coerce'),
        'y': pd.to_numeric(df[y_col], errors='coerce')
    })
    complete = pairs.dropna()

    dropped = len(pairs) - len(complete)
    if dropped:
        logger.warning("'%s'/'%s' 컬럼에서 불완전한 행 %d개를 제외했습니다.", x_col, y_col, dropped)

    return [DataPoint(x=float(x), y=float(y)) for x, y in complete.itertuples(index=False)]


def generate_random_numbers(
    count: int,
    min_value: int = 0,
    max_value: int = 100,
    seed: Optional[int] = None
) -> List[int]:
    """
    범위 내의 임의 정수 목록을 생성합니다. (샘플 대시보드용)

    Args:
        count (int): 생성할 개수 (0 이하이면 빈 목록)
        min_value (int): 최솟값 (포함)
        max_value (int): 최댓값 (포함)
        seed (Optional[int]): 난수 시드 (재현용)

    Returns:
        List[int]: 임의 정수 목록
    """
    if count <= 0:
        return []

    rng = np.random.default_rng(seed)
    return rng.integers(min_value, max_value, size=count, endpoint=True).tolist()
