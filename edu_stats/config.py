"""
설정 모듈

통계 엔진 전반에서 사용하는 기본 설정값(채점 기준, 반올림 자릿수 등)을 제공합니다.
"""

from typing import Any, Mapping, Optional


# ═══════════════════════════════════════════════════════════════════
# 기본 설정 (읽기 전용)
# ═══════════════════════════════════════════════════════════════════

DEFAULT_CONFIG = {
    # ============= 채점 기준 =============
    'grading': {
        'max_score': 100,
        'passing_score': 60,
        # 등급별 하한 (하한 포함)
        'letter_cutoffs': {
            'A': 90,
            'B': 80,
            'C': 70,
            'D': 60,
        },
        'fallback_letter': 'F',
        # 점수 구간 라벨 (등급 순서와 동일)
        'distribution_labels': ['90-100', '80-89', '70-79', '60-69', '0-59'],
    },

    # ============= 반올림 =============
    'rounding': {
        'percentage_precision': 2,
        'equation_precision': 4,
        'table_precision': 2,
    },
}


def get_config(path: str, default=None, config: Optional[Mapping[str, Any]] = None):
    """
    설정에서 값을 안전하게 가져옵니다.

    Args:
        path (str): 점으로 구분된 키 경로
        default: 경로가 없을 때 반환할 값
        config (Optional[Mapping]): 조회할 설정 (기본값: DEFAULT_CONFIG)

    Returns:
        경로에 해당하는 설정값 또는 default

    사용 예시:
        get_config('grading.passing_score')          → 60
        get_config('rounding.equation_precision')    → 4
        get_config('grading.unknown', 0)             → 0
    """
    value = DEFAULT_CONFIG if config is None else config

    for key in path.split('.'):
        if isinstance(value, Mapping) and key in value:
            value = value[key]
        else:
            return default

    return value
