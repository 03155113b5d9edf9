"""
교육 통계 엔진 패키지

이 패키지는 성적, 참여도 등 수치 데이터를 대시보드와 리포트용으로 요약하는 통계 계산 기능을 제공합니다.

Modules:
    - statistics: 기술통계 (평균, 중앙값, 최빈값, 분산, 표준편차)
    - distribution: 백분율, 백분위수, Z-점수, 정규화
    - regression: 상관계수, 단순 선형회귀, 유클리드 거리
    - grades: 성적 백분율/등급 변환 및 성적 분포 집계
    - data_loader: DataFrame → 통계 입력 변환
    - models: 결과 레코드
    - config: 기본 설정
"""

__version__ = "1.0.0"
