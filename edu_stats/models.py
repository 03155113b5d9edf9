"""
결과 레코드 모듈

통계 엔진이 반환하는 값 객체(불변 데이터클래스)를 정의합니다.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping


@dataclass(frozen=True)
class DescriptiveStats:
    mean: float = 0.0
    median: float = 0.0
    mode: FrozenSet[float] = field(default_factory=frozenset)
    min: float = 0.0
    max: float = 0.0
    range: float = 0.0
    variance: float = 0.0
    standard_deviation: float = 0.0
    count: int = 0
    sum: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """직렬화용 딕셔너리를 반환합니다. 최빈값은 정렬된 리스트로 변환됩니다."""
        return {
            'mean': self.mean,
            'median': self.median,
            'mode': sorted(self.mode),
            'min': self.min,
            'max': self.max,
            'range': self.range,
            'variance': self.variance,
            'standardDeviation': self.standard_deviation,
            'count': self.count,
            'sum': self.sum,
        }


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float

    @classmethod
    def from_mapping(cls, data: Mapping[str, float]) -> 'DataPoint':
        """
        {'x': ..., 'y': ...} 형태의 매핑에서 DataPoint를 생성합니다.

        Examples:
            >>> DataPoint.from_mapping({'x': 1, 'y': 3})
            DataPoint(x=1.0, y=3.0)
        """
        return cls(x=float(data['x']), y=float(data['y']))

    def to_dict(self) -> Dict[str, float]:
        return {'x': self.x, 'y': self.y}


@dataclass(frozen=True)
class LinearRegressionResult:
    slope: float
    intercept: float
    r_squared: float
    equation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'slope': self.slope,
            'intercept': self.intercept,
            'rSquared': self.r_squared,
            'equation': self.equation,
        }


@dataclass(eq=True, frozen=True)
class GradeStats:
    average: float
    median: float
    highest: float
    lowest: float
    pass_rate: float
    distribution: Mapping[str, int]
    letter_grades: Mapping[str, int]

    def __post_init__(self):
        # 분포 딕셔너리는 읽기 전용 사본으로 보관
        object.__setattr__(self, 'distribution', MappingProxyType(dict(self.distribution)))
        object.__setattr__(self, 'letter_grades', MappingProxyType(dict(self.letter_grades)))

    def __hash__(self):
        return hash((
            self.average,
            self.median,
            self.highest,
            self.lowest,
            self.pass_rate,
            frozenset(self.distribution.items()),
            frozenset(self.letter_grades.items()),
        ))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'average': self.average,
            'median': self.median,
            'highest': self.highest,
            'lowest': self.lowest,
            'passRate': self.pass_rate,
            'distribution': dict(self.distribution),
            'letterGrades': dict(self.letter_grades),
        }
