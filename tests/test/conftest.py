"""
Pytest 설정 및 공통 Fixture
"""

import copy
import sys
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from app.algorithms.network import MetroNetwork  # noqa: E402
from app.algorithms.route_resolver import RouteResolver  # noqa: E402
from app.db.metro_data import METRO_DATA  # noqa: E402


# 테스트용 작은 노선망
#
#   1호선: A - X - M - Y - B
#   2호선: C - X - N - Y - D
#   3호선: E - D - G
#
# X, Y: 1/2호선 환승역 (M -> N은 X, Y 어느 쪽이든 3개 역)
# D: 2/3호선 환승역 => 1호선 <-> 3호선은 환승 2회 필요
SYNTHETIC_DATA = {
    "stations": {
        "A": {"line": 1, "interchange": False},
        "X": {"line": 1, "interchange": True},
        "M": {"line": 1, "interchange": False},
        "Y": {"line": 1, "interchange": True},
        "B": {"line": 1, "interchange": False},
        "C": {"line": 2, "interchange": False},
        "N": {"line": 2, "interchange": False},
        "D": {"line": 2, "interchange": True},
        "E": {"line": 3, "interchange": False},
        "G": {"line": 3, "interchange": False},
    },
    "lines": {
        1: ["A", "X", "M", "Y", "B"],
        2: ["C", "X", "N", "Y", "D"],
        3: ["E", "D", "G"],
    },
    "interchanges": {
        "X": [1, 2],
        "Y": [1, 2],
        "D": [2, 3],
    },
}


@pytest.fixture
def patna_data():
    """Patna Metro 원본 데이터 (수정 가능한 복사본)"""
    return copy.deepcopy(METRO_DATA)


@pytest.fixture
def synthetic_data():
    """테스트용 노선 데이터 (수정 가능한 복사본)"""
    return copy.deepcopy(SYNTHETIC_DATA)


@pytest.fixture
def patna_network(patna_data):
    return MetroNetwork.from_dict(patna_data)


@pytest.fixture
def synthetic_network(synthetic_data):
    return MetroNetwork.from_dict(synthetic_data)


@pytest.fixture
def patna_resolver(patna_network):
    return RouteResolver(patna_network)


@pytest.fixture
def synthetic_resolver(synthetic_network):
    return RouteResolver(synthetic_network)


@pytest.fixture
def line1_stations():
    """1호선 역 순서"""
    return list(METRO_DATA["lines"][1])


@pytest.fixture
def line2_stations():
    """2호선 역 순서"""
    return list(METRO_DATA["lines"][2])
