"""
노선망 모델 및 경로 탐색 알고리즘
"""

from app.algorithms.network import MetroNetwork
from app.algorithms.route_resolver import RouteResolver

__all__ = [
    "MetroNetwork",
    "RouteResolver",
]
