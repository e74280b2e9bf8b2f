"""
Type definitions for exported sweep results
"""

from typing import TypedDict, List, Optional


class StepDict(TypedDict):
    """Structure for one state along a route"""
    row: int
    col: int
    heading: str
    remaining: int


class SweepRowDict(TypedDict):
    """Structure for one sweep result"""
    start_row: int
    start_col: int
    heading: str
    remaining: int
    target_row: int
    target_col: int
    reachable: bool
    cost: Optional[int]
    path_length: Optional[int]
    settled: Optional[int]
    path: List[StepDict]
