"""
Utility functions for facetpivot.

This module provides utilities for handing output to the rendering
collaborator:
- serialization: JSON-ready dicts for pivot results, rankings and widget output
"""

from .serialization import (
    serialize,
    serialize_pivot,
    serialize_ranking,
    to_json,
)

__all__ = [
    'serialize',
    'serialize_pivot',
    'serialize_ranking',
    'to_json',
]
