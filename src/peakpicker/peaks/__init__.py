from .gradient import gradient
from .locate_peak import locate_peak
from .nearest import (
    find_nearest_points, nearest,
)

__all__ = [
    'gradient',
    'locate_peak',
    'find_nearest_points', 'nearest',
]
