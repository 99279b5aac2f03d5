from .errors import DivisionByZeroError, InvalidInputError, MathError, MathFault, OverflowFault
from .config import FaultCheckConfig, get_fault_check_config, set_fault_check_config
from .trigonom import (
    archimedes,
    cosine_law,
    cross,
    cross3d,
    cross_from_line,
    cross_from_three_points,
    cross_law,
    dilatation,
    dot,
    dot3d,
    quadrance,
    quadrance3d,
    quadrance_from_line,
    quadrance_from_three_points,
    quadrance_from_three_points3d,
    sine_law_product,
    spread,
    spread3d,
    spread_from_line,
    spread_from_three_points,
    spread_from_three_points3d,
    spreads_from_quadrances,
    triple_spread,
    turn,
)
from .safe import (
    safe_cosine_law,
    safe_dilatation,
    safe_quadrance_from_line,
    safe_spread,
    safe_spread3d,
    safe_spread_from_line,
    safe_spread_from_three_points,
    safe_turn,
)
from .validation import (
    are_collinear,
    are_lines_parallel,
    are_lines_perpendicular,
    is_acute_triangle,
    is_obtuse_triangle,
    is_right_triangle,
    is_valid_quadrance,
    is_valid_spread,
    is_valid_triangle,
    point_in_triangle,
    point_on_line,
    satisfies_triangle_inequality,
)
from .geometry import Line2D, Point2D, Point3D, Triangle2D, Triangle3D, Vector2D, Vector3D
from .fixed import F64, I32, I64, I128, U32, U64, U128, WIDTHS, FixedWidth, get_width
from .logging_utils import instrument

__version__ = "0.3.0"

__all__ = [
    'DivisionByZeroError',
    'InvalidInputError',
    'MathError',
    'MathFault',
    'OverflowFault',
    'FaultCheckConfig',
    'get_fault_check_config',
    'set_fault_check_config',
    'archimedes',
    'cosine_law',
    'cross',
    'cross3d',
    'cross_from_line',
    'cross_from_three_points',
    'cross_law',
    'dilatation',
    'dot',
    'dot3d',
    'quadrance',
    'quadrance3d',
    'quadrance_from_line',
    'quadrance_from_three_points',
    'quadrance_from_three_points3d',
    'sine_law_product',
    'spread',
    'spread3d',
    'spread_from_line',
    'spread_from_three_points',
    'spread_from_three_points3d',
    'spreads_from_quadrances',
    'triple_spread',
    'turn',
    'safe_cosine_law',
    'safe_dilatation',
    'safe_quadrance_from_line',
    'safe_spread',
    'safe_spread3d',
    'safe_spread_from_line',
    'safe_spread_from_three_points',
    'safe_turn',
    'are_collinear',
    'are_lines_parallel',
    'are_lines_perpendicular',
    'is_acute_triangle',
    'is_obtuse_triangle',
    'is_right_triangle',
    'is_valid_quadrance',
    'is_valid_spread',
    'is_valid_triangle',
    'point_in_triangle',
    'point_on_line',
    'satisfies_triangle_inequality',
    'Line2D',
    'Point2D',
    'Point3D',
    'Triangle2D',
    'Triangle3D',
    'Vector2D',
    'Vector3D',
    'F64',
    'I32',
    'I64',
    'I128',
    'U32',
    'U64',
    'U128',
    'WIDTHS',
    'FixedWidth',
    'get_width',
    'instrument',
]
