"""strongwolfe - a strong Wolfe line search for gradient-based optimizers.

Example
-------
>>> from strongwolfe import FunctionObjective, LineSearchConfig, StrongWolfeLineSearch
>>> objective = FunctionObjective(lambda a: a * a - 2 * a, lambda a: 2 * a - 2)
>>> config = LineSearchConfig.builder(objective, f0=0.0, slope0=-2.0).c2(0.9).build()
>>> StrongWolfeLineSearch(config).search()
1.0
"""

__version__ = "0.1.0"

from .config import LineSearchConfig, LineSearchConfigBuilder
from .core import (
    ALPHA_MIN,
    DELTA_MAX,
    GRADIENT_TOLERANCE,
    MAX_UPDATE_ITERATIONS,
    InvalidConfiguration,
    LineSearchResult,
    ScalarObjective,
    Status,
    curvature_condition,
    satisfies_strong_wolfe,
    sufficient_decrease,
)
from .interpolation import (
    cubic_minimum,
    quadratic_minimum,
    secant_minimum,
    three_point_minimum,
)
from .line_search import StrongWolfeLineSearch, trial_value, wolfe_line_search
from .logging import configure_logging, get_logger, set_log_level
from .objectives import FunctionObjective, RayObjective, TorchRayObjective

__all__ = [
    "__version__",
    # Configuration
    "InvalidConfiguration",
    "LineSearchConfig",
    "LineSearchConfigBuilder",
    # Core types
    "ALPHA_MIN",
    "DELTA_MAX",
    "GRADIENT_TOLERANCE",
    "MAX_UPDATE_ITERATIONS",
    "LineSearchResult",
    "ScalarObjective",
    "Status",
    "curvature_condition",
    "satisfies_strong_wolfe",
    "sufficient_decrease",
    # Interpolation
    "cubic_minimum",
    "quadratic_minimum",
    "secant_minimum",
    "three_point_minimum",
    # Line search
    "StrongWolfeLineSearch",
    "trial_value",
    "wolfe_line_search",
    # Objectives
    "FunctionObjective",
    "RayObjective",
    "TorchRayObjective",
    # Logging
    "configure_logging",
    "get_logger",
    "set_log_level",
]
