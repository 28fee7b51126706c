from mcpathgen.utils.utils import OptionType, as_option_type, exercise_payoff
from mcpathgen.utils.linalg import check_correlation_matrix, pseudo_sqrt
from mcpathgen.utils.decorators.timing import timeit

__all__ = [
    "OptionType",
    "as_option_type",
    "exercise_payoff",
    "check_correlation_matrix",
    "pseudo_sqrt",
    "timeit",
]
