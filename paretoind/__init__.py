"""Quality indicators for multi-objective optimisation: hypervolume,
hypervolume contributions, epsilon, generational distances and set
dominance, with command-line tools for epsilon, IGD and dominance counts."""

__version__ = "0.1.0"

__all__ = [
    "avltree",
    "contrib",
    "dominance",
    "epsilon",
    "epsilon_cli",
    "hv",
    "igd",
    "igd_cli",
    "io",
]