"""
party_core package: roster models, scoring, history, solvers, scheduling, IO, and validation.
"""
__all__ = [
    "models",
    "constants",
    "config",
    "history",
    "scoring",
    "assignment",
    "solver_heuristic",
    "leaders",
    "matchups",
    "scheduler",
    "fairness",
    "validation",
    "export_text",
    "io",
    "cli",
]
