from .actions import ACTION_TABLE, ActionTemplate
from .catalog import CATALOG_VERSION, Check, EntryCheck, FieldCheck, format_minutes
from .cv_catalog import CV_CATALOG
from .evaluator import Finding, catalog_for, evaluate_completeness, fields_by_importance
from .jd_catalog import JD_CATALOG
from .ranking import rank_priority_actions
from .scoring import MAX_SCORE, aggregate_score

__all__ = [
    "ACTION_TABLE",
    "ActionTemplate",
    "CATALOG_VERSION",
    "Check",
    "EntryCheck",
    "FieldCheck",
    "CV_CATALOG",
    "JD_CATALOG",
    "Finding",
    "catalog_for",
    "evaluate_completeness",
    "fields_by_importance",
    "format_minutes",
    "rank_priority_actions",
    "MAX_SCORE",
    "aggregate_score",
]
