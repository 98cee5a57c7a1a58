# ABOUTME: Search package for the multi-criteria species query ("dexsearch").
# ABOUTME: Contains the token classifier, category accumulator, evaluator, formatter, and engine.

from dexsearch.search.categories import EVALUATION_ORDER, Category, CategoryKind, QueryState
from dexsearch.search.classifier import classify_token, parse_query, requests_all, split_query
from dexsearch.search.engine import DexSearchEngine
from dexsearch.search.evaluator import QueryEvaluator, ResultSet
from dexsearch.search.formatter import ResultFormatter, hidden_count

__all__ = [
    "EVALUATION_ORDER",
    "Category",
    "CategoryKind",
    "DexSearchEngine",
    "QueryEvaluator",
    "QueryState",
    "ResultFormatter",
    "ResultSet",
    "classify_token",
    "hidden_count",
    "parse_query",
    "requests_all",
    "split_query",
]
