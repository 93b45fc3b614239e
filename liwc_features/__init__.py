# liwc_features/__init__.py
from .workers import FeatureConfig, init_worker, process_file
from .segment import tokenize, split_sentences
from .core import (
    LIWCError, DictionaryNotFound, DictionaryFormatError, EmptyInputError, MissingNumbersCategoryError,
    LIWCDictionary, load_liwc_cat, parse_liwc_cat, build_category_pattern,
    count_structure, count_categories, apply_numbers_adjustment, build_feature_vector, get_counts,
)
__all__ = ["FeatureConfig", "init_worker", "process_file",
           "tokenize", "split_sentences",
           "LIWCError", "DictionaryNotFound", "DictionaryFormatError", "EmptyInputError",
           "MissingNumbersCategoryError",
           "LIWCDictionary", "load_liwc_cat", "parse_liwc_cat", "build_category_pattern",
           "count_structure", "count_categories", "apply_numbers_adjustment",
           "build_feature_vector", "get_counts"]
