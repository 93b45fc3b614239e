# -*- coding: utf-8 -*-
"""
Heavy initialization for child processes (LIWC dictionary), and single file processing.
Intended to be imported from parent process (runner.py).

◎ Roles
- Initialize each child process (load and compile the LIWC dictionary once)
- Compute the feature vector per file (read text → tokenize/split → structure + categories → dictify)
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

from .core import EmptyInputError, LIWCDictionary, get_counts, load_liwc_cat
from .segment import tokenize, split_sentences


@dataclass
class FeatureConfig:
    absolute_counts: bool = False  # Add raw word count (WC) as first feature
    numbers_policy: str = "error"  # error | skip (dictionary without NUMBERS)
    encoding: str = "utf-8"        # Encoding of the input text files
    verbose: bool = False          # Print token/sentence counts per file


# ---- Resources shared within child process (process-wide global) ----
_WORKER_DICTIONARY: Optional[LIWCDictionary] = None
_WORKER_CONFIG = FeatureConfig()
_WORKER_DIC_BASENAME = None


def init_worker(dic_path: str, config: Optional[FeatureConfig] = None):
    """
    Called once at each process startup. Load and compile the dictionary here.
    Dictionary errors propagate so the pool fails instead of producing empty rows.
    """
    global _WORKER_DICTIONARY, _WORKER_CONFIG, _WORKER_DIC_BASENAME

    _WORKER_CONFIG = config or FeatureConfig()
    _WORKER_DICTIONARY = load_liwc_cat(dic_path)
    _WORKER_DIC_BASENAME = os.path.basename(dic_path)
    print(f"[INFO] LIWC dictionary loaded ({len(_WORKER_DICTIONARY)} lexical categories)", file=sys.stderr)


def read_text(file_path, encoding: str = "utf-8") -> str:
    with open(file_path, encoding=encoding) as f:
        return f.read()


def subject_id(file_path) -> str:
    """Subject identifier = file name without extension."""
    return Path(file_path).stem


def process_file(file_path: str) -> Optional[Dict[str, Any]]:
    """
    Compute the feature vector of a single file and return it as a record.
    Files without any word are skipped (None); other errors propagate.
    """
    assert _WORKER_DICTIONARY is not None, "init_worker() must run first"
    cfg = _WORKER_CONFIG

    text = read_text(file_path, encoding=cfg.encoding)
    if cfg.verbose:
        print(f"[INFO] {os.path.basename(file_path)}: {len(tokenize(text))} words, "
              f"{len(split_sentences(text))} sentences", file=sys.stderr)

    try:
        counts = get_counts(
            _WORKER_DICTIONARY,
            text,
            absolute_counts=cfg.absolute_counts,
            numbers_policy=cfg.numbers_policy,
        )
    except EmptyInputError:
        print(f"[WARN] {file_path}: no words, skipped", file=sys.stderr)
        return None

    rec: Dict[str, Any] = {"subject": subject_id(file_path)}
    rec.update(counts)
    # --- Additional metadata ---
    rec["file_path"] = str(file_path)
    rec["dic_filename"] = _WORKER_DIC_BASENAME
    return rec
