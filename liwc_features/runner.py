# -*- coding: utf-8 -*-
"""
LIWC feature extraction script (parallel, CSV/JSON save)
Example execution:
python -m liwc_features.runner \
  --dic ./sample_dictionary/sample_liwc.cat \
  --input ./essays \
  --results ./results/liwc \
  --procs 8 --chunksize 8

Single text (vector printed to stdout):
python -m liwc_features.runner --dic ./sample_dictionary/sample_liwc.cat --text essay.txt
"""

import os
import sys
import json
import argparse
from pathlib import Path
from typing import List, Dict, Any, Optional
import platform
import multiprocessing as mp
import numpy as np
import pandas as pd

from .core import NUMBERS_POLICIES
# Child process side processing
from .workers import FeatureConfig, init_worker, process_file

# ---- Settings ----
DEFAULT_PATTERN = "*.txt"
DEFAULT_PREFIX = "liwc_features"
ID_COLUMNS = ["subject"]
META_COLUMNS = ["file_path", "dic_filename"]


def get_ctx():
    """Determine start method based on platform. Use fork on Linux."""
    return mp.get_context("fork" if platform.system() == "Linux" else "spawn")


def discover_subject_files(input_dir: str, pattern: str = DEFAULT_PATTERN) -> List[str]:
    """One text file per subject, sorted by name for a stable row order."""
    root = Path(input_dir)
    if not root.is_dir():
        raise NotADirectoryError(f"Input directory not found: {input_dir}")
    return [str(p) for p in sorted(root.glob(pattern)) if p.is_file()]


def _ensure_finite(df: pd.DataFrame) -> None:
    """Check that every feature column holds finite numbers."""
    feature_cols = [c for c in df.columns if c not in ID_COLUMNS + META_COLUMNS]
    values = df[feature_cols].to_numpy(dtype=float)
    bad = ~np.isfinite(values)
    if bad.any():
        rows, cols = np.nonzero(bad)
        examples = [(df.iloc[r]["subject"], feature_cols[c]) for r, c in zip(rows[:5], cols[:5])]
        raise ValueError(f"Non-finite feature values ({int(bad.sum())} cells). Example: {examples}")


def save_results(df: pd.DataFrame, results_dir: str, prefix: str = DEFAULT_PREFIX) -> Dict[str, str]:
    """Save rounded CSV, full precision CSV and JSON records. Return written paths."""
    _ensure_finite(df)
    Path(results_dir).mkdir(parents=True, exist_ok=True)
    paths = {
        "csv": os.path.join(results_dir, f"{prefix}.csv"),
        "csv_full": os.path.join(results_dir, f"{prefix}_full.csv"),
        "json": os.path.join(results_dir, f"{prefix}.json"),
    }
    df.to_csv(paths["csv"], index=False, float_format="%.6f")
    df.to_csv(paths["csv_full"], index=False)
    df.to_json(paths["json"], orient="records", indent=2)
    for p in paths.values():
        print(f"[OK] saved: {p} ({len(df)} rows)", file=sys.stderr)
    return paths


def run_features_parallel(files: List[str],
                          dic_path: str,
                          results_dir: str,
                          procs: int,
                          chunksize: int,
                          config: Optional[FeatureConfig] = None,
                          prefix: str = DEFAULT_PREFIX) -> Optional[pd.DataFrame]:
    if not files:
        print("[INFO] No input files", file=sys.stderr)
        return None

    print(f"[INFO] {len(files)} files / {procs} processes (chunksize={chunksize})", file=sys.stderr)

    ctx = get_ctx()
    rows: List[Dict[str, Any]] = []

    with ctx.Pool(
        processes=procs,
        initializer=init_worker,
        initargs=(dic_path, config or FeatureConfig()),
    ) as pool:
        # imap keeps input order, so rows follow the sorted file list
        for i, rec in enumerate(pool.imap(process_file, files, chunksize=chunksize), 1):
            if rec:
                rows.append(rec)
            if i % 50 == 0:
                print(f"[INFO] processed {i}/{len(files)}", file=sys.stderr)

    if not rows:
        print("[INFO] No successful records", file=sys.stderr)
        return None

    df = pd.DataFrame(rows)
    # Features first, metadata last
    df = df[[c for c in df.columns if c not in META_COLUMNS] + META_COLUMNS]
    save_results(df, results_dir, prefix=prefix)
    return df


def run_single_text(text_path: str, dic_path: str, config: Optional[FeatureConfig] = None) -> Optional[Dict[str, Any]]:
    """Analyze one corpus file in-process and print its vector as JSON."""
    init_worker(dic_path, config)
    rec = process_file(text_path)
    if rec is not None:
        print(json.dumps(rec, indent=2))
    return rec


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="LIWC feature extraction batch runner")
    parser.add_argument("--dic", type=str, required=True,
                        help="Path to LIWC dictionary file (LIWC.CAT format)")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--input", type=str,
                     help="Directory with one text file per subject")
    src.add_argument("--text", type=str,
                     help="Single text file (vector printed to stdout)")
    parser.add_argument("--pattern", type=str, default=DEFAULT_PATTERN,
                        help=f"Glob for subject files (default: {DEFAULT_PATTERN})")
    parser.add_argument("--results", type=str, default="./results",
                        help="CSV/JSON output directory")
    parser.add_argument("--prefix", type=str, default=DEFAULT_PREFIX,
                        help="Output file name prefix")
    parser.add_argument("--procs", type=int, default=max(1, mp.cpu_count() - 1),
                        help="Number of parallel processes")
    parser.add_argument("--chunksize", type=int, default=8,
                        help="chunksize for imap")
    parser.add_argument("--absolute", action="store_true",
                        help="Include the raw word count (WC)")
    parser.add_argument("--numbers-policy", choices=NUMBERS_POLICIES, default="error",
                        help="What to do when the dictionary has no NUMBERS category")
    parser.add_argument("--encoding", type=str, default="utf-8",
                        help="Encoding of the input text files")
    parser.add_argument("--verbose", action="store_true",
                        help="Print word/sentence counts per file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    dic_path = str(Path(args.dic).resolve())
    config = FeatureConfig(
        absolute_counts=args.absolute,
        numbers_policy=args.numbers_policy,
        encoding=args.encoding,
        verbose=args.verbose,
    )

    if args.text:
        rec = run_single_text(args.text, dic_path, config)
        return 0 if rec is not None else 1

    results_dir = str(Path(args.results).resolve())
    print(f"[INFO] dictionary      : {dic_path}", file=sys.stderr)
    print(f"[INFO] input_dir       : {args.input}", file=sys.stderr)
    print(f"[INFO] results_dir     : {results_dir}", file=sys.stderr)

    files = discover_subject_files(args.input, args.pattern)
    df = run_features_parallel(
        files,
        dic_path=dic_path,
        results_dir=results_dir,
        procs=args.procs,
        chunksize=args.chunksize,
        config=config,
        prefix=args.prefix,
    )
    return 0 if df is not None else 1


if __name__ == "__main__":
    sys.exit(main())
