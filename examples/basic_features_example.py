#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Basic LIWC feature extraction example

This script demonstrates how to compute the feature vector of a short English
text using the sample dictionary included in this repository.

The vector holds structural features (words per sentence, long words,
punctuation) followed by one percentage per dictionary category and DIC,
the share of words found in the dictionary.
"""

import sys
from pathlib import Path

# Add parent directory to path to import liwc_features module
sys.path.insert(0, str(Path(__file__).parent.parent))

from liwc_features.core import load_liwc_cat, get_counts
from liwc_features.segment import tokenize, split_sentences

TEXT = (
    "I love talking with my friends! We met two times this week, "
    "and it was nice :-) Was it a bad idea to skip the gym? Maybe."
)


def main():
    print("=" * 70)
    print("LIWC Feature Extraction - Basic Example")
    print("=" * 70)

    # Step 1: Load and compile the sample dictionary
    print("\n[Step 1] Loading LIWC dictionary...")
    dic_path = Path(__file__).parent.parent / "sample_dictionary" / "sample_liwc.cat"
    dictionary = load_liwc_cat(dic_path)
    print(f"  ✓ Loaded {len(dictionary)} categories: {', '.join(dictionary.names)}")

    # Step 2: Segment the text
    print("\n[Step 2] Segmenting text...")
    words = tokenize(TEXT)
    sentences = split_sentences(TEXT)
    print(f"  ✓ {len(words)} words, {len(sentences)} sentences")

    # Step 3: Feature vector
    print("\n[Step 3] Computing features...")
    counts = get_counts(dictionary, TEXT, absolute_counts=True)

    print("\n" + "=" * 70)
    print("Results")
    print("=" * 70)
    for name, value in counts.items():
        if isinstance(value, int):
            print(f"  {name:15s}: {value}")
        else:
            print(f"  {name:15s}: {value:.4f}")


if __name__ == "__main__":
    main()
