# liwc_features/tests/conftest.py
import textwrap
import pytest

from liwc_features.core import load_liwc_cat


def _cat(text):
    # LIWC.CAT needs literal TABs; fixtures use "|" for readability
    return textwrap.dedent(text).replace("|", "\t")


@pytest.fixture
def liwc_cat_text():
    """
    Minimal LIWC.CAT-like dictionary (POSEMO, EMPTY, NUMBERS, PRONOUN).
    Headers are one TAB + name, members two TABs + word + "(id)". Includes wildcard (*).
    """
    return _cat("""\
        |POSEMO
        ||happy* (13)
        ||good (13)
        |EMPTY
        |NUMBERS
        ||one (24)
        ||two (24)
        |PRONOUN
        ||i (1)
        ||we (1)
    """)


@pytest.fixture
def liwc_cat_path(tmp_path, liwc_cat_text):
    p = tmp_path / "mini.cat"
    p.write_text(liwc_cat_text, encoding="utf-8")
    return str(p)


@pytest.fixture
def dictionary(liwc_cat_path):
    return load_liwc_cat(liwc_cat_path)
