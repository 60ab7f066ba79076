"""Shared fixtures: small Hunspell dictionaries written to tmp_path."""

from pathlib import Path

import pytest

TEST_AFF = """\
SET UTF-8
TRY esianrtolcdugmphbyfvkwz
KEEPCASE K
FORBIDDENWORD F
NEEDAFFIX X
NOSUGGEST !

REP 1
REP f ph

PFX U Y 1
PFX U   0     un         .

SFX S Y 3
SFX S   y     ies        [^aeiou]y
SFX S   0     s          [aeiou]y
SFX S   0     s          [^y]

SFX D Y 2
SFX D   0     d          e
SFX D   0     ed         [^e]

SFX G Y 2
SFX G   e     ing        e
SFX G   0     ing        [^e]
"""

TEST_DIC = """\
28
a
he
she
go/GS
to
the
market/S
walk/DGS
happy/U
city/S
cat/S
sat
on
mat/S
macOS/K
colour/F
wiki/XS
phone/DGS
damn/!
good
this
is
very
it
was
nice
fine
eaten
"""


@pytest.fixture
def english_files(tmp_path: Path) -> tuple[Path, Path]:
    """Write the test .dic/.aff pair; return (dic, aff)."""
    dic = tmp_path / "test_EN.dic"
    aff = tmp_path / "test_EN.aff"
    dic.write_text(TEST_DIC, encoding="utf-8")
    aff.write_text(TEST_AFF, encoding="utf-8")
    return dic, aff


@pytest.fixture
def custom_words(tmp_path: Path) -> Path:
    """A flat project word list."""
    path = tmp_path / "words.txt"
    path.write_text("# project vocabulary\nKubernetes\nproofreader\n", encoding="utf-8")
    return path
