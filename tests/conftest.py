"""
Shared fixtures: a small morpheme dictionary, in the same format as
data/vortaro.tsv.
"""
import pytest

from analizilo.vortaro import make_dictionary, reset_dictionary

TEST_VORTARO = """\
# morpheme part-of-speech meaning transitivity SF KF synthesis rarity flag
la ARTIKOLO N N SF N NO 0 R
mi PRONOMO N N SF KF NO 0 R
ne ADVERBO N N SF N P 0 R
for ADVERBO N N SF N P 0 R
dum PREPOZICIO N N SF N P 0 R
sen PREPOZICIO N N SF N P 0 R
antaux PREPOZICIO N N SF KF P 0 R
mis PREFIKSO N N N N P 1 R
mal PREFIKSO N N N N P 0 R
bo PREFIKSO N N N N P 1 R
ge PREFIKSO N N N N P 0 R
eks PREFIKSO N N N N P 1 R
hiper TEHXPREFIKSO N N N N P 2 R
it PARTICIPO N N N N PRT 0 R
int PARTICIPO N N N N PRT 0 R
acx SUFIKSO N N N N S 1 R
ajx SUFIKSO N N N KF S 0 R
ebl SUFIKSO N N N KF S 0 R
ej SUFIKSO LOKO N N KF S 0 R
estr SUFIKSO PERSONO N N KF S 0 R
et SUFIKSO N N N KF S 0 R
in SUFIKSO N N N KF S 0 R
obl SUFIKSO N N N KF S 1 R
ul SUFIKSO PERSONO N N KF S 0 R
du NUMERO N N SF KF NLM 0 R
dir VERBO N T N KF NLM 0 R
dorm VERBO N N N KF NLM 0 R
ir VERBO N N N KF LM 0 R
kur VERBO N N N KF NLM 0 R
lern VERBO N T N KF NLM 0 R
montr VERBO N T N KF NLM 0 R
perd VERBO N T N KF NLM 0 R
vid VERBO N T N KF NLM 0 R
edz SUBST PARENCO N N KF NLM 0 R
fingr SUBST ANATOMIO N N KF NLM 0 R
franc SUBST ETNO N N KF LM 0 R
hejm SUBST LOKO N N KF NLM 0 R
hund SUBST ANIMALO N N KF NLM 0 R
patr SUBST PARENCO N N KF LM 0 R
tabl SUBST N N N KF NLM 0 R
urb SUBST URBO N N KF NLM 0 R
vin SUBST TRINKAJXO N N KF NLM 0 R
aktiv ADJ N N N KF NLM 0 R
bon ADJ N N N KF NLM 0 R
cxiu.tag ADVERBO TAGO N N KF NLM 1 K
n-r.oj MALLONGIGO N N SF N NO 2 R
"""


@pytest.fixture
def vortaro():
    """The test dictionary."""
    return make_dictionary(TEST_VORTARO)


@pytest.fixture
def vortaro_file(tmp_path):
    """The test dictionary, written to a file."""
    path = tmp_path / "vortaro.tsv"
    path.write_text(TEST_VORTARO, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def fresh_dictionary_singleton():
    """Make sure no test sees a default dictionary loaded by another."""
    reset_dictionary()
    yield
    reset_dictionary()
