"""
Tests for loading the morpheme dictionary.
"""
import logging
import tempfile
import unittest
from pathlib import Path

from analizilo import config
from analizilo.checker import check_word
from analizilo.entry import Flag, PartOfSpeech, Synthesis
from analizilo.vortaro import (
    Dictionary,
    get_dictionary,
    load_dictionary,
    make_dictionary,
    make_key,
    reset_dictionary,
)

DATA = """\
# A comment line

hund\tSUBST\tANIMALO\tN\tN\tKF\tNLM\t0\tR
cxiu.tag\tADVERBO\tTAGO\tN\tN\tKF\tNLM\t1\tK
n-r.oj\tMALLONGIGO\tN\tN\tSF\tN\tNO\t2\tR
b\tLITERO\tN\tN\tSF\tN\tNO\t0\tR
laut\tADJ\tN\tN\tN\tKF\tNLM\t0\tX
kat\tSUBST\tMAMULO
"""


class TestMakeKey(unittest.TestCase):

    def test_keys(self):
        self.assertEqual(make_key("cxiu.tag"), "ĉiutag")
        self.assertEqual(make_key("Esperant"), "esperant")
        self.assertEqual(make_key("n-r.oj"), "n-roj")


class TestDictionary(unittest.TestCase):

    def setUp(self):
        self.vortaro = make_dictionary(DATA)

    def test_entries(self):
        self.assertEqual(len(self.vortaro), 3)
        self.assertIn("hund", self.vortaro)
        self.assertEqual(self.vortaro["hund"].part_of_speech, PartOfSpeech.SUBSTANTIVE)
        self.assertEqual(self.vortaro.get("ĉiutag").word, "ĉiu.tag")
        self.assertEqual(self.vortaro.get("n-roj").synthesis, Synthesis.NO)
        self.assertEqual(sorted(self.vortaro), ["hund", "n-roj", "ĉiutag"])

    def test_unknown_key(self):
        self.assertIsNone(self.vortaro.get("kat"))
        with self.assertRaises(KeyError):
            self.vortaro["kat"]

    def test_single_letters_and_excluded_rows_left_out(self):
        self.assertNotIn("b", self.vortaro)
        self.assertNotIn("laut", self.vortaro)

    def test_row_with_unknown_flag_is_kept(self):
        vortaro = make_dictionary("hund SUBST ANIMALO N N KF NLM 0 Q\n")
        entry = vortaro.get("hund")
        self.assertIsNotNone(entry)
        self.assertEqual(entry.flag, Flag.EXCLUDE)
        self.assertEqual(vortaro.skipped_rows, 0)

    def test_malformed_rows_skipped_and_logged(self):
        with self.assertLogs("analizilo.vortaro", level=logging.WARNING) as logs:
            vortaro = make_dictionary(DATA)
        self.assertEqual(vortaro.skipped_rows, 1)
        self.assertIn("kat", logs.output[0])

    def test_empty_data(self):
        vortaro = Dictionary.from_text("")
        self.assertEqual(len(vortaro), 0)
        self.assertEqual(vortaro.skipped_rows, 0)


class TestLoading(unittest.TestCase):

    def setUp(self):
        reset_dictionary()
        self.test_dir = tempfile.mkdtemp()
        self.path = Path(self.test_dir) / "vortaro.tsv"
        self.path.write_text(DATA, encoding="utf-8")

    def tearDown(self):
        reset_dictionary()
        import shutil
        shutil.rmtree(self.test_dir)

    def test_load_file(self):
        vortaro = load_dictionary(self.path)
        self.assertEqual(len(vortaro), 3)
        self.assertEqual(vortaro.source, str(self.path))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_dictionary(Path(self.test_dir) / "missing.tsv")

    def test_singleton(self):
        """get_dictionary() loads the configured file once."""
        from unittest.mock import patch
        with patch.dict("os.environ", {config.DICTIONARY_ENV_VAR: str(self.path)}):
            first = get_dictionary()
            second = get_dictionary()
        self.assertIs(first, second)
        reset_dictionary()
        with patch.dict("os.environ", {config.DICTIONARY_ENV_VAR: str(self.path)}):
            self.assertIsNot(get_dictionary(), first)


class TestShippedDictionary(unittest.TestCase):
    """The dictionary in data/ loads cleanly and analyzes common words."""

    @classmethod
    def setUpClass(cls):
        cls.vortaro = load_dictionary(config.DEFAULT_DICTIONARY_PATH)

    def test_loads_without_errors(self):
        self.assertGreater(len(self.vortaro), 100)
        self.assertEqual(self.vortaro.skipped_rows, 0)

    def test_words(self):
        for word, divided in [
            ("hundoj", "hund.oj"),
            ("misdirita", "mis.dir.it.a"),
            ("malbona", "mal.bon.a"),
            ("Esperantisto", "Esperant.ist.o"),
            ("lernejo", "lern.ej.o"),
            ("ĉiutage", "ĉiu.tag.e"),
            ("fingromontri", "fingr.o.montr.i"),
        ]:
            result = check_word(word, self.vortaro)
            self.assertTrue(result.valid, word)
            self.assertEqual(result.word, divided)

    def test_misspelled(self):
        self.assertFalse(check_word("dormita", self.vortaro).valid)
        self.assertFalse(check_word("hundpatro", self.vortaro).valid)


if __name__ == '__main__':
    unittest.main()
