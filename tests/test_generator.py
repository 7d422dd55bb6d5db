import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from wordgrid.core.exceptions import ConfigurationError, DictionaryReadError, ValidationError
from wordgrid.data.dictionary import build_index
from wordgrid.engine.generator import GeneratorConfig, WordGridGenerator
from wordgrid.engine.validator import GridValidator


class GeneratorConfigTests(unittest.TestCase):
    def test_rejects_non_positive_dimensions(self) -> None:
        for width, height in ((0, 3), (3, 0), (-1, 2), (2, -5)):
            with self.subTest(width=width, height=height):
                with self.assertRaises(ConfigurationError):
                    GeneratorConfig(width=width, height=height).validate()

    def test_rejects_more_cells_than_letters(self) -> None:
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(width=9, height=3).validate()

    def test_accepts_full_alphabet(self) -> None:
        GeneratorConfig(width=13, height=2).validate()
        GeneratorConfig(width=1, height=26).validate()

    def test_dictionary_config_carries_flags(self) -> None:
        config = GeneratorConfig(
            width=4,
            height=3,
            dictionary_path="words.txt",
            strip_apostrophes=False,
            restrict_short_words=False,
        )
        dictionary_config = config.to_dictionary_config()
        self.assertEqual((dictionary_config.width, dictionary_config.height), (4, 3))
        self.assertEqual(dictionary_config.path, "words.txt")
        self.assertFalse(dictionary_config.strip_apostrophes)
        self.assertFalse(dictionary_config.restrict_short_words)


class WordGridGeneratorTests(unittest.TestCase):
    def test_configuration_error_precedes_dictionary_access(self) -> None:
        with patch("wordgrid.engine.generator.load_index") as load_index:
            with self.assertRaises(ConfigurationError):
                WordGridGenerator(GeneratorConfig(width=9, height=3, dictionary_path="/nonexistent"))
            load_index.assert_not_called()

    def test_missing_dictionary_raises_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            config = GeneratorConfig(width=2, height=2, dictionary_path=Path(tmpdir) / "absent")
            with self.assertRaises(DictionaryReadError):
                WordGridGenerator(config)

    def test_generate_from_dictionary_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "words"
            sample.write_text("at\nok\nao\ntk\n", encoding="utf-8")
            config = GeneratorConfig(
                width=2, height=2, dictionary_path=sample, restrict_short_words=False
            )
            generator = WordGridGenerator(config)
            self.assertEqual(list(generator.generate()), [("AO", "TK"), ("AT", "OK")])

    def test_generate_can_be_restarted(self) -> None:
        index = build_index(["AT", "OK", "AO", "TK"], 2, 2, restrict_short_words=False)
        generator = WordGridGenerator(GeneratorConfig(width=2, height=2), index=index)
        self.assertEqual(list(generator.generate()), list(generator.generate()))

    def test_run_invokes_callback_per_grid(self) -> None:
        index = build_index(["AT", "OK", "AO", "TK"], 2, 2, restrict_short_words=False)
        config = GeneratorConfig(width=2, height=2, validate_grids=True)
        seen = []
        count = WordGridGenerator(config, index=index).run(seen.append)
        self.assertEqual(count, 2)
        self.assertEqual(seen, [("AO", "TK"), ("AT", "OK")])

    def test_invalid_grid_is_reported_when_validating(self) -> None:
        index = build_index(["AT", "OK", "AO", "TK"], 2, 2, restrict_short_words=False)
        config = GeneratorConfig(width=2, height=2, validate_grids=True)
        generator = WordGridGenerator(config, index=index)
        with patch("wordgrid.engine.generator.search", return_value=iter([("AT", "TO")])):
            with self.assertRaises(ValidationError):
                list(generator.generate())


class GridValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        index = build_index(["ABC", "DEF", "GHI", "ADG", "BEH", "CFI", "ABD"], 3, 3)
        self.validator = GridValidator(index)

    def test_valid_grid(self) -> None:
        result = self.validator.validate(("ABC", "DEF", "GHI"))
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_wrong_shape(self) -> None:
        self.assertFalse(self.validator.validate(("ABC", "DEF")).ok)
        self.assertFalse(self.validator.validate(("ABC", "DE", "GHI")).ok)

    def test_invalid_letters(self) -> None:
        result = self.validator.validate(("abc", "DEF", "GHI"))
        self.assertFalse(result.ok)
        self.assertIn("Invalid letters", result.messages[0])

    def test_repeated_letter(self) -> None:
        result = self.validator.validate(("ABC", "ABD", "GHI"))
        self.assertFalse(result.ok)
        self.assertIn("repeats", result.messages[0])

    def test_unknown_row(self) -> None:
        result = self.validator.validate(("ABC", "DEF", "GHJ"))
        self.assertFalse(result.ok)
        self.assertIn("row candidate", result.messages[0])

    def test_unknown_column(self) -> None:
        result = self.validator.validate(("ADG", "BEH", "CFI"))
        self.assertTrue(result.ok)
        result = self.validator.validate(("GHI", "DEF", "ABC"))
        self.assertFalse(result.ok)
        self.assertIn("Column 0 'GDA'", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
