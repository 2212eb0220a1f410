import os
import tempfile
import unittest
from pathlib import Path

from endstone_rulez.utils.config_util import (
    RULES_DEFAULT,
    RULES_FILENAME,
    prepare_data_folder,
    read_rules,
)


class PrepareDataFolderTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.data_folder = Path(self._tmp.name) / "plugins" / "rulez"

    def test_creates_folder_and_default_rules(self):
        path = prepare_data_folder(self.data_folder)

        self.assertEqual(path, os.path.join(str(self.data_folder), RULES_FILENAME))
        self.assertTrue(self.data_folder.is_dir())
        self.assertEqual(Path(path).read_text(encoding="utf-8"), RULES_DEFAULT)

    def test_default_rules_are_multi_line(self):
        self.assertGreater(len(RULES_DEFAULT.splitlines()), 1)

    def test_existing_rules_are_not_overwritten(self):
        self.data_folder.mkdir(parents=True)
        rules = self.data_folder / RULES_FILENAME
        rules.write_text("Be kind.", encoding="utf-8")

        prepare_data_folder(self.data_folder)
        prepare_data_folder(self.data_folder)

        self.assertEqual(rules.read_text(encoding="utf-8"), "Be kind.")

    def test_loading_twice_is_idempotent(self):
        first = prepare_data_folder(self.data_folder)
        second = prepare_data_folder(self.data_folder)

        self.assertEqual(first, second)
        self.assertEqual(read_rules(second), RULES_DEFAULT)

    def test_unwritable_location_is_ignored(self):
        blocker = Path(self._tmp.name) / "not_a_dir"
        blocker.write_text("", encoding="utf-8")

        path = prepare_data_folder(blocker / "rulez")

        self.assertTrue(path.endswith(RULES_FILENAME))
        self.assertIsNone(read_rules(path))


class ReadRulesTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / RULES_FILENAME

    def test_returns_exact_content(self):
        content = "§6Rules\r\n1. No griefing\n\n2. ❤\n"
        self.path.write_bytes(content.encode("utf-8"))

        self.assertEqual(read_rules(str(self.path)), content)

    def test_missing_file(self):
        self.assertIsNone(read_rules(str(self.path)))

    def test_directory_instead_of_file(self):
        self.path.mkdir()
        self.assertIsNone(read_rules(str(self.path)))

    def test_invalid_utf8(self):
        self.path.write_bytes(b"\xff\xfe\xfa broken")
        self.assertIsNone(read_rules(str(self.path)))


if __name__ == "__main__":
    unittest.main()
