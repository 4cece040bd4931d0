import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from gitmoji_helper.config.loader import (
    Configuration,
    ConfigurationStore,
    EmojiFormat,
    render_emoji_format,
)
from gitmoji_helper.errors import ParseError, StorageError


class TestConfigurationStore(unittest.TestCase):
    """Tests for loading and saving the settings file."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_file = Path(self._tmp.name) / "settings" / "config.json"
        self.store = ConfigurationStore(self.config_file)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, data) -> None:
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else json.dumps(data)
        self.config_file.write_text(text, encoding="utf-8")

    def test_load_missing_file_returns_defaults(self) -> None:
        config = self.store.load()
        self.assertEqual(config, Configuration())
        self.assertFalse(config.auto_stage)
        self.assertIs(config.emoji_format, EmojiFormat.CODE)
        self.assertFalse(config.scope_prompt)
        self.assertFalse(config.signed_commit)
        self.assertFalse(config.issue_prompt)
        self.assertFalse(self.config_file.exists())

    def test_save_then_load_round_trip(self) -> None:
        config = Configuration(
            auto_stage=True,
            emoji_format=EmojiFormat.GLYPH,
            scope_prompt=True,
            signed_commit=False,
            issue_prompt=True,
        )
        self.store.save(config)
        self.assertEqual(self.store.load(), config)

    def test_save_creates_directory_and_writes_named_keys(self) -> None:
        self.store.save(Configuration(emoji_format=EmojiFormat.GLYPH))
        data = json.loads(self.config_file.read_text(encoding="utf-8"))
        self.assertEqual(
            data,
            {
                "autoStage": False,
                "emojiFormat": "glyph",
                "scopePrompt": False,
                "signedCommit": False,
                "issuePrompt": False,
            },
        )

    def test_missing_keys_use_defaults(self) -> None:
        self._write({"signedCommit": True})
        self.assertEqual(self.store.load(), Configuration(signed_commit=True))

    def test_unknown_keys_are_ignored(self) -> None:
        self._write({"autoStage": True, "somethingElse": 3})
        self.assertEqual(self.store.load(), Configuration(auto_stage=True))

    def test_invalid_json_raises_parse_error(self) -> None:
        self._write("{invalid}")
        with self.assertRaises(ParseError):
            self.store.load()

    def test_invalid_utf8_raises_parse_error(self) -> None:
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_bytes(b'{"autoStage": \xff}')
        with self.assertRaises(ParseError):
            self.store.load()

    def test_non_object_raises_parse_error(self) -> None:
        self._write([1, 2, 3])
        with self.assertRaises(ParseError):
            self.store.load()

    def test_wrong_bool_type_raises_parse_error(self) -> None:
        self._write({"autoStage": "yes"})
        with self.assertRaises(ParseError) as cm:
            self.store.load()
        self.assertIn("'autoStage' must be a boolean", str(cm.exception))

    def test_unknown_emoji_format_raises_parse_error(self) -> None:
        self._write({"emojiFormat": "EMOJI"})
        with self.assertRaises(ParseError) as cm:
            self.store.load()
        self.assertIn("emojiFormat", str(cm.exception))

    def test_unreadable_file_raises_storage_error(self) -> None:
        self._write({})
        with patch("pathlib.Path.read_text", side_effect=PermissionError("denied")):
            with self.assertRaises(StorageError):
                self.store.load()

    def test_save_failure_raises_storage_error(self) -> None:
        with patch("pathlib.Path.mkdir", side_effect=PermissionError("denied")):
            with self.assertRaises(StorageError):
                self.store.save(Configuration())

    def test_accessors_reflect_external_changes(self) -> None:
        self.assertFalse(self.store.is_auto_stage())
        self._write({"autoStage": True, "emojiFormat": "glyph", "issuePrompt": True})
        self.assertTrue(self.store.is_auto_stage())
        self.assertIs(self.store.emoji_format(), EmojiFormat.GLYPH)
        self.assertTrue(self.store.is_issue_prompt_enabled())
        self.assertFalse(self.store.is_scope_prompt_enabled())
        self.assertFalse(self.store.is_signed_commit_enabled())
        self._write({"scopePrompt": True, "signedCommit": True})
        self.assertFalse(self.store.is_auto_stage())
        self.assertTrue(self.store.is_scope_prompt_enabled())
        self.assertTrue(self.store.is_signed_commit_enabled())


class TestRenderEmojiFormat(unittest.TestCase):
    def test_labels(self) -> None:
        self.assertEqual(render_emoji_format(EmojiFormat.CODE), ":smile:")
        self.assertEqual(render_emoji_format(EmojiFormat.GLYPH), "😄")


if __name__ == "__main__":
    unittest.main()
