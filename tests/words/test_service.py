"""Tests for WordListStore."""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import yaml

from send_no_evil.defaults import DEFAULT_FORBIDDEN_WORDS
from send_no_evil.exceptions import SettingsStoreError
from send_no_evil.words.models import ForbiddenWordList, PolicyFlags
from send_no_evil.words.service import WordListStore
from send_no_evil.words.store import MemorySettingsStore, SettingsStore, YamlSettingsStore


class TestLoad:
    def test_stored_words_and_flags(self) -> None:
        store = MemorySettingsStore(
            {
                "forbidden-words": ["secret", "draft"],
                "check-attachments": False,
                "check-message-body": True,
                "case-sensitive": True,
            }
        )
        words, flags = WordListStore(store).load()

        assert words.words == ("secret", "draft")
        assert not words.from_defaults
        assert flags == PolicyFlags(
            check_attachments=False, check_message_body=True, case_sensitive=True
        )

    def test_absent_words_use_defaults(self) -> None:
        words, flags = WordListStore(MemorySettingsStore()).load()

        assert words.words == DEFAULT_FORBIDDEN_WORDS
        assert words.words == (
            "confidential",
            "secret",
            "password",
            "private",
            "internal",
            "draft",
        )
        assert words.from_defaults
        assert flags == PolicyFlags()

    def test_empty_words_use_defaults(self) -> None:
        store = MemorySettingsStore({"forbidden-words": []})
        words, _ = WordListStore(store).load()
        assert words.words == DEFAULT_FORBIDDEN_WORDS

    def test_all_blank_words_use_defaults(self) -> None:
        store = MemorySettingsStore({"forbidden-words": ["", "  "]})
        words, _ = WordListStore(store).load()
        assert words.from_defaults

    def test_custom_default_words(self) -> None:
        words, _ = WordListStore(MemorySettingsStore(), default_words=["geheim"]).load()
        assert words.words == ("geheim",)

    def test_loaded_words_are_trimmed(self) -> None:
        store = MemorySettingsStore({"forbidden-words": [" secret ", "", "draft"]})
        words, _ = WordListStore(store).load()
        assert words.words == ("secret", "draft")

    def test_absent_flags_use_defaults(self) -> None:
        store = MemorySettingsStore({"forbidden-words": ["secret"], "case-sensitive": True})
        _, flags = WordListStore(store).load()
        assert flags.check_attachments is True
        assert flags.check_message_body is True
        assert flags.case_sensitive is True

    def test_no_store_is_fail_open(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            words, flags = WordListStore(None).load()

        assert len(words) == 0
        assert flags == PolicyFlags()
        assert "No config store available" in caplog.text

    def test_unreadable_store_is_fail_open(self, caplog: pytest.LogCaptureFixture) -> None:
        store = MagicMock(spec=SettingsStore)
        store.read_all.side_effect = SettingsStoreError("Cannot read config store")

        with caplog.at_level(logging.WARNING):
            words, flags = WordListStore(store).load()

        assert len(words) == 0
        assert flags == PolicyFlags()
        assert "Config store unavailable" in caplog.text

    def test_corrupt_yaml_store_is_fail_open(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("forbidden-words: [secret\n")
        words, _ = WordListStore(YamlSettingsStore(path)).load()
        assert len(words) == 0

    def test_load_reads_store_every_time(self) -> None:
        store = MemorySettingsStore({"forbidden-words": ["secret"]})
        service = WordListStore(store)
        assert service.load()[0].words == ("secret",)

        store.apply({"forbidden-words": ["draft"]})
        assert service.load()[0].words == ("draft",)

    def test_load_reads_yaml_file_once(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("forbidden-words: [secret]\ncase-sensitive: true\n")
        store = YamlSettingsStore(path)

        with patch.object(store, "_read_file", wraps=store._read_file) as read_file:
            words, flags = WordListStore(store).load()

        assert read_file.call_count == 1
        assert words.words == ("secret",)
        assert flags.case_sensitive is True

    def test_words_and_flags_come_from_one_snapshot(self) -> None:
        store = MagicMock(spec=SettingsStore)
        store.read_all.return_value = {
            "forbidden-words": ["secret"],
            "check-message-body": False,
        }

        words, flags = WordListStore(store).load()

        store.read_all.assert_called_once()
        assert words.words == ("secret",)
        assert flags.check_message_body is False


class TestSave:
    def test_saves_words_and_flags_then_syncs(self) -> None:
        store = MemorySettingsStore()
        words = ForbiddenWordList.from_words(["secret", "draft"])
        flags = PolicyFlags(check_attachments=False)

        WordListStore(store).save(words, flags)

        assert store.values == {
            "forbidden-words": ["secret", "draft"],
            "check-attachments": False,
            "check-message-body": True,
            "case-sensitive": False,
        }
        assert store.sync_count == 1

    def test_applies_all_keys_in_one_update(self) -> None:
        store = MagicMock(spec=SettingsStore)
        WordListStore(store).save(ForbiddenWordList.from_words(["secret"]), PolicyFlags())

        store.apply.assert_called_once()
        store.sync.assert_called_once()
        values = store.apply.call_args.args[0]
        assert set(values) == {
            "forbidden-words",
            "check-attachments",
            "check-message-body",
            "case-sensitive",
        }

    def test_blank_entries_are_dropped(self) -> None:
        store = MemorySettingsStore()
        words = ForbiddenWordList(entries=["secret", "", "  ", " draft "])
        WordListStore(store).save(words, PolicyFlags())
        assert store.values["forbidden-words"] == ["secret", "draft"]

    def test_round_trip_keeps_stored_words(self) -> None:
        store = MemorySettingsStore({"forbidden-words": ["secret", "", "secret", "Draft"]})
        service = WordListStore(store)

        service.save(*service.load())

        assert store.values["forbidden-words"] == ["secret", "secret", "Draft"]

    def test_round_trip_of_defaults_does_not_store_defaults(self) -> None:
        store = MemorySettingsStore({"case-sensitive": True})
        service = WordListStore(store)

        service.save(*service.load())

        assert "forbidden-words" not in store.values
        assert store.values["case-sensitive"] is True

    def test_edited_defaults_are_stored(self) -> None:
        store = MemorySettingsStore()
        service = WordListStore(store)
        words, flags = service.load()
        words.remove(0)

        service.save(words, flags)

        assert store.values["forbidden-words"] == list(DEFAULT_FORBIDDEN_WORDS[1:])

    def test_round_trip_through_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            "forbidden-words: [secret, '  ', draft]\n"
            "check-attachments: false\n"
        )
        service = WordListStore(YamlSettingsStore(path))

        service.save(*service.load())

        data = yaml.safe_load(path.read_text())
        assert data["forbidden-words"] == ["secret", "draft"]
        assert data["check-attachments"] is False

    def test_save_without_store_raises(self) -> None:
        with pytest.raises(SettingsStoreError):
            WordListStore(None).save(ForbiddenWordList(), PolicyFlags())

    def test_save_failure_propagates(self) -> None:
        store = MagicMock(spec=SettingsStore)
        store.sync.side_effect = SettingsStoreError("Cannot write config store")
        with pytest.raises(SettingsStoreError):
            WordListStore(store).save(ForbiddenWordList.from_words(["secret"]), PolicyFlags())
