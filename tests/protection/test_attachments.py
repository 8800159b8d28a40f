"""Tests for attachment filename scanning."""

from unittest.mock import MagicMock

from send_no_evil.email.models import BaseAttachment, ComposerAttachment
from send_no_evil.protection.attachments import scan_attachment_names


def _attachment(path: str | None) -> ComposerAttachment:
    return ComposerAttachment(path=path)


class TestScanAttachmentNames:
    def test_matches_basename(self) -> None:
        result = scan_attachment_names(
            [_attachment("/home/user/confidential-report.pdf")], ["confidential"]
        )
        assert result.word == "confidential"
        assert result.filename == "confidential-report.pdf"

    def test_directory_names_are_not_scanned(self) -> None:
        result = scan_attachment_names(
            [_attachment("/srv/secret/holiday.jpg")], ["secret"]
        )
        assert not result.matched

    def test_windows_style_paths(self) -> None:
        result = scan_attachment_names(
            [_attachment("C:\\Users\\me\\Private\\notes.txt")], ["private"]
        )
        assert not result.matched

    def test_case_insensitive_by_default(self) -> None:
        result = scan_attachment_names([_attachment("DRAFT_v2.docx")], ["draft"])
        assert result.word == "draft"

    def test_case_sensitive(self) -> None:
        result = scan_attachment_names(
            [_attachment("DRAFT_v2.docx")], ["draft"], case_sensitive=True
        )
        assert not result.matched

    def test_unresolvable_attachment_is_skipped(self) -> None:
        attachments = [_attachment(None), _attachment("/tmp/secret.txt")]
        result = scan_attachment_names(attachments, ["secret"])
        assert result.filename == "secret.txt"

    def test_stops_at_first_match(self) -> None:
        first = MagicMock(spec=BaseAttachment)
        first.resolve_file.return_value = "/tmp/internal.txt"
        second = MagicMock(spec=BaseAttachment)
        second.resolve_file.return_value = "/tmp/secret.txt"

        result = scan_attachment_names([first, second], ["secret", "internal"])

        assert result.word == "internal"
        assert result.filename == "internal.txt"
        second.resolve_file.assert_not_called()

    def test_word_order_applies_within_one_filename(self) -> None:
        result = scan_attachment_names(
            [_attachment("secret-password.txt")], ["password", "secret"]
        )
        assert result.word == "password"

    def test_no_attachments(self) -> None:
        assert not scan_attachment_names([], ["secret"]).matched

    def test_empty_word_list(self) -> None:
        attachment = MagicMock(spec=BaseAttachment)
        result = scan_attachment_names([attachment], [])
        assert not result.matched
        attachment.resolve_file.assert_not_called()

    def test_clean_attachments(self) -> None:
        attachments = [_attachment("/tmp/a.pdf"), _attachment("/tmp/b.png")]
        assert not scan_attachment_names(attachments, ["secret"]).matched
