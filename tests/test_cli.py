"""Tests for the CLI module."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from scholarflow.cli import main


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)


def mock_gemini(mock_client_class):
    mock_client = MagicMock()
    mock_client.__enter__ = MagicMock(return_value=mock_client)
    mock_client.__exit__ = MagicMock(return_value=False)
    mock_client.is_configured = True
    mock_client_class.return_value = mock_client
    return mock_client


class TestCLIMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: scholarflow" in capsys.readouterr().out

    def test_unknown_role_is_rejected(self):
        with pytest.raises(SystemExit):
            main(["journals", "--role", "superuser"])


class TestCLIJournals:
    """Tests for the journals and journal commands."""

    def test_lists_directory(self, capsys):
        assert main(["journals"]) == 0

        out = capsys.readouterr().out
        for title in ("Journal of Advanced Artificial Intelligence", "Global Economics Quarterly"):
            assert title in out
        assert "Admin:" not in out

    def test_editor_sees_edit_action(self, capsys):
        assert main(["journals", "--role", "editor"]) == 0

        out = capsys.readouterr().out
        assert "Actions: edit" in out
        assert "Admin:" not in out

    def test_guest_sees_no_edit_action(self, capsys):
        assert main(["journals"]) == 0

        assert "Actions:" not in capsys.readouterr().out

    def test_field_filter(self, capsys):
        assert main(["journals", "--field", "Medicine"]) == 0

        out = capsys.readouterr().out
        assert "[j2] Modern Medical Research" in out
        assert "[j1]" not in out

    def test_unknown_field(self, caplog):
        assert main(["journals", "--field", "Astrology"]) == 1
        assert "Unknown field: Astrology" in caplog.text

    def test_admin_sees_admin_actions(self, capsys):
        assert main(["journals", "--role", "admin"]) == 0

        assert "Admin: logs, users, create-journal" in capsys.readouterr().out

    def test_journal_issues_newest_first(self, capsys):
        assert main(["journal", "j1"]) == 0

        out = capsys.readouterr().out
        assert out.index("Vol. 12, Issue 1 (2024)") < out.index("Vol. 11, Issue 4 (2023)")

    def test_editor_journal_actions(self, capsys):
        assert main(["journal", "j1", "--role", "editor"]) == 0

        assert "Actions:   edit, create" in capsys.readouterr().out

    def test_journal_not_found(self, caplog):
        assert main(["journal", "j99"]) == 1
        assert "Journal not found" in caplog.text


class TestCLIIssueAndArticle:
    """Tests for the issue and article commands."""

    def test_issue_title_sort(self, capsys):
        assert main(["issue", "i1", "--sort", "title"]) == 0

        out = capsys.readouterr().out
        assert out.index("[a2]") < out.index("[a1]")
        assert "Actions" not in out

    def test_editor_issue_actions(self, capsys):
        assert main(["issue", "i1", "--role", "editor"]) == 0

        out = capsys.readouterr().out
        assert "Actions: edit, delete\n" in out
        assert "Actions: edit, delete, withdraw" in out

    def test_issue_not_found(self, caplog):
        assert main(["issue", "i99"]) == 1
        assert "Issue not found" in caplog.text

    def test_article(self, capsys):
        assert main(["article", "a3"]) == 0

        out = capsys.readouterr().out
        assert "CRISPR Advances in 2023" in out
        assert "Modern Medical Research" in out
        assert "AI Generated Summary" not in out

    def test_article_not_found(self, caplog):
        assert main(["article", "a99"]) == 1
        assert "Article not found" in caplog.text

    def test_summary_without_key(self, capsys):
        assert main(["article", "a1", "--summarize"]) == 0

        assert "API Key not configured." in capsys.readouterr().out

    def test_summary_with_bad_timeout_setting(self, monkeypatch, capsys, caplog):
        """A malformed numeric setting falls back instead of crashing."""
        monkeypatch.setenv("GEMINI_TIMEOUT", "abc")

        assert main(["article", "a1", "--summarize"]) == 0

        assert "API Key not configured." in capsys.readouterr().out
        assert "Ignoring GEMINI_TIMEOUT='abc'" in caplog.text

    @patch("scholarflow.cli.GeminiClient")
    def test_summary(self, mock_client_class, capsys):
        client = mock_gemini(mock_client_class)
        client.summarize.return_value = "Transformers help small languages."

        assert main(["article", "a1", "--summarize", "--api-key", "k"]) == 0

        assert "Transformers help small languages." in capsys.readouterr().out
        assert mock_client_class.call_args.args[0]["api_key"] == "k"


class TestCLISearch:
    """Tests for the search command."""

    def test_query(self, capsys):
        assert main(["search", "--query", "CRISPR"]) == 0

        out = capsys.readouterr().out
        assert "[a3] CRISPR Advances in 2023" in out
        assert "[a1]" not in out

    def test_date_desc(self, capsys):
        assert main(["search", "--sort", "date_desc"]) == 0

        out = capsys.readouterr().out
        assert out.index("[a2]") < out.index("[a1]") < out.index("[a3]")

    def test_journal_by_title(self, capsys):
        assert main(["search", "--journal", "Modern Medical Research"]) == 0

        out = capsys.readouterr().out
        assert "Journals: Modern Medical Resea..." in out
        assert "[a3]" in out
        assert "[a2]" not in out

    def test_unknown_journal(self, caplog):
        assert main(["search", "--journal", "j99"]) == 1
        assert "Journal not found: j99" in caplog.text

    def test_guest_cannot_filter_unpublished(self, caplog, capsys):
        assert main(["search", "--status", "pending"]) == 0

        assert "cannot filter on pending" in caplog.text
        assert "Status:   published" in capsys.readouterr().out

    def test_editor_filters_unpublished(self, capsys):
        assert main(["search", "--role", "editor", "--status", "pending"]) == 0

        out = capsys.readouterr().out
        assert "Status:   pending" in out
        assert "No results found." in out


class TestCLISemanticSearch:
    """Tests for the semantic-search command."""

    @patch("scholarflow.cli.GeminiClient")
    def test_matched(self, mock_client_class, capsys):
        client = mock_gemini(mock_client_class)
        client.semantic_match.return_value = ["Quantum Physics Review"]

        assert main(["semantic-search", "the nature of reality"]) == 0

        out = capsys.readouterr().out
        assert "AI search matched 1 journal(s)." in out
        assert "[j3]" in out
        assert "[j1]" not in out

    @patch("scholarflow.cli.GeminiClient")
    def test_none(self, mock_client_class, capsys):
        client = mock_gemini(mock_client_class)
        client.semantic_match.return_value = []

        assert main(["semantic-search", "poetry"]) == 0

        assert "No journals found." in capsys.readouterr().out

    def test_unavailable_keeps_keyword_matches(self, capsys, caplog):
        assert main(["semantic-search", "quantum"]) == 0

        out = capsys.readouterr().out
        assert "AI search unavailable; showing keyword matches." in out
        assert "[j3]" in out
        assert "unavailable" in caplog.text


class TestCLIPages:
    """Tests for profile, admin, faq and about pages."""

    def test_guest_has_no_profile(self, caplog):
        assert main(["profile"]) == 1

    def test_author_profile(self, capsys):
        assert main(["profile", "--role", "author"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Dr. Jane Smith\n")
        assert "[a1] Transformer Architectures" in out

    def test_author_profile_by_loosely_typed_name(self, capsys):
        assert main(["profile", "--role", "author", "--user", "  dr.  jane SMITH "]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Dr. Jane Smith\n")
        assert "[a1] Transformer Architectures" in out

    def test_editor_profile_lists_managed_journals(self, capsys):
        assert main(["profile", "--role", "editor"]) == 0

        out = capsys.readouterr().out
        assert "Managed Journals" in out
        assert "[j2] Modern Medical Research" in out
        assert "[j3]" not in out

    def test_users_requires_admin(self, caplog):
        assert main(["users", "--role", "editor"]) == 1
        assert "not permitted" in caplog.text

    def test_users(self, capsys):
        assert main(["users", "--role", "admin", "--filter-role", "editor"]) == 0

        out = capsys.readouterr().out
        assert "Editor John" in out
        assert "Guest User" not in out

    def test_logs(self, capsys):
        assert main(["logs", "--role", "admin", "--query", "spambot"]) == 0

        assert "DELETE USER" in capsys.readouterr().out

    def test_logs_requires_admin(self):
        assert main(["logs"]) == 1

    def test_faq_category(self, capsys):
        assert main(["faq", "--category", "author"]) == 0

        out = capsys.readouterr().out
        assert "How do I submit an article?" in out
        assert "double-blind" not in out

    def test_about(self, capsys):
        assert main(["about"]) == 0

        assert "Journals: 4 | Issues: 3 | Articles: 3" in capsys.readouterr().out


class TestCLIWrites:
    """Tests for the simulated write commands."""

    def test_admin_creates_journal(self, capsys, caplog):
        caplog.set_level(logging.INFO)

        result = main([
            "create-journal", "--role", "admin",
            "--title", "Marine Biology Letters",
            "--description", "Oceans.",
            "--issn", "1111-2222",
            "--field", "Biology",
            "--publisher", "Ocean Press",
        ])

        assert result == 0
        assert capsys.readouterr().out == "j5\n"
        assert 'Journal "Marine Biology Letters" created successfully' in caplog.text

    def test_editor_cannot_create_journal(self, caplog):
        result = main([
            "create-journal", "--role", "editor",
            "--title", "T", "--description", "D", "--issn", "I",
            "--field", "F", "--publisher", "P",
        ])

        assert result == 1
        assert "Role 'editor' is not permitted to create journal" in caplog.text

    def test_edit_journal(self, capsys):
        assert main(["edit-journal", "j2", "--role", "editor", "--title", "Renamed"]) == 0
        assert capsys.readouterr().out == "j2\n"

    def test_edit_missing_journal(self, caplog):
        assert main(["edit-journal", "j99", "--role", "admin", "--title", "X"]) == 1
        assert "Journal j99 not found" in caplog.text

    def test_create_issue(self, capsys):
        result = main([
            "create-issue", "--role", "editor",
            "--journal", "j3", "--volume", "1", "--number", "1", "--year", "2025",
        ])

        assert result == 0
        assert capsys.readouterr().out == "i4\n"

    def test_create_issue_unknown_journal(self, caplog):
        result = main([
            "create-issue", "--role", "editor",
            "--journal", "j99", "--volume", "1", "--number", "1", "--year", "2025",
        ])

        assert result == 1
        assert "Invalid issue" in caplog.text

    def test_invalid_volume(self, caplog):
        assert main(["edit-issue", "i1", "--role", "editor", "--volume", "0"]) == 1
        assert "Invalid issue" in caplog.text

    def test_author_submits_article(self, capsys, caplog):
        caplog.set_level(logging.INFO)

        result = main([
            "submit-article", "--role", "author",
            "--issue", "i3",
            "--title", "Gene Drives",
            "--abstract", "On gene drives.",
            "--keyword", "Genetics",
        ])

        assert result == 0
        assert capsys.readouterr().out == "a4\n"
        assert "Dr. Jane Smith: Submit Article" in caplog.text

    def test_guest_cannot_submit(self, caplog):
        result = main([
            "submit-article", "--issue", "i1", "--title", "T", "--abstract", "A",
        ])

        assert result == 1
        assert "not permitted" in caplog.text

    def test_submit_to_unknown_issue(self, caplog):
        result = main([
            "submit-article", "--role", "author",
            "--issue", "i99", "--title", "T", "--abstract", "A",
        ])

        assert result == 1
        assert "Issue i99 not found" in caplog.text

    def test_author_edits_own_article(self):
        assert main(["edit-article", "a1", "--role", "author", "--status", "under_review"]) == 0

    def test_author_cannot_edit_others_article(self, caplog):
        assert main(["edit-article", "a2", "--role", "author", "--title", "Mine now"]) == 1
        assert "not permitted to edit article" in caplog.text

    def test_named_author(self):
        assert main([
            "edit-article", "a2", "--role", "author", "--user", "Sarah Connor",
            "--author", "Sarah Connor|Tech Ethics Board",
            "--author", "Kyle Reese|Resistance",
        ]) == 0

    def test_admin_creates_user(self, capsys):
        result = main([
            "create-user", "--role", "admin",
            "--name", "Ada Lovelace", "--email", "ada@example.com", "--new-role", "editor",
        ])

        assert result == 0
        assert capsys.readouterr().out == "u5\n"


class TestCLIDelete:
    """Tests for the delete command."""

    def test_guest_cannot_delete_article(self, caplog):
        assert main(["delete", "article", "a1"]) == 1
        assert "Role 'guest' is not permitted to withdraw article" in caplog.text

    def test_editor_deletes_article(self, caplog):
        caplog.set_level(logging.INFO)

        assert main(["delete", "article", "a1", "--role", "editor"]) == 0
        assert "Delete Article" in caplog.text

    def test_author_withdraws_own_article(self, caplog):
        caplog.set_level(logging.INFO)

        assert main(["delete", "article", "a1", "--role", "author"]) == 0
        assert "Withdraw Article" in caplog.text

    def test_editor_cannot_delete_journal(self):
        assert main(["delete", "journal", "j1", "--role", "editor"]) == 1

    def test_editor_cannot_delete_user(self):
        assert main(["delete", "user", "u4", "--role", "editor"]) == 1

    def test_admin_deletes_journal(self, caplog):
        caplog.set_level(logging.INFO)

        assert main(["delete", "journal", "j1", "--role", "admin"]) == 0
        assert "Successfully deleted journal with ID j1" in caplog.text

    def test_delete_unknown(self, caplog):
        assert main(["delete", "journal", "j99", "--role", "admin"]) == 1
        assert "Journal j99 not found" in caplog.text
