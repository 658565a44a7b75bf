"""Tests for the session manager."""

import pytest

from jira_versions.adapters.config import CredentialsFile
from jira_versions.application.sync import SessionManager
from jira_versions.core.exceptions import TransportError


class TestSessionManager:
    """Tests for SessionManager."""

    def test_login_uses_credentials_file(self, tracker, tmp_path):
        path = tmp_path / ".jenkins-ci.org"
        path.write_text("userName=alice\npassword=secret\n")

        token = SessionManager(tracker, CredentialsFile(path)).login()

        assert token == "token-1"
        assert tracker.login_calls == [("alice", "secret")]

    def test_missing_file_logs_in_anonymously(self, tracker, tmp_path):
        SessionManager(tracker, CredentialsFile(tmp_path / "absent")).login()

        assert tracker.login_calls == [("", "")]

    def test_credentials_reread_on_each_login(self, tracker, tmp_path):
        path = tmp_path / ".jenkins-ci.org"
        path.write_text("userName=alice\npassword=old\n")
        manager = SessionManager(tracker, CredentialsFile(path))

        manager.login()
        path.write_text("userName=alice\npassword=new\n")
        manager.login()

        assert [password for _, password in tracker.login_calls] == ["old", "new"]
        assert manager.login_count == 2

    def test_login_failure_propagates(self, tracker, session_manager):
        tracker.login_failures = [TransportError("unreachable")]

        with pytest.raises(TransportError):
            session_manager.login()
