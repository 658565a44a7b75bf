"""Tests for domain entities and value objects."""

from datetime import date, datetime, timezone

import pytest

from jira_versions.core.domain import (
    EventBus,
    DomainEvent,
    PluginSkipped,
    SourceKind,
    TrackerVersionEntry,
    VersionCandidate,
    VersionCreated,
    VersionNumber,
    canonical_name,
)


RELEASED_AT = datetime(2011, 4, 1, 23, 15, tzinfo=timezone.utc)


class TestCanonicalName:
    """Tests for canonical version naming."""

    def test_core_release(self):
        candidate = VersionCandidate.core("1.410", RELEASED_AT)
        assert canonical_name(candidate) == "jenkins-1.410"

    def test_plugin_suffix_is_stripped(self):
        candidate = VersionCandidate.plugin("foo-plugin", "2.1", RELEASED_AT)
        assert canonical_name(candidate) == "foo-2.1"

    def test_plugin_without_suffix(self):
        candidate = VersionCandidate.plugin("bar", "3.0", RELEASED_AT)
        assert canonical_name(candidate) == "bar-3.0"

    def test_only_trailing_suffix_is_stripped(self):
        candidate = VersionCandidate.plugin("plugin-usage-plugin", "1.0", RELEASED_AT)
        assert canonical_name(candidate) == "plugin-usage-1.0"

    def test_infix_plugin_is_kept(self):
        candidate = VersionCandidate.plugin("plugin-foo", "1.0", RELEASED_AT)
        assert canonical_name(candidate) == "plugin-foo-1.0"

    def test_property_matches_function(self):
        candidate = VersionCandidate.plugin("git-plugin", "1.1.5", RELEASED_AT)
        assert candidate.canonical_name == "git-1.1.5"


class TestVersionCandidate:
    """Tests for VersionCandidate."""

    def test_core_has_no_artifact(self):
        candidate = VersionCandidate.core("1.0", RELEASED_AT)
        assert candidate.source_kind is SourceKind.CORE
        assert candidate.artifact_id == ""

    def test_is_immutable(self):
        candidate = VersionCandidate.core("1.0", RELEASED_AT)
        with pytest.raises(AttributeError):
            candidate.raw_version = "2.0"

    @pytest.mark.parametrize("version", ["1.0-alpha-1", "2.0-BETA", "1.5beta3"])
    def test_experimental(self, version):
        assert VersionCandidate.core(version, RELEASED_AT).is_experimental

    @pytest.mark.parametrize("version", ["1.0", "1.0-rc-1", "2.3.1"])
    def test_not_experimental(self, version):
        assert not VersionCandidate.core(version, RELEASED_AT).is_experimental


class TestTrackerVersionEntry:
    """Tests for TrackerVersionEntry."""

    def test_from_candidate(self):
        entry = TrackerVersionEntry.from_candidate(
            VersionCandidate.plugin("foo-plugin", "1.2", RELEASED_AT)
        )
        assert entry.name == "foo-1.2"
        assert entry.released is True
        assert entry.release_date == date(2011, 4, 1)

    def test_accepts_plain_date(self):
        entry = TrackerVersionEntry.from_candidate(
            VersionCandidate.core("1.0", date(2010, 1, 5))
        )
        assert entry.release_date == date(2010, 1, 5)

    def test_unresolved_release_time_rejected(self):
        with pytest.raises(ValueError):
            TrackerVersionEntry.from_candidate(VersionCandidate.core("1.0"))


class TestVersionNumber:
    """Tests for VersionNumber ordering."""

    def test_numeric_components(self):
        assert VersionNumber("1.9") < VersionNumber("1.10")
        assert VersionNumber("1.100") > VersionNumber("1.99")

    def test_longer_release_is_newer(self):
        assert VersionNumber("1.0") < VersionNumber("1.0.1")

    def test_trailing_zero_is_equal(self):
        assert VersionNumber("1.0") == VersionNumber("1.0.0")
        assert hash(VersionNumber("1.0")) == hash(VersionNumber("1.0.0"))

    def test_qualifiers_precede_release(self):
        ordered = ["1.0-alpha-1", "1.0-beta-1", "1.0-beta-2", "1.0-rc-1", "1.0", "1.1"]
        shuffled = ["1.1", "1.0-rc-1", "1.0", "1.0-beta-2", "1.0-alpha-1", "1.0-beta-1"]
        assert sorted(shuffled, key=VersionNumber) == ordered

    def test_str(self):
        assert str(VersionNumber(" 1.2.3 ")) == "1.2.3"

    def test_not_comparable_with_strings(self):
        assert VersionNumber("1.0") != "1.0"


class TestEventBus:
    """Tests for EventBus."""

    def test_specific_and_catch_all_handlers(self):
        bus = EventBus()
        specific, everything = [], []
        bus.subscribe(VersionCreated, specific.append)
        bus.subscribe(DomainEvent, everything.append)

        bus.publish(VersionCreated(name="jenkins-1.0"))
        bus.publish(PluginSkipped(artifact_id="old"))

        assert [e.name for e in specific] == ["jenkins-1.0"]
        assert [e.event_type for e in everything] == ["VersionCreated", "PluginSkipped"]

    def test_history(self):
        bus = EventBus()
        bus.publish(PluginSkipped(artifact_id="old"))

        assert len(bus.get_history()) == 1
        bus.clear_history()
        assert bus.get_history() == []

    def test_unsubscribed_handler_is_not_called(self):
        bus = EventBus()
        received = []
        bus.subscribe(PluginSkipped, received.append)
        bus.unsubscribe(PluginSkipped, received.append)
        bus.unsubscribe(VersionCreated, received.append)

        bus.publish(PluginSkipped(artifact_id="old"))

        assert received == []
