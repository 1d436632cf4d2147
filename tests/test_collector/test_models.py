"""Tests for the SessionConfig model and license catalogue."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from typings_generator.collector.models import (
    LICENSES,
    LicenseId,
    SessionConfig,
    is_source_ref,
    source_package_name,
    source_package_url,
)

pytestmark = pytest.mark.unit


class TestDerivedFields:
    def test_url(self):
        assert source_package_url("facebook/react") == "https://github.com/facebook/react"

    def test_url_strips_slashes(self):
        assert source_package_url("/facebook/react/") == "https://github.com/facebook/react"

    def test_package_name(self):
        assert source_package_name("microsoft/vscode") == "vscode"

    def test_package_name_without_author(self):
        assert source_package_name("lodash") == "lodash"

    def test_from_source_ref(self, react_session):
        assert react_session.source_repo_ref == "facebook/react"
        assert react_session.source_package_url == "https://github.com/facebook/react"
        assert react_session.source_package_name == "react"
        assert react_session.pretty_package_name == "React"

    def test_pretty_name_of_hyphenated_repo(self):
        session = SessionConfig.from_source_ref("airbnb/react-dates", username="octocat")
        assert session.pretty_package_name == "React Dates"


class TestSessionConfig:
    def test_frozen(self, react_session):
        with pytest.raises(ValidationError):
            react_session.username = "someone-else"

    def test_license_coerced_to_enum(self, react_session):
        assert react_session.license_id is LicenseId.MIT

    def test_unknown_license_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig.from_source_ref("a/b", username="octocat", license_id="GPL-3.0")

    def test_empty_username_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig.from_source_ref("a/b", username="")

    @pytest.mark.parametrize("ref", ["/", "facebook/", "/react", "lodash", "a/b/c", " / "])
    def test_malformed_source_ref_rejected(self, ref):
        with pytest.raises(ValidationError):
            SessionConfig.from_source_ref(ref, username="octocat")

    def test_registry_name_requires_published(self):
        with pytest.raises(ValidationError):
            SessionConfig.from_source_ref(
                "a/b",
                username="octocat",
                is_published_on_registry=False,
                registry_name="b",
            )

    def test_ambient_flag(self, react_session, ambient_session):
        assert react_session.ambient_flag == ""
        assert ambient_session.ambient_flag == " --ambient"


class TestLicenses:
    def test_every_id_offered_once(self):
        ids = [license_id for _, license_id in LICENSES]
        assert sorted(ids, key=lambda i: i.value) == sorted(LicenseId, key=lambda i: i.value)

    def test_display_names(self):
        names = dict((license_id, name) for name, license_id in LICENSES)
        assert names[LicenseId.FREEBSD] == "FreeBSD"
        assert names[LicenseId.NOLICENSE] == "No License (Copyrighted)"

    def test_ids_are_strings(self):
        assert LicenseId("BSD-3-Clause") is LicenseId.NEWBSD


class TestIsSourceRef:
    @pytest.mark.parametrize("ref", ["facebook/react", "/facebook/react/", "airbnb/react-dates"])
    def test_author_and_repo(self, ref):
        assert is_source_ref(ref)

    @pytest.mark.parametrize("ref", ["", "/", "facebook/", "/react", "lodash", "a/b/c", "a/ /"])
    def test_missing_part(self, ref):
        assert not is_source_ref(ref)
