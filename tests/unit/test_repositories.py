"""Unit tests for repository resolution."""

from lathe.project.descriptor import build_descriptor
from lathe.project.models import RepositorySettings
from lathe.project.repositories import DEFAULT_REPOSITORIES, init_settings, repositories_for


def project_with(tmp_path, **options):
    """Build a descriptor with extra options given as python names."""
    options = {key.replace("_", "-"): value for key, value in options.items()}
    return build_descriptor({"name": "p", "version": "1", **options}, tmp_path)


class TestRepositoriesFor:
    """Tests for repositories_for."""

    def test_defaults(self, tmp_path) -> None:
        """Test that a project without repositories gets the defaults."""
        repos = repositories_for(project_with(tmp_path))

        assert set(repos) == {"central", "clojure", "clojure-snapshots", "clojars"}
        assert repos["clojure-snapshots"].releases is False
        assert repos["central"].snapshots is False

    def test_releases_inference(self, tmp_path) -> None:
        """Test that the releases id disables snapshots."""
        repos = repositories_for(project_with(tmp_path, repositories={"releases": {"url": "x"}}))

        assert repos["releases"].to_dict() == {"url": "x", "snapshots": False}

    def test_snapshots_inference(self, tmp_path) -> None:
        """Test that the snapshots id disables releases."""
        repos = repositories_for(project_with(tmp_path, repositories={"snapshots": {"url": "y"}}))

        assert repos["snapshots"].to_dict() == {"url": "y", "releases": False}

    def test_explicit_policy_wins(self, tmp_path) -> None:
        """Test that inference never overrides the project."""
        repos = repositories_for(
            project_with(tmp_path, repositories={"releases": {"url": "x", "snapshots": True}})
        )

        assert repos["releases"].snapshots is True

    def test_string_shorthand(self, tmp_path) -> None:
        """Test that a string is the URL."""
        repos = repositories_for(project_with(tmp_path, repositories={"internal": "http://repo"}))

        assert repos["internal"].to_dict() == {"url": "http://repo"}

    def test_project_replaces_default(self, tmp_path) -> None:
        """Test that a project entry replaces the default wholesale."""
        repos = repositories_for(
            project_with(tmp_path, repositories={"central": {"url": "http://mirror"}})
        )

        assert repos["central"].to_dict() == {"url": "http://mirror"}

    def test_omit_defaults(self, tmp_path) -> None:
        """Test that defaults can be left out."""
        repos = repositories_for(
            project_with(
                tmp_path,
                omit_default_repositories=True,
                repositories={"clojars": {"url": "http://clojars.org/repo/", "releases": False}},
            )
        )

        assert list(repos) == ["clojars"]
        assert repos["clojars"].releases is False

    def test_extra_settings_kept(self, tmp_path) -> None:
        """Test that credentials and other keys pass through."""
        repos = repositories_for(
            project_with(
                tmp_path,
                repositories={"private": {"url": "http://p", "username": "ci"}},
            )
        )

        assert repos["private"].to_dict() == {"url": "http://p", "username": "ci"}

    def test_defaults_not_mutated(self, tmp_path) -> None:
        """Test that resolving never changes the default table."""
        repositories_for(project_with(tmp_path, repositories={"central": "http://mirror"}))

        assert DEFAULT_REPOSITORIES["central"].url == "https://repo1.maven.org/maven2"


class TestInitSettings:
    """Tests for init_settings."""

    def test_string_for_releases_id_not_inferred(self) -> None:
        """Test that string shorthand skips policy inference."""
        assert init_settings("releases", "http://r").to_dict() == {"url": "http://r"}

    def test_accepts_settings_model(self) -> None:
        """Test passing an already built RepositorySettings."""
        settings = init_settings("snapshots", RepositorySettings(url="http://s"))

        assert settings.releases is False
        assert settings.url == "http://s"
