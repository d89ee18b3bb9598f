"""Unit tests for the built-in help and version tasks."""

import pytest

from lathe import __version__
from lathe.core.config import clear_settings_cache
from lathe.core.errors import TaskNotFoundError
from lathe.tasks.help import help
from lathe.tasks.version import version


@pytest.fixture
def plugin_tasks(make_package, monkeypatch) -> str:
    """Expose a plugin task package through the environment."""
    package = make_package(
        {
            "uber_jar": '''
                def uber_jar(project, main=None):
                    """Package the project and dependencies as a standalone jar.

                    Includes every dependency jar.
                    """
            ''',
            "quiet": "def quiet():\n    pass\n",
        }
    )
    monkeypatch.setenv("LATHE_TASK_PACKAGES", f'["lathe.tasks", "{package}"]')
    clear_settings_cache()
    return package


class TestHelp:
    """Tests for the help task."""

    def test_lists_tasks(self, plugin_tasks, capsys) -> None:
        """Test the task overview."""
        help()

        output = capsys.readouterr().out
        assert "uber-jar" in output
        assert "Package the project" in output
        assert "version" in output

    def test_broken_task_module(self, make_package, monkeypatch, capsys, log_messages) -> None:
        """Test that one unloadable task does not break the overview."""
        package = make_package(
            {
                "bad": "def bad(:\n",
                "good": 'def good():\n    """Works."""\n',
            }
        )
        monkeypatch.setenv("LATHE_TASK_PACKAGES", f'["{package}"]')
        clear_settings_cache()

        help()

        output = capsys.readouterr().out
        assert "Works." in output
        assert "Failed to load." in output
        assert any("Problem loading bad task" in m for m in log_messages)

    def test_task_help(self, plugin_tasks, capsys) -> None:
        """Test help for one task shows shapes without the project."""
        help("uber-jar")

        output = capsys.readouterr().out
        assert "[] [main]" in output
        assert "Includes every dependency jar." in output

    def test_task_without_doc(self, plugin_tasks, capsys) -> None:
        """Test a task with no docstring."""
        help("quiet")

        assert "No documentation available." in capsys.readouterr().out

    def test_unknown_task(self, plugin_tasks) -> None:
        """Test help for a name that is not a task."""
        with pytest.raises(TaskNotFoundError):
            help("nope")


class TestVersion:
    """Tests for the version task."""

    def test_prints_version(self, capsys) -> None:
        """Test the version line."""
        version()

        assert f"Lathe {__version__} on Python" in capsys.readouterr().out
