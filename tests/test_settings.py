"""Unit tests for QSettings-backed configuration."""

from pathlib import Path

from entity_maped.settings import AppSettings, ValidationResult


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, settings: AppSettings) -> None:
        """Test AppSettings can be initialized from an INI file."""
        assert settings is not None
        assert isinstance(settings.validate(), ValidationResult)
        assert settings.get_settings_file_path().endswith("settings.ini")

    def test_defaults(self, settings: AppSettings) -> None:
        assert settings.project_directory == "res/"
        assert settings.project_file_name == "objecttypes.xml"
        assert settings.recent_projects == []
        assert settings.console_logging is True
        assert settings.console_log_level == "INFO"
        assert settings.file_logging is False
        assert settings.image_cache_enabled is False

    def test_values_persist_across_instances(self, tmp_path: Path) -> None:
        """Test values written by one instance are read by the next."""
        first = AppSettings(settings_file=tmp_path / "persist.ini")
        first.project_directory = "maps"
        first.image_cache_enabled = True
        first.sync()

        second = AppSettings(settings_file=tmp_path / "persist.ini")
        assert second.project_directory == "maps"
        assert second.image_cache_enabled is True

    def test_profiles_are_isolated(self, tmp_path: Path) -> None:
        default = AppSettings(settings_file=tmp_path / "profiles.ini")
        other = AppSettings(profile="other", settings_file=tmp_path / "profiles.ini")
        default.project_file_name = "a.xml"
        assert other.project_file_name == "objecttypes.xml"


class TestLoggingSettings:
    """Test logging option validation."""

    def test_valid_level_is_normalized(self, settings: AppSettings) -> None:
        settings.console_log_level = "debug"
        assert settings.console_log_level == "DEBUG"

    def test_invalid_level_is_ignored(self, settings: AppSettings) -> None:
        settings.console_log_level = "LOUD"
        assert settings.console_log_level == "INFO"


class TestRecentProjects:
    """Test the recent projects list."""

    def test_single_entry(self, settings: AppSettings) -> None:
        settings.add_recent_project("maps/objecttypes.xml")
        assert settings.recent_projects == ["maps/objecttypes.xml"]

    def test_most_recent_first_without_duplicates(self, settings: AppSettings) -> None:
        settings.add_recent_project("a.xml")
        settings.add_recent_project("b.xml")
        settings.add_recent_project("a.xml")
        assert settings.recent_projects == ["a.xml", "b.xml"]

    def test_limited_to_ten(self, settings: AppSettings) -> None:
        for index in range(12):
            settings.add_recent_project(f"{index}.xml")
        recent = settings.recent_projects
        assert len(recent) == 10
        assert recent[0] == "11.xml"

    def test_clear(self, settings: AppSettings) -> None:
        settings.add_recent_project("a.xml")
        settings.clear_recent_projects()
        assert settings.recent_projects == []


class TestValidation:
    """Test settings validation."""

    def test_missing_project_directory_warns(self, settings: AppSettings, tmp_path: Path) -> None:
        settings.project_directory = tmp_path / "absent"
        result = settings.validate()
        assert result.is_valid
        assert any("does not exist" in warning for warning in result.warnings)

    def test_missing_descriptor_warns(self, settings: AppSettings, tmp_path: Path) -> None:
        settings.project_directory = tmp_path
        result = settings.validate()
        assert result.is_valid
        assert any("Descriptor file not found" in warning for warning in result.warnings)

    def test_project_directory_is_file_errors(self, settings: AppSettings, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        settings.project_directory = blocker
        result = settings.validate()
        assert not result.is_valid

    def test_stale_recent_projects_pruned(self, settings: AppSettings, project_dir: Path) -> None:
        existing = str(project_dir / "objecttypes.xml")
        settings.project_directory = project_dir
        settings.add_recent_project(str(project_dir / "gone.xml"))
        settings.add_recent_project(existing)

        result = settings.validate()
        assert result.is_valid
        assert result.warnings == [f"Recent project no longer exists: {project_dir / 'gone.xml'}"]
        assert settings.recent_projects == [existing]
