"""Shared fixtures for launch options tests."""
import pytest


@pytest.fixture
def intermediate_dir(tmp_path):
    path = tmp_path / "intermediate"
    path.mkdir()
    return str(path)


@pytest.fixture
def launch_mapping(intermediate_dir):
    """Attributes of a valid launch request, keyed by document attribute name."""
    return {
        "Package": "com.example.app",
        "Attach": False,
        "LaunchActivity": "MainActivity",
        "TargetArchitecture": "arm",
        "IntermediateDirectory": intermediate_dir,
        "DeviceId": "emulator-5554",
    }
