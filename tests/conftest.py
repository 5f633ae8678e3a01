from pathlib import Path
import pytest

@pytest.fixture(scope="session")
def project_root() -> Path:
    return Path(__file__).resolve().parents[1]

@pytest.fixture(scope="session")
def cfg_path(project_root: Path) -> Path:
    return project_root / "config" / "config.toml"

@pytest.fixture(scope="session")
def cfg(cfg_path: Path):
    from src.config_model.model import load_config
    return load_config(str(cfg_path))

@pytest.fixture
def spy_filter():
    """A filter that records every (value, options) it sees and returns value unchanged."""
    class Spy:
        def __init__(self) -> None:
            self.calls: list[tuple[object, list[str]]] = []

        def apply(self, value, options):
            self.calls.append((value, list(options)))
            return value

    return Spy()
