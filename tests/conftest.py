import pytest
from yaml import dump

from timekeep_merge import configuration
from timekeep_merge.repository.configuration import CONFIGURATION_REPO
from timekeep_merge.view import state as view_state


@pytest.fixture
def app_config(tmp_path, monkeypatch):
    config_path = tmp_path / "config" / "config.yaml"
    config_path.parent.mkdir()
    config = configuration.get_default_configuration()
    config["show_header"] = False
    config_path.write_text(dump(config))

    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    CONFIGURATION_REPO._config = None
    CONFIGURATION_REPO.is_dirty = False
    view_state.set_show_header(False)
    yield config_path
    CONFIGURATION_REPO._config = None
    CONFIGURATION_REPO.is_dirty = False
    view_state.set_show_header(True)
