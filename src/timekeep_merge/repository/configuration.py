# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timekeep_merge import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Fill in settings added after the config file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        vault_path: Optional[str] = None,
        remove_vault_path: bool = False,
        scan_batch_size: Optional[int] = None,
        show_header: Optional[bool] = None,
        log_level: Optional[str] = None,
        pdf_title: Optional[str] = None,
        pdf_rows_per_page: Optional[int] = None,
        pdf_date_format: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if vault_path is not None:
            self.config["vault_path"] = vault_path
        if remove_vault_path:
            self.config["vault_path"] = None
        if scan_batch_size is not None:
            self.config["scan_batch_size"] = scan_batch_size
        if show_header is not None:
            self.config["show_header"] = show_header
        if log_level is not None:
            self.config["log_level"] = log_level
        if pdf_title is not None:
            self.config["pdf_title"] = pdf_title
        if pdf_rows_per_page is not None:
            self.config["pdf_rows_per_page"] = pdf_rows_per_page
        if pdf_date_format is not None:
            self.config["pdf_date_format"] = pdf_date_format


CONFIGURATION_REPO = ConfigurationRepository()
