# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from rungantt import configuration


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
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Missing or partial files fall back to defaults key by key
        self._config = configuration.default_configuration()
        if isinstance(loaded, dict):
            for key in self._config.keys():
                if key in loaded:
                    self._config[key] = loaded[key]  # type: ignore[literal-required]

        if self._config["dim_style"] not in ("dim", "gray"):
            raise ValueError(
                f"dim_style must be 'dim' or 'gray', got {self._config['dim_style']!r}"
            )

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        force_color: Optional[bool] = None,
        dim_style: Optional[configuration.DimStyle] = None,
        show_header: Optional[bool] = None,
        runs_path: Optional[str] = None,
        remove_runs_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if force_color is not None:
            self.config["force_color"] = force_color
        if dim_style is not None:
            self.config["dim_style"] = dim_style
        if show_header is not None:
            self.config["show_header"] = show_header
        if runs_path is not None:
            self.config["runs_path"] = runs_path
        if remove_runs_path:
            self.config["runs_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
