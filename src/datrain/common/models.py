"""Common models used across DatRain."""

from typing import Literal

from pydantic import BaseModel

from datrain.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class AppPaths(BaseModel):
    config_dir_name: str = APP_NAME
    data_dir_name: str = APP_NAME
    global_config_filename: str = "config.yaml"
    log_filename: str = f"{APP_NAME}.log"
