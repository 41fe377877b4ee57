from .paths import PathsConfig, get_data_directory, get_global_config_path, get_global_config_root

__all__ = ["PathsConfig", "get_data_directory", "get_global_config_path", "get_global_config_root"]
