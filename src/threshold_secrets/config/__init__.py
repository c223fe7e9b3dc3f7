from .models import CONFIG_ENV_VAR, SharingConfig, load_sharing_config, resolve_config_path

__all__ = [
    "CONFIG_ENV_VAR",
    "SharingConfig",
    "load_sharing_config",
    "resolve_config_path",
]
