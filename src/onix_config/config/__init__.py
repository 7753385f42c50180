from .loader import BuildInfo, ConfigError, load_build_info, load_params, params_from_env
from .models import AdapterParams, resolve_params

# Config exports are intentionally small.
__all__ = [
    "AdapterParams",
    "BuildInfo",
    "ConfigError",
    "load_build_info",
    "load_params",
    "params_from_env",
    "resolve_params",
]
