from .app_config import AppConfig
from .log_config import LogConfig
from .rpc_config import RpcConfig, DEFAULT_RPC_URL
from .window_config import WindowConfig

__all__ = ["AppConfig", "LogConfig", "RpcConfig", "WindowConfig", "DEFAULT_RPC_URL"]
