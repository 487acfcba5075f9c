#!filepath: mintwatch/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .rpc_config import RpcConfig
from .window_config import WindowConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    mintwatch/config/app_config.py → mintwatch/config → mintwatch → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


# env var -> (section, field)
ENV_OVERRIDES = {
    "SOLANA_RPC": ("rpc", "url"),
    "CREATOR": ("window", "creator_owner_id"),
    "SIG_PAGE_CONCURRENCY": ("window", "signature_page_concurrency"),
    "TX_CONCURRENCY": ("window", "transaction_concurrency"),
}


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    rpc: RpcConfig = Field(default_factory=RpcConfig)
    window: WindowConfig = Field(default_factory=WindowConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 mintwatch/config/base.yml
        - 不依赖当前工作目录
        - 环境变量覆盖 YAML（SOLANA_RPC / CREATOR / *_CONCURRENCY）
        """
        # 1) 先加载 .env（在项目根目录下），已存在的环境变量不被覆盖
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 从 env 注入覆盖项，空字符串视为未设置
        for env_key, (section, field) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value:
                raw.setdefault(section, {})[field] = value

        return cls(**raw)
