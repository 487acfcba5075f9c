#!filepath: mintwatch/config/rpc_config.py
from pydantic import BaseModel, Field

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"


class RpcConfig(BaseModel):
    url: str = DEFAULT_RPC_URL
    commitment: str = "finalized"
    page_limit: int = Field(default=1000, ge=1, le=1000)
    timeout_seconds: float = 30.0
