#!filepath: mintwatch/config/window_config.py
from typing import Optional

from pydantic import BaseModel, Field


class WindowConfig(BaseModel):
    """
    Window monitor knobs.

    The two concurrency caps are separate values:
    signature pagination and transaction fetching never share one pool.
    """

    creator_owner_id: Optional[str] = None
    signature_page_concurrency: int = Field(default=8, ge=1)
    transaction_concurrency: int = Field(default=8, ge=1)
    max_genesis_pages: int = Field(default=200, ge=1)
    max_pages_per_account: int = Field(default=50, ge=1)
