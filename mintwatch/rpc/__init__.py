from .client import SolanaRpcClient, TOKEN_PROGRAM_ID, TOKEN_ACCOUNT_SIZE
from .models import SignatureInfo, TokenBalance, TransactionMeta

__all__ = [
    "SolanaRpcClient",
    "TOKEN_PROGRAM_ID",
    "TOKEN_ACCOUNT_SIZE",
    "SignatureInfo",
    "TokenBalance",
    "TransactionMeta",
]
