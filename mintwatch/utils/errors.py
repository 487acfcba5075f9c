# mintwatch/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (mint, concurrency, etc).
    Should NOT print traceback.
    """


class LocateError(RuntimeError):
    """No genesis candidate carries a block time, t0 cannot be determined."""


class MintNotFoundError(RuntimeError):
    """The mint address does not resolve to an existing account."""

    def __init__(self, mint: str):
        super().__init__(f"mint account not found: {mint}")
        self.mint = mint


class RpcError(RuntimeError):
    """JSON-RPC level error returned by the node."""

    def __init__(self, code: int, message: str, method: str = ""):
        super().__init__(f"[{method}] rpc error {code}: {message}")
        self.code = code
        self.message = message
        self.method = method
