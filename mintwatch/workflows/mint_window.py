#!filepath: mintwatch/workflows/mint_window.py
from __future__ import annotations

from mintwatch import AppConfig, logs
from mintwatch.engines.genesis_locator_engine import GenesisLocatorEngine
from mintwatch.engines.signature_collect_engine import SignatureCollectEngine
from mintwatch.engines.token_account_engine import TokenAccountEngine
from mintwatch.engines.transaction_fetch_engine import TransactionFetchEngine
from mintwatch.observability.instrumentation import Instrumentation
from mintwatch.pipeline.context import WindowContext
from mintwatch.pipeline.group import ConcurrentStepGroup
from mintwatch.pipeline.pipeline import MintWindowPipeline
from mintwatch.rpc.client import SolanaRpcClient
from mintwatch.steps.aggregate_window_step import AggregateWindowStep
from mintwatch.steps.check_mint_step import CheckMintStep
from mintwatch.steps.collect_signatures_step import CollectSignaturesStep
from mintwatch.steps.fetch_transactions_step import FetchTransactionsStep
from mintwatch.steps.locate_genesis_step import LocateGenesisStep
from mintwatch.steps.resolve_token_accounts_step import ResolveTokenAccountsStep


def build_mint_window_pipeline(client, cfg: AppConfig, inst: Instrumentation | None = None) -> MintWindowPipeline:
    """
    CheckMint
      → (LocateGenesis ∥ ResolveTokenAccounts)
      → CollectSignatures
      → FetchTransactions
      → AggregateWindow
    """
    inst = inst or Instrumentation()
    w = cfg.window
    page_limit = cfg.rpc.page_limit

    steps = [
        CheckMintStep(client, inst=inst),
        ConcurrentStepGroup(
            [
                LocateGenesisStep(
                    GenesisLocatorEngine(client, max_pages=w.max_genesis_pages, page_limit=page_limit),
                    inst=inst,
                ),
                ResolveTokenAccountsStep(TokenAccountEngine(client), inst=inst),
            ],
            inst=inst,
        ),
        CollectSignaturesStep(
            SignatureCollectEngine(
                client,
                concurrency=w.signature_page_concurrency,
                max_pages_per_account=w.max_pages_per_account,
                page_limit=page_limit,
            ),
            inst=inst,
        ),
        FetchTransactionsStep(
            TransactionFetchEngine(client, concurrency=w.transaction_concurrency),
            inst=inst,
        ),
        AggregateWindowStep(inst=inst),
    ]
    return MintWindowPipeline(steps, inst=inst)


@logs.catch(msg="mint window run failed")
async def run_mint_window(
    mint: str,
    cfg: AppConfig,
    client=None,
    inst: Instrumentation | None = None,
) -> WindowContext:
    """
    Run the whole window monitor for one mint.
    ``client`` defaults to a SolanaRpcClient on cfg.rpc; an injected client is not closed.
    """
    ctx = WindowContext(mint=mint, rpc_url=cfg.rpc.url, creator=cfg.window.creator_owner_id)

    if client is not None:
        return await build_mint_window_pipeline(client, cfg, inst).run(ctx)

    async with SolanaRpcClient(cfg.rpc) as rpc:
        return await build_mint_window_pipeline(rpc, cfg, inst).run(ctx)
