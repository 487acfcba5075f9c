#!filepath: mintwatch/cli.py
import asyncio
import os
from typing import Optional

import typer
from rich import print
from rich.markup import escape

from mintwatch import AppConfig, __version__, init_logging
from mintwatch.utils.errors import LocateError, MintNotFoundError, UserInputError

app = typer.Typer(help="Mint first-ten-minutes window monitor")


@app.command()
def version():
    print(f"v{__version__}")


def load_config(
    config: Optional[str],
    rpc_url: Optional[str],
    creator: Optional[str],
    sig_concurrency: Optional[int],
    tx_concurrency: Optional[int],
) -> AppConfig:
    """YAML + .env + env, then CLI flags on top."""
    cfg = AppConfig.load(config)

    if rpc_url:
        cfg.rpc.url = rpc_url
    if creator:
        cfg.window.creator_owner_id = creator
    if sig_concurrency is not None:
        cfg.window.signature_page_concurrency = sig_concurrency
    if tx_concurrency is not None:
        cfg.window.transaction_concurrency = tx_concurrency

    if cfg.window.signature_page_concurrency < 1 or cfg.window.transaction_concurrency < 1:
        raise UserInputError("concurrency must be >= 1")
    return cfg


@app.command()
def run(
    mint: Optional[str] = typer.Argument(None, help="Token mint address (falls back to $MINT)"),
    rpc_url: Optional[str] = typer.Argument(None, help="RPC endpoint (falls back to $SOLANA_RPC)"),
    creator: Optional[str] = typer.Option(None, "--creator", help="Owner wallet whose share is reported"),
    sig_concurrency: Optional[int] = typer.Option(None, "--sig-concurrency", help="Signature pagination workers"),
    tx_concurrency: Optional[int] = typer.Option(None, "--tx-concurrency", help="Transaction fetch workers"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML config path"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
):
    """
    Observe the first ten minutes after MINT was created:
    trades / SOL volume / holders (and creator %) per interval.
    """
    from mintwatch.report.json_export import report_to_json
    from mintwatch.report.table import print_report
    from mintwatch.workflows.mint_window import run_mint_window

    try:
        cfg = load_config(config, rpc_url, creator, sig_concurrency, tx_concurrency)
        mint = mint or os.getenv("MINT")
        if not mint:
            raise UserInputError("usage: mintwatch run <MINT> [RPC_URL]")
    except (UserInputError, ValueError, FileNotFoundError) as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    init_logging(cfg.log)

    try:
        ctx = asyncio.run(run_mint_window(mint, cfg))
    except (LocateError, MintNotFoundError) as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except Exception:
        # traceback already logged by run_mint_window
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(report_to_json(ctx.report, ctx.mint, ctx.rpc_url))
    else:
        print_report(ctx.report, ctx.mint, ctx.rpc_url)


def main():
    app()


if __name__ == "__main__":
    main()

# python -m mintwatch.cli run <MINT> [RPC_URL]
