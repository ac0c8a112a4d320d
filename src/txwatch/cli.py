import logging
from dataclasses import replace
import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .application.parser import build_parser
from .config import (DEFAULT_REQUEST_ID, DEFAULT_RPC_URL, ENV_REQUEST_ID, ENV_RPC_URL,
                     FetcherConfig)
from .domain.errors import ParserError
from .domain.models import Transaction

DEFAULT_ADDRESS = "0x1234567890abcdef"

console = Console()

def _format_tx(tx: Transaction) -> str:
    return f"{tx.hash}  {tx.from_address} -> {tx.to}  value={tx.value}  block={tx.block_number}"

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )

@click.command()
@click.option("--rpc", "rpc_url", default=None, show_default=f"${ENV_RPC_URL} or {DEFAULT_RPC_URL}",
              help="JSON-RPC endpoint URL")
@click.option("--request-id", default=None, show_default=f"${ENV_REQUEST_ID} or {DEFAULT_REQUEST_ID}",
              help="JSON-RPC request id")
@click.option("--address", "addresses", multiple=True, default=[DEFAULT_ADDRESS], show_default=True,
              help="Address to subscribe and fetch; repeat for several")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log requests and raw responses")
def cli(rpc_url, request_id, addresses, verbose):
    """txwatch: track the block height and fetch transactions for subscribed addresses."""
    _setup_logging(verbose)
    config = FetcherConfig.from_env()
    config = replace(config, rpc_url=rpc_url or config.rpc_url, request_id=request_id or config.request_id)
    with build_parser(config) as parser:
        for address in addresses:
            parser.subscribe(address)

        console.print(f"Current block: {parser.current_block()}", highlight=False)

        # failures are reported, never turned into an exit status
        for address in addresses:
            try:
                transactions = parser.get_transactions(address)
            except ParserError as e:
                console.print(f"[red]Error:[/] {escape(str(e))}", highlight=False, soft_wrap=True)
                continue
            console.print(f"Transactions for address {address}:", markup=False, highlight=False)
            for tx in transactions:
                console.print(_format_tx(tx), markup=False, highlight=False, soft_wrap=True)

if __name__ == "__main__":
    cli()
