import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console(stderr=True)


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI analysis server."""
    import uvicorn

    from hypnolint.api.app import create_app

    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from hypnolint.mcp.server import create_mcp_server

    server = create_mcp_server()
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
