"""
Serve command for Postboard CLI.

This module provides the command to start the FastAPI server.

Example:
    $ postboard serve
    $ postboard serve --port 8080 --reload
"""

import os
from pathlib import Path

import rich_click as click
from rich.panel import Panel

from backend.postboard.cli.utils import (
    get_console,
    load_config,
    print_error,
    print_info,
)
from backend.postboard.core.utils.config import CONFIG_ENV_VAR

APP_IMPORT_PATH = "backend.postboard.api.main:app"


@click.command()
@click.option('--host', help='Host to bind')
@click.option('--port', type=int, help='Port to bind')
@click.option('--reload', is_flag=True, help='Enable auto-reload')
@click.option('--workers', type=int, help='Number of workers')
@click.option(
    '--log-level',
    type=click.Choice(['debug', 'info', 'warning', 'error']),
    help='Log level',
)
@click.pass_context
def serve(ctx, host, port, reload, workers, log_level):
    """🚀 Start the FastAPI server.

    The server connects to MongoDB on startup and exits if the database
    cannot be reached.

    Examples:
        postboard serve

        postboard serve --port 8080 --reload
    """
    console = get_console()

    try:
        config_path = ctx.obj.get('config')
        config = load_config(config_path)

        # uvicorn imports the app by path, in this process or in workers;
        # the environment carries the config file to it
        if config_path:
            os.environ[CONFIG_ENV_VAR] = str(Path(config_path).resolve())

        server_host = host or config.get('api.host', default='0.0.0.0')
        server_port = port or config.get('api.port', default=4000)
        server_reload = reload or config.get('api.reload', default=False)
        server_workers = workers or config.get('api.workers', default=1)
        server_log_level = log_level or config.get('api.log_level', default='info')

        startup_info = f"""[bold cyan]Postboard API Server[/bold cyan]

[bold]Server URL:[/bold] http://{server_host}:{server_port}
[bold]API Documentation:[/bold] http://{server_host}:{server_port}/docs

[bold]Configuration:[/bold]
  • Workers: {server_workers}
  • Auto-reload: {'Yes' if server_reload else 'No'}
  • Log level: {server_log_level}

[yellow]Press Ctrl+C to stop the server[/yellow]
"""
        if not ctx.obj.get('quiet'):
            console.print(Panel(startup_info, border_style="green"))

        import uvicorn

        uvicorn.run(
            APP_IMPORT_PATH,
            host=server_host,
            port=server_port,
            reload=server_reload,
            workers=server_workers if not server_reload else 1,  # Reload doesn't work with multiple workers
            log_level=server_log_level,
        )

    except KeyboardInterrupt:
        console.print()
        print_info("Server stopped by user")
    except click.ClickException:
        raise
    except Exception as e:
        print_error(f"Failed to start server: {e}")
        if ctx.obj.get('verbose'):
            console.print_exception()
        raise click.Abort()
