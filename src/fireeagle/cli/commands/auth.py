"""Authentication commands."""

import webbrowser

import typer

from fireeagle.cli.async_runner import async_command
from fireeagle.cli.client_factory import get_client
from fireeagle.cli.config import CLIConfig
from fireeagle.cli.formatters import console, print_info, print_success
from fireeagle.exceptions import ConfigurationError

app = typer.Typer(no_args_is_help=True)


@app.command("login")
@async_command
async def login(
    ctx: typer.Context,
    no_browser: bool = typer.Option(
        False,
        "--no-browser",
        help="Don't open browser automatically.",
    ),
    verifier_prompt: bool = typer.Option(
        False,
        "--verifier-prompt/--no-verifier-prompt",
        help="Ask for an oauth_verifier code after authorization.",
    ),
) -> None:
    """Authorize this application with FireEagle.

    This command runs the OAuth flow:
    1. Fetches a request token and opens the authorization page
    2. Waits until you have granted access
    3. Exchanges the request token for an access token and prints it

    The access token is not stored; add it to your credentials file or
    environment.
    """
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        print_info("Requesting authorization URL...")
        auth_url = await client.get_authorization_url()

        if no_browser:
            console.print("\nOpen this URL in your browser:")
            console.print(auth_url, highlight=False, soft_wrap=True)
        else:
            print_info("Opening browser for authorization...")
            webbrowser.open(auth_url)
            console.print("\n[dim]If browser didn't open, visit:[/dim]")
            console.print(auth_url, highlight=False, soft_wrap=True)

        console.print()
        verifier = None
        if verifier_prompt:
            verifier = typer.prompt("Enter the verification code from FireEagle").strip()
        else:
            typer.confirm("Have you authorized the application?", default=True, abort=True)

        print_info("Exchanging request token for access token...")
        access_token = await client.request_access_token(verifier=verifier)

    print_success("Authorized successfully!")
    console.print(f"access_token:        {access_token.token}", highlight=False)
    console.print(f"access_token_secret: {access_token.token_secret}", highlight=False)
    print_info(
        "Save these as FIREEAGLE_ACCESS_TOKEN and FIREEAGLE_ACCESS_TOKEN_SECRET "
        f"or in {config.credentials_path}"
    )


@app.command("status")
def status(ctx: typer.Context) -> None:
    """Check whether an access token is configured."""
    config: CLIConfig = ctx.obj

    console.print(f"Credentials file: {config.credentials_path}")

    try:
        fe_config = config.load_config()
    except ConfigurationError as e:
        print_info(e.message)
        raise typer.Exit(1) from None

    if fe_config.has_access_token:
        print_success("Access token configured - you are authorized")
        print_info("The service may still reject a revoked token")
    else:
        print_info("Not authorized - run 'fireeagle auth login' to authorize")
