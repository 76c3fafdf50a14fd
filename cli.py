"""CLI commands for the wedding RSVP proxy."""

import asyncio

import typer

from src.airtable.client import AirtableError
from src.client.api_client import ApiClientError, RSVPApiClient
from src.client.flow import RSVPSession, SubmissionError
from src.config.logging import setup_logging
from src.config.settings import settings
from src.guests.dtos import FamilyIntegrityError, GuestDTO
from src.guests.features.verify_name.read_model import VerifyNameReadModel
from src.guests.repository.read_models import AirtableGuestReadModel

app = typer.Typer(help="CLI commands for the wedding RSVP proxy")


def _print_guest(guest: GuestDTO) -> None:
    answers = []
    if guest.szertartas:
        answers.append("ceremony")
    if guest.lakodalom:
        answers.append("reception")
    if guest.transfer:
        answers.append("transfer")
    line = f"{guest.id}  {guest.name}"
    if answers:
        line += f"  [{', '.join(answers)}]"
    if guest.dietary_restrictions:
        line += f"  diet: {guest.dietary_restrictions}"
    typer.echo(line)


@app.command()
def serve(
    host: str = typer.Option(settings.app_host, help="Interface to bind"),
    port: int = typer.Option(settings.app_port, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the RSVP proxy with uvicorn."""
    import uvicorn

    uvicorn.run("src.main:app", host=host, port=port, reload=reload)


@app.command()
def list_guests(family_id: str = typer.Option("", help="Only guests of this family")):
    """List guests straight from Airtable."""
    read_model = AirtableGuestReadModel()
    try:
        if family_id:
            guests = asyncio.run(read_model.list_guests_by_family(family_id))
        else:
            guests = asyncio.run(read_model.list_guests())
    except AirtableError as e:
        typer.secho(f"Airtable error: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    for guest in guests:
        _print_guest(guest)
    typer.secho(f"{len(guests)} guests", fg=typer.colors.GREEN)


@app.command()
def verify_name(name: str):
    """Check how a name resolves to a guest and a family."""
    verifier = VerifyNameReadModel(AirtableGuestReadModel())
    try:
        result = asyncio.run(verifier.verify(name.strip()))
    except (AirtableError, FamilyIntegrityError) as e:
        typer.secho(f"Verification failed: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if result is None:
        typer.secho(f"{name!r} is not on the guest list", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    typer.secho(f"Found {result.guest.name} in family {result.family_id}", fg=typer.colors.GREEN)
    if result.family_email:
        typer.secho(f"Email: {result.family_email}", fg=typer.colors.BLUE)
    for member in result.family_members:
        _print_guest(member)


async def _run_rsvp(session: RSVPSession) -> None:
    name = typer.prompt("Your name")
    if not await session.verify(name):
        typer.secho("Name not found in guest list", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    for member in session.family_members:
        typer.echo(f"- {member.name}")
    session.begin_rsvp()

    for guest_id, draft in list(session.drafts.items()):
        typer.secho(draft.name, fg=typer.colors.CYAN)
        szertartas = typer.confirm("  Attending the ceremony?", default=draft.szertartas)
        lakodalom = typer.confirm("  Attending the reception?", default=draft.lakodalom)
        changes = {"szertartas": szertartas, "lakodalom": lakodalom}
        if lakodalom:
            changes["dietary_restrictions"] = typer.prompt(
                "  Dietary restrictions", default=draft.dietary_restrictions
            )
            changes["transfer"] = typer.confirm("  Need a transfer?", default=draft.transfer)
        session.update_member(guest_id, **changes)

    session.family_email = typer.prompt("Family email", default=session.family_email)
    session.family_notes = typer.prompt("Notes", default=session.family_notes)
    await session.submit()


@app.command()
def rsvp(api_url: str = typer.Option(settings.api_url, help="Base URL of a running proxy")):
    """Walk through the RSVP form against a running proxy."""
    session = RSVPSession(RSVPApiClient(api_url))
    try:
        asyncio.run(_run_rsvp(session))
    except (ApiClientError, SubmissionError) as e:
        typer.secho(f"RSVP failed: {e}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    typer.secho("Thank you, your RSVP has been recorded!", fg=typer.colors.GREEN)
    for result in session.results:
        if result.warning:
            typer.secho(result.warning, fg=typer.colors.YELLOW)
            break


if __name__ == "__main__":
    setup_logging()
    app()
