# manage.py

# Load .env before the application reads its settings
from dotenv import load_dotenv
load_dotenv()

import asyncio
from typing import Optional

import typer
import uvicorn
from typing_extensions import Annotated

# Management CLI for the FastAPI project, built with Typer.
cli = typer.Typer(
    help="Management CLI for the winestock API."
)

# --- Database Commands ---

@cli.command()
def init_db():
    """
    Create every table declared by the models.
    """
    # Imported here so the engine is not built on --help
    from winestock.database import Base, async_engine
    import winestock.models  # noqa: F401  registers all tables on Base.metadata

    async def create_tables():
        async with async_engine.begin() as conn:
            typer.echo("Creating all tables...")
            await conn.run_sync(Base.metadata.create_all)
        typer.secho("Database initialized.", fg=typer.colors.GREEN)

    asyncio.run(create_tables())

# --- User Management Commands ---

@cli.command()
def create_user(
    name: Annotated[str, typer.Argument(help="Display name of the new user.")],
    email: Annotated[str, typer.Argument(help="Email of the new user (must be unique).")],
    password: Annotated[str, typer.Argument(help="Password of the new user.")],
    role: Annotated[Optional[str], typer.Option(help="Role to grant, created if missing.")] = None,
    customer_id: Annotated[Optional[str], typer.Option(help="Associated customer id.")] = None,
):
    """
    Create a user, optionally granting a role.
    """
    from winestock.config import settings
    from winestock.database import AsyncSessionLocal
    from winestock.repositories import UserRepository
    from winestock.schemas import UserCreateSchema
    from winestock.services import UserService, ConflictError

    async def add_user():
        typer.echo(f"Creating user '{email}'...")
        async with AsyncSessionLocal() as session:
            repository = UserRepository(session)
            user_service = UserService(repository, hash_rounds=settings.PASSWORD_HASH_ROUNDS)
            try:
                result = await user_service.create_user(UserCreateSchema(
                    name=name,
                    email=email,
                    password=password,
                    associated_customer_id=customer_id,
                ))
            except ConflictError as e:
                typer.secho(f"Failed: {e}", fg=typer.colors.RED)
                raise typer.Exit(code=1)

            if role:
                await repository.assign_role(result['user_id'], role)
            typer.secho(f"User '{email}' created with id {result['user_id']}.", fg=typer.colors.GREEN)

    asyncio.run(add_user())

# --- Server Commands ---

@cli.command()
def run(
    host: str = "127.0.0.1",
    port: Optional[int] = None,
    reload: bool = True
):
    """
    Run the Uvicorn development server.
    """
    from winestock.config import settings

    port = port or settings.PORT
    typer.echo(f"Running server on http://{host}:{port}")
    uvicorn.run("main:app", host=host, port=port, reload=reload, factory=True)


if __name__ == "__main__":
    cli()
