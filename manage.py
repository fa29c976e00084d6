import click

from auth.auth import BcryptPasswordHasher
from configs.manager import settings
from controller.user_controller import set_admin_password
from db.store import JsonStore


def get_store() -> JsonStore:
    return JsonStore(
        settings.DATA_PATH,
        admin_username=settings.ADMIN_USERNAME,
        company_name=settings.DEFAULT_COMPANY_NAME,
    )


@click.group()
def cli():
    """Catalog admin management script."""
    pass


@cli.command()
def init_store():
    """Creates the datastore file with default values."""
    if get_store().ensure_initialized():
        click.echo(f"Datastore created at {settings.DATA_PATH}.")
    else:
        click.echo(f"Datastore already exists at {settings.DATA_PATH}.")


@cli.command("set-admin-password")
@click.password_option(help="New admin password.")
def set_admin_password_cmd(password):
    """Sets the password of the admin account."""
    store = get_store()
    set_admin_password(store, BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS), password)
    click.echo(f"Password updated for '{store.load().admin.username}'.")


if __name__ == "__main__":
    cli()
