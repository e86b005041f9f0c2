"""Initialize a new Groot repository."""

import click
from pathlib import Path
from groot.core.errors import GrootError, RepositoryExistsError
from groot.core.repository import Repository
from groot.cli.output import success, error, info, warning


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Groot repository.
    
    Creates a .groot directory with the object database, an empty HEAD
    and an empty staging area. Running it again is harmless.
    
    Examples:
        groot init                  # Initialize in current directory
        groot init my-project       # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()
    repo = Repository(str(repo_path))
    
    try:
        repo.init()
    except RepositoryExistsError:
        click.echo(warning(f".groot directory already initialized in {repo_path}"))
        return
    except GrootError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()
    
    click.echo(success(f"Initialized empty Groot repository in {repo.groot_dir}"))
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  groot add <file>"))
    click.echo(info("  groot commit '<message>'"))
