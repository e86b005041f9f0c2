"""Commit command - create a commit from staged changes."""

import click
from groot.core.errors import GrootError
from groot.core.repository import Repository
from groot.cli.output import success, error, info, warning


@click.command('commit')
@click.argument('message')
def commit_cmd(message):
    """
    Record the staged files as a new commit.
    
    The new commit points at the previous HEAD as its parent, HEAD moves
    to the new commit and the staging area is emptied. Committing with an
    empty staging area records a commit with no files.
    
    Examples:
        groot commit "Initial commit"
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    try:
        staged = len(repo.index)
        parent = repo.graph.current_head()
        
        if staged == 0:
            click.echo(warning("Staging area is empty; recording a commit with no files"))
        
        commit_hash = repo.commit(message)
    except GrootError as e:
        click.echo(error(f"Error committing changes: {e}"))
        raise click.Abort()
    
    click.echo(success(f"Commit successfully created: {commit_hash}"))
    click.echo(info(f"Message: {message}"))
    if parent:
        click.echo(info(f"Parent: {parent[:7]}"))
    else:
        click.echo(info("(root commit)"))
    click.echo(info(f"Files: {staged}"))
