"""Restore command - bring back a file as it was at a commit."""

import os
import click
from pathlib import Path
from groot.core.errors import GrootError
from groot.core.repository import Repository
from groot.cli.output import success, error


@click.command('restore')
@click.argument('file')
@click.argument('commit')
def restore_cmd(file, commit):
    """
    Restore a file to its content at a commit.
    
    The working copy of FILE is overwritten. Nothing is written if the
    commit or the file cannot be found.
    
    Examples:
        groot restore notes.txt 3f2a9c1
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    target = Path(os.path.normpath(Path.cwd().resolve() / file))
    try:
        rel_path = target.relative_to(repo.work_tree).as_posix()
    except ValueError:
        click.echo(error(f"{file} is outside the repository"))
        raise click.Abort()
    
    try:
        commit_hash = repo.graph.resolve(commit)
        repo.restore(rel_path, commit_hash)
    except GrootError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    click.echo(success(f"Restored {file} to its state at commit {commit_hash}"))
