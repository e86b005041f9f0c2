"""Add command - stage files for commit."""

import click
from pathlib import Path
from groot.core.errors import GrootError
from groot.core.repository import Repository
from groot.utils.ignore import REPO_DIR_PATTERN, IgnoreMatcher, get_ignore_matcher
from groot.utils.scanner import list_files
from groot.cli.output import success, error, info, warning


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
@click.option('-f', '--force', is_flag=True, help='Add ignored files')
def add_cmd(paths, force):
    """
    Add file contents to the staging area.
    
    Stage files for the next commit. Modified files must be added
    again to stage the new changes. Directories are added recursively.
    
    Files matching patterns in .grootignore are skipped unless --force is used.
    
    Examples:
        groot add file.txt
        groot add src
        groot add .
        groot add -f ignored_file.txt
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository"))
        raise click.Abort()
    
    if force:
        matcher = IgnoreMatcher([REPO_DIR_PATTERN])
    else:
        matcher = get_ignore_matcher(repo.work_tree, repo.config.ignore_file)
    
    index = repo.index
    added_files = []
    failed_files = []
    ignored_files = []
    
    def stage(rel_path_str):
        try:
            index.add_file(repo.work_tree, rel_path_str)
            added_files.append(rel_path_str)
        except (GrootError, OSError, ValueError) as e:
            failed_files.append((rel_path_str, str(e)))
    
    for path_pattern in paths:
        resolved_path = (Path.cwd() / path_pattern).resolve()
        
        if not resolved_path.exists():
            failed_files.append((path_pattern, "File not found"))
            continue
        
        try:
            rel_path_str = resolved_path.relative_to(repo.work_tree).as_posix()
        except ValueError:
            failed_files.append((path_pattern, "Outside repository"))
            continue
        
        if resolved_path.is_file():
            if matcher.is_ignored(rel_path_str):
                ignored_files.append(rel_path_str)
                continue
            stage(rel_path_str)
        
        elif resolved_path.is_dir():
            prefix = '' if rel_path_str == '.' else rel_path_str + '/'
            if prefix and matcher.is_ignored(rel_path_str):
                ignored_files.append(prefix)
                continue
            
            for sub_path in list_files(resolved_path, lambda p: matcher.is_ignored(prefix + p)):
                stage(prefix + sub_path)
    
    if added_files:
        click.echo(success(f"Added {len(added_files)} file(s) to staging area"))
        for file in added_files:
            click.echo(info(f"  {file}"))
    
    if ignored_files:
        click.echo(warning(f"Ignored {len(ignored_files)} path(s) matching ignore patterns"))
        for file in ignored_files:
            click.echo(warning(f"  {file}"))
        click.echo(info("Use 'groot add -f <file>' to force add ignored files"))
    
    if failed_files:
        click.echo(error(f"Failed to add {len(failed_files)} file(s):"))
        for file, reason in failed_files:
            click.echo(error(f"  {file}: {reason}"))
        if not added_files:
            raise click.Abort()
    
    if not added_files and not failed_files and not ignored_files:
        click.echo(warning("No files matched"))
