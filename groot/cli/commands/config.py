"""Config command - manage repository configuration."""

import click
from groot.core.config import get_config, parse_key
from groot.core.errors import GrootError
from groot.core.repository import Repository
from groot.cli.output import success, error, info


def _config_for(is_global):
    if is_global:
        return get_config()
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a groot repository (use --global for global config)"))
        raise click.Abort()
    return get_config(repo)


def _parse(key):
    try:
        return parse_key(key)
    except GrootError as e:
        click.echo(error(str(e)))
        raise click.Abort()


@click.group('config')
def config_cmd():
    """
    Get and set repository or global options.
    
    Groot reads core.ignorefile, core.loglevel and color.ui; values for
    these are checked when set.
    """
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.
    
    Examples:
        groot config set core.ignorefile .ignore
        groot config set --global color.ui false
    """
    section, option = _parse(key)
    config = _config_for(is_global)
    try:
        config.set(section, option, value, global_config=is_global)
    except GrootError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {section}.{option} = {value}"))


@config_cmd.command('get')
@click.argument('key')
def config_get(key):
    """
    Get a config value.
    
    Examples:
        groot config get core.ignorefile
    """
    section, option = _parse(key)
    value = get_config(Repository.find_repository()).get(section, option)
    
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """Remove a config value."""
    section, option = _parse(key)
    config = _config_for(is_global)
    try:
        removed = config.unset(section, option, global_config=is_global)
    except GrootError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    if not removed:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    
    click.echo(success(f"Removed {section}.{option}"))


@config_cmd.command('list')
def config_list():
    """List config values from the repository and global files."""
    values = get_config(Repository.find_repository()).list_all()
    
    if not values:
        click.echo(info("No configuration set"))
        return
    
    for key, value in values.items():
        click.echo(f"{key}={value}")
