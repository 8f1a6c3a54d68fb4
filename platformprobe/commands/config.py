import click
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..host.java import JavaPluginConvention
from ..host.kotlin import KotlinMultiplatformExtension, KotlinSingleTargetExtension
from ..host.loader import load_project
from ..utils.variants import get_variants

def _targets(targets):
    return ", ".join(f"{t.name} [{t.platform_type}]" for t in targets) or "none"

def describe_project(project):
    """One line per host shape the resolver strategies look for."""
    kotlin = project.extensions.find_by_name("kotlin")
    if isinstance(kotlin, KotlinMultiplatformExtension):
        lines = [f"kotlin: multiplatform, targets {_targets(kotlin.targets)}"]
    elif isinstance(kotlin, KotlinSingleTargetExtension):
        lines = [f"kotlin: single target {_targets([kotlin.target])}"]
    else:
        lines = ["kotlin: not configured"]

    if project.is_android_project():
        android = project.extensions.get_by_name("android")
        variants = ", ".join(v.name for v in get_variants(project)) or "none"
        lines.append(f"android: {type(android).__name__}, variants {variants}")
    else:
        lines.append("android: not configured")

    java = project.convention.find_by_type(JavaPluginConvention)
    if java is not None:
        lines.append(f"java: source sets {', '.join(java.source_sets.names) or 'none'}")
    else:
        lines.append("java: not applied")

    lines.append(f"tasks: {len(project.tasks)} compile task(s)")
    return lines

def _load(ctx):
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found.")
        ctx.exit(1)
    return conf

@click.group()
@click.pass_context
def config(ctx):
    """Inspect the platformprobe.toml project description."""
    pass

@config.command()
@click.pass_context
@handle_exceptions
def view(ctx):
    """Show the host shapes the project description declares."""
    conf = _load(ctx)
    project = load_project(conf, project_dir=ctx.obj["path"])
    click.echo(f"project: {project.name}")
    for line in describe_project(project):
        click.echo(line)

@config.command()
@click.pass_context
@handle_exceptions
def strategies(ctx):
    """Show the order in which discovery strategies are tried."""
    conf = _load(ctx)
    for position, strategy in enumerate(config_module.get_strategies(conf), start=1):
        click.echo(f"{position}. {strategy}")
