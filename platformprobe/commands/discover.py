import click
import json
import os
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..host.loader import load_project
from ..resolver import PlatformResolver

@click.command()
@click.pass_context
@click.option("--json", "as_json", is_flag=True, help="Print the discovered platforms as a JSON array.")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output of every strategy.")
@handle_exceptions
def discover(ctx, as_json, verbose):
    """Discover the source roots and classpath of every platform of the project."""
    path = ctx.obj["path"]
    logger.verbose = verbose
    conf = config_module.load_config(path=path)
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found in {os.path.abspath(path)}.")
        logger.info("Please export the project description before running discovery.")
        ctx.exit(1)

    project = load_project(conf, project_dir=path)
    resolver = PlatformResolver(project)
    platforms = resolver.resolve(
        kotlin_tasks=list(project.tasks),
        strategies=config_module.get_strategies(conf),
    )

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in platforms], indent=4))
        return

    if not platforms:
        logger.warning(f"No platform configuration found for project '{project.name}'.")
        return
    for data in platforms:
        logger.info(f"Platform {data.name or '<default>'} ({data.platform or 'unknown'})")
        logger.step_info("source roots:", indent=2)
        for root in data.source_roots:
            logger.step_info(str(root), indent=4)
        logger.step_info("classpath:", indent=2)
        for entry in data.classpath:
            logger.step_info(str(entry), indent=4)
    logger.success(f"Discovered {len(platforms)} platform(s) for project '{project.name}'.")
