import click

from logz import __version__
from logz.config import LoggingConfig
from logz.levels import LogLevel, get_log_level
from logz.logger import Logz

CONTEXT_SETTINGS = dict(auto_envvar_prefix="LOGZ_CLI")

LEVEL_HELP = "trace, info, warning, error or fatal."


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="logz")
@click.option(
    "-c",
    "--config",
    type=click.Path(),
    metavar="",
    help="Optional path to a YAML file with a 'logging' section.",
)
@click.option("--std-level", metavar="", help=f"Minimum level written to stdout: {LEVEL_HELP}")
@click.option("--out-level", metavar="", help=f"Minimum level written to the output: {LEVEL_HELP}")
@click.option("--stack-level", metavar="", help=f"Minimum level that appends a stack trace: {LEVEL_HELP}")
@click.option(
    "-o",
    "--output",
    type=click.Choice(["stderr", "stdout", "file"]),
    help="Configured output.",
)
@click.option("-f", "--file", "file_path", type=click.Path(), metavar="", help="Log file path for --output file.")
@click.option("--caller/--no-caller", "log_file_name", default=None, help="Include caller file:line.")
@click.option("-l", "--level", default="info", show_default=True, metavar="", help=f"Message level: {LEVEL_HELP}")
@click.argument("message", nargs=-1, required=True)
def cli(config, std_level, out_level, stack_level, output, file_path, log_file_name, level, message):
    """Write MESSAGE through logz.

    Examples:
        logz --std-level info "Service started"
        logz -o file -f app.log -l warn "Disk almost full"
        logz -l fatal "Unrecoverable"        # exits with status 1
    """
    message_level = get_log_level(level)
    with LoggingConfig.setup_logging(
        config_path=config,
        logger=Logz(),
        std_level=std_level,
        out_level=out_level,
        stack_level=stack_level,
        output=output,
        file_path=file_path,
        log_file_name=log_file_name,
    ) as logger:
        if message_level == LogLevel.CRITICAL:
            logger.critical(*message)
        logger.log(message_level, *message)
