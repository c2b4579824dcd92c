import time

import click
import uvloop
from pydantic import ValidationError

from await_ready.env import Env, load_env
from await_ready.exit_codes import ExitCode, to_exit_code
from await_ready.logging import Logger, LoggingConfig, LogLevelName
from await_ready.logging.config import LogOutput
from await_ready.output import OutputMode, create_output, output_mode_names
from await_ready.poll import PollParams, poll
from await_ready.protocols import protocol_names
from await_ready.status import StatusCode
from await_ready.targets import parse_target
from await_ready.version import VERSION


LOG_LEVEL_NAMES = ["trace", "debug", "info", "warn", "error", "critical", "fatal"]


@click.command(
    name="await-ready",
    help="Wait until a TCP service accepts connections and, optionally, speaks its protocol.",
)
@click.argument("target", required=False)
@click.option("--host", default="localhost", show_default=True, type=str, help="The host to connect to.")
@click.option("-p", "--port", default=None, type=click.IntRange(1, 65535), help="The port to connect to.")
@click.option("--timeout", default=None, type=click.IntRange(min=0), help="The timeout in milliseconds (0 for infinite).")
@click.option("--interval", default=None, type=click.IntRange(min=10), help="The delay between rounds of attempts in milliseconds.")
@click.option("--ping-timeout", default=None, type=click.IntRange(min=0), help="How long a probe waits for the first response byte in milliseconds.")
@click.option("--protocol", default="none", show_default=True, type=click.Choice(protocol_names()), help="The protocol to check.")
@click.option("--path", default=None, type=str, help="Request path for HTTP probes.")
@click.option("--output", default="dots", show_default=True, type=click.Choice(output_mode_names()), help="Output mode.")
@click.option("-s", "--silent", is_flag=True, default=False, help="Suppress all output (shorthand for --output silent).")
@click.option("--wait-for-dns", is_flag=True, default=False, help="Keep waiting when the host cannot be resolved.")
@click.option("--log-level", default=None, type=click.Choice(LOG_LEVEL_NAMES), help="Log level for diagnostic logs.")
@click.option("--env-file", default=None, type=str, help="Path to a .env file with AWAIT_READY_* settings.")
@click.version_option(version=VERSION, prog_name="await-ready")
def await_ready_command(
    target: str | None,
    host: str,
    port: int | None,
    timeout: int | None,
    interval: int | None,
    ping_timeout: int | None,
    protocol: str,
    path: str | None,
    output: str,
    silent: bool,
    wait_for_dns: bool,
    log_level: LogLevelName | None,
    env_file: str | None,
):
    try:
        env = load_env(Env, env_file=env_file)

    except ValidationError as err:
        click.echo(f"Error: Invalid environment configuration\n{err}", err=True)
        raise SystemExit(ExitCode.VALIDATION_ERROR)

    exit_code = uvloop.run(
        run_await_ready(
            target=target,
            host=host,
            port=port,
            timeout=env.AWAIT_READY_TIMEOUT if timeout is None else timeout,
            interval=env.AWAIT_READY_INTERVAL if interval is None else interval,
            ping_timeout=env.AWAIT_READY_PING_TIMEOUT if ping_timeout is None else ping_timeout,
            protocol=protocol,
            path=path,
            output_mode=OutputMode.SILENT if silent else OutputMode(output),
            wait_for_dns=wait_for_dns,
            log_level=log_level or env.AWAIT_READY_LOG_LEVEL,
            log_output=env.AWAIT_READY_LOG_OUTPUT,
            log_directory=env.AWAIT_READY_LOGS_DIRECTORY,
        )
    )

    raise SystemExit(exit_code)


async def run_await_ready(
    target: str | None,
    host: str,
    port: int | None,
    timeout: int,
    interval: int,
    ping_timeout: int,
    protocol: str,
    path: str | None,
    output_mode: OutputMode,
    wait_for_dns: bool,
    log_level: LogLevelName = "error",
    log_output: LogOutput = "stderr",
    log_directory: str | None = None,
) -> ExitCode:
    # Context variables set here stay scoped to this run.
    logging_config = LoggingConfig()
    logging_config.update(
        log_directory=log_directory,
        log_level=log_level,
        log_output=log_output,
    )

    logger = Logger()

    try:
        if target:
            parsed = await parse_target(target, logger=logger)
            if parsed is None:
                click.echo(f"Error: Invalid target: '{target}'", err=True)
                return ExitCode.VALIDATION_ERROR

            host = parsed.host
            port = parsed.port
            protocol = parsed.protocol
            path = parsed.path

        elif port is None:
            click.echo("Error: A valid port is required. Specify a target or use -p.", err=True)
            return ExitCode.VALIDATION_ERROR

        output = create_output(output_mode)

        try:
            params = PollParams(
                host=host,
                port=port,
                timeout=timeout,
                interval=interval,
                protocol=protocol,
                path=path,
                wait_for_dns=wait_for_dns,
                ping_timeout=ping_timeout,
                on_retry=output.on_retry,
            )

        except ValidationError as err:
            click.echo(f"Error: Invalid arguments\n{err}", err=True)
            return ExitCode.VALIDATION_ERROR

        start = time.monotonic()

        try:
            await output.on_start(host, port)

            result = await poll(params, logger=logger)
            elapsed = int((time.monotonic() - start) * 1000)

            if result.code == StatusCode.CONNECTED:
                await output.on_success(host, port, elapsed)

            else:
                await output.on_failure(result.message, elapsed)

            return to_exit_code(result)

        finally:
            await output.dispose()

    finally:
        await logger.close()


def main():
    await_ready_command()
