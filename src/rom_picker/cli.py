"""CLI entry point for rom-picker."""

from pathlib import Path

import click
from loguru import logger

from .config import PickerConfig
from .errors import ConfigurationError, MissingInputError
from .inputs import load_candidates, load_titles
from .runner import ConfirmRescan, PickerRunner

log = logger.bind(stage="cli")


def _prompt_rescan(unmatched: list[str]) -> bool:
    return click.confirm(
        f"{len(unmatched)} titles unmatched. Rescan them at the secondary threshold?",
        default=False,
    )


def _fixed_answer(answer: bool) -> ConfirmRescan:
    return lambda unmatched: answer


@click.command()
@click.argument("game_list", type=click.Path(dir_okay=False), required=False)
@click.option(
    "-s",
    "--source",
    "source_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory of candidate files.",
)
@click.option(
    "-d",
    "--dest",
    "dest_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to copy matched files into (created if absent).",
)
@click.option(
    "-t",
    "--threshold",
    "primary_threshold",
    type=float,
    default=None,
    help="Primary pass match threshold in (0, 1].",
)
@click.option(
    "--secondary-threshold",
    type=float,
    default=None,
    help="Secondary pass threshold, must be lower than the primary.",
)
@click.option(
    "--rescan/--no-rescan",
    default=None,
    help="Run (or skip) the secondary pass without asking.",
)
@click.option(
    "--missed-list",
    "missed_list_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write titles still unmatched at the end to this file.",
)
@click.option(
    "--dry-run", is_flag=True, help="Show what would be copied without copying."
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to .env file.",
)
def main(
    game_list: str | None,
    source_dir: str | None,
    dest_dir: str | None,
    primary_threshold: float | None,
    secondary_threshold: float | None,
    rescan: bool | None,
    missed_list_file: str | None,
    dry_run: bool,
    verbose: bool,
    config_file: str | None,
) -> None:
    """Pick the best matching ROM for each title in a wanted list and copy it."""
    # Only pass options given on the command line so env/.env values survive
    config_kwargs: dict[str, object] = {"dry_run": dry_run, "verbose": verbose}
    for key, value in (
        ("game_list_file", game_list),
        ("source_dir", source_dir),
        ("dest_dir", dest_dir),
        ("primary_threshold", primary_threshold),
        ("secondary_threshold", secondary_threshold),
        ("missed_list_file", missed_list_file),
    ):
        if value is not None:
            config_kwargs[key] = value
    if verbose:
        config_kwargs["log_level"] = "DEBUG"

    env_file = Path(config_file) if config_file else Path(".env")
    config = PickerConfig(_env_file=env_file, **config_kwargs)  # type: ignore[arg-type]

    try:
        config.validate_thresholds()
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    log_file = config.setup_logging()
    log.debug(f"Logging to {log_file}")

    try:
        titles = load_titles(config.game_list_file, limit=config.max_titles)
        candidates = load_candidates(config.source_dir)
    except MissingInputError as e:
        raise click.ClickException(str(e)) from e

    confirm = _prompt_rescan if rescan is None else _fixed_answer(rescan)

    log.info(
        f"Starting picker: list={config.game_list_file} source={config.source_dir} "
        f"dest={config.dest_dir} dry_run={config.dry_run}"
    )
    runner = PickerRunner(config=config, confirm=confirm)
    runner.run(titles, candidates)
