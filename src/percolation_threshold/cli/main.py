"""
Command-line interface for percolation_threshold.

Commands:
    percolation-stats stats N TRIALS [--seed S] [--confidence C]
        Run TRIALS experiments on an N-by-N grid and print the sample mean,
        sample standard deviation and confidence interval of the threshold.

    percolation-stats run --config run.yaml [--overwrite]
        Run the grid-size sweep described by a YAML run config.

    percolation-stats results summarize --results-dir DIR --output CSV
        Aggregate saved per-size results into a summary CSV.
"""

import click

from .. import __version__


@click.group()
@click.version_option(version=__version__)
def cli():
    """Percolation threshold estimation via Monte Carlo simulation."""
    pass


@cli.command('stats')
@click.argument('n', type=int)
@click.argument('trials', type=int)
@click.option('--seed', type=int, default=None, help='Random seed for reproducibility')
@click.option('--confidence', default=0.95, type=float, show_default=True,
              help='Confidence level of the interval')
def stats_command(n, trials, seed, confidence):
    """Estimate the percolation threshold of an N-by-N grid over TRIALS trials."""
    from ..percolation.stats import PercolationStats

    try:
        experiment = PercolationStats(n, trials, seed=seed, confidence=confidence)
    except ValueError as e:
        raise click.UsageError(str(e))

    click.echo(f"program took {experiment.elapsed_seconds:f} seconds")
    click.echo(f"mean = {experiment.mean():f}")
    click.echo(f"stddev = {experiment.stddev():f}")
    click.echo(f"{confidence * 100:g}% confidence interval = "
               f"{experiment.confidence_lo():f}, {experiment.confidence_hi():f}")


@cli.command('run')
@click.option('--config', '-c', 'config_path', required=True, type=click.Path(exists=True),
              help='Run config YAML file')
@click.option('--overwrite', is_flag=True, help='Re-run grid sizes that already have results')
def run_command(config_path, overwrite):
    """Run the grid-size sweep defined in a run config."""
    from ..run import RunConfig, RunOrchestrator

    try:
        config = RunConfig.from_yaml(config_path)
    except ValueError as e:
        click.echo(f"ERROR: invalid run config: {e}", err=True)
        raise SystemExit(1)

    orchestrator = RunOrchestrator(config, skip_completed=not overwrite)
    df = orchestrator.run_all()

    click.echo(f"✓ {len(df)} grid sizes summarized in {config.summary_csv}")


# ============================================================================
# Results Commands
# ============================================================================

@cli.group()
def results():
    """Result aggregation commands."""
    pass


@results.command('summarize')
@click.option('--results-dir', '-r', required=True, type=click.Path(exists=True),
              help='Directory containing n_*.npz result files')
@click.option('--output', '-o', 'output_csv', required=True, type=click.Path(),
              help='Output CSV file')
def results_summarize(results_dir, output_csv):
    """Aggregate saved threshold results into a CSV."""
    from ..percolation.analysis import aggregate_results_to_csv

    df = aggregate_results_to_csv(results_dir, output_csv)
    if df.empty:
        click.echo("No results to summarize", err=True)
        raise SystemExit(1)


if __name__ == '__main__':
    cli()
