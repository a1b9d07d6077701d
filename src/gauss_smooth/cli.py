"""
Gaussian-smooth a grayscale image.

Usage:
    gauss-smooth INPUT OUTPUT [--sigma SIGMA] [--truncate T] [--workers N]
                 [--config PATH] [--print-kernel] [--verbose]

Parameters left unset are taken from the configuration file (the packaged
config.yaml unless --config is given).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from gauss_smooth.config import Config
from gauss_smooth.exceptions import GaussSmoothError
from gauss_smooth.kernel import build_kernel
from gauss_smooth.libs.common.np_imgops import load_grid, save_grid
from gauss_smooth.libs.common.utilities import pretty_print
from gauss_smooth.smoothing import smooth_quantized

logger = logging.getLogger(__name__)


def cli(
    input_path: Path = typer.Argument(..., help="Image to smooth (converted to 8-bit grayscale)."),
    output_path: Path = typer.Argument(..., help="Where to save the smoothed image."),
    sigma: Optional[float] = typer.Option(None, "--sigma", "-s", help="Gaussian standard deviation, in pixels. 0 copies the input."),
    truncate: Optional[float] = typer.Option(None, "--truncate", "-t", help="Kernel half-width in standard deviations."),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Threads per convolution pass."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with default parameters."),
    print_kernel: bool = typer.Option(False, "--print-kernel", help="Print the 1D kernel before smoothing."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Gaussian-smooth INPUT_PATH and write the result to OUTPUT_PATH."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = Config(config if config is not None else "", verbose=verbose)
        options = cfg.with_overrides(sigma=sigma, truncate=truncate, workers=workers)

        if print_kernel:
            typer.echo(pretty_print(build_kernel(options.sigma, options.truncate)))

        grid = load_grid(input_path)
        logger.info("Loaded %s (%dx%d)", input_path, grid.shape[0], grid.shape[1])
        smoothed = smooth_quantized(grid, options=options)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        save_grid(smoothed, output_path)
        logger.info(
            "Smoothed %s -> %s (sigma=%s, truncate=%s)",
            input_path,
            output_path,
            options.sigma,
            options.truncate,
        )
    except (GaussSmoothError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    typer.run(cli)


if __name__ == "__main__":
    main()
