#!/usr/bin/env python3
"""
HullScope Design Explorer

Computes hydrostatics and performance for one trailerable hull and,
optionally, trains the surrogate and maps the LWL × beam design space around
it.

Usage:
    python scripts/explore_design.py --lwl 6.5 --beam 1.6 --hull-type flat-bottom
    python scripts/explore_design.py --train --epochs 10 --resolution 12

Examples:
    # Default 7 m single-chine skiff
    python scripts/explore_design.py

    # Heavily loaded narrow hull
    python scripts/explore_design.py --beam 1.3 --crew 240 --cargo 200

    # Surrogate prediction plus a coarse design-space map, as JSON
    python scripts/explore_design.py --train --epochs 5 --resolution 8 --json
"""

import argparse
import asyncio
import json
import sys
import os

# Ensure HullScope is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dataclasses import replace

from hullscope.bootstrap import get_config, setup_logging_from_config
from hullscope.core import HullParams, HullType, clamp_params
from hullscope.physics import compute_physics
from hullscope.stability import summarize_righting_curve
from hullscope.surrogate import SurrogateService


def print_header(title: str):
    """Print a formatted header."""
    print("\n" + "=" * 70)
    print(f" {title}")
    print("=" * 70)


def print_section(title: str):
    """Print a formatted section header."""
    print(f"\n--- {title} ---")


def print_progress(progress):
    if progress.stage == "data generation":
        print(f"  labelled {progress.completed:6d}/{progress.total} designs")
        return
    line = f"  epoch {progress.epoch:3d}/{progress.total_epochs}  loss {progress.loss:.5f}"
    if progress.val_loss is not None:
        line += f"  val {progress.val_loss:.5f}"
    print(line)


async def explore(
    params: HullParams,
    train: bool = False,
    epochs: int = None,
    resolution: int = None,
    verbose: bool = True,
) -> dict:
    """
    Evaluate one design and optionally the surrogate around it.

    Args:
        params: Design to evaluate (clamped to its parameter domain)
        train: Train the surrogate and map the design space
        epochs: Training epochs (default from configuration)
        resolution: Grid points per axis (default from configuration)
        verbose: Print progress and results

    Returns:
        Dictionary with physics and, when trained, surrogate results
    """
    config = get_config()

    params, warnings = clamp_params(params)
    results = compute_physics(params)
    summary = summarize_righting_curve(results.righting_curve)

    if verbose:
        print_header("HULLSCOPE DESIGN")
        for warning in warnings:
            print(f"  WARNING: {warning}")

        print_section("HULL")
        print(f"  LWL:   {params.lwl:.2f} m")
        print(f"  Beam:  {params.beam:.2f} m")
        print(f"  Depth: {params.depth:.2f} m")
        print(f"  Type:  {params.hull_type.value}")
        print(f"  Load:  {params.total_load:.0f} kg")

        print_section("HYDROSTATICS")
        print(f"  Displacement: {results.displacement:.1f} kg")
        print(f"  Draft:        {results.draft:.3f} m")
        print(f"  Freeboard:    {results.freeboard:.3f} m")

        print_section("STABILITY")
        print(f"  KB: {results.kb:.3f} m")
        print(f"  BM: {results.bm:.3f} m")
        print(f"  KG: {results.kg:.3f} m")
        print(f"  GM: {results.gm:.3f} m ({results.stability_rating.value})")
        print(f"  GZ max: {summary.gz_max_m:.3f} m at {summary.angle_gz_max_deg:.0f} deg")

        print_section("PERFORMANCE")
        print(f"  Hull speed:  {results.hull_speed:.2f} kn (Fn {results.froude_number:.3f})")
        print(f"  Max speed:   {results.max_speed:.2f} kn")
        print(f"  Planing:     {'yes' if results.planing_capable else 'no'}")

    output = {
        "params": params.to_dict(),
        "warnings": warnings,
        "physics": results.to_dict(),
        "righting_summary": summary.to_dict(),
    }

    if not train:
        return output

    training = config.training
    if epochs is not None:
        training = replace(training, epochs=epochs)

    service = SurrogateService(training)
    if verbose:
        print_section("SURROGATE TRAINING")
    context = await service.train(print_progress if verbose else None)

    prediction = service.predict(params)
    grid = service.design_space(params, resolution or config.grid.resolution)

    if verbose:
        print_section("SURROGATE PREDICTION")
        print(f"  GM:         {prediction.gm:.3f} m (physics {results.gm:.3f})")
        print(f"  Hull speed: {prediction.hull_speed:.2f} kn (physics {results.hull_speed:.2f})")
        print(f"  Max speed:  {prediction.max_speed:.2f} kn (physics {results.max_speed:.2f})")
        print(f"  Draft:      {prediction.draft:.3f} m (physics {results.draft:.3f})")

        print_section("DESIGN SPACE")
        print(f"  Grid:    {grid.shape[0]} x {grid.shape[1]}")
        print(f"  GM:      {grid.gm_grid.min():.2f} .. {grid.gm_grid.max():.2f} m")
        print(f"  Speed:   {grid.hull_speed_grid.min():.2f} .. {grid.hull_speed_grid.max():.2f} kn")
        print(f"  Draft:   {grid.draft_grid.min():.3f} .. {grid.draft_grid.max():.3f} m")
        print("\n" + "=" * 70)

    output["surrogate"] = context.to_dict()
    output["prediction"] = prediction.to_dict()
    output["design_space"] = grid.to_dict()
    return output


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Evaluate a trailerable hull design",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/explore_design.py                              # Default skiff
  python scripts/explore_design.py --hull-type round-bilge      # Displacement hull
  python scripts/explore_design.py --train --epochs 10          # With surrogate map
        """
    )

    defaults = HullParams()

    parser.add_argument("--lwl", type=float, default=defaults.lwl,
                        help=f"Waterline length in m (default: {defaults.lwl})")
    parser.add_argument("--beam", type=float, default=defaults.beam,
                        help=f"Beam in m (default: {defaults.beam})")
    parser.add_argument("--depth", type=float, default=defaults.depth,
                        help=f"Hull depth in m (default: {defaults.depth})")
    parser.add_argument("--hull-type", type=str, default=defaults.hull_type.value,
                        choices=[t.value for t in HullType],
                        help=f"Hull form (default: {defaults.hull_type.value})")
    parser.add_argument("--deadrise", type=float, default=defaults.deadrise,
                        help=f"Deadrise in degrees (default: {defaults.deadrise})")
    parser.add_argument("--crew", type=float, default=defaults.crew_weight,
                        help=f"Crew weight in kg (default: {defaults.crew_weight})")
    parser.add_argument("--cargo", type=float, default=defaults.cargo_weight,
                        help=f"Cargo weight in kg (default: {defaults.cargo_weight})")
    parser.add_argument("--hp", type=float, default=defaults.engine_hp,
                        help=f"Engine power in hp (default: {defaults.engine_hp})")
    parser.add_argument("--train", action="store_true",
                        help="Train the surrogate and map the design space")
    parser.add_argument("--epochs", type=int, default=None,
                        help="Training epochs (default: from configuration)")
    parser.add_argument("--resolution", type=int, default=None,
                        help="Design-space grid points per axis (default: from configuration)")
    parser.add_argument("--json", action="store_true",
                        help="Print results as JSON")
    parser.add_argument("--quiet", action="store_true",
                        help="Suppress verbose output")

    args = parser.parse_args()

    setup_logging_from_config(get_config().logging)

    params = defaults.replace(
        lwl=args.lwl,
        beam=args.beam,
        depth=args.depth,
        hull_type=args.hull_type,
        deadrise=args.deadrise,
        crew_weight=args.crew,
        cargo_weight=args.cargo,
        engine_hp=args.hp,
    )

    result = asyncio.run(explore(
        params,
        train=args.train,
        epochs=args.epochs,
        resolution=args.resolution,
        verbose=not (args.quiet or args.json),
    ))

    if args.json:
        print(json.dumps(result, indent=2))

    sys.exit(0)


if __name__ == "__main__":
    main()
