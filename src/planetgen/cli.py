"""Command line entry point: generate planets or survey a seed range."""
from __future__ import annotations

import argparse
import logging
from collections import Counter
from pathlib import Path
from typing import Sequence

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from planetgen.core.config import GENERATION_CFG
from planetgen.core.errors import PlanetGenError
from planetgen.core.logging_utils import RunLogger
from planetgen.core.model import OrbitalProfile, SurfaceType
from planetgen.data.palettes import SURFACE_COLORS, SURFACE_ORDER
from planetgen.planet_generator import derive_planet_profile, generate_planets

logger = logging.getLogger("planetgen")

DEFAULT_RUNS_DIR = Path("data") / "runs"
SURVEY_FIGURE = "survey.png"


# ===========================
# GENERATE
# ===========================
def run_generate(args: argparse.Namespace) -> int:
    # pygame is only needed once PNGs are written.
    if not args.no_png:
        from planetgen.render.export import save_texture_png

    planets = generate_planets(
        args.seeds,
        max_workers=args.workers,
        surface_type=args.type,
        texture_size=args.size,
        lightweight=args.lightweight,
    )

    with RunLogger(args.out, run_id=args.run_id) as run_logger:
        run_logger.write_meta(
            {
                "command": "generate",
                "seeds": list(args.seeds),
                "surface_type": args.type,
                "texture_size": args.size,
                "lightweight": args.lightweight,
                "png": not args.no_png,
            }
        )
        for planet in planets:
            texture_file = None
            if not args.no_png:
                texture_file = save_texture_png(
                    planet.texture,
                    run_logger.textures_dir / f"planet_{planet.seed}.png",
                )
            run_logger.log_planet(planet, texture_file)
            print(format_profile(planet.seed, planet.profile))

    print(f"Run: {run_logger.run_dir}")
    return 0


def format_profile(seed: int, profile: OrbitalProfile) -> str:
    return (
        f"seed={seed:<11d} type={profile.surface_type.value:<5s} "
        f"r={profile.orbit_radius:6.3f} w={profile.orbit_speed:5.3f} "
        f"tilt={profile.orbit_tilt:5.3f} size={profile.size:5.3f}"
    )


# ===========================
# SURVEY
# ===========================
def survey_profiles(start: int, count: int) -> list[OrbitalProfile]:
    return [derive_planet_profile(seed) for seed in range(start, start + count)]


def count_surface_types(profiles: Sequence[OrbitalProfile]) -> dict[SurfaceType, int]:
    counts = Counter(profile.surface_type for profile in profiles)
    return {surface_type: counts.get(surface_type, 0) for surface_type in SURFACE_ORDER}


def plot_survey(out_path: Path, profiles: Sequence[OrbitalProfile]) -> Path:
    columns = {
        "Orbit radius": (
            np.array([p.orbit_radius for p in profiles]),
            GENERATION_CFG.orbit_radius_range,
        ),
        "Orbit speed": (
            np.array([p.orbit_speed for p in profiles]),
            GENERATION_CFG.orbit_speed_range,
        ),
        "Orbit tilt": (
            np.array([p.orbit_tilt for p in profiles]),
            GENERATION_CFG.orbit_tilt_range,
        ),
        "Size": (
            np.array([p.size for p in profiles]),
            GENERATION_CFG.size_range,
        ),
    }

    fig, axes = plt.subplots(1, len(columns) + 1, figsize=(16, 3.5))
    for ax, (title, (values, bounds)) in zip(axes, columns.items()):
        ax.hist(values, bins=30, range=bounds, color="#4dabf7", alpha=0.85)
        ax.set_title(title)
        ax.grid(True, alpha=0.3)

    counts = count_surface_types(profiles)
    ax = axes[-1]
    ax.bar(
        [surface_type.value for surface_type in counts],
        list(counts.values()),
        color=["#{:02x}{:02x}{:02x}".format(*SURFACE_COLORS[t]) for t in counts],
    )
    ax.set_title("Surface type")
    ax.grid(True, axis="y", alpha=0.3)

    fig.suptitle(f"{len(profiles)} seeds")
    fig.tight_layout()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
    return out_path


def run_survey(args: argparse.Namespace) -> int:
    profiles = survey_profiles(args.start, args.count)
    counts = count_surface_types(profiles)
    print(f"Seeds {args.start}..{args.start + args.count - 1}")
    for surface_type, count in counts.items():
        share = count / len(profiles) if profiles else 0.0
        print(f" {surface_type.value:<5s} {count:6d} ({share:6.1%})")

    if not args.no_plot:
        figure = plot_survey(Path(args.out) / SURVEY_FIGURE, profiles)
        print(f"Figure: {figure}")
    return 0


# ===========================
# ENTRY POINT
# ===========================
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planetgen",
        description="Deterministic procedural planets from integer seeds.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate planets and write their textures")
    gen.add_argument("seeds", nargs="+", type=int, help="One or more 32-bit seeds")
    gen.add_argument(
        "--type",
        choices=[surface_type.value for surface_type in SurfaceType],
        default=None,
        help="Force a surface type",
    )
    gen.add_argument("--size", type=int, default=None, help="Texture edge length in pixels")
    gen.add_argument("--lightweight", action="store_true", help="Speckled texture for small bodies")
    gen.add_argument("--out", type=Path, default=DEFAULT_RUNS_DIR, help="Root directory for runs")
    gen.add_argument("--run-id", default=None, help="Custom run identifier")
    gen.add_argument("--workers", type=int, default=None, help="Worker threads")
    gen.add_argument("--no-png", action="store_true", help="Skip writing PNG textures")
    gen.set_defaults(func=run_generate)

    survey = sub.add_parser("survey", help="Summarize derived profiles over a seed range")
    survey.add_argument("--start", type=int, default=0)
    survey.add_argument("--count", type=int, default=3000)
    survey.add_argument("--out", type=Path, default=Path("figures"))
    survey.add_argument("--no-plot", action="store_true", help="Only print the counts")
    survey.set_defaults(func=run_survey)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command == "survey" and args.count <= 0:
        parser.error("--count must be positive")
    try:
        return args.func(args)
    except PlanetGenError as exc:
        logger.debug("Generation failed", exc_info=True)
        parser.error(str(exc))
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
