"""Run logging for batch planet generation."""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from .model import GeneratedPlanet


class RunLogger:
    """Buffered logger that stores generated planets to a CSV file.

    Parameters
    ----------
    root_dir:
        Root directory where run folders should be created.
    run_id:
        Optional custom run identifier. If omitted a timestamp based
        identifier in the form ``YYYYmmdd_HHMMSS_run`` is used.
    flush_threshold:
        Number of buffered rows before an automatic flush to disk.
    """

    PLANETS_HEADER = [
        "seed",
        "surface_type",
        "orbit_radius",
        "orbit_speed",
        "orbit_tilt",
        "size",
        "color",
        "texture_width",
        "texture_height",
        "texture_sha256",
        "texture_file",
    ]

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        flush_threshold: int = 50,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        def make_candidate(suffix: Optional[int] = None) -> str:
            base = run_id or f"{timestamp}_run"
            if suffix is None:
                return base
            if run_id:
                return f"{run_id}_{suffix}"
            return f"{base}_{suffix:02d}"

        candidate_id = make_candidate()
        suffix = 1
        while (self.root_dir / candidate_id).exists():
            candidate_id = make_candidate(suffix)
            suffix += 1

        self.run_id = candidate_id
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=False)
        self.textures_dir = self.run_dir / "textures"

        self.planets_path = self.run_dir / "planets.csv"
        self.meta_path = self.run_dir / "meta.json"

        self._file = self.planets_path.open("w", newline="", encoding="utf-8")
        self._file.write(",".join(self.PLANETS_HEADER) + "\n")
        self._buffer: list[str] = []
        self._threshold = max(1, flush_threshold)
        self.rows_written = 0

        last_run_marker = self.root_dir / "last_run.txt"
        last_run_marker.write_text(self.run_id, encoding="utf-8")

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_planet(self, planet: GeneratedPlanet, texture_file: str | Path | None = None) -> None:
        profile = planet.profile
        texture = planet.texture
        self.log_row(
            (
                planet.seed,
                profile.surface_type.value,
                profile.orbit_radius,
                profile.orbit_speed,
                profile.orbit_tilt,
                profile.size,
                "#{:02x}{:02x}{:02x}".format(*profile.color),
                texture.width,
                texture.height,
                texture.digest(),
                "" if texture_file is None else Path(texture_file).name,
            )
        )

    def log_row(self, values: Sequence[object]) -> None:
        self._buffer.append(",".join(self._format_value(v) for v in values))
        self.rows_written += 1
        if len(self._buffer) >= self._threshold:
            self._flush()

    def close(self) -> None:
        self._flush()
        self._file.close()

    def _flush(self) -> None:
        if self._buffer:
            self._file.write("\n".join(self._buffer) + "\n")
            self._file.flush()
            self._buffer.clear()

    @staticmethod
    def _format_value(value: object) -> str:
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return f"{value:.10g}"
        return str(value)

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["RunLogger"]
