"""Raster → SVG tracing through the potrace command line tool.

The preprocessed PNG is written as BMP into a scratch directory, potrace
writes its SVG next to it, and the SVG bytes are returned.
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ma3scribble.errors import TraceError
from ma3scribble.imaging.preprocess import decode_image

logger = logging.getLogger(__name__)

TurnPolicy = Literal["black", "white", "right", "left", "minority", "majority", "random"]


@dataclass(frozen=True)
class TraceConfig:
    turn_policy: TurnPolicy = "minority"
    turd_size: int = 10_000
    alpha_max: float = 1.0
    curve_optimization_tolerance: float = 0.2
    black_level: float = 0.5
    invert: bool = False


def potrace_args(config: TraceConfig, input_path: Path, output_path: Path) -> list[str]:
    """Command line arguments after the executable."""
    args = [
        "--progress",
        f"--output={output_path}",
        "--backend=svg",
        "--group",
        "--flat",
        f"--alphamax={config.alpha_max:.10f}",
        f"--turdsize={config.turd_size:d}",
        f"--turnpolicy={config.turn_policy}",
        f"--blacklevel={config.black_level:.10f}",
        "--fill=#ffffff",
    ]
    if config.curve_optimization_tolerance == 0:
        args.append("--longcurve")
    else:
        args.append(f"--opttolerance={config.curve_optimization_tolerance:.10f}")
    if config.invert:
        args.append("--invert")
    args.append(str(input_path))
    return args


def trace_png(
    data: bytes,
    config: TraceConfig,
    potrace_filename: str = "potrace",
    timeout: float = 120.0,
) -> bytes:
    """Trace a PNG with potrace and return the SVG document."""
    image = decode_image(data)

    with tempfile.TemporaryDirectory(prefix="ma3scribble-") as tmp:
        input_path = Path(tmp) / "trace-input.bmp"
        output_path = Path(tmp) / "trace-output.svg"

        logger.debug("Convert to bmp: %s", input_path)
        # BMP has no alpha channel; preprocessing already made the image opaque
        image.convert("RGB").save(input_path, format="BMP")

        cmd = [potrace_filename, *potrace_args(config, input_path, output_path)]
        details = {"potrace_filename": potrace_filename, "args": cmd[1:]}
        start = time.perf_counter()
        logger.debug("Run tracing: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
        except FileNotFoundError as e:
            raise TraceError("potrace not found", details) from e
        except subprocess.TimeoutExpired as e:
            raise TraceError("potrace timed out", {**details, "timeout": timeout}) from e

        logger.debug("Potrace output: %s", (result.stdout + result.stderr).strip())
        if result.returncode != 0:
            raise TraceError(
                "run potrace",
                {**details, "returncode": result.returncode, "output": result.stderr.strip()},
            )
        if not output_path.exists():
            raise TraceError("potrace did not produce output svg", details)

        svg = output_path.read_bytes()

    logger.debug(
        "Potrace done in %.1fms, %d bytes", (time.perf_counter() - start) * 1000, len(svg)
    )
    return svg
