"""NASA JPL ephemeris helpers."""

from datetime import datetime, timezone
from typing import Optional
from pathlib import Path
from urllib.request import urlopen
import logging
import shutil

import numpy as np
from jplephem.spk import SPK

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400.0


def load_ephemeris(path: str) -> SPK:
    """Load a JPL SPK ephemeris file."""
    return SPK.open(path)


def julian_date(epoch: datetime) -> float:
    """Julian date of ``epoch``; naive datetimes are taken as UTC."""
    if epoch.tzinfo is None:
        epoch = epoch.replace(tzinfo=timezone.utc)
    return epoch.timestamp() / SECONDS_PER_DAY + 2440587.5


def _segment_chain(ephem, target: int):
    """Segments leading from the solar-system barycentre (0) to ``target``."""
    chain = []
    while target != 0:
        center = next((c for c, t in ephem.pairs if t == target), None)
        if center is None:
            raise KeyError(f"no ephemeris segment ends at target {target}")
        chain.append(ephem[center, target])
        target = center
    return chain


def body_state(ephem: SPK, target: int, epoch: datetime) -> tuple[np.ndarray, np.ndarray]:
    """Return barycentric position in metres and velocity in m/s."""
    jd = julian_date(epoch)
    pos = np.zeros(3)
    vel = np.zeros(3)
    for segment in _segment_chain(ephem, target):
        p, v = segment.compute_and_differentiate(jd)
        pos += np.asarray(p, dtype=float)
        vel += np.asarray(v, dtype=float)
    # kernels store km and km/day
    return pos * 1000.0, vel * 1000.0 / SECONDS_PER_DAY


def create_descriptor(
    ephem: SPK,
    target: int,
    epoch: datetime,
    mass: float,
    *,
    name: Optional[str] = None,
    **extra,
) -> dict:
    """Create a body descriptor from ephemeris data."""
    pos, vel = body_state(ephem, target, epoch)
    descriptor = {
        "name": name or str(target),
        "mass": mass,
        "position": pos.tolist(),
        "velocity": vel.tolist(),
    }
    descriptor.update(extra)
    return descriptor


def download_ephemeris(url: str, dest: str | Path) -> Path:
    """Download a JPL ephemeris BSP file.

    Parameters
    ----------
    url:
        HTTP(S) location of the BSP file.
    dest:
        Destination directory or full file path where the kernel will be
        written. If ``dest`` is a directory, the filename is taken from
        ``url``.

    Returns
    -------
    Path
        Path of the downloaded file.
    """
    dest_path = Path(dest)
    if dest_path.is_dir():
        dest_path = dest_path / Path(url).name

    logger.info("downloading %s to %s", url, dest_path)
    with urlopen(url) as resp, open(dest_path, "wb") as f:
        shutil.copyfileobj(resp, f)

    return dest_path.resolve()


def main(argv: list[str] | None = None) -> None:
    """Command line entry point for downloading ephemerides."""
    import argparse

    parser = argparse.ArgumentParser(description="Download a JPL ephemeris BSP file")
    parser.add_argument("url", help="URL of the BSP file")
    parser.add_argument(
        "dest",
        nargs="?",
        default=".",
        help="Destination directory or file path",
    )
    args = parser.parse_args(argv)

    path = download_ephemeris(args.url, args.dest)
    print(path)


if __name__ == "__main__":  # pragma: no cover - manual tool
    main()
