import json
from pathlib import Path

from .bodies import InvalidBodyConfig


def save_state(filepath, bodies, styles=None):
    """Write body descriptors for ``bodies`` to a JSON file.

    ``styles`` optionally maps body names to extra keys (``color``,
    ``radius``) that are merged into each descriptor.
    """
    styles = styles or {}
    data = []
    for b in bodies:
        item = {
            "name": b.name,
            "mass": b.mass,
            "position": b.pos.tolist(),
            "velocity": b.vel.tolist(),
        }
        item.update(styles.get(b.name, {}))
        data.append(item)
    Path(filepath).write_text(json.dumps(data, indent=2))


def load_descriptors(filepath):
    """Read a list of body descriptors from a JSON file."""
    try:
        data = json.loads(Path(filepath).read_text())
    except json.JSONDecodeError as exc:
        raise InvalidBodyConfig(f"{filepath}: not valid JSON ({exc})") from exc
    if isinstance(data, dict):
        data = data.get("bodies")
    if not isinstance(data, list):
        raise InvalidBodyConfig(f"{filepath}: expected a list of bodies")
    for item in data:
        if not isinstance(item, dict):
            raise InvalidBodyConfig(f"{filepath}: body entries must be objects, got {item!r}")
        if "color" in item:
            item["color"] = tuple(item["color"])
    return data
