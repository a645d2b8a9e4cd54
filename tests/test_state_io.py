import json

import numpy as np
import pytest

from orbits.bodies import BodyRegistry, InvalidBodyConfig
from orbits.presets import get_preset
from orbits.state_io import load_descriptors, save_state


def test_save_and_reload(tmp_path):
    reg = BodyRegistry.from_descriptors(get_preset("Sun & Earth"))
    path = tmp_path / "bodies.json"
    save_state(path, reg, styles={"Sun": {"color": (1, 2, 3)}})

    descriptors = load_descriptors(path)
    assert descriptors[0]["color"] == (1, 2, 3)
    again = BodyRegistry.from_descriptors(descriptors)
    assert again.names == reg.names
    assert np.allclose(again.positions(), reg.positions())
    assert np.allclose(again.velocities(), reg.velocities())


def test_bodies_key_is_accepted(tmp_path):
    path = tmp_path / "bodies.json"
    path.write_text(json.dumps({"bodies": [
        {"name": "A", "mass": 1.0, "position": [0, 0, 0], "velocity": [0, 0, 0]}
    ]}))
    assert load_descriptors(path)[0]["name"] == "A"


@pytest.mark.parametrize("text", ["not json", "{\"x\": 1}", "[1, 2]"])
def test_malformed_files(tmp_path, text):
    path = tmp_path / "bad.json"
    path.write_text(text)
    with pytest.raises(InvalidBodyConfig):
        load_descriptors(path)


def test_negative_mass_in_file_fails_setup(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([
        {"name": "A", "mass": -5, "position": [0, 0, 0], "velocity": [0, 0, 0]}
    ]))
    with pytest.raises(InvalidBodyConfig):
        BodyRegistry.from_descriptors(load_descriptors(path))
