"""Unit tests for the flatten entrypoint."""

import logging
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType
from typing import Any, Final, List

import pytest
from hydra import compose, initialize_config_dir
from omegaconf import OmegaConf

from flatseq.structures.config import FlattenConfig

ROOT_DIR: Final[Path] = Path(__file__).resolve().parent.parent.parent
CONFIG_PATH: Final[Path] = ROOT_DIR / "conf" / "config.yaml"


def _load_script() -> ModuleType:
    """Import `scripts/flatten.py`, which is not part of the package."""
    spec = spec_from_file_location(
        "flatten_script", ROOT_DIR / "scripts" / "flatten.py"
    )
    assert spec is not None and spec.loader is not None
    module = module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_get_items() -> None:
    """Unit test for reading the top-level items from the default config."""
    script = _load_script()
    cfg = OmegaConf.load(CONFIG_PATH)
    assert script.get_items(cfg) == [[], 1, [[], [2, 3]], 4, "hello"]


@pytest.mark.parametrize(
    "inputs, items_",
    [
        pytest.param(None, [], id="none"),
        pytest.param(5, [5], id="scalar"),
        pytest.param([[1], 2], [[1], 2], id="list"),
    ],
)
def test_get_items_shapes(inputs: Any, items_: List[Any]) -> None:
    """Unit test for normalizing the configured inputs to a list."""
    script = _load_script()
    cfg = OmegaConf.create({"inputs": inputs})
    assert script.get_items(cfg) == items_


def test_get_config() -> None:
    """Unit test for instantiating the classification options."""
    script = _load_script()
    cfg = OmegaConf.load(CONFIG_PATH)
    config = script.get_config(cfg)
    assert isinstance(config, FlattenConfig)
    assert config == FlattenConfig()


def test_flatten(caplog: pytest.LogCaptureFixture) -> None:
    """Unit test for logging every leaf of the composed config."""
    script = _load_script()
    with initialize_config_dir(
        config_dir=str(CONFIG_PATH.parent), version_base=None
    ):
        cfg = compose(config_name="config", overrides=["inputs=[1,[2,[3]]]"])

    caplog.set_level(logging.INFO)
    script.flatten.__wrapped__(cfg)
    messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == "flatten_script"
    ]
    assert messages == ["0: 1", "1: 2", "2: 3", "Flattened 3 leaves."]
