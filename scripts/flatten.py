"""Flatten a nested list from the command line."""

import logging
from pathlib import Path
from typing import Any, Final, List, cast

import hydra
from hydra.utils import instantiate
from omegaconf import DictConfig, OmegaConf

from flatseq.iterators.flattening import FlatteningIterator
from flatseq.structures.config import FlattenConfig

logging.getLogger("torch").setLevel(logging.ERROR)

logger = logging.getLogger(__name__)

HYDRA_PATH: Final[Path] = Path(__file__).resolve().parent.parent / "conf"


@hydra.main(
    config_path=str(HYDRA_PATH),
    config_name="config",
    version_base=None,
)
def flatten(cfg: DictConfig) -> None:
    """Flatten entrypoint.

    Args:
        cfg: Flatten configuration.
    """
    if cfg.debug:
        logging.getLogger("flatseq").setLevel(logging.DEBUG)
        logger.info("Using debug mode ...")

    items = get_items(cfg)
    iterator = FlatteningIterator(*items, config=get_config(cfg))

    num_leaves = 0
    for leaf in iterator:
        logger.info(f"{num_leaves}: {leaf!r}")
        num_leaves += 1
    logger.info(f"Flattened {num_leaves} leaves.")


def get_items(cfg: DictConfig) -> List[Any]:
    """Get the top-level items as plain Python containers."""
    inputs = cfg.inputs
    if inputs is None:
        return []
    if not OmegaConf.is_config(inputs):
        return [inputs]
    items = OmegaConf.to_container(inputs, resolve=True)
    if not isinstance(items, list):
        return [items]
    return cast(List[Any], items)


def get_config(cfg: DictConfig) -> FlattenConfig:
    """Get the classification options.

    Args:
        cfg: Flatten configuration.

    Returns:
        The instantiated options.
    """
    config: FlattenConfig = instantiate(cfg.flatten, _convert_="all")
    return config


if __name__ == "__main__":
    flatten()
