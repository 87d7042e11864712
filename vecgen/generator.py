"""Synthetic vector dataset generation.

Provides:
 - generate(config, rng=None, seed=None): build a read-only (num_vecs, dim) float array
 - render(dataset, sink=None): pretty-print the dataset as JSON to a writable sink
 - run(config=None, sink=None, rng=None): generate with defaults and render to stdout
"""
import json
import sys
import numpy as np
from vecgen.config import GeneratorConfig, default_config
from vecgen.utils import logger


def generate(config: GeneratorConfig, rng=None, seed=None) -> np.ndarray:
    """Sample config.num_vecs vectors of config.dim scalars from [0, config.max).

    rng takes precedence over seed; with neither, an unseeded generator is used.
    """
    if rng is None:
        rng = np.random.default_rng(seed)
    high = float(config.max)
    X = rng.uniform(0.0, high, size=(config.num_vecs, config.dim))
    # u * high can round up to high when high is subnormal
    X = np.minimum(X, np.nextafter(high, 0.0))
    X.flags.writeable = False
    logger.debug("Generated dataset shape=%s max=%s", X.shape, high)
    return X


def render(dataset: np.ndarray, sink=None) -> str:
    sink = sink if sink is not None else sys.stdout
    text = json.dumps(dataset.tolist(), indent=2)
    sink.write(text + "\n")
    if hasattr(sink, "flush"):
        sink.flush()
    return text


def run(config=None, sink=None, rng=None) -> str:
    config = config or default_config()
    X = generate(config, rng=rng)
    return render(X, sink)


def main():
    run()
