import logging
import time
from collections import deque
from typing import Callable, List

import hydra
import numpy as np
from omegaconf import DictConfig, OmegaConf

from conf import BenchmarkConfig
from rotatable.data_structures import RotatingSequence

log = logging.getLogger(__name__)


def timed(fn: Callable[[], None]) -> float:
    start = time.perf_counter()
    fn()
    return time.perf_counter() - start


def rotate_list(xs: List[int], steps: np.ndarray) -> List[int]:
    # Physical rotation, O(n) per step
    for step in steps:
        cut = len(xs) - int(step) % len(xs)
        xs = xs[cut:] + xs[:cut]
    return xs


@hydra.main(version_base=None, config_path='conf', config_name='benchmark_rotation')
def benchmark(cfg: DictConfig) -> None:
    bench_cfg = BenchmarkConfig(**OmegaConf.to_container(cfg, resolve=True))
    log.info('Benchmarking with %s', bench_cfg)

    rng = np.random.default_rng(bench_cfg.seed)
    steps = rng.integers(1, bench_cfg.max_step, size=bench_cfg.num_rotations, endpoint=True)
    lookups = rng.integers(0, bench_cfg.length, size=bench_cfg.num_lookups)

    xs = list(range(bench_cfg.length))
    rotating = RotatingSequence(xs)
    ring = deque(xs)
    rotated: List[List[int]] = []

    def rotate_rotating() -> None:
        for step in steps:
            rotating.shift_forward(step)

    def rotate_deque() -> None:
        for step in steps:
            ring.rotate(int(step))

    elapsed = {
        'RotatingSequence': timed(rotate_rotating),
        'deque': timed(rotate_deque),
        'list': timed(lambda: rotated.append(rotate_list(xs, steps))),
    }
    for name, seconds in elapsed.items():
        log.info('%-16s %d rotations in %.6fs', name, bench_cfg.num_rotations, seconds)

    if not rotating.to_list() == list(ring) == rotated[0]:
        raise RuntimeError('Rotated views disagree')

    elapsed_lookup = timed(lambda: rotating.index_via_array(lookups))
    log.info('RotatingSequence %d lookups in %.6fs', bench_cfg.num_lookups, elapsed_lookup)


if __name__ == '__main__':
    benchmark()
