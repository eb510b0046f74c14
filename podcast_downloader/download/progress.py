"""
Terminal progress bar for episode downloads.
"""

from typing import Optional

from tqdm import tqdm


class TqdmProgress:
    """
    Progress callback that renders a tqdm byte counter.

    Pass an instance as ``on_progress`` to download_episode(). The bar is
    created on the first call, once the total size is known.
    """

    def __init__(self, **tqdm_kwargs):
        self._tqdm_kwargs = tqdm_kwargs
        self._bar: Optional[tqdm] = None

    def __call__(self, downloaded: int, total: int) -> None:
        if self._bar is None:
            self._bar = tqdm(
                total=total,
                unit='B',
                unit_scale=True,
                unit_divisor=1024,
                **self._tqdm_kwargs
            )
        self._bar.update(downloaded - self._bar.n)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.close()
