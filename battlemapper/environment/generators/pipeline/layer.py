"""Abstract base class for generation layers.

Each layer in the pipeline implements the GenerationLayer interface and
transforms the GenerationContext in some way: adding roads, buildings,
obstacles, or marking cells occupied.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationLayer(ABC):
    """Abstract base class for map generation layers.

    Layers are applied sequentially by the PipelineGenerator. Each layer
    receives a GenerationContext and modifies it in place. Layer order fixes
    the order random numbers are drawn in, so reordering layers changes the
    output for a given seed.
    """

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Apply this layer's generation logic to the context.

        This method should modify the context in place. It may:
        - Mark cells occupied (ctx.grid)
        - Append geometry to the output (ctx.layout)
        - Use ctx.rng for random decisions
        - Record skipped features with ctx.record_failure()

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
