"""Architecture classifier.

Scores the directory layout against DDD, Clean, Layered and N-Tier
indicator lists and reports the winning pattern with the layers present.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..config import DEFAULT_ARCHITECTURE, ArchitectureConfig
from ..knowledge import ArchitectureInfo
from ..scoring import score_families, strict_winner


def classify_architecture(
    basenames: Iterable[str],
    config: ArchitectureConfig = DEFAULT_ARCHITECTURE,
) -> ArchitectureInfo:
    """Classify the architecture from lower-cased directory basenames."""
    names = [n.lower() for n in basenames]

    scores = score_families(config.families, names)
    winner, best = strict_winner(scores)

    labels = {f.key: f.label for f in config.families}
    pattern = labels[winner] if winner is not None and best >= config.min_score else config.fallback

    layers = detect_layers(names, pattern, config)
    return ArchitectureInfo(
        pattern=pattern,
        layers=tuple(layers),
        description=_describe(pattern, layers, config),
    )


def detect_layers(names: list[str], pattern: str, config: ArchitectureConfig = DEFAULT_ARCHITECTURE) -> list[str]:
    """Layers of ``pattern`` present on disk, else any generic layer found."""
    layers = _present(config.layers_for(pattern), names)
    if not layers:
        layers = _present(config.generic_layers, names)
    return layers


def _present(candidates: Iterable[str], names: list[str]) -> list[str]:
    return [
        layer for layer in candidates
        if any(layer.lower() in name for name in names)
    ]


def _describe(pattern: str, layers: list[str], config: ArchitectureConfig) -> str:
    base = config.description_for(pattern)
    if layers:
        return f"{base}. Layers detected: {', '.join(layers)}."
    return base
