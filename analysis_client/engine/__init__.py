from analysis_client.engine.base import (
    BaseAnalysisEngine,
    BaseMarkupRenderer,
    ChunkedEngine,
    SingleShotEngine,
)
from analysis_client.engine.factory import EngineFactory

__all__ = [
    "BaseAnalysisEngine",
    "BaseMarkupRenderer",
    "ChunkedEngine",
    "EngineFactory",
    "SingleShotEngine",
]
