from __future__ import annotations

from binevo.evolution.engine.config import CrossoverType, GAConfig, SelectionType
from binevo.evolution.engine.core import EvolutionEngine, ProgressCallback
from binevo.evolution.engine.metrics import EngineMetrics, GenerationStats
from binevo.evolution.engine.state import EngineState
