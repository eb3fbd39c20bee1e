from .signal_pipeline import SignalPipeline

__all__ = ["SignalPipeline"]
