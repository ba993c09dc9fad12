"""Settings and pipeline definition loading."""
from .loader import PipelineLoader, load_settings
from .models import PipelineDefinition, Settings

__all__ = ["Settings", "PipelineDefinition", "PipelineLoader", "load_settings"]
