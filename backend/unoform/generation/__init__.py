"""
Image generation collaborators: model configurations and the prediction API client.
"""

from unoform.generation.models import (
    MODEL_CONFIGS,
    ModelConfig,
    build_model_input,
    get_model_config,
)
from unoform.generation.client import (
    GenerationError,
    GenerationTimeout,
    ReplicateClient,
    get_generation_client,
)

__all__ = [
    "MODEL_CONFIGS",
    "ModelConfig",
    "build_model_input",
    "get_model_config",
    "GenerationError",
    "GenerationTimeout",
    "ReplicateClient",
    "get_generation_client",
]
