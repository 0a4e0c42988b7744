"""Story pipeline orchestration."""
from storyteller.orchestrator.pipeline import PipelineError, StoryPipeline
