"""ChainLinked carousel engine.

Turns multi-slide canvas templates into fillable content slots, builds
constraint-aware prompts for an LLM, validates the model's output, and fits
the generated text back into the template geometry. A companion writing
style analyzer fingerprints an author's post history for personalization.
"""

__version__ = "0.1.0"
