from .config.models import AdapterParams
from .usecases.synthesize import build_documents, synthesize

__all__ = ["AdapterParams", "build_documents", "synthesize"]
