from .config_writer import FileConfigWriter
from .log_sinks import JsonlLogSink, StdoutLogSink
from .serializer import dump_document, dump_yaml, load_yaml

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FileConfigWriter",
    "JsonlLogSink",
    "StdoutLogSink",
    "dump_document",
    "dump_yaml",
    "load_yaml",
]
